from decimal import Decimal

from bign.domain.services.precision_service import PrecisionService
from bign.domain.values import FixedPointNumber


class NumberFactory:
    def __init__(self, precision_service: PrecisionService):
        self._default_precision = precision_service.policy.default_precision

    def from_string(self, value: str) -> FixedPointNumber:
        return FixedPointNumber.from_decimal_string(value, self._default_precision)

    def from_int(self, value: int, decimals: int = 0) -> FixedPointNumber:
        return FixedPointNumber.from_scaled_integer(value, decimals, self._default_precision)

    def from_decimal(self, value: Decimal) -> FixedPointNumber:
        return FixedPointNumber.from_decimal(value, self._default_precision)

    def from_float(self, value: float) -> FixedPointNumber:
        return self.from_decimal(Decimal(str(value)))
