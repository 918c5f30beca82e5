from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from bign.domain.exceptions import InvalidArgumentError

RoundingFunction = Callable[[int, int], int]


class RoundingMode(str, Enum):
    """
    Ways to settle the digits dropped when a scaled value is narrowed.

    HALF_UP and HALF_DOWN break ties toward positive and negative infinity;
    use HALF_AWAY_FROM_ZERO for the "schoolbook" rounding.
    """

    TOWARD_ZERO = "TOWARD_ZERO"
    HALF_AWAY_FROM_ZERO = "HALF_AWAY_FROM_ZERO"
    FLOOR = "FLOOR"
    CEIL = "CEIL"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    HALF_ODD = "HALF_ODD"
    CUSTOM = "CUSTOM"


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def truncated_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Integer division rounding toward zero.

    Python's ``divmod`` floors; the remainder returned here carries the sign
    of the dividend instead, so ``q * divisor + r == dividend`` with ``|q|``
    never larger than the exact quotient.
    """
    quotient = abs(dividend) // abs(divisor)

    if (dividend < 0) != (divisor < 0):
        quotient = -quotient

    return quotient, dividend - quotient * divisor


@dataclass(frozen=True)
class RoundingPolicy:
    mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO
    custom: Optional[RoundingFunction] = None

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "mode", RoundingMode(self.mode))
        except ValueError:
            raise InvalidArgumentError(f"unknown rounding mode {self.mode!r}") from None

        if self.mode is RoundingMode.CUSTOM and self.custom is None:
            raise InvalidArgumentError("CUSTOM rounding requires a rounding function")

        if self.mode is not RoundingMode.CUSTOM and self.custom is not None:
            raise InvalidArgumentError(
                f"a rounding function is only used with CUSTOM mode, got {self.mode.value}"
            )

    def carry(self, quotient: int, remainder: int, divisor: int) -> int:
        """
        Decide the adjustment applied to a truncated quotient.

        :param quotient: Truncated (toward zero) quotient
        :param remainder: Dropped part, same sign as the original value
        :param divisor: Power of ten that was divided out

        :return: -1, 0 or +1
        """
        if remainder == 0:
            return 0

        mode = self.mode
        sign = _sign(remainder)

        if mode is RoundingMode.TOWARD_ZERO:
            return 0

        if mode is RoundingMode.FLOOR:
            return -1 if sign < 0 else 0

        if mode is RoundingMode.CEIL:
            return 1 if sign > 0 else 0

        if mode is RoundingMode.CUSTOM:
            result = self.custom(remainder, divisor)
            if result not in (-1, 0, 1):
                raise InvalidArgumentError(
                    f"rounding function must return -1, 0 or 1, got {result!r}"
                )
            return int(result)

        doubled = 2 * abs(remainder)

        if mode is RoundingMode.HALF_AWAY_FROM_ZERO:
            return sign if doubled >= divisor else 0

        if doubled != divisor:
            return sign if doubled > divisor else 0

        # Exactly half way.
        if mode is RoundingMode.HALF_UP:
            return 1 if sign > 0 else 0
        if mode is RoundingMode.HALF_DOWN:
            return -1 if sign < 0 else 0
        if mode is RoundingMode.HALF_EVEN:
            return sign if quotient % 2 else 0
        # HALF_ODD
        return 0 if quotient % 2 else sign

    def narrow(self, value: int, digits: int) -> int:
        """
        Drop ``digits`` trailing decimal digits of a scaled integer.

        :param value: Scaled integer value
        :param digits: Number of digits to drop, must not be negative

        :return: value / 10^digits, rounded according to the policy
        """
        if digits < 0:
            raise InvalidArgumentError(f"cannot narrow by {digits} digits")

        if digits == 0:
            return value

        divisor = 10**digits
        quotient, remainder = truncated_divmod(value, divisor)

        return quotient + self.carry(quotient, remainder, divisor)
