import re
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union

from bign.domain.exceptions import (
    DivisionByZeroError,
    DomainError,
    InvalidArgumentError,
)
from bign.domain.services import precision_service
from bign.shared.logging import get_logger

from .rounding import RoundingMode, RoundingPolicy, truncated_divmod

logger = get_logger(__name__)

# Error messages never go through a caller-supplied rounding function.
_TRUNCATE = RoundingPolicy(RoundingMode.TOWARD_ZERO)

_DECIMAL_STRING = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")

Operand = Union["FixedPointNumber", int, str, Decimal]


def rebase(value: int, from_precision: int, to_precision: int) -> int:
    """
    Express a scaled integer at another precision.

    Widening pads with zero digits and is exact; narrowing truncates toward zero.
    """
    if to_precision >= from_precision:
        return value * 10 ** (to_precision - from_precision)

    quotient, _ = truncated_divmod(value, 10 ** (from_precision - to_precision))
    return quotient


def _resolve_precision(precision: Optional[int], decimals: int = 0) -> int:
    if precision is None:
        precision = precision_service.get_policy().default_precision

    if precision < 0:
        raise InvalidArgumentError(f"precision cannot be negative: {precision}")

    if precision < decimals:
        logger.debug("precision_raised_to_decimals", requested=precision, decimals=decimals)
        return decimals

    return precision


@dataclass(frozen=True, eq=False)
class FixedPointNumber:
    """
    Decimal number stored as an integer scaled by 10^precision.

    Given 123.456 and precision 5, the number is stored as:

        decimals = 3           decimals_factor = 1000
        precision = 5          factor = 100000
        value = 12345600

    ``decimals`` only matters when the number is expanded back to an external
    decimal; all arithmetic runs on ``value`` at ``precision`` digits.
    """

    value: int
    decimals: int = 0
    precision: Optional[int] = None
    decimals_factor: int = field(init=False, repr=False)
    factor: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidArgumentError(f"scaled value must be an integer: {self.value!r}")

        if self.decimals < 0:
            raise InvalidArgumentError(f"decimals cannot be negative: {self.decimals}")

        requested = self.precision
        if requested is None:
            requested = precision_service.get_policy().default_precision

        precision = _resolve_precision(requested, self.decimals)
        if precision != requested:
            # Keep the meaning of a value that was scaled to the requested precision.
            object.__setattr__(self, "value", rebase(self.value, requested, precision))

        object.__setattr__(self, "precision", precision)
        object.__setattr__(self, "decimals_factor", 10**self.decimals)
        object.__setattr__(self, "factor", 10**precision)

    # Construction

    @classmethod
    def from_precise_integer(
        cls, value: int, decimals: int, precision: Optional[int] = None
    ) -> "FixedPointNumber":
        """Wrap a value that is already scaled to ``precision`` digits."""
        return cls(value=value, decimals=decimals, precision=precision)

    @classmethod
    def from_scaled_integer(
        cls, magnitude: int, decimals: int = 0, precision: Optional[int] = None
    ) -> "FixedPointNumber":
        """
        Create a number from an integer scaled by 10^decimals.

        :param magnitude: Integer magnitude, e.g. 10000 for 100.00
        :param decimals: Number of fractional digits carried by ``magnitude``
        :param precision: Internal precision (defaults to the active policy)
        """
        if decimals < 0:
            raise InvalidArgumentError(f"decimals cannot be negative: {decimals}")

        precision = _resolve_precision(precision, decimals)

        return cls(
            value=magnitude * 10**precision // 10**decimals,
            decimals=decimals,
            precision=precision,
        )

    @classmethod
    def from_decimal_string(
        cls, text: str, precision: Optional[int] = None
    ) -> "FixedPointNumber":
        """
        Create a number from a string such as ``"-123.45"``.

        The count of digits after the point becomes ``decimals``.
        """
        text = text.strip()

        if not _DECIMAL_STRING.match(text):
            raise InvalidArgumentError(f"not a decimal string: {text!r}")

        decimals = 0
        if "." in text:
            decimals = len(text) - 1 - text.index(".")
            text = text.replace(".", "")

        return cls.from_scaled_integer(int(text), decimals, precision)

    @classmethod
    def from_decimal(
        cls, value: Decimal, precision: Optional[int] = None
    ) -> "FixedPointNumber":
        if not value.is_finite():
            raise InvalidArgumentError(f"cannot represent non-finite decimal {value}")

        return cls.from_decimal_string(format(value, "f"), precision)

    @classmethod
    def coerce(cls, operand: Operand, precision: Optional[int] = None) -> "FixedPointNumber":
        """Turn an operand into a number; plain ints are whole numbers."""
        if isinstance(operand, FixedPointNumber):
            return operand
        if isinstance(operand, bool):
            raise InvalidArgumentError(f"unsupported operand type: {type(operand).__name__}")
        if isinstance(operand, int):
            return cls.from_scaled_integer(operand, 0, precision)
        if isinstance(operand, str):
            return cls.from_decimal_string(operand, precision)
        if isinstance(operand, Decimal):
            return cls.from_decimal(operand, precision)

        raise InvalidArgumentError(f"unsupported operand type: {type(operand).__name__}")

    def clone(self) -> "FixedPointNumber":
        return FixedPointNumber(self.value, self.decimals, self.precision)

    def rescale(
        self, precision: int, rounding: Optional[RoundingPolicy] = None
    ) -> "FixedPointNumber":
        """
        Return the number at another internal precision, rounding if it narrows.

        Narrowing below ``decimals`` also shortens the external representation.
        """
        if precision < 0:
            raise InvalidArgumentError(f"precision cannot be negative: {precision}")

        return FixedPointNumber(
            self._scaled_to(precision, rounding), min(self.decimals, precision), precision
        )

    def _derive(self, value: int, precision: int) -> "FixedPointNumber":
        return FixedPointNumber(value, self.decimals, precision)

    def _align(self, operand: Operand) -> tuple[int, int, int]:
        other = FixedPointNumber.coerce(operand, self.precision)
        precision = max(self.precision, other.precision)

        return (
            rebase(self.value, self.precision, precision),
            rebase(other.value, other.precision, precision),
            precision,
        )

    # Conversion

    def _scaled_to(self, digits: int, rounding: Optional[RoundingPolicy] = None) -> int:
        if digits >= self.precision:
            return rebase(self.value, self.precision, digits)

        policy = rounding or precision_service.get_policy().rounding
        return policy.narrow(self.value, self.precision - digits)

    def value_of(self, rounding: Optional[RoundingPolicy] = None) -> int:
        """Returns the integer part, rounded."""
        return self._scaled_to(0, rounding)

    def to_precise(self) -> int:
        """Returns the internal value at internal precision."""
        return self.value

    def to_decimal(
        self, digits: Optional[int] = None, rounding: Optional[RoundingPolicy] = None
    ) -> int:
        """
        Returns the value scaled by 10^digits.

        :param digits: Fractional digits to keep, defaults to ``decimals``;
            may be negative to round to tens, hundreds, ...
        :param rounding: Rounding policy, defaults to the active one
        """
        if digits is None:
            digits = self.decimals

        return self._scaled_to(digits, rounding)

    def to_string(
        self, digits: Optional[int] = None, rounding: Optional[RoundingPolicy] = None
    ) -> str:
        if digits is None:
            digits = self.decimals

        scaled = self.to_decimal(digits, rounding)

        if digits <= 0:
            if scaled == 0:
                return "0"
            return str(scaled) + "0" * -digits

        sign = "-" if scaled < 0 else ""
        text = str(abs(scaled)).rjust(digits + 1, "0")

        return f"{sign}{text[:-digits]}.{text[-digits:]}"

    def as_decimal(self) -> Decimal:
        """Returns an exact ``decimal.Decimal`` at internal precision."""
        return Decimal(f"{self.value}E-{self.precision}")

    # Arithmetic

    def plus(self, addend: Operand) -> "FixedPointNumber":
        augend, addend, precision = self._align(addend)
        return self._derive(augend + addend, precision)

    def minus(self, subtrahend: Operand) -> "FixedPointNumber":
        minuend, subtrahend, precision = self._align(subtrahend)
        return self._derive(minuend - subtrahend, precision)

    def mul(self, factor: Operand) -> "FixedPointNumber":
        multiplier, multiplicand, precision = self._align(factor)
        product, _ = truncated_divmod(multiplier * multiplicand, 10**precision)
        return self._derive(product, precision)

    def multiplied_by(self, factor: Operand) -> "FixedPointNumber":
        return self.mul(factor)

    def div(self, divisor: Operand) -> "FixedPointNumber":
        dividend, divisor, precision = self._align(divisor)

        if divisor == 0:
            raise DivisionByZeroError(self.to_string(rounding=_TRUNCATE))

        quotient, _ = truncated_divmod(10**precision * dividend, divisor)
        return self._derive(quotient, precision)

    def sq(self) -> "FixedPointNumber":
        return self.mul(self)

    def sqrt(self) -> "FixedPointNumber":
        """
        Square root by integer Newton-Raphson on value * factor.

        Returns the floor of the exact root at internal precision.
        """
        if self.value < 0:
            raise DomainError(
                "sqrt", f"square root of negative number {self.to_string(rounding=_TRUNCATE)}"
            )

        if self.value < 2:
            return self.clone()

        radicand = self.value * self.factor
        root = radicand // 2 + 1
        iterations = 0

        while True:
            iterations += 1
            candidate = (root + radicand // root) >> 1
            # Converged or started oscillating between two neighbours.
            if candidate >= root:
                break
            root = candidate

        logger.debug("sqrt_converged", iterations=iterations, precision=self.precision)

        return self._derive(root, self.precision)

    def negated(self) -> "FixedPointNumber":
        return self._derive(-self.value, self.precision)

    def abs(self) -> "FixedPointNumber":
        return self._derive(abs(self.value), self.precision)

    # Comparisons

    def eq(self, comparand: Operand) -> bool:
        compared, comparand, _ = self._align(comparand)
        return compared == comparand

    def lt(self, comparand: Operand) -> bool:
        compared, comparand, _ = self._align(comparand)
        return compared < comparand

    def lte(self, comparand: Operand) -> bool:
        compared, comparand, _ = self._align(comparand)
        return compared <= comparand

    def gt(self, comparand: Operand) -> bool:
        compared, comparand, _ = self._align(comparand)
        return compared > comparand

    def gte(self, comparand: Operand) -> bool:
        compared, comparand, _ = self._align(comparand)
        return compared >= comparand

    # Python protocol

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"FixedPointNumber('{self.to_string(self.decimals)}', "
            f"decimals={self.decimals}, precision={self.precision})"
        )

    def __int__(self) -> int:
        quotient, _ = truncated_divmod(self.value, self.factor)
        return quotient

    def __float__(self) -> float:
        return self.value / self.factor

    def __bool__(self) -> bool:
        return self.value != 0

    def __hash__(self) -> int:
        # Matches hash() of equal ints, Decimals and Fractions.
        return hash(Fraction(self.value, self.factor))

    def __neg__(self) -> "FixedPointNumber":
        return self.negated()

    def __pos__(self) -> "FixedPointNumber":
        return self

    def __abs__(self) -> "FixedPointNumber":
        return self.abs()

    def __add__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return FixedPointNumber.coerce(other, self.precision).plus(self)

    def __sub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return FixedPointNumber.coerce(other, self.precision).minus(self)

    def __mul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return FixedPointNumber.coerce(other, self.precision).mul(self)

    def __truediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return FixedPointNumber.coerce(other, self.precision).div(self)

    def __eq__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> Any:
        if not _is_operand(other):
            return NotImplemented
        return self.gte(other)


def _is_operand(other: Any) -> bool:
    if isinstance(other, bool):
        return False
    return isinstance(other, (FixedPointNumber, int, Decimal))
