from .rounding import RoundingMode, RoundingPolicy
from .fixed_point import FixedPointNumber, rebase

__all__ = [
    "FixedPointNumber",
    "RoundingMode",
    "RoundingPolicy",
    "rebase",
]
