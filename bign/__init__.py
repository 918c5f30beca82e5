from bign.domain.exceptions import (
    BignException,
    DivisionByZeroError,
    DomainError,
    InvalidArgumentError,
)
from bign.domain.services import (
    PrecisionPolicy,
    PrecisionService,
    get_policy,
    policy_scope,
    reset_policy,
    set_policy,
)
from bign.domain.values import FixedPointNumber, RoundingMode, RoundingPolicy

N = FixedPointNumber

__version__ = "0.1.0"

__all__ = [
    "BignException",
    "DivisionByZeroError",
    "DomainError",
    "FixedPointNumber",
    "InvalidArgumentError",
    "N",
    "PrecisionPolicy",
    "PrecisionService",
    "RoundingMode",
    "RoundingPolicy",
    "get_policy",
    "policy_scope",
    "reset_policy",
    "set_policy",
]
