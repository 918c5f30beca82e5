from .arithmetic import DivisionByZeroError, DomainError, InvalidArgumentError
from .base import BignException

__all__ = [
    "BignException",
    "DivisionByZeroError",
    "DomainError",
    "InvalidArgumentError",
]
