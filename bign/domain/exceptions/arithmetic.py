from .base import BignException


class InvalidArgumentError(BignException, ValueError):
    """Raised when a number or policy is built from invalid input."""

    def __init__(self, reason: str):
        self.reason = reason

        super().__init__(f"Invalid argument: {reason}")


class DomainError(BignException, ArithmeticError):
    """Raised when an operation is undefined for its operand."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation

        super().__init__(f"Domain error in {operation}: {reason}")


class DivisionByZeroError(DomainError, ZeroDivisionError):
    def __init__(self, dividend: str):
        super().__init__("div", f"cannot divide {dividend} by zero")
