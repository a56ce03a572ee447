"""Client-facing errors raised while serving a calculation."""
from typing import Optional


class CalculatorError(Exception):
    """
    Base class for errors reported to the client with a 4xx status.

    ``message`` is returned to the client, ``log_message`` is written to the
    error log and defaults to ``message``.
    """

    status_code: int = 400

    def __init__(self, message: str, log_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.log_message = log_message or message


class InvalidOperandError(CalculatorError):
    """An operand is missing or is not a valid number."""


class DomainError(CalculatorError):
    """Operands fall outside the domain of the requested operation."""
