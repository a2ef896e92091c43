"""Domain errors raised by the string calculator."""

from __future__ import annotations

from collections.abc import Sequence

from string_calculator.types import ErrorKind

Number = int | float


def format_number(value: Number) -> str:
    """Render a number, dropping the fraction of integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CalculatorError(ValueError):
    """Base class for every failure raised while evaluating an input."""

    kind: ErrorKind


class TooManyOperandsError(CalculatorError):
    """Raised when the bounded variant receives more than two operands."""

    kind = ErrorKind.TOO_MANY_OPERANDS

    def __init__(self, message: str | None = None) -> None:
        """Initialise the error with the fixed operand limit message."""
        super().__init__(message or "The method can only take 0, 1, or 2 numbers.")


class MalformedDelimiterDeclarationError(CalculatorError):
    """Raised when a delimiter declaration is not followed by numbers."""

    kind = ErrorKind.MALFORMED_DELIMITER_DECLARATION

    def __init__(self, message: str | None = None) -> None:
        """Initialise the error with an optional message."""
        default_message = "Invalid format: Custom delimiter must be followed by numbers."
        super().__init__(message or default_message)


class NonNumericOperandError(CalculatorError):
    """Raised when a token does not parse as a base-10 number."""

    kind = ErrorKind.NON_NUMERIC_OPERAND

    def __init__(self, token: str) -> None:
        """Initialise the error, keeping the first offending token."""
        super().__init__("All inputs must be valid numbers.")
        self.token = token


class NegativeOperandsError(CalculatorError):
    """Raised when negative operands are found by the rejecting variant."""

    kind = ErrorKind.NEGATIVE_OPERANDS_PRESENT

    def __init__(self, negatives: Sequence[Number]) -> None:
        """Initialise the error listing every negative value in input order."""
        self.negatives = tuple(negatives)
        listed = ", ".join(format_number(value) for value in self.negatives)
        super().__init__(f"Negatives not allowed: {listed}")


__all__ = [
    "CalculatorError",
    "MalformedDelimiterDeclarationError",
    "NegativeOperandsError",
    "NonNumericOperandError",
    "Number",
    "TooManyOperandsError",
    "format_number",
]
