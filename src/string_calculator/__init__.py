"""String Calculator: sum numbers embedded in delimited strings."""

from string_calculator.calculator import StringCalculator
from string_calculator.errors import (
    CalculatorError,
    MalformedDelimiterDeclarationError,
    NegativeOperandsError,
    NonNumericOperandError,
    TooManyOperandsError,
)
from string_calculator.types import AdditionVariant, ErrorKind

__all__ = [
    "AdditionVariant",
    "CalculatorError",
    "ErrorKind",
    "MalformedDelimiterDeclarationError",
    "NegativeOperandsError",
    "NonNumericOperandError",
    "StringCalculator",
    "TooManyOperandsError",
]
