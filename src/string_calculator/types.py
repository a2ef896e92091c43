"""Enumerations shared across the string calculator."""

from enum import Enum


class AdditionVariant(str, Enum):
    """Parsing rule used by a summation entry point."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"
    V4 = "v4"
    V5 = "v5"


class ErrorKind(str, Enum):
    """Failure categories reported by the calculator."""

    TOO_MANY_OPERANDS = "TooManyOperands"
    MALFORMED_DELIMITER_DECLARATION = "MalformedDelimiterDeclaration"
    NON_NUMERIC_OPERAND = "NonNumericOperand"
    NEGATIVE_OPERANDS_PRESENT = "NegativeOperandsPresent"
