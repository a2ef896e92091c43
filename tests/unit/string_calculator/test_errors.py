"""Tests for calculator error types."""

import pytest

from string_calculator.errors import (
    CalculatorError,
    MalformedDelimiterDeclarationError,
    NegativeOperandsError,
    NonNumericOperandError,
    TooManyOperandsError,
    format_number,
)
from string_calculator.types import ErrorKind


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (TooManyOperandsError(), ErrorKind.TOO_MANY_OPERANDS),
        (MalformedDelimiterDeclarationError(), ErrorKind.MALFORMED_DELIMITER_DECLARATION),
        (NonNumericOperandError("x"), ErrorKind.NON_NUMERIC_OPERAND),
        (NegativeOperandsError([-1]), ErrorKind.NEGATIVE_OPERANDS_PRESENT),
    ],
)
def test_errors_carry_kind(error: CalculatorError, kind: ErrorKind) -> None:
    """Every error exposes its kind and is a ValueError."""
    assert error.kind is kind
    assert isinstance(error, ValueError)


def test_negative_message_joins_values() -> None:
    """Negative values are listed in order, comma-and-space joined."""
    error = NegativeOperandsError([-2, -3.5, -1])
    assert str(error) == "Negatives not allowed: -2, -3.5, -1"
    assert error.negatives == (-2, -3.5, -1)


def test_custom_messages_override_defaults() -> None:
    """Optional messages replace the default text."""
    assert str(MalformedDelimiterDeclarationError("bad")) == "bad"
    assert str(TooManyOperandsError("limit")) == "limit"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-2, "-2"), (-2.0, "-2"), (-2.5, "-2.5"), (0.0, "0"), (10**20, "100000000000000000000")],
)
def test_format_number(value: float, expected: str) -> None:
    """Integral floats are rendered without a fractional part."""
    assert format_number(value) == expected


def test_negative_message_drops_integral_fraction() -> None:
    """Integral float negatives are listed like integers."""
    assert str(NegativeOperandsError([-2.0, -3])) == "Negatives not allowed: -2, -3"
