"""Numeric validation and reduction of operand tokens.

A token is numeric when, once surrounding whitespace is stripped, it matches
``[+-]?(digits[.digits] | .digits)`` using ASCII digits only. Exponents,
``inf``/``nan``, digit-group underscores and empty tokens are rejected even
though :func:`float` would accept some of them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from string_calculator.errors import NonNumericOperandError, Number

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)


def is_numeric(token: str) -> bool:
    """Return whether ``token`` is a valid base-10 operand."""
    return _NUMBER_PATTERN.fullmatch(token.strip()) is not None


def _convert(stripped: str) -> Number:
    if "." in stripped:
        return float(stripped)
    return int(stripped)


def parse_operand(token: str) -> Number:
    """Convert a single token to ``int`` or ``float``."""
    stripped = token.strip()
    if _NUMBER_PATTERN.fullmatch(stripped) is None:
        raise NonNumericOperandError(token)
    return _convert(stripped)


def parse_operands(tokens: Sequence[str]) -> list[Number]:
    """Validate every token before converting any of them."""
    stripped_tokens = [token.strip() for token in tokens]
    for token, stripped in zip(tokens, stripped_tokens, strict=True):
        if _NUMBER_PATTERN.fullmatch(stripped) is None:
            raise NonNumericOperandError(token)
    return [_convert(stripped) for stripped in stripped_tokens]


def sum_operands(values: Sequence[Number]) -> Number:
    """Add values left to right starting from zero."""
    total: Number = 0
    for value in values:
        total += value
    return total


__all__ = ["is_numeric", "parse_operand", "parse_operands", "sum_operands"]
