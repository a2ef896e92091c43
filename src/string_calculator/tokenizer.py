"""Splitting of raw calculator input into operand tokens."""

from __future__ import annotations

import re
from collections.abc import Iterable


def split_on_any(text: str, delimiters: Iterable[str]) -> list[str]:
    """Split ``text`` wherever any of ``delimiters`` occurs.

    Longer delimiters take precedence over shorter ones sharing a prefix, so
    ``{"*", "**"}`` splits ``"1**2"`` into ``["1", "2"]``. An empty ``text``
    yields no tokens at all.

    Raises:
        ValueError: If no delimiter, or an empty delimiter, is given.

    """
    if not text:
        return []

    ordered = sorted(set(delimiters), key=len, reverse=True)
    if not ordered or "" in ordered:
        msg = "At least one non-empty delimiter is required"
        raise ValueError(msg)

    if len(ordered) == 1:
        return text.split(ordered[0])

    pattern = "|".join(re.escape(delimiter) for delimiter in ordered)
    return re.split(pattern, text)


__all__ = ["split_on_any"]
