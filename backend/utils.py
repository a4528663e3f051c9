"""Utility helpers used across backend modules."""

from __future__ import annotations

from backend import MAX_NUMERIC_INPUT_LENGTH


def sanitize_numeric_input(
    text: str,
    max_len: int = MAX_NUMERIC_INPUT_LENGTH,
    allow_decimal: bool = True,
) -> str:
    """Return ``text`` reduced to a numeric string.

    Only digits survive, plus the first ``.`` when ``allow_decimal`` is set.
    The result is truncated to ``max_len`` characters.
    """

    result = []
    dot_seen = False
    for ch in text or "":
        if ch.isdigit():
            result.append(ch)
        elif ch == "." and allow_decimal and not dot_seen:
            dot_seen = True
            result.append(ch)
    return "".join(result)[:max_len]


def parse_set_count(text: str | None) -> int:
    """Return the set count encoded in ``text``.

    Empty or non-numeric values and counts below one all read as a single
    set, so a logged entry always contributes at least one set.
    """

    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        return 1
    return max(value, 1)
