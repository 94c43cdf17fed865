"""Small text helpers with the exact semantics the scene parser relies on."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

_ULONG_MOD = 1 << 64
_LONG_MAX = (1 << 63) - 1
_INT_MOD = 1 << 32
_INT_MIN = -(1 << 31)


def _wrap_int32(value: int) -> int:
    value %= _INT_MOD
    return value + 2 * _INT_MIN if value >= -_INT_MIN else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the scene format expects.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Input that has no digits gives 0.
    A magnitude above the signed 64-bit maximum gives -1 when positive and 0
    when negative; otherwise the value wraps to a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    magnitude = 0
    for char in rest:
        if char not in _DIGITS:
            break
        magnitude = (magnitude * 10 + ord(char) - ord("0")) % _ULONG_MOD

    if magnitude > _LONG_MAX:
        return 0 if negative else -1
    return _wrap_int32(-magnitude if negative else magnitude)


def split(text: str, delims: str) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens