"""Turning command-line arguments into the integers of stack ``a``.

The rules are the puzzle's:
- arguments may hold several numbers separated by spaces;
- every number is an optional sign followed by digits;
- no number may appear twice;
- every number fits in a signed 32-bit integer.
Any violation raises :class:`ParseError`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_INT_MIN = -2147483648
_INT_MAX = 2147483647
_MAX_SIGNIFICANT_DIGITS = 10


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid stack."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def _leading_integer(text: str) -> int:
    """Read an integer the way the C library does: spaces, one sign, digits."""
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in _SIGNS and rest[:1]:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return sign * int("".join(digits))


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Convert the leading number of ``text`` to a 32-bit integer (wrapping)."""
    return _wrap(_leading_integer(text), 32)


def atol(text: str) -> int:
    """Convert the leading number of ``text`` to a 64-bit integer (wrapping)."""
    return _wrap(_leading_integer(text), 64)


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on a single character, dropping empty words."""
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(separator) if word]


def join_arguments(args: Iterable[str]) -> str:
    """Join arguments into one line, each followed by a space."""
    return "".join(f"{arg} " for arg in args)


def has_blank_argument(args: Iterable[str]) -> bool:
    """Tell whether some argument is empty or made of spaces only."""
    return any(all(char == " " for char in arg) for arg in args)


def has_bad_sign(tokens: Iterable[str]) -> bool:
    """Tell whether a token is not an optional sign followed by digits."""
    for token in tokens:
        body = token
        if token[:1] in _SIGNS and token[:1]:
            if len(token) == 1:
                return True
            body = token[1:]
        if any(char not in _DIGITS for char in body):
            return True
    return False


def has_duplicate(tokens: Sequence[str]) -> bool:
    """Tell whether two tokens denote the same number."""
    values = [atoi(token) for token in tokens]
    return len(set(values)) != len(values)


def has_long_number(tokens: Iterable[str]) -> bool:
    """Tell whether a token has more than ten significant characters.

    Leading zeros and sign characters are not counted.
    """
    return any(
        len(token.lstrip("0+-")) > _MAX_SIGNIFICANT_DIGITS for token in tokens
    )


def is_out_of_limits(tokens: Sequence[str]) -> bool:
    """Tell whether a token lies outside the signed 32-bit range."""
    if not tokens:
        return False
    if has_long_number(tokens):
        return True
    return any(not _INT_MIN <= atol(token) <= _INT_MAX for token in tokens)


def check_tokens(tokens: Sequence[str]) -> None:
    """Raise :class:`ParseError` unless every token is a valid, unique number."""
    if has_bad_sign(tokens) or has_duplicate(tokens) or is_out_of_limits(tokens):
        raise ParseError()


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Return the numbers given by ``args``, top of the stack first.

    ``args`` excludes the program name. No arguments give an empty list.
    """
    if not args:
        return []
    if has_blank_argument(args):
        raise ParseError()
    tokens = split_words(join_arguments(args), " ")
    check_tokens(tokens)
    return [atoi(token) for token in tokens]