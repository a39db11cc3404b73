"""Canonical character sets for string generation.

Every accessor is pure and returns a fresh ``str`` built from fixed ASCII
ranges.  Order is stable so seeded output is reproducible across releases;
sampling is uniform over positions so order does not affect the draw.
"""

from __future__ import annotations

from collections.abc import Callable

from anyrand.utils.errors import InvalidAlphabetError

__all__ = [
    "ALPHABET_NAMES",
    "lowercase",
    "uppercase",
    "numeric",
    "alpha",
    "alphanumeric",
    "punctuation",
    "printable",
    "hexadecimal",
    "get_alphabet",
]


def _char_range(first: str, last: str) -> str:
    """Return the characters from ``first`` to ``last`` inclusive."""

    return "".join(chr(code) for code in range(ord(first), ord(last) + 1))


def lowercase() -> str:
    return _char_range("a", "z")


def uppercase() -> str:
    return _char_range("A", "Z")


def numeric() -> str:
    return _char_range("0", "9")


def alpha() -> str:
    """Letters of both cases, lowercase first."""

    return lowercase() + uppercase()


def alphanumeric() -> str:
    return lowercase() + uppercase() + numeric()


def punctuation() -> str:
    """Printable, non-whitespace ASCII that is neither a letter nor a digit.

    Built from the four bands ``!../``, ``:..@``, ``[..``` and ``{..~``.
    """

    return (
        _char_range("!", "/")
        + _char_range(":", "@")
        + _char_range("[", "`")
        + _char_range("{", "~")
    )


def printable() -> str:
    """All printable, non-whitespace ASCII characters."""

    return lowercase() + uppercase() + numeric() + punctuation()


def hexadecimal() -> str:
    """Lowercase hexadecimal digits ``0-9a-f``."""

    return numeric() + _char_range("a", "f")


_CATALOG: dict[str, Callable[[], str]] = {
    "lowercase": lowercase,
    "uppercase": uppercase,
    "numeric": numeric,
    "alpha": alpha,
    "alphanumeric": alphanumeric,
    "punctuation": punctuation,
    "printable": printable,
    "hexadecimal": hexadecimal,
}

ALPHABET_NAMES: tuple[str, ...] = tuple(_CATALOG)


def get_alphabet(name: str) -> str:
    """Return the catalog alphabet called ``name``.

    Raises
    ------
    InvalidAlphabetError
        If ``name`` is not one of :data:`ALPHABET_NAMES`.
    """

    try:
        factory = _CATALOG[name.strip().lower()]
    except KeyError:
        known = ", ".join(ALPHABET_NAMES)
        raise InvalidAlphabetError(f"unknown alphabet {name!r}; expected one of: {known}") from None
    return factory()
