"""Random string generation over a configurable alphabet.

:class:`StringGenerator` owns one engine and composes an integral
:class:`~anyrand.scalar.ScalarGenerator` bound to that engine.  A call first
draws the length (for the ranged form) and then draws one index per position
from ``[0, len(alphabet) - 1]``.  Characters are independent and drawn with
replacement.

Two call shapes are accepted, distinguished by the second positional argument::

    gen(5, "01")            # exactly five characters from "01"
    gen(2, 5, "01")         # two to five characters from "01"

When the alphabet is omitted or empty, the instance default (the
printable catalog alphabet unless overridden) is used.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NoReturn

from anyrand import alphabets
from anyrand.engine import Engine
from anyrand.scalar import Category, ScalarGenerator
from anyrand.utils.errors import InvalidAlphabetError, InvalidRangeError
from anyrand.utils.logging import get_logger

log = get_logger(__name__)

Alphabet = str | Sequence[str]


def normalize_alphabet(alphabet: Alphabet) -> str:
    """Return ``alphabet`` as a non-empty string.

    Strings are returned unchanged.  Other sequences must contain only
    single-character strings.  Duplicates are kept; they weight the draw.
    """

    if isinstance(alphabet, str):
        chars = alphabet
    else:
        items = list(alphabet)
        if not all(isinstance(ch, str) and len(ch) == 1 for ch in items):
            raise InvalidAlphabetError("alphabet items must be single characters")
        chars = "".join(items)
    if not chars:
        raise InvalidAlphabetError("alphabet must contain at least one character")
    return chars


class StringGenerator:
    """Generate random strings of fixed or ranged length.

    Parameters
    ----------
    seed:
        Optional explicit seed for reproducible output.
    default_alphabet:
        Alphabet used when a call omits one.  Defaults to
        :func:`anyrand.alphabets.printable`.
    """

    __slots__ = ("_engine", "_rnd", "_default_alphabet")

    def __init__(
        self, seed: int | None = None, *, default_alphabet: Alphabet | None = None
    ) -> None:
        if default_alphabet is None:
            default_alphabet = alphabets.printable()
        self._default_alphabet: str = normalize_alphabet(default_alphabet)
        self._engine = Engine(seed)
        self._rnd = ScalarGenerator(Category.INTEGRAL, engine=self._engine)
        log.debug("string generator default alphabet: %d characters", len(self._default_alphabet))

    @property
    def category(self) -> Category:
        return Category.TEXT

    @property
    def seed(self) -> int:
        return self._engine.seed

    @property
    def default_alphabet(self) -> str:
        return self._default_alphabet

    # -- generation ---------------------------------------------------------

    def generate(
        self,
        length: int,
        max_length: int | Alphabet | None = None,
        alphabet: Alphabet | None = None,
    ) -> str:
        """Return a random string.

        ``generate(length, alphabet=None)`` yields exactly ``length``
        characters; ``generate(min_length, max_length, alphabet=None)`` yields
        a length drawn uniformly from ``[min_length, max_length]``.
        """

        if isinstance(max_length, bool):
            raise TypeError("max_length must be an int, not bool")
        if max_length is None or isinstance(max_length, int):
            if max_length is None:
                return self.fixed(length, alphabet)
            return self.ranged(length, max_length, alphabet)
        if alphabet is not None:
            raise TypeError("alphabet given twice")
        return self.fixed(length, max_length)

    __call__ = generate

    def fixed(self, length: int, alphabet: Alphabet | None = None) -> str:
        """Return exactly ``length`` characters drawn from ``alphabet``."""

        return self.ranged(length, length, alphabet)

    def ranged(self, min_length: int, max_length: int, alphabet: Alphabet | None = None) -> str:
        """Return ``min_length`` to ``max_length`` characters drawn from ``alphabet``."""

        chars = self._resolve_alphabet(alphabet)
        if min_length < 0:
            raise InvalidRangeError(f"length must be non-negative, got {min_length}")
        if min_length > max_length:
            raise InvalidRangeError(
                f"min_length ({min_length}) must not exceed max_length ({max_length})"
            )
        length = self._rnd(min_length, max_length)
        last = len(chars) - 1
        return "".join(chars[self._rnd(0, last)] for _ in range(length))

    def sample(
        self,
        count: int,
        length: int,
        max_length: int | Alphabet | None = None,
        alphabet: Alphabet | None = None,
    ) -> list[str]:
        """Return ``count`` strings generated with the same arguments."""

        if count < 0:
            raise InvalidRangeError(f"count must be non-negative, got {count}")
        return [self.generate(length, max_length, alphabet) for _ in range(count)]

    def _resolve_alphabet(self, alphabet: Alphabet | None) -> str:
        if alphabet is None or len(alphabet) == 0:
            return self._default_alphabet
        return normalize_alphabet(alphabet)

    # -- catalog accessors -------------------------------------------------

    def alphabet_printable(self) -> str:
        return alphabets.printable()

    def alphabet_alpha(self) -> str:
        return alphabets.alpha()

    def alphabet_lowercase(self) -> str:
        return alphabets.lowercase()

    def alphabet_uppercase(self) -> str:
        return alphabets.uppercase()

    def alphabet_alphanumeric(self) -> str:
        return alphabets.alphanumeric()

    def alphabet_numeric(self) -> str:
        return alphabets.numeric()

    def alphabet_punctuation(self) -> str:
        return alphabets.punctuation()

    def alphabet_hexadecimal(self) -> str:
        return alphabets.hexadecimal()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._engine.seed})"

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} state cannot be serialized")


__all__ = ["Alphabet", "StringGenerator", "normalize_alphabet"]
