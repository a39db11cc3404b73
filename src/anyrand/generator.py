"""Category-dispatching construction of generators.

:func:`make_generator` is the single entry point that accepts every category,
including text.  Numeric categories yield a
:class:`~anyrand.scalar.ScalarGenerator`; text yields a
:class:`~anyrand.text.StringGenerator`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anyrand import alphabets
from anyrand.scalar import Category, ScalarGenerator
from anyrand.text import StringGenerator

if TYPE_CHECKING:  # pragma: no cover
    from anyrand.config import ConfigModel

AnyGenerator = ScalarGenerator | StringGenerator


def make_generator(category: Category | str | type, seed: int | None = None) -> AnyGenerator:
    """Return a generator for ``category`` seeded with ``seed``.

    Raises :class:`~anyrand.utils.errors.UnsupportedCategoryError` when the
    category is not recognised.
    """

    resolved = Category.resolve(category)
    if resolved is Category.TEXT:
        return StringGenerator(seed)
    return ScalarGenerator(resolved, seed)


def generator_from_config(category: Category | str | type, cfg: ConfigModel) -> AnyGenerator:
    """Return a generator for ``category`` using seed and alphabet from ``cfg``."""

    resolved = Category.resolve(category)
    if resolved is Category.TEXT:
        return StringGenerator(
            cfg.seed.value,
            default_alphabet=alphabets.get_alphabet(cfg.text.default_alphabet),
        )
    return ScalarGenerator(resolved, cfg.seed.value)


__all__ = ["AnyGenerator", "make_generator", "generator_from_config"]
