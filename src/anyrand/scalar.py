"""Uniform integral and real number generation.

A :class:`ScalarGenerator` is bound to one :class:`Category` when it is
constructed.  The category selects one of two strategies:

``Category.INTEGRAL``
    uniform ``int`` in the closed range ``[low, high]``.
``Category.REAL``
    uniform ``float`` in the half-open range ``[low, high)``.  The upper bound
    is never returned; when ``low == high`` the single value ``low`` is.

Requests for any other category (``Category.TEXT``, ``bool``, ``complex``,
unknown names) fail at construction with :class:`UnsupportedCategoryError`.
Text generation lives in :mod:`anyrand.text` because its bounds are lengths,
not values of the generated type.

Range violations raise :class:`InvalidRangeError` before the engine is
advanced, so a failed call leaves the stream untouched.
"""

from __future__ import annotations

import math
import operator
from enum import Enum
from typing import Any, NoReturn, Protocol, runtime_checkable

from anyrand.engine import Engine
from anyrand.utils.errors import InvalidRangeError, UnsupportedCategoryError
from anyrand.utils.logging import get_logger

log = get_logger(__name__)

Number = int | float


class Category(Enum):
    """Enumeration of supported value categories."""

    INTEGRAL = "integral"
    REAL = "real"
    TEXT = "text"

    @classmethod
    def resolve(cls, value: Any) -> "Category":
        """Map a category member, its value or a Python type to a member.

        ``int`` maps to ``INTEGRAL``, ``float`` to ``REAL`` and ``str`` to
        ``TEXT``.  ``bool`` is rejected even though it subclasses ``int``.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        elif isinstance(value, type):
            found = _TYPE_CATEGORIES.get(value)
            if found is not None:
                return found
        raise UnsupportedCategoryError(f"Unable to generate randoms of type {_describe(value)}")


_TYPE_CATEGORIES: dict[type, Category] = {
    int: Category.INTEGRAL,
    float: Category.REAL,
    str: Category.TEXT,
}


def _describe(value: Any) -> str:
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


@runtime_checkable
class ScalarStrategy(Protocol):
    """Protocol for numeric sampling strategies bound to an engine."""

    category: Category

    def generate(self, low: Any, high: Any) -> Number:
        """Return one uniform draw between ``low`` and ``high``."""

        ...


class IntegralStrategy:
    """Uniform integers over the closed range ``[low, high]``."""

    category = Category.INTEGRAL

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def generate(self, low: Any, high: Any) -> int:
        low = operator.index(low)
        high = operator.index(high)
        if low > high:
            raise InvalidRangeError(f"low ({low}) must not exceed high ({high})")
        return self._engine.randint(low, high)


class RealStrategy:
    """Uniform floats over the half-open range ``[low, high)``."""

    category = Category.REAL

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def generate(self, low: Any, high: Any) -> float:
        low = float(low)
        high = float(high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise InvalidRangeError(f"bounds must be finite, got [{low}, {high})")
        if low > high:
            raise InvalidRangeError(f"low ({low}) must not exceed high ({high})")
        u = self._engine.random()
        # weighted form stays finite when high - low overflows
        value = low * (1.0 - u) + high * u
        if value >= high and high > low:
            # rounding can land on the excluded bound
            value = math.nextafter(high, low)
        return max(value, low)


_STRATEGIES: dict[Category, type[IntegralStrategy] | type[RealStrategy]] = {
    Category.INTEGRAL: IntegralStrategy,
    Category.REAL: RealStrategy,
}


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ScalarGenerator:
    """Generate uniform numbers of one category from an owned engine.

    Parameters
    ----------
    category:
        ``Category.INTEGRAL`` or ``Category.REAL``, their string values, or
        the types ``int`` / ``float``.
    seed:
        Optional explicit seed.  When omitted the engine draws one from
        operating-system entropy; it is available afterwards as :attr:`seed`.
    engine:
        Existing engine to draw from instead of creating one.  Used by
        generators that compose this one; mutually exclusive with ``seed``.
    """

    __slots__ = ("_category", "_engine", "_strategy")

    def __init__(
        self,
        category: Category | str | type,
        seed: int | None = None,
        *,
        engine: Engine | None = None,
    ) -> None:
        resolved = Category.resolve(category)
        strategy_cls = _STRATEGIES.get(resolved)
        if strategy_cls is None:
            raise UnsupportedCategoryError(
                f"Unable to generate randoms of category {resolved.value!r} with "
                "ScalarGenerator; use StringGenerator for text"
            )
        if engine is not None and seed is not None:
            raise TypeError("pass either seed or engine, not both")
        self._category: Category = resolved
        self._engine: Engine = engine if engine is not None else Engine(seed)
        self._strategy: ScalarStrategy = strategy_cls(self._engine)
        log.debug("scalar generator bound to %s strategy", resolved.value)

    @property
    def category(self) -> Category:
        return self._category

    @property
    def seed(self) -> int:
        """Seed of the underlying engine."""

        return self._engine.seed

    def generate(self, low: Any, high: Any) -> Number:
        """Return one uniform value between ``low`` and ``high``.

        Integral bounds are both inclusive; for real values ``high`` is
        exclusive.
        """

        return self._strategy.generate(low, high)

    __call__ = generate

    def sample(self, low: Any, high: Any, count: int) -> list[Number]:
        """Return ``count`` successive draws from ``[low, high]``/``[low, high)``."""

        if count < 0:
            raise InvalidRangeError(f"count must be non-negative, got {count}")
        return [self._strategy.generate(low, high) for _ in range(count)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._category.value!r}, seed={self._engine.seed})"

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} state cannot be serialized")


__all__ = [
    "Category",
    "ScalarStrategy",
    "IntegralStrategy",
    "RealStrategy",
    "ScalarGenerator",
]
