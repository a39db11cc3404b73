"""Seeded pseudo-random engine and seed derivation helpers.

All randomness of a generator passes through exactly one :class:`Engine`
owned by that generator.  The engine is a Mersenne Twister
(:class:`random.Random`) seeded once, either from an explicit integer or from
operating-system entropy.  The seed actually used is kept so that an
entropy-seeded run can be replayed.

Engines refuse to be copied or pickled: a duplicate would continue the same
stream from the copy point and silently correlate the two consumers.

Thread model
------------
An engine is not safe for concurrent use.  Give each thread its own generator,
seeded from :func:`spawn_seeds` for a reproducible set of streams or from
entropy otherwise.

These helpers are not suitable for secrets; use :mod:`secrets` for tokens.
"""

from __future__ import annotations

import hashlib
import os
import random
from typing import Any, Final, NoReturn

from anyrand.utils.logging import get_logger

log = get_logger(__name__)

# ---------------------------------------------------------------------------
# Domain separation constants
# ---------------------------------------------------------------------------

_NS_CHILD: Final = b"anyrand/v1/child-seed"
_SEED_BYTES: Final = 8


# ---------------------------------------------------------------------------
# Seed sources
# ---------------------------------------------------------------------------


def entropy_seed() -> int:
    """Return a fresh 64-bit seed read from ``os.urandom``."""

    return int.from_bytes(os.urandom(_SEED_BYTES), "big")


def derive_seed(seed: int, stream: int | str) -> int:
    """Derive a deterministic child seed for ``stream`` from ``seed``.

    The child is ``SHA256(_NS_CHILD || seed || 0x00 || stream)`` truncated to
    64 bits.  Equal inputs always give equal children; distinct streams give
    unrelated children.
    """

    data = _NS_CHILD + str(int(seed)).encode("ascii") + b"\x00" + str(stream).encode("utf-8")
    digest = hashlib.sha256(data).digest()
    return int.from_bytes(digest[:_SEED_BYTES], "big")


def spawn_seeds(seed: int, count: int) -> list[int]:
    """Return ``count`` child seeds of ``seed``, one per independent stream."""

    if count < 0:
        raise ValueError("count must be non-negative")
    return [derive_seed(seed, index) for index in range(count)]


def _zigzag(seed: int) -> int:
    """Map a signed seed to a distinct non-negative one.

    ``random.Random`` seeds from ``abs(seed)``, so ``-7`` and ``7`` would share
    a stream.  Non-negative seeds map to even values, negative ones to odd.
    """

    return seed * 2 if seed >= 0 else -seed * 2 - 1


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class Engine:
    """Exclusively owned, seeded source of uniform draws."""

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = entropy_seed()
            log.debug("engine seeded from entropy: %d", seed)
        else:
            seed = int(seed)
            log.debug("engine seeded explicitly: %d", seed)
        self._seed: int = seed
        self._rng = random.Random(_zigzag(seed))

    @property
    def seed(self) -> int:
        """The seed this engine was initialised with."""

        return self._seed

    def random(self) -> float:
        """Return the next float in ``[0.0, 1.0)``."""

        return self._rng.random()

    def randint(self, low: int, high: int) -> int:
        """Return the next integer in ``[low, high]`` inclusive."""

        return self._rng.randint(low, high)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self._seed})"

    # -- copy protection ---------------------------------------------------

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __deepcopy__(self, memo: dict[int, Any]) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied; create a new instance instead")

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"{type(self).__name__} state cannot be serialized")


__all__ = ["Engine", "entropy_seed", "derive_seed", "spawn_seeds"]
