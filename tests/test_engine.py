from __future__ import annotations

import copy
import pickle

import pytest

from anyrand.engine import Engine, derive_seed, entropy_seed, spawn_seeds


def test_explicit_seed_is_reproducible() -> None:
    e1 = Engine(33)
    e2 = Engine(33)
    assert e1.seed == 33
    assert [e1.randint(1, 1000) for _ in range(10)] == [e2.randint(1, 1000) for _ in range(10)]
    assert e1.random() == e2.random()


def test_negative_seed_has_its_own_stream() -> None:
    pos = Engine(7)
    neg = Engine(-7)
    assert neg.seed == -7
    assert [pos.randint(1, 10**9) for _ in range(5)] != [neg.randint(1, 10**9) for _ in range(5)]
    assert Engine(-7).random() == Engine(-7).random()
    assert Engine(0).random() != Engine(-1).random()


def test_entropy_seed_is_recorded() -> None:
    engine = Engine()
    replay = Engine(engine.seed)
    assert [engine.random() for _ in range(5)] == [replay.random() for _ in range(5)]
    assert 0 <= entropy_seed() < 2**64


def test_engine_cannot_be_copied_or_pickled() -> None:
    engine = Engine(1)
    with pytest.raises(TypeError):
        copy.copy(engine)
    with pytest.raises(TypeError):
        copy.deepcopy(engine)
    with pytest.raises(TypeError):
        pickle.dumps(engine)


def test_derive_seed_is_stable_and_separated() -> None:
    assert derive_seed(7, 0) == derive_seed(7, 0)
    assert derive_seed(7, 0) != derive_seed(7, 1)
    assert derive_seed(7, "worker") != derive_seed(8, "worker")
    assert 0 <= derive_seed(7, 0) < 2**64


def test_spawn_seeds() -> None:
    seeds = spawn_seeds(42, 4)
    assert seeds == spawn_seeds(42, 4)
    assert len(set(seeds)) == 4
    assert spawn_seeds(42, 0) == []
    with pytest.raises(ValueError):
        spawn_seeds(42, -1)
