"""Import surface of the package and its strategy modules."""

from __future__ import annotations

import importlib

import pytest

import anyrand
from anyrand.scalar import IntegralStrategy, RealStrategy, ScalarStrategy

MODULES = [
    "anyrand.alphabets",
    "anyrand.engine",
    "anyrand.scalar",
    "anyrand.text",
    "anyrand.generator",
    "anyrand.config",
    "anyrand.config.schema",
    "anyrand.utils.errors",
    "anyrand.utils.logging",
    "anyrand.cli",
]


def test_version_is_set() -> None:
    assert anyrand.__version__ == "0.1.0"


@pytest.mark.parametrize("name", MODULES)
def test_module_imports_with_docstring(name: str) -> None:
    module = importlib.import_module(name)
    assert module.__doc__ and module.__doc__.strip()


@pytest.mark.parametrize("name", [n for n in anyrand.__all__ if n != "__version__"])
def test_exported_name_resolves(name: str) -> None:
    assert getattr(anyrand, name) is not None


def test_exactly_two_numeric_strategies() -> None:
    from anyrand.scalar import _STRATEGIES

    assert set(_STRATEGIES.values()) == {IntegralStrategy, RealStrategy}
    for strategy in _STRATEGIES.values():
        assert issubclass(strategy, ScalarStrategy)


def test_generators_documented() -> None:
    for obj in (anyrand.ScalarGenerator, anyrand.StringGenerator, anyrand.make_generator):
        assert obj.__doc__ and obj.__doc__.strip()
