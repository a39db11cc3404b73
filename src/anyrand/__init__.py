"""Uniform pseudo-random integers, reals and strings with minimal setup.

Create a generator for a category and call it with the bounds you want::

    from anyrand import ScalarGenerator, StringGenerator

    dice = ScalarGenerator(int, seed=33)
    dice(1, 6)                          # int in [1, 6]
    ScalarGenerator(float)(0, 1)        # float in [0, 1)
    StringGenerator()(2, 5, "01")       # two to five characters from "01"
"""

from . import alphabets
from .engine import Engine, derive_seed, entropy_seed, spawn_seeds
from .generator import generator_from_config, make_generator
from .scalar import Category, ScalarGenerator
from .text import StringGenerator
from .utils.errors import (
    GeneratorError,
    InvalidAlphabetError,
    InvalidRangeError,
    UnsupportedCategoryError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "alphabets",
    "Category",
    "Engine",
    "ScalarGenerator",
    "StringGenerator",
    "make_generator",
    "generator_from_config",
    "entropy_seed",
    "derive_seed",
    "spawn_seeds",
    "GeneratorError",
    "UnsupportedCategoryError",
    "InvalidRangeError",
    "InvalidAlphabetError",
]
