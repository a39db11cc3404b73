"""Typed exceptions for generator construction and sampling."""


class GeneratorError(Exception):
    """Base class for generator related errors."""


class UnsupportedCategoryError(GeneratorError, TypeError):
    """Raised at construction when no strategy exists for a value category."""


class InvalidRangeError(GeneratorError, ValueError):
    """Raised when ``low > high`` or a length or count is negative."""


class InvalidAlphabetError(GeneratorError, ValueError):
    """Raised when an alphabet is empty, malformed or not in the catalog."""
