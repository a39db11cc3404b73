"""Shared helpers: typed exceptions and logging setup."""
