"""Typed configuration schema and loader for the anyrand package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, model_validator

AlphabetName = Literal[
    "lowercase",
    "uppercase",
    "numeric",
    "alpha",
    "alphanumeric",
    "punctuation",
    "printable",
    "hexadecimal",
]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Engine seeding settings."""

    seed_env: str
    value: int | None = None

    model_config = ConfigDict(extra="forbid")


class TextSettings(BaseModel):
    """Defaults for string generation."""

    default_alphabet: AlphabetName = "printable"
    min_length: conint(ge=0) = 8
    max_length: conint(ge=0) = 8

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_lengths(self) -> "TextSettings":
        if self.min_length > self.max_length:
            raise ValueError("text.min_length must not exceed text.max_length")
        return self


class LoggingSettings(BaseModel):
    """Log level used by the command line."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    text: TextSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.seed_env``.  A non-integer value in
    that variable fails validation.
    """

    with (
        importlib_resources.files("anyrand.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.seed_env
    if seed_env in environ:
        seed = SeedSettings.model_validate({"seed_env": seed_env, "value": environ[seed_env]})
        cfg = cfg.model_copy(update={"seed": seed})

    return cfg


__all__ = [
    "AlphabetName",
    "ConfigModel",
    "SeedSettings",
    "TextSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
