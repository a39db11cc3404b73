"""Typer-based command line front end for the generators.

The commands are thin consumers of the library: each loads configuration,
builds one generator and prints ``--count`` values, one per line.  ``demo``
prints the sample tables, ten values per row.

Negative bounds must follow ``--`` so they are not parsed as options, e.g.
``anyrand int -- -10 10``.

Exit codes
----------
0 success
2 usage error
4 configuration error
5 generation error (invalid range, alphabet or category)
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .alphabets import ALPHABET_NAMES, get_alphabet
from .config import ConfigModel, load_config
from .config.schema import SeedSettings
from .engine import entropy_seed, spawn_seeds
from .generator import generator_from_config
from .scalar import Category, ScalarGenerator
from .text import StringGenerator
from .utils.errors import GeneratorError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="anyrand",
    help="Generate uniform random integers, reals and strings. "
    "Use 'anyrand demo' for a quick tour.",
)

_ROW = 10
_DEMO_COUNT = 60


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _setup(config_path: Path | None, seed: int | None, verbose: bool) -> ConfigModel:
    """Load configuration, apply the ``--seed`` override and configure logging."""

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if seed is not None:
        cfg = cfg.model_copy(
            update={"seed": SeedSettings(seed_env=cfg.seed.seed_env, value=seed)}
        )
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    return cfg


def _build(
    category: Category, cfg: ConfigModel, verbose: bool
) -> ScalarGenerator | StringGenerator:
    try:
        gen = generator_from_config(category, cfg)
    except GeneratorError as exc:
        _safe_exit(5, str(exc))
    if verbose:
        typer.echo(f"Seed: {gen.seed}", err=True)
    return gen


def _emit(draw: Callable[[], object], count: int, fmt: Callable[[object], str] = str) -> None:
    """Print ``count`` values from ``draw``; generation errors exit with code 5."""

    try:
        for _ in range(count):
            typer.echo(fmt(draw()))
    except GeneratorError as exc:
        _safe_exit(5, str(exc))


def _table(title: str, values: Iterable[str]) -> None:
    typer.echo(f"{title}:")
    row: list[str] = []
    for value in values:
        row.append(value)
        if len(row) == _ROW:
            typer.echo("".join(row).rstrip())
            row = []
    if row:
        typer.echo("".join(row).rstrip())
    typer.echo("")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

_SEED_HELP = "Explicit seed for reproducible output"
_CONFIG_HELP = "YAML config to override defaults"


@app.callback()
def main() -> None:
    """Entry point for the anyrand command group."""


@app.command("int")
def int_command(
    low: int = typer.Argument(..., help="Smallest value (inclusive)"),
    high: int = typer.Argument(..., help="Largest value (inclusive)"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Print uniform integers in [LOW, HIGH]."""

    cfg = _setup(config_path, seed, verbose)
    gen = _build(Category.INTEGRAL, cfg, verbose)
    _emit(lambda: gen(low, high), count)


@app.command("real")
def real_command(
    low: float = typer.Argument(..., help="Smallest value (inclusive)"),
    high: float = typer.Argument(..., help="Upper bound (exclusive)"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of values"),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=0, help="Digits after the decimal point"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Print uniform reals in [LOW, HIGH)."""

    cfg = _setup(config_path, seed, verbose)
    gen = _build(Category.REAL, cfg, verbose)
    fmt: Callable[[object], str] = str if precision is None else (lambda v: f"{v:.{precision}f}")
    _emit(lambda: gen(low, high), count, fmt)


@app.command("text")
def text_command(
    length: Optional[int] = typer.Argument(
        None, help="Exact length, or minimum length when MAX_LENGTH is given"
    ),
    max_length: Optional[int] = typer.Argument(None, help="Maximum length (inclusive)"),
    alphabet: Optional[str] = typer.Option(
        None, "--alphabet", "-a", help=f"Catalog alphabet [{'|'.join(ALPHABET_NAMES)}]"
    ),
    chars: Optional[str] = typer.Option(None, "--chars", help="Literal characters to draw from"),
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of strings"),
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Print random strings.

    Without LENGTH the configured ``text.min_length``/``text.max_length`` apply.
    """

    cfg = _setup(config_path, seed, verbose)
    if alphabet is not None and chars is not None:
        _safe_exit(2, "--alphabet and --chars are mutually exclusive")
    gen = _build(Category.TEXT, cfg, verbose)
    if length is None:
        low, high = cfg.text.min_length, cfg.text.max_length
    else:
        low = length
        high = length if max_length is None else max_length
    try:
        pool = chars if chars is not None else (get_alphabet(alphabet) if alphabet else None)
    except GeneratorError as exc:
        _safe_exit(5, str(exc))
    _emit(lambda: gen(low, high, pool), count)


@app.command("alphabet")
def alphabet_command(
    name: Optional[str] = typer.Argument(None, help="Catalog alphabet to print"),
) -> None:
    """Print a catalog alphabet, or list all of them."""

    if name is None:
        for known in ALPHABET_NAMES:
            typer.echo(f"{known:<14}{len(get_alphabet(known)):>3}")
        return
    try:
        typer.echo(get_alphabet(name))
    except GeneratorError as exc:
        _safe_exit(5, str(exc))


@app.command("demo")
def demo_command(
    seed: Optional[int] = typer.Option(None, "--seed", help=_SEED_HELP),
    config_path: Optional[Path] = typer.Option(None, "--config", help=_CONFIG_HELP),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log to stderr"),
) -> None:
    """Print sample tables of every category."""

    cfg = _setup(config_path, seed, verbose)
    base = cfg.seed.value if cfg.seed.value is not None else entropy_seed()
    if verbose:
        typer.echo(f"Seed: {base}", err=True)
    int_seed, real_seed, text_seed = spawn_seeds(base, 3)
    ints = ScalarGenerator(Category.INTEGRAL, int_seed)
    reals = ScalarGenerator(Category.REAL, real_seed)
    strings = StringGenerator(text_seed)

    _table("Integers [1, 6]", (f"{ints(1, 6):<6}" for _ in range(_DEMO_COUNT)))
    _table("Reals [1, 6)", (f"{reals(1, 6):6.3f}" for _ in range(_DEMO_COUNT)))
    _table("Reals [0, 1)", (f"{reals(0, 1):6.3f}" for _ in range(_DEMO_COUNT)))
    _table(
        "Strings (length [2, 5], alphanumeric)",
        (f"{strings(2, 5, get_alphabet('alphanumeric')):>6}" for _ in range(_DEMO_COUNT)),
    )
    _table(
        "Strings (length 5, alpha)",
        (f"{strings(5, get_alphabet('alpha')):>6}" for _ in range(_DEMO_COUNT)),
    )
    log.debug("demo finished")
