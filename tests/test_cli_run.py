from __future__ import annotations

from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from anyrand import ScalarGenerator, StringGenerator, alphabets
from anyrand.cli import app


def _lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if line.strip()]


def test_int_values_in_range(monkeypatch: Any) -> None:
    monkeypatch.delenv("ANYRAND_SEED", raising=False)
    runner = CliRunner()
    result = runner.invoke(app, ["int", "1", "6", "--count", "50"])
    assert result.exit_code == 0
    values = [int(v) for v in _lines(result.stdout)]
    assert len(values) == 50
    assert all(1 <= v <= 6 for v in values)


def test_int_seed_matches_library() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["int", "1", "1000", "-n", "10", "--seed", "33"])
    assert result.exit_code == 0
    gen = ScalarGenerator(int, seed=33)
    assert [int(v) for v in _lines(result.stdout)] == gen.sample(1, 1000, 10)


def test_negative_bounds_after_separator() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["int", "--seed", "1", "-n", "20", "--", "-10", "-5"])
    assert result.exit_code == 0
    assert all(-10 <= int(v) <= -5 for v in _lines(result.stdout))


def test_real_precision() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["real", "0", "1", "-n", "5", "-p", "3", "--seed", "2"])
    assert result.exit_code == 0
    values = _lines(result.stdout)
    assert len(values) == 5
    for v in values:
        assert len(v.split(".")[1]) == 3
        assert 0.0 <= float(v) <= 1.0


def test_text_fixed_and_ranged() -> None:
    runner = CliRunner()
    fixed = runner.invoke(app, ["text", "4", "--chars", "01", "-n", "10", "--seed", "3"])
    assert fixed.exit_code == 0
    assert all(len(s) == 4 and set(s) <= {"0", "1"} for s in _lines(fixed.stdout))

    ranged = runner.invoke(
        app, ["text", "2", "5", "--alphabet", "alphanumeric", "-n", "30", "--seed", "3"]
    )
    assert ranged.exit_code == 0
    for s in _lines(ranged.stdout):
        assert 2 <= len(s) <= 5
        assert set(s) <= set(alphabets.alphanumeric())


def test_text_seed_matches_library() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["text", "6", "--alphabet", "hexadecimal", "--seed", "9"])
    assert result.exit_code == 0
    assert result.stdout.strip() == StringGenerator(seed=9)(6, alphabets.hexadecimal())


def test_text_uses_config_lengths(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(
        "text:\n  default_alphabet: numeric\n  min_length: 3\n  max_length: 3\n",
        encoding="utf-8",
    )
    runner = CliRunner()
    result = runner.invoke(app, ["text", "--config", str(cfg), "-n", "5", "--seed", "1"])
    assert result.exit_code == 0
    assert all(len(s) == 3 and s.isdigit() for s in _lines(result.stdout))


def test_alphabet_listing() -> None:
    runner = CliRunner()
    listing = runner.invoke(app, ["alphabet"])
    assert listing.exit_code == 0
    assert "alphanumeric" in listing.stdout
    assert "62" in listing.stdout

    hexa = runner.invoke(app, ["alphabet", "hexadecimal"])
    assert hexa.stdout.strip() == "0123456789abcdef"


def test_demo_is_reproducible() -> None:
    runner = CliRunner()
    first = runner.invoke(app, ["demo", "--seed", "5"])
    second = runner.invoke(app, ["demo", "--seed", "5"])
    assert first.exit_code == 0
    assert first.stdout == second.stdout
    assert "Integers [1, 6]:" in first.stdout
    assert "Strings (length 5, alpha):" in first.stdout
