"""Shared pytest fixtures for the benchgen test suite.

Provides reusable fixtures for:
- Temporary output directories and generator configuration
- Deterministic random sources for the dependency coin flip
- Small generation requests
- Helpers for inspecting generated trees
"""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from benchgen.config import GenerationRequest, GeneratorConfig


# ---------------------------------------------------------------------------
# Deterministic random sources
# ---------------------------------------------------------------------------


class FixedRandom:
    """Stand-in for ``random.Random`` that always returns the same value.

    Counts how many draws were made.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return self.value


class SequenceRandom:
    """Returns the given values in order, cycling when exhausted."""

    def __init__(self, values: list[float]) -> None:
        self.values = values
        self.draws = 0

    def random(self) -> float:
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value


@pytest.fixture
def always_depend() -> FixedRandom:
    """Every module imports Base."""
    return FixedRandom(0.0)


@pytest.fixture
def never_depend() -> FixedRandom:
    """No module imports Base."""
    return FixedRandom(0.99)


# ---------------------------------------------------------------------------
# Configuration & requests
# ---------------------------------------------------------------------------


@pytest.fixture
def gen_config(tmp_path: Path) -> GeneratorConfig:
    """Generator configuration writing under a temporary directory."""
    return GeneratorConfig(output_dir=tmp_path / "out", seed=1234)


@pytest.fixture
def small_request() -> GenerationRequest:
    """25 modules over 10 packages: packages 0-4 get three, 5-9 get two."""
    return GenerationRequest(module_count=25, package_count=10)


# ---------------------------------------------------------------------------
# Tree inspection helpers
# ---------------------------------------------------------------------------


_MODULE_FILE = re.compile(r"^Module(\d+)\.(ts|res)$")


def module_files(root: Path) -> list[Path]:
    """All generated module files under ``root/src`` (Base excluded)."""
    src = root / "src"
    return sorted(p for p in src.rglob("*") if p.is_file() and _MODULE_FILE.match(p.name))


def module_index(path: Path) -> int:
    match = _MODULE_FILE.match(path.name)
    assert match is not None, f"not a module file: {path}"
    return int(match.group(1))
