"""benchgen configuration.

Typed configuration for the fixture generator. Both models use Pydantic v2 so
that module/package counts and generator knobs are validated at construction
time, before anything touches the filesystem.
"""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    """How many modules to generate and how many packages to spread them over.

    Constructed once from the invocation arguments and read-only afterwards.
    """

    model_config = ConfigDict(frozen=True)

    module_count: int = Field(default=1000, ge=0, description="Total number of generated modules")
    package_count: int = Field(default=10, ge=1, description="Number of package directories")


class GeneratorConfig(BaseModel):
    """Generator-wide settings shared by every ecosystem target."""

    output_dir: Path = Field(default=Path("."))
    ts_project_dir: str = Field(default="ts-project")
    rescript_project_dir: str = Field(default="rescript-project")
    dependency_probability: float = Field(
        default=0.12,
        ge=0.0,
        le=1.0,
        description="Chance that a generated module imports the shared Base module",
    )
    namespace_alias: str = Field(default="@bench")
    rescript_project_name: str = Field(default="rescript-bench")
    seed: int | None = Field(default=None, description="Seed for the dependency coin flips")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def ts_root(self) -> Path:
        """Root of the generated TypeScript (composite build) project."""
        return self.output_dir / self.ts_project_dir

    @property
    def rescript_root(self) -> Path:
        """Root of the generated ReScript (single source set) project."""
        return self.output_dir / self.rescript_project_dir

    def make_rng(self) -> random.Random:
        """Return the random source used for the dependency coin flips."""
        return random.Random(self.seed)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            BENCHGEN_OUTPUT_DIR, BENCHGEN_DEPENDENCY_PROBABILITY,
            BENCHGEN_NAMESPACE_ALIAS, BENCHGEN_SEED.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("BENCHGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["BENCHGEN_OUTPUT_DIR"])
        if os.environ.get("BENCHGEN_DEPENDENCY_PROBABILITY"):
            kwargs["dependency_probability"] = float(os.environ["BENCHGEN_DEPENDENCY_PROBABILITY"])
        if os.environ.get("BENCHGEN_NAMESPACE_ALIAS"):
            kwargs["namespace_alias"] = os.environ["BENCHGEN_NAMESPACE_ALIAS"]
        if os.environ.get("BENCHGEN_SEED"):
            kwargs["seed"] = int(os.environ["BENCHGEN_SEED"])
        return cls(**kwargs)
