"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and one or more ``EcosystemProfile`` values and
writes a multi-package benchmark source tree per profile:

    <root>/src/pkg0/Base.<ext>
    <root>/src/pkg<i % P>/Module<i>.<ext>
    <root>/<ecosystem descriptors>

Everything runs in program order on the calling thread.  Filesystem errors
are not caught; a failed run leaves a partially written tree behind.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.markup import escape

from benchgen.config import GenerationRequest, GeneratorConfig
from benchgen.utils import console, ensure_dir, format_duration, print_success, remove_tree

from .descriptors import package_name
from .profiles import EcosystemKind, EcosystemProfile, default_profiles
from .templates import TemplateRenderer


BASE_PACKAGE = 0
BASE_MODULE = "Base"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when generation is attempted against a target in the wrong state."""

    def __init__(self, label: str, message: str) -> None:
        self.label = label
        super().__init__(f"{label}: {message}")


# ---------------------------------------------------------------------------
# Module planning
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ModulePlan:
    """Placement and dependency decision for one generated module."""

    index: int
    package: int
    depends_on_base: bool

    @property
    def name(self) -> str:
        return module_name(self.index)


@dataclass
class GenerationResult:
    """What a single ``generate`` call wrote."""

    label: str
    root: Path
    module_files: list[Path] = field(default_factory=list)
    descriptor_files: list[Path] = field(default_factory=list)
    dependent_modules: list[int] = field(default_factory=list)
    elapsed: float = 0.0


def module_name(index: int) -> str:
    return f"Module{index}"


def package_index(module_index: int, package_count: int) -> int:
    """Round-robin package assignment."""
    return module_index % package_count


def plan_modules(
    request: GenerationRequest,
    rng: random.Random,
    probability: float,
) -> list[ModulePlan]:
    """Assign every module to a package and flip its dependency coin.

    Exactly one ``rng.random()`` draw is made per module, in index order.
    """
    return [
        ModulePlan(
            index=i,
            package=package_index(i, request.package_count),
            depends_on_base=rng.random() < probability,
        )
        for i in range(request.module_count)
    ]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Writes benchmark source trees for each ecosystem profile.

    The random source is injectable so tests can pin the dependency
    pattern; by default it comes from ``GeneratorConfig.make_rng``.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: TemplateRenderer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.rng = rng or config.make_rng()

    # -- Public API --------------------------------------------------------

    def reset(self, root: str | Path) -> Path:
        """Remove any previous ``src`` tree under *root* and recreate it empty.

        Anything else under *root* is left alone.  Returns the ``src`` path.
        """
        root = Path(root)
        src = root / "src"
        remove_tree(src)
        ensure_dir(root)
        return ensure_dir(src)

    def generate(
        self, request: GenerationRequest, profile: EcosystemProfile
    ) -> GenerationResult:
        """Generate the tree for *profile*.  ``reset`` must have run first."""
        root = profile.root_for(self.config)
        src = root / "src"
        if not src.is_dir():
            raise GenerationError(profile.label, f"{src} does not exist; reset the target first")
        available = self.renderer.list_templates(profile.template_dir)
        missing = [
            t for t in (profile.base_template, profile.module_template) if t not in available
        ]
        if missing:
            raise GenerationError(profile.label, f"missing templates: {', '.join(missing)}")

        started = time.monotonic()
        result = GenerationResult(label=profile.label, root=root)

        # 1. Directories before any file is written
        package_dirs = [
            ensure_dir(src / package_name(i)) for i in range(request.package_count)
        ]
        for extra in profile.extra_dirs:
            ensure_dir(root / extra)

        # 2. Build descriptors
        result.descriptor_files = profile.write_descriptors(root, request, self.config)

        # 3. Shared Base module
        self.renderer.render_to_file(
            profile.base_template,
            package_dirs[BASE_PACKAGE] / f"{BASE_MODULE}.{profile.extension}",
            {},
        )

        # 4. Generated modules
        plans = plan_modules(request, self.rng, self.config.dependency_probability)
        for plan in plans:
            out = package_dirs[plan.package] / f"{plan.name}.{profile.extension}"
            self.renderer.render_to_file(
                profile.module_template, out, self._module_context(plan)
            )
            result.module_files.append(out)
            if plan.depends_on_base:
                result.dependent_modules.append(plan.index)

        result.elapsed = time.monotonic() - started
        return result

    def run(
        self,
        request: GenerationRequest,
        profiles: list[EcosystemProfile] | None = None,
    ) -> list[GenerationResult]:
        """Reset and generate every profile in order, reporting progress."""
        if profiles is None:
            profiles = default_profiles()

        console.print(
            f"Generating {request.module_count} modules across "
            f"{request.package_count} packages..."
        )

        results: list[GenerationResult] = []
        for profile in profiles:
            root = profile.root_for(self.config)
            console.print(f"[dim]{profile.label}: writing to {escape(str(root))}[/dim]")
            self.reset(root)
            result = self.generate(request, profile)
            print_success(
                f"{_ready_message(profile, request)} ({format_duration(result.elapsed)})"
            )
            results.append(result)
        return results

    # -- Context building --------------------------------------------------

    def _module_context(self, plan: ModulePlan) -> dict[str, Any]:
        return {
            "index": plan.index,
            "depends_on_base": plan.depends_on_base,
            "namespace_alias": self.config.namespace_alias,
            "base_package": package_name(BASE_PACKAGE),
        }


def _ready_message(profile: EcosystemProfile, request: GenerationRequest) -> str:
    if profile.kind is EcosystemKind.COMPOSITE_BUILD:
        return (
            f"{profile.label} ready: {request.module_count} modules, "
            "path mapping + correct references"
        )
    return (
        f"{profile.label} ready: {request.module_count} modules across "
        f"{request.package_count} packages"
    )
