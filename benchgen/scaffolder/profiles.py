"""Ecosystem profiles.

An :class:`EcosystemProfile` is a small value object holding everything that
differs between the two generated projects: file extension, templates,
auxiliary directories and the descriptor writer.  The generation procedure in
:mod:`benchgen.scaffolder.generator` is shared and only reads from the
profile.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from benchgen.config import GenerationRequest, GeneratorConfig
from benchgen.utils import write_descriptor

from .descriptors import (
    BSCONFIG_FILE,
    BUILD_INFO_DIR,
    OUTPUT_DIR,
    SETTINGS_FILE,
    TSCONFIG_FILE,
    bsconfig_descriptor,
    package_descriptor,
    package_name,
    settings_descriptor,
    solution_descriptor,
)


class EcosystemKind(str, Enum):
    COMPOSITE_BUILD = "composite-build"
    SINGLE_SOURCE_SET = "single-source-set"


DescriptorWriter = Callable[[Path, GenerationRequest, GeneratorConfig], list[Path]]


@dataclass(frozen=True)
class EcosystemProfile:
    """Everything the generator needs to know about one target ecosystem."""

    kind: EcosystemKind
    label: str
    extension: str
    template_dir: str
    write_descriptors: DescriptorWriter
    build_command: str
    extra_dirs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def base_template(self) -> str:
        return f"{self.template_dir}/Base.{self.extension}.j2"

    @property
    def module_template(self) -> str:
        return f"{self.template_dir}/Module.{self.extension}.j2"

    def root_for(self, config: GeneratorConfig) -> Path:
        """Project root this profile generates into."""
        if self.kind is EcosystemKind.COMPOSITE_BUILD:
            return config.ts_root
        return config.rescript_root


# ---------------------------------------------------------------------------
# Descriptor writers
# ---------------------------------------------------------------------------


def write_typescript_descriptors(
    root: Path, request: GenerationRequest, config: GeneratorConfig
) -> list[Path]:
    """Write the shared settings, one descriptor per package, and the solution file."""
    written = [
        write_descriptor(settings_descriptor(config.namespace_alias), root / SETTINGS_FILE),
    ]
    for index in range(request.package_count):
        written.append(
            write_descriptor(
                package_descriptor(index),
                root / "src" / package_name(index) / TSCONFIG_FILE,
            )
        )
    written.append(
        write_descriptor(solution_descriptor(request.package_count), root / TSCONFIG_FILE)
    )
    return written


def write_rescript_descriptors(
    root: Path, request: GenerationRequest, config: GeneratorConfig
) -> list[Path]:
    """Write the single flat ``bsconfig.json``."""
    return [
        write_descriptor(bsconfig_descriptor(config.rescript_project_name), root / BSCONFIG_FILE),
    ]


# ---------------------------------------------------------------------------
# Profiles
# ---------------------------------------------------------------------------


def typescript_profile() -> EcosystemProfile:
    return EcosystemProfile(
        kind=EcosystemKind.COMPOSITE_BUILD,
        label="TypeScript",
        extension="ts",
        template_dir="typescript",
        write_descriptors=write_typescript_descriptors,
        build_command="rake build_ts",
        extra_dirs=(OUTPUT_DIR, BUILD_INFO_DIR),
    )


def rescript_profile() -> EcosystemProfile:
    return EcosystemProfile(
        kind=EcosystemKind.SINGLE_SOURCE_SET,
        label="ReScript",
        extension="res",
        template_dir="rescript",
        write_descriptors=write_rescript_descriptors,
        build_command="rake build_res",
    )


def default_profiles() -> list[EcosystemProfile]:
    """Both targets, in generation order."""
    return [typescript_profile(), rescript_profile()]
