"""Build descriptor models for the generated projects.

Each descriptor is a Pydantic model whose field aliases match the keys the
target tool expects (``compilerOptions``, ``package-specs``...).  Descriptors
are written with :func:`benchgen.utils.write_descriptor`.

All paths inside descriptors are relative and resolve from the directory of
the descriptor file itself.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


SETTINGS_FILE = "tsconfig.settings.json"
TSCONFIG_FILE = "tsconfig.json"
BSCONFIG_FILE = "bsconfig.json"
OUTPUT_DIR = "dist"
BUILD_INFO_DIR = ".tsbuildinfo"


class _Descriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# TypeScript (composite build)
# ---------------------------------------------------------------------------


class TsReference(_Descriptor):
    """A ``references`` entry pointing at another project's directory."""

    path: str


class TsCompilerSettings(_Descriptor):
    """Compiler options shared by every package via ``extends``."""

    base_url: str = Field(default="./src", alias="baseUrl")
    paths: dict[str, list[str]] = Field(default_factory=dict)
    target: str = "esnext"
    module: str = "commonjs"
    strict: bool = True
    skip_lib_check: bool = Field(default=True, alias="skipLibCheck")
    declaration: bool = True
    declaration_map: bool = Field(default=True, alias="declarationMap")
    composite: bool = True
    source_map: bool = Field(default=True, alias="sourceMap")


class TsSettingsDescriptor(_Descriptor):
    """``tsconfig.settings.json`` at the project root."""

    compiler_options: TsCompilerSettings = Field(alias="compilerOptions")


class TsPackageOptions(_Descriptor):
    """Per-package output and incremental cache locations."""

    out_dir: str = Field(alias="outDir")
    root_dir: str = Field(default=".", alias="rootDir")
    ts_build_info_file: str = Field(alias="tsBuildInfoFile")


class TsPackageDescriptor(_Descriptor):
    """``src/pkgN/tsconfig.json``."""

    extends: str
    compiler_options: TsPackageOptions = Field(alias="compilerOptions")
    include: list[str] = Field(default_factory=lambda: ["**/*"])
    references: list[TsReference] = Field(default_factory=list)


class TsSolutionDescriptor(_Descriptor):
    """Root ``tsconfig.json``: no sources, only ordered package references."""

    files: list[str] = Field(default_factory=list)
    references: list[TsReference] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# ReScript (single source set)
# ---------------------------------------------------------------------------


class BsSources(_Descriptor):
    dir: str = "src"
    subdirs: bool = True


class BsPackageSpecs(_Descriptor):
    module: str = "commonjs"
    in_source: bool = Field(default=True, alias="in-source")


class BsConfigDescriptor(_Descriptor):
    """``bsconfig.json`` at the project root."""

    name: str
    sources: BsSources = Field(default_factory=BsSources)
    package_specs: BsPackageSpecs = Field(default_factory=BsPackageSpecs, alias="package-specs")


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def package_name(index: int) -> str:
    """Directory name of the package with the given index."""
    return f"pkg{index}"


def settings_descriptor(namespace_alias: str) -> TsSettingsDescriptor:
    """Shared settings mapping ``<alias>/*`` onto the source root."""
    return TsSettingsDescriptor(
        compiler_options=TsCompilerSettings(paths={f"{namespace_alias}/*": ["*"]}),
    )


def package_descriptor(index: int) -> TsPackageDescriptor:
    """Descriptor for package *index*.

    Package 0 hosts Base and references nothing; every other package
    references package 0 so the optional Base import always resolves.
    """
    name = package_name(index)
    references = [] if index == 0 else [TsReference(path=f"../{package_name(0)}")]
    return TsPackageDescriptor(
        extends=f"../../{SETTINGS_FILE}",
        compiler_options=TsPackageOptions(
            out_dir=f"../../{OUTPUT_DIR}/{name}",
            ts_build_info_file=f"../../{BUILD_INFO_DIR}/{name}.tsbuildinfo",
        ),
        references=references,
    )


def solution_descriptor(package_count: int) -> TsSolutionDescriptor:
    """Root descriptor referencing every package in ascending index order."""
    return TsSolutionDescriptor(
        references=[TsReference(path=f"./src/{package_name(i)}") for i in range(package_count)],
    )


def bsconfig_descriptor(project_name: str) -> BsConfigDescriptor:
    return BsConfigDescriptor(name=project_name)
