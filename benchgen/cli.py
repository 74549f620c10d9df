"""Command-line entry point.

Usage::

    python -m benchgen              # 1000 modules across 10 packages
    python -m benchgen 5000 20      # 5000 modules across 20 packages

Output location, dependency probability, import alias and RNG seed come from
``BENCHGEN_*`` environment variables (see ``GeneratorConfig.from_env``).
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError
from rich.markup import escape

from benchgen.config import GenerationRequest, GeneratorConfig
from benchgen.scaffolder import ProjectGenerator, default_profiles
from benchgen.utils import console, print_error, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchgen",
        description="Generate TypeScript and ReScript benchmark source trees",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m benchgen\n"
            "  python -m benchgen 5000 20\n"
        ),
    )
    parser.add_argument(
        "modules",
        nargs="?",
        type=int,
        default=1000,
        help="Number of modules to generate (default: 1000)",
    )
    parser.add_argument(
        "packages",
        nargs="?",
        type=int,
        default=10,
        help="Number of packages to spread them over (default: 10)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m benchgen``."""
    args = build_parser().parse_args(argv)

    try:
        request = GenerationRequest(module_count=args.modules, package_count=args.packages)
        config = GeneratorConfig.from_env()
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        sys.exit(1)

    if request.module_count < request.package_count:
        print_warning(
            f"Only {request.module_count} modules for {request.package_count} packages; "
            "some packages will contain no modules"
        )

    profiles = default_profiles()
    generator = ProjectGenerator(config)
    results = generator.run(request, profiles)

    summary: dict[str, str] = {}
    for result in results:
        summary[f"{result.label} root"] = str(result.root)
        summary[f"{result.label} modules importing Base"] = (
            f"{len(result.dependent_modules)} / {len(result.module_files)}"
        )
    print_summary_table(summary, title="Benchmark trees")

    console.print()
    console.print("Commands:")
    for profile in reversed(profiles):
        console.print(f"   {profile.build_command}")


if __name__ == "__main__":
    main()
