"""benchgen scaffolder -- writes benchmark source trees.

Quick usage::

    from benchgen.config import GenerationRequest, GeneratorConfig
    from benchgen.scaffolder import ProjectGenerator

    generator = ProjectGenerator(GeneratorConfig(output_dir=Path("/tmp/bench")))
    results = generator.run(GenerationRequest(module_count=200, package_count=4))
"""

from benchgen.scaffolder.generator import GenerationError, GenerationResult, ProjectGenerator
from benchgen.scaffolder.profiles import (
    EcosystemKind,
    EcosystemProfile,
    default_profiles,
    rescript_profile,
    typescript_profile,
)
from benchgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "EcosystemKind",
    "EcosystemProfile",
    "GenerationError",
    "GenerationResult",
    "ProjectGenerator",
    "TemplateRenderer",
    "default_profiles",
    "rescript_profile",
    "typescript_profile",
]
