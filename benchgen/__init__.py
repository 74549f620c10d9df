"""benchgen -- synthetic multi-package source trees for build benchmarks."""

__version__ = "0.1.0"
