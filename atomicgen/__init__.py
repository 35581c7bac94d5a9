"""
atomicgen: template-driven generator for type-specialized Atomic wrappers.

Expands a small set of Swift templates across a matrix of primitive types
and operators, producing the wrapper source and its test suite. Outputs
are rewritten only when their content changes.

Usage:
    from atomicgen import run

    run(root="path/to/swift/project")
"""

__version__ = "0.1.0"
__author__ = "atomicgen Team"
__email__ = "atomicgen@example.com"

# Public API exports
from .pipeline import run, generate_text, TargetResult

from .utils.config import (
    get_config,
    GeneratorConfig,
)

__all__ = [
    "run",
    "generate_text",
    "TargetResult",
    "get_config",
    "GeneratorConfig",
]
