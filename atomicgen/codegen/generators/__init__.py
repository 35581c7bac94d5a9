"""
Code Generators.

- base: shared fragment expansion and output buffer
- source: wrapper source document
- suite: generated test suite
"""

from .base import BaseGenerator, OutputBuffer
from .source import SourceGenerator
from .suite import SuiteGenerator

__all__ = [
    "BaseGenerator",
    "OutputBuffer",
    "SourceGenerator",
    "SuiteGenerator",
]
