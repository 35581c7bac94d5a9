"""
Template expansion engine.

Parses template documents into fragments and expands them across the
type catalog and operator tables to produce wrapper source and tests.
"""

from .catalog import (
    TypeCategory,
    TypeCatalog,
    create_catalog,
    DEFAULT_CATALOG,
)
from .axes import Section, SectionRule, SOURCE_RULES, rules_for
from .rewriter import WrapperSyntax, rewrite_wrappers, should_rewrite
from .normalizer import normalize_deprecated, rewrite_statements, remove_marked_blocks
from .templates import FragmentMap, parse_template, PlaceholderRenderer
from .generators import SourceGenerator, SuiteGenerator

__all__ = [
    "TypeCategory",
    "TypeCatalog",
    "create_catalog",
    "DEFAULT_CATALOG",
    "Section",
    "SectionRule",
    "SOURCE_RULES",
    "rules_for",
    "WrapperSyntax",
    "rewrite_wrappers",
    "should_rewrite",
    "normalize_deprecated",
    "rewrite_statements",
    "remove_marked_blocks",
    "FragmentMap",
    "parse_template",
    "PlaceholderRenderer",
    "SourceGenerator",
    "SuiteGenerator",
]
