"""
Test Suite Generator.

Builds one test case per catalog type. A case body is the concatenation
of operator snippets chosen by the same rule table as the source pass;
the snippets carry nested placeholders (variable setup, assertion,
literals) that are resolved in repeated passes once the case is built.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..axes import SOURCE_RULES
from ..catalog import DEFAULT_CATALOG, TypeCatalog, TypeCategory
from ..rewriter import WrapperSyntax, rewrite_wrappers
from ..templates.renderer import PlaceholderRenderer
from ..templates.store import FragmentMap
from ...utils.config import SuiteConfig
from .base import BaseGenerator, OutputBuffer


class SuiteGenerator(BaseGenerator):
    """Axis driver for the generated test suite."""

    def __init__(
        self,
        fragments: FragmentMap,
        catalog: TypeCatalog = DEFAULT_CATALOG,
        renderer: Optional[PlaceholderRenderer] = None,
        wrapper: WrapperSyntax = WrapperSyntax(),
        normalize: bool = True,
        suite: Optional[SuiteConfig] = None,
    ):
        super().__init__(fragments, catalog, renderer, wrapper, normalize)
        self._suite = suite or SuiteConfig()

    def _generate(self) -> str:
        out = OutputBuffer()
        out.append(self._fragments.base + "\n\n")

        count = 0
        for t in self._catalog.all:
            count += out.add_block(self.test_case(t))
        self._log.log_section("tests", count)

        return out.getvalue()

    def test_case(self, type_name: str) -> str:
        """Fully resolved test case for one type."""
        case = self._render("test", "", type_name)
        if not case:
            return ""
        text = self._renderer.resolve(
            case,
            self._bindings(type_name),
            max_passes=self._suite.max_resolution_passes,
            name=f"test {type_name}",
        )
        return rewrite_wrappers(text, self._wrapper)

    def content(self, type_name: str) -> str:
        """Operator snippets for one type, in rule order."""
        category = self._catalog.category_of(type_name)
        parts = []
        for rule in SOURCE_RULES:
            if not rule.applies_to(category):
                continue
            for op in rule.operators:
                snippet = self._render(rule.test_fragment, op, type_name)
                if snippet:
                    parts.append(self._suite.indent + snippet + "\n")
        return "".join(parts)

    def _bindings(self, type_name: str) -> Dict[str, str]:
        category = self._catalog.category_of(type_name)
        if category is TypeCategory.BOOL:
            default = self._suite.bool_literal
        else:
            default = self._suite.default_literal
        delimiter = self._suite.string_delimiter if category is TypeCategory.STRING else ""

        return {
            "CONTENT": self.content(type_name),
            "INITVARS": self._fragments.get("initvars"),
            "ASSERT": self._fragments.get("assert"),
            "DEFAULT": default,
            "DEL": delimiter,
            "T": type_name,
        }
