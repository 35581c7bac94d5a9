"""
Source Generator.

Expands the wrapper source template: one alias per type, one initializer
extension per type, then each section's operator rules over their
applicable types, section by section.
Output order is fixed by the catalog declaration order and the rule
table, so regenerating from unchanged templates is byte-identical.
"""

from __future__ import annotations

from ..axes import Section, SectionRule, rules_for
from .base import BaseGenerator, OutputBuffer


class SourceGenerator(BaseGenerator):
    """Axis driver for the wrapper source document."""

    def _generate(self) -> str:
        out = OutputBuffer()
        out.append(self._fragments.base + "\n\n")

        self._typealiases(out)
        out.append("\n")
        self._initializers(out)
        out.append("\n")

        for section in Section:
            for rule in rules_for(section):
                self._operators(out, rule)

        return out.getvalue()

    def _typealiases(self, out: OutputBuffer) -> None:
        count = 0
        for t in self._catalog.all:
            # identity binding: the alias declaration keeps the wrapper form
            count += out.add_block(self._render("typealias", self._wrapper.alias(t), t))
        self._log.log_section("typealias", count)

    def _initializers(self, out: OutputBuffer) -> None:
        numbers = self._catalog.number
        count = 0
        for t in self._catalog.all:
            out.add_block(self._render("initialize-head", "", t))
            count += out.add_block(self._render("initialize-body", t, t), prefix="\t")
            if t in numbers:
                for other in numbers:
                    if other != t:
                        count += out.add_block(self._render("initialize-body", other, t), prefix="\t")
            out.add_block(self._render("initialize-foot", "", t))
        self._log.log_section("initialize", count)

    def _operators(self, out: OutputBuffer, rule: SectionRule) -> None:
        count = 0
        for op, t in rule.combinations(self._catalog):
            count += out.add_block(self._render(rule.fragment, op, t))
        self._log.log_section(f"{rule.section.value} {' '.join(rule.operators)}", count)
