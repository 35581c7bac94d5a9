"""
Operator Axis Tables.

Each ``SectionRule`` pairs an ordered operator list with the type
categories it applies to. ``SOURCE_RULES`` is walked front to back by
both generators; the order of rules and of operators within a rule is
the order of the generated output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterator, Tuple

from .catalog import TypeCatalog, TypeCategory


class Section(Enum):
    """Operator sections of the generated source."""
    ARITHMETIC = "arithmetic"
    PREFIX = "prefix"
    POSTFIX = "postfix"
    MODIFY = "modify"


_SIGNED = TypeCategory.SIGNED
_UNSIGNED = TypeCategory.UNSIGNED
_FLOAT = TypeCategory.FLOAT
_STRING = TypeCategory.STRING


@dataclass(frozen=True)
class SectionRule:
    """Operators of one section valid for a set of type categories."""
    section: Section
    operators: Tuple[str, ...]
    categories: FrozenSet[TypeCategory]
    test_fragment: str

    @property
    def fragment(self) -> str:
        """Source template fragment rendered for this rule."""
        return self.section.value

    def applies_to(self, category: TypeCategory) -> bool:
        return category in self.categories

    def types(self, catalog: TypeCatalog) -> Tuple[str, ...]:
        return catalog.select(self.categories)

    def combinations(self, catalog: TypeCatalog) -> Iterator[Tuple[str, str]]:
        """Yield (operator, type) pairs, operators outermost."""
        types = self.types(catalog)
        for op in self.operators:
            for t in types:
                yield op, t


def _rule(section, operators, categories, test_fragment) -> SectionRule:
    return SectionRule(
        section=section,
        operators=tuple(operators.split()),
        categories=frozenset(categories),
        test_fragment=test_fragment,
    )


SOURCE_RULES: Tuple[SectionRule, ...] = (
    _rule(Section.ARITHMETIC, "+ - * / %", (_SIGNED, _UNSIGNED, _FLOAT), "operator-join"),
    _rule(Section.ARITHMETIC, "<< >> ^ & &+ &- &*", (_SIGNED, _UNSIGNED), "operator-join"),
    _rule(Section.ARITHMETIC, "+", (_STRING,), "operator-join"),
    _rule(Section.PREFIX, "++ --", (_SIGNED, _UNSIGNED, _FLOAT), "operator-prefix"),
    _rule(Section.PREFIX, "+ -", (_SIGNED, _FLOAT), "operator-prefix-assign"),
    _rule(Section.PREFIX, "~", (_SIGNED,), "operator-prefix-assign"),
    _rule(Section.POSTFIX, "++ --", (_SIGNED, _UNSIGNED, _FLOAT), "operator-postfix"),
    _rule(Section.MODIFY, "+= -= *= /= %=", (_SIGNED, _UNSIGNED, _FLOAT), "operator-modify"),
    _rule(Section.MODIFY, "+=", (_STRING,), "operator-combine"),
    _rule(Section.MODIFY, "<<= >>= ^= &=", (_SIGNED, _UNSIGNED), "operator-modify"),
)


def rules_for(section: Section) -> Tuple[SectionRule, ...]:
    return tuple(rule for rule in SOURCE_RULES if rule.section is section)
