"""
Primitive Type Catalog.

Classifies the Swift primitive type names the generators expand over.
Each name belongs to exactly one primitive category; the ``number`` and
``all`` selections are unions computed on demand as fresh tuples, always
in declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class TypeCategory(Enum):
    """Primitive type categories."""
    SIGNED = "signed"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"


NUMBER_CATEGORIES = frozenset({TypeCategory.SIGNED, TypeCategory.UNSIGNED, TypeCategory.FLOAT})
ALL_CATEGORIES = frozenset(TypeCategory)


@dataclass(frozen=True)
class TypeCatalog:
    """Immutable, ordered mapping of type name to category."""
    entries: Tuple[Tuple[str, TypeCategory], ...]

    def __post_init__(self):
        seen = set()
        for name, category in self.entries:
            if not name:
                raise ValueError("Type name cannot be empty")
            if name in seen:
                raise ValueError(f"Type '{name}' declared more than once")
            if not isinstance(category, TypeCategory):
                raise TypeError(f"Category of '{name}' must be a TypeCategory")
            seen.add(name)

    def select(self, categories: Iterable[TypeCategory]) -> Tuple[str, ...]:
        """Type names in any of ``categories``, in declaration order."""
        wanted = frozenset(categories)
        return tuple(name for name, category in self.entries if category in wanted)

    def category_of(self, name: str) -> TypeCategory:
        for type_name, category in self.entries:
            if type_name == name:
                return category
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(type_name == name for type_name, _ in self.entries)

    @property
    def signed(self) -> Tuple[str, ...]:
        return self.select({TypeCategory.SIGNED})

    @property
    def unsigned(self) -> Tuple[str, ...]:
        return self.select({TypeCategory.UNSIGNED})

    @property
    def floats(self) -> Tuple[str, ...]:
        return self.select({TypeCategory.FLOAT})

    @property
    def bools(self) -> Tuple[str, ...]:
        return self.select({TypeCategory.BOOL})

    @property
    def strings(self) -> Tuple[str, ...]:
        return self.select({TypeCategory.STRING})

    @property
    def number(self) -> Tuple[str, ...]:
        return self.select(NUMBER_CATEGORIES)

    @property
    def all(self) -> Tuple[str, ...]:
        return self.select(ALL_CATEGORIES)


def create_catalog(
    signed: Iterable[str] = (),
    unsigned: Iterable[str] = (),
    floats: Iterable[str] = (),
    bools: Iterable[str] = (),
    strings: Iterable[str] = (),
) -> TypeCatalog:
    """Build a catalog; declaration order is signed, unsigned, float, bool, string."""
    entries = []
    for names, category in (
        (signed, TypeCategory.SIGNED),
        (unsigned, TypeCategory.UNSIGNED),
        (floats, TypeCategory.FLOAT),
        (bools, TypeCategory.BOOL),
        (strings, TypeCategory.STRING),
    ):
        entries.extend((name, category) for name in names)
    return TypeCatalog(entries=tuple(entries))


DEFAULT_CATALOG = create_catalog(
    signed=("Int", "Int64", "Int32", "Int16", "Int8"),
    unsigned=("UInt", "UInt64", "UInt32", "UInt16", "UInt8"),
    floats=("Double", "Float", "Float80"),
    bools=("Bool",),
    strings=("String",),
)
