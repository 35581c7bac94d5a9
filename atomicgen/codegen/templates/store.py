"""
Template Fragment Store.

A template document is plain text split by a delimiter line. Text before
the first delimiter is the ``base`` fragment; every later chunk starts
with the fragment name on the delimiter's line and runs to the next
delimiter. Fragment bodies are stripped of surrounding whitespace.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterator

from ...utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DELIMITER = "// TEMPLATE:"
BASE_FRAGMENT = "base"


class FragmentMap(Mapping):
    """Read-only mapping of fragment name to body."""

    def __init__(self, fragments: Dict[str, str]):
        self._fragments = dict(fragments)
        self._fragments.setdefault(BASE_FRAGMENT, "")

    def __getitem__(self, name: str) -> str:
        return self._fragments[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def get(self, name: str, default: str = "") -> str:
        """Fragment body, or ``default`` (empty) when absent."""
        return self._fragments.get(name, default)

    @property
    def base(self) -> str:
        return self._fragments[BASE_FRAGMENT]

    def __repr__(self) -> str:
        return f"FragmentMap({sorted(self._fragments)})"


def parse_template(text: str, delimiter: str = DEFAULT_DELIMITER) -> FragmentMap:
    """
    Split a template document into named fragments.

    Args:
        text: Raw template document
        delimiter: Marker that introduces each named fragment

    Returns:
        FragmentMap with at least the ``base`` entry
    """
    if not delimiter:
        raise ValueError("Fragment delimiter cannot be empty")

    parts = text.split(delimiter)
    fragments = {BASE_FRAGMENT: parts[0].strip()}

    if len(parts) == 1:
        logger.warning(f"Delimiter '{delimiter}' not found, whole document is the base fragment")

    for part in parts[1:]:
        name, newline, body = part.partition("\n")
        name = name.strip()
        if not newline:
            body = ""
        if name in fragments:
            logger.warning(f"Fragment '{name}' defined more than once, keeping the last definition")
        fragments[name] = body.strip()

    logger.debug(f"Parsed {len(fragments)} fragments")
    return FragmentMap(fragments)
