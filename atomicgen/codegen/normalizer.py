"""
Deprecated-Idiom Normalizer.

Swift removed the ``++`` and ``--`` operators. Generated code is
normalised in two steps: statements that use them on the stored value
are replaced by explicit ``+= 1`` / ``-= 1`` forms, and ``do { ... }``
blocks whose only purpose is to exercise them are deleted.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from ..utils.logging import get_logger

logger = get_logger(__name__)

STATEMENT_REWRITES: Tuple[Tuple[str, str], ...] = (
    ("let result = ++x.value;", "let result = x.value; x.value += 1;"),
    ("let result = --x.value;", "let result = x.value; x.value -= 1;"),
    ("let result = x.value++;", "let result = x.value; x.value += 1;"),
    ("let result = x.value--;", "let result = x.value; x.value -= 1;"),
)

BLOCK_MARKERS: Tuple[str, ...] = ("++n", "n++", "--n", "n--")

BLOCK_OPEN = "do {"
BLOCK_CLOSE = "}"


def rewrite_statements(text: str, rewrites: Sequence[Tuple[str, str]] = STATEMENT_REWRITES) -> str:
    for old, new in rewrites:
        text = text.replace(old, new)
    return text


def remove_marked_blocks(
    text: str,
    markers: Sequence[str] = BLOCK_MARKERS,
    opener: str = BLOCK_OPEN,
    closer: str = BLOCK_CLOSE,
) -> str:
    """
    Delete every block enclosing one of ``markers``.

    The block runs from the nearest ``opener`` before the marker to the
    first ``closer`` after it. If either is missing the pass stops and
    the text is returned as it stands.
    """
    removed = 0
    for marker in markers:
        while True:
            idx = text.find(marker)
            if idx == -1:
                break
            start = text.rfind(opener, 0, idx)
            end = text.find(closer, idx + len(marker))
            if start == -1 or end == -1:
                logger.warning(f"No enclosing block for '{marker}' at offset {idx}, stopping block removal")
                return text
            text = text[:start] + text[end + len(closer):]
            removed += 1

    if removed:
        logger.debug(f"Removed {removed} deprecated operator blocks")
    return text


def normalize_deprecated(text: str) -> str:
    """Apply statement rewrites, then block removal."""
    return remove_marked_blocks(rewrite_statements(text))
