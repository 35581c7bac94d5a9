"""
Generic-Wrapper Rewriter.

Templates spell wrapper types generically (``Atomic<Int>``); generated
declarations refer to the type alias instead (``IntA``). The rewrite is
skipped for the expansion whose operator binding is the alias of its own
type, which is how the alias declarations themselves are produced.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WrapperSyntax:
    """Spelling of the generic wrapper and of its aliases."""
    name: str = "Atomic"
    suffix: str = "A"
    close: str = ">"

    @property
    def open(self) -> str:
        return f"{self.name}<"

    def alias(self, type_name: str) -> str:
        return type_name + self.suffix


def should_rewrite(operator: str, type_name: str, syntax: WrapperSyntax = WrapperSyntax()) -> bool:
    """False only for the identity binding ``operator == alias(type_name)``."""
    return operator != syntax.alias(type_name)


def rewrite_wrappers(text: str, syntax: WrapperSyntax = WrapperSyntax()) -> str:
    """
    Replace each ``Wrapper<X>`` in ``text`` with ``X`` plus the alias suffix.

    The scan repeats until no open token is left, so nested wrappers
    collapse to stacked suffixes and a second call is a no-op. An open
    token with no later close token stops the scan; the rest of the text
    is returned as is.
    """
    open_token = syntax.open
    pos = 0
    while True:
        start = text.find(open_token, pos)
        if start == -1:
            return text
        inner_start = start + len(open_token)
        end = text.find(syntax.close, inner_start)
        if end == -1:
            logger.warning(f"Unterminated '{open_token}' at offset {start}, leaving remainder unrewritten")
            return text
        replacement = text[inner_start:end] + syntax.suffix
        text = text[:start] + replacement + text[end + len(syntax.close):]
        # rescan from the splice point; the kept inner text may hold another open token
        pos = max(0, start - len(open_token) + 1)
