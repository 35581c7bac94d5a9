"""
Placeholder Rendering Engine.

This module expands ``{{NAME}}`` placeholders in template fragments using
Jinja2. Bound names are replaced by their literal values; unbound names
are written back unchanged so that a later rendering layer can resolve
them. A value is never re-expanded within the call that inserts it.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Set

from jinja2 import Environment, Template, TemplateError, TemplateSyntaxError, Undefined

from ...utils.exceptions import PlaceholderCycleError, TemplateRenderError
from ...utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

# Jinja2 block and comment syntax is moved to NUL-delimited markers so that
# ``{%`` and ``{#`` in Swift text are plain data.
_BLOCK_START = "\x00<%"
_BLOCK_END = "%>\x00"
_COMMENT_START = "\x00<#"
_COMMENT_END = "#>\x00"

# The Jinja2 lexer folds \r\n and \r into newline_sequence; carriage
# returns are masked before compiling and restored after rendering.
_CR_MARK = "\x01CR\x01"


class PreservingUndefined(Undefined):
    """Undefined that renders as its own placeholder token."""

    __slots__ = ()

    def __str__(self) -> str:
        if self._undefined_name is None:
            return ""
        return "{{%s}}" % self._undefined_name


class PlaceholderRenderer:
    """Jinja2-based placeholder renderer for template fragments."""

    def __init__(self):
        """Initialize the Jinja2 environment."""
        self._env = Environment(
            variable_start_string="{{",
            variable_end_string="}}",
            block_start_string=_BLOCK_START,
            block_end_string=_BLOCK_END,
            comment_start_string=_COMMENT_START,
            comment_end_string=_COMMENT_END,
            line_statement_prefix=None,
            line_comment_prefix=None,
            undefined=PreservingUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._cache: Dict[str, Template] = {}

    def _compile(self, text: str, name: str) -> Template:
        template = self._cache.get(text)
        if template is None:
            try:
                template = self._env.from_string(text.replace("\r", _CR_MARK))
            except TemplateSyntaxError as e:
                raise TemplateRenderError(name, e.message or str(e), e.lineno) from e
            self._cache[text] = template
        return template

    def render(self, text: str, bindings: Mapping[str, str], name: str = "<inline>") -> str:
        """Render ``text`` once with the given bindings."""
        if not text:
            return ""
        template = self._compile(text, name)
        try:
            rendered = template.render(**bindings)
        except TemplateError as e:
            raise TemplateRenderError(name, str(e)) from e
        return rendered.replace(_CR_MARK, "\r")

    def expand(self, fragments: Mapping[str, str], name: str, bindings: Mapping[str, str]) -> str:
        """Render the named fragment; a missing fragment renders empty."""
        body = fragments.get(name, "")
        if not body:
            return ""
        return self.render(body, bindings, name)

    @staticmethod
    def placeholders(text: str) -> Set[str]:
        """Names of all placeholder tokens present in ``text``."""
        return set(PLACEHOLDER_PATTERN.findall(text))

    def resolve(self, text: str, bindings: Mapping[str, str], max_passes: int = 16, name: str = "<inline>") -> str:
        """
        Render repeatedly until no bound placeholder remains.

        Bound values may themselves contain placeholders, so each pass
        can introduce tokens resolved by the next one.

        Raises:
            PlaceholderCycleError: if bound tokens remain after ``max_passes``
        """
        bound = set(bindings)
        for passes in range(max_passes):
            pending = self.placeholders(text) & bound
            if not pending:
                logger.debug(f"Resolved '{name}' in {passes} passes")
                return text
            text = self.render(text, bindings, name)

        pending = self.placeholders(text) & bound
        if pending:
            raise PlaceholderCycleError(max_passes, list(pending))
        return text


def create_placeholder_renderer() -> PlaceholderRenderer:
    """Create a placeholder renderer."""
    return PlaceholderRenderer()
