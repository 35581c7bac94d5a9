"""
Base Classes for Code Generators.

This module provides the shared expansion step used by every generator:
render a fragment for one (operator, type) binding, then rewrite wrapper
references unless the binding is the identity alias.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from ..catalog import DEFAULT_CATALOG, TypeCatalog
from ..normalizer import normalize_deprecated
from ..rewriter import WrapperSyntax, rewrite_wrappers, should_rewrite
from ..templates.renderer import PlaceholderRenderer, create_placeholder_renderer
from ..templates.store import FragmentMap
from ...utils.logging import GeneratorLogger


class OutputBuffer:
    """Append-only sequence of rendered blocks."""

    def __init__(self):
        self._blocks: List[str] = []

    def append(self, text: str) -> None:
        self._blocks.append(text)

    def add_block(self, text: str, prefix: str = "") -> bool:
        """Append a newline-terminated block; empty renders are dropped."""
        if not text:
            return False
        self._blocks.append(prefix + text + "\n")
        return True

    def getvalue(self) -> str:
        return "".join(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)


class BaseGenerator(ABC):
    """Base class for all template-driven generators."""

    def __init__(
        self,
        fragments: FragmentMap,
        catalog: TypeCatalog = DEFAULT_CATALOG,
        renderer: Optional[PlaceholderRenderer] = None,
        wrapper: WrapperSyntax = WrapperSyntax(),
        normalize: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            fragments: Parsed template document
            catalog: Type catalog driving the type axis
            renderer: Placeholder renderer, created if not given
            wrapper: Wrapper spelling to rewrite to aliases
            normalize: Whether to normalize deprecated idioms in the output
        """
        self._fragments = fragments
        self._catalog = catalog
        self._renderer = renderer or create_placeholder_renderer()
        self._wrapper = wrapper
        self._normalize = normalize
        self._log = GeneratorLogger(self.__class__.__module__)

    @property
    def catalog(self) -> TypeCatalog:
        return self._catalog

    def generate(self) -> str:
        """Generate the complete document."""
        text = self._generate()
        if self._normalize:
            text = normalize_deprecated(text)
        return text

    @abstractmethod
    def _generate(self) -> str:
        """Generate the document before normalization."""
        pass

    def _render(self, fragment: str, operator: str, type_name: str) -> str:
        """Expand ``fragment`` for one (operator, type) binding."""
        text = self._renderer.expand(self._fragments, fragment, {"O": operator, "T": type_name})
        if text and should_rewrite(operator, type_name, self._wrapper):
            text = rewrite_wrappers(text, self._wrapper)
        return text
