"""
Template System.

- store: splits a template document into named fragments
- renderer: expands ``{{NAME}}`` placeholders with Jinja2
"""

from .store import (
    FragmentMap,
    parse_template,
    DEFAULT_DELIMITER,
    BASE_FRAGMENT,
)
from .renderer import (
    PlaceholderRenderer,
    PreservingUndefined,
    create_placeholder_renderer,
)

__all__ = [
    "FragmentMap",
    "parse_template",
    "DEFAULT_DELIMITER",
    "BASE_FRAGMENT",
    "PlaceholderRenderer",
    "PreservingUndefined",
    "create_placeholder_renderer",
]
