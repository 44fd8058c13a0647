"""
Taggart: tag-based markup for Python

Builds HTML/XML-like markup from nested calls and serializes it to text,
escaping every piece of content exactly once however fragments are nested or
combined. Zero runtime dependencies.

Quick Start:
    >>> from taggart import html, taggart
    >>> page = html.div(
    ...     html.p("A & B", class_="lead"),
    ...     html.img(src="/logo.png", alt="Logo"),
    ...     data={"section": "intro"},
    ... )
    >>> page.render()
    '<div data-section="intro"><p class="lead">A &amp; B</p><img alt="Logo" src="/logo.png"></div>'

    >>> # Group siblings into one fragment
    >>> taggart(html.div(), html.span()).render()
    '<div></div><span></span>'

Custom Tags:
    >>> from taggart import MarkupConfig, markup_config_context
    >>> from taggart import create_registry_with_defaults
    >>>
    >>> registry = create_registry_with_defaults().deftag("my-card").build()
    >>> with markup_config_context(MarkupConfig(tag_registry=registry)):
    ...     html["my-card"]("Hi").render()
    '<my-card>Hi</my-card>'

Interop:
    Fragments implement ``__html__``, so markupsafe and Jinja2 treat them as
    already escaped.
"""

from typing import Any

from taggart.attributes import (
    dasherize,
    normalize_attributes,
    render_attribute_value,
    render_attributes,
)
from taggart.config import (
    DEFAULT_ATTR_PREFIXES,
    MarkupConfig,
    get_markup_config,
    markup_config_context,
    reset_markup_config,
    set_markup_config,
)
from taggart.dsl import TagFactory, TagNamespace, html
from taggart.errors import (
    InvalidCombinatorElement,
    TaggartError,
    UnknownTag,
    UnsupportedAttributeValue,
    UnsupportedContent,
    VoidTagContent,
)
from taggart.registry import (
    TagRegistry,
    TagRegistryBuilder,
    TagSpec,
    create_default_registry,
    create_registry_with_defaults,
)
from taggart.safe import EMPTY, Raw, Safe, escape
from taggart.tags import build_content_tag, build_tag, build_void_tag, combine, taggart

__version__ = "0.2.0"


def render(value: Any) -> str:
    """Render a fragment, or any escapable value, to a plain string.

    Example:
        >>> render(html.p("A & B"))
        '<p>A &amp; B</p>'
        >>> render("<raw>")
        '&lt;raw&gt;'
    """
    return escape(value).render()


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "escape",
    "render",
    "build_tag",
    "build_void_tag",
    "build_content_tag",
    "combine",
    "taggart",
    # Fragments
    "EMPTY",
    "Raw",
    "Safe",
    # Attributes
    "dasherize",
    "normalize_attributes",
    "render_attribute_value",
    "render_attributes",
    # Tag declaration
    "TagRegistry",
    "TagRegistryBuilder",
    "TagSpec",
    "create_default_registry",
    "create_registry_with_defaults",
    # Call-site sugar
    "TagFactory",
    "TagNamespace",
    "html",
    # Configuration (ContextVar-based)
    "DEFAULT_ATTR_PREFIXES",
    "MarkupConfig",
    "get_markup_config",
    "set_markup_config",
    "reset_markup_config",
    "markup_config_context",
    # Errors
    "TaggartError",
    "InvalidCombinatorElement",
    "UnknownTag",
    "UnsupportedAttributeValue",
    "UnsupportedContent",
    "VoidTagContent",
]
