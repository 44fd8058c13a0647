"""Tag registry for tag declaration and lookup.

The registry maps tag names to their TagSpec, replacing one generated
function per tag with a single table consulted by ``build_tag()``.

Thread Safety:
TagRegistry is immutable after creation. Safe to share.
Use TagRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.deftag("my-widget")
    >>> builder.deftag("spacer", void=True)
    >>> registry = builder.build()
    >>> registry.is_void("spacer")
    True
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from taggart.errors import UnknownTag
from taggart.utils.logger import get_logger

logger = get_logger(__name__)

# Characters that would let a tag name break out of its angle brackets
_INVALID_TAG_NAME = re.compile(r"[\s<>/\"'=]")

HTML_VOID_TAGS: frozenset[str] = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    )
)

HTML_CONTENT_TAGS: frozenset[str] = frozenset(
    (
        "a", "abbr", "address", "article", "aside", "audio",
        "b", "bdi", "bdo", "blockquote", "body", "button",
        "canvas", "caption", "cite", "code", "colgroup",
        "data", "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
        "em",
        "fieldset", "figcaption", "figure", "footer", "form",
        "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "html",
        "i", "iframe", "ins",
        "kbd",
        "label", "legend", "li",
        "main", "map", "mark", "menu", "meter",
        "nav", "noscript",
        "object", "ol", "optgroup", "option", "output",
        "p", "picture", "pre", "progress",
        "q",
        "rp", "rt", "ruby",
        "s", "samp", "script", "search", "section", "select", "slot", "small", "span",
        "strong", "style", "sub", "summary", "sup",
        "table", "tbody", "td", "template", "textarea", "tfoot", "th", "thead", "time",
        "title", "tr",
        "u", "ul",
        "var", "video",
    )
)  # fmt: skip


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Declaration of a single tag.

    Attributes:
        name: Tag name, emitted verbatim (never escaped)
        void: Void tags have no content and no closing tag

    """

    name: str
    void: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Tag name must be a non-empty string, got {self.name!r}"
            raise ValueError(msg)
        if _INVALID_TAG_NAME.search(self.name):
            msg = f"Tag name {self.name!r} contains characters not allowed in markup"
            raise ValueError(msg)


class TagRegistry:
    """Immutable registry of tag declarations.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: dict[str, TagSpec]) -> None:
        """Initialize registry with a pre-built mapping.

        Use TagRegistryBuilder to create instances.
        """
        self._by_name = by_name

    def get(self, name: str) -> TagSpec | None:
        """Get the spec for a tag name, or None if not registered."""
        return self._by_name.get(name)

    def require(self, name: str) -> TagSpec:
        """Get the spec for a tag name.

        Raises:
            UnknownTag: name is not registered
        """
        spec = self._by_name.get(name)
        if spec is None:
            raise UnknownTag(name)
        return spec

    def has(self, name: str) -> bool:
        """Check if tag name is registered."""
        return name in self._by_name

    def is_void(self, name: str) -> bool:
        """Check if a registered tag is void.

        Raises:
            UnknownTag: name is not registered
        """
        return self.require(name).void

    @property
    def names(self) -> frozenset[str]:
        """Get all registered tag names."""
        return frozenset(self._by_name.keys())

    @property
    def specs(self) -> tuple[TagSpec, ...]:
        """Get all registered specs, in registration order."""
        return tuple(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        """Support 'name in registry' syntax."""
        return name in self._by_name

    def __iter__(self) -> Iterator[TagSpec]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        """Number of registered tags."""
        return len(self._by_name)


class TagRegistryBuilder:
    """Mutable builder for TagRegistry.

    Declare tags, then call build() to create an immutable registry.

    Example:
        >>> builder = TagRegistryBuilder()
        >>> builder.deftag("div").deftag("hr", void=True)
        >>> registry = builder.build()
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, TagSpec] = {}

    def register(self, spec: TagSpec) -> TagRegistryBuilder:
        """Register a tag spec.

        Returns:
            Self for chaining

        Raises:
            TypeError: spec is not a TagSpec
            ValueError: tag name already registered
        """
        if not isinstance(spec, TagSpec):
            msg = f"Expected TagSpec, got {type(spec).__name__}"
            raise TypeError(msg)
        if spec.name in self._by_name:
            msg = f"Tag '{spec.name}' already registered"
            raise ValueError(msg)
        self._by_name[spec.name] = spec
        return self

    def deftag(self, name: str, *, void: bool = False) -> TagRegistryBuilder:
        """Declare a new tag by name."""
        return self.register(TagSpec(name, void=void))

    def register_all(self, specs: Iterable[TagSpec]) -> TagRegistryBuilder:
        """Register multiple specs."""
        for spec in specs:
            self.register(spec)
        return self

    def build(self) -> TagRegistry:
        """Build immutable registry from registered specs."""
        logger.debug("Building tag registry with %d tags", len(self._by_name))
        return TagRegistry(dict(self._by_name))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        """Number of registered tags."""
        return len(self._by_name)


def _html_specs() -> list[TagSpec]:
    specs = [TagSpec(name) for name in sorted(HTML_CONTENT_TAGS)]
    specs.extend(TagSpec(name, void=True) for name in sorted(HTML_VOID_TAGS))
    return specs


# Cached singleton, TagRegistry is immutable
_DEFAULT_REGISTRY: TagRegistry | None = None


def create_default_registry() -> TagRegistry:
    """Get the default tag registry (cached singleton).

    Returns:
        Registry with the standard HTML element set

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> TagRegistryBuilder:
    """Create a builder pre-populated with the standard HTML tags.

    Use this to declare custom tags on top of the defaults:

        >>> builder = create_registry_with_defaults()
        >>> builder.deftag("my-element")
        >>> registry = builder.build()

    Returns:
        TagRegistryBuilder with defaults already registered
    """
    return TagRegistryBuilder().register_all(_html_specs())


__all__ = [
    "HTML_CONTENT_TAGS",
    "HTML_VOID_TAGS",
    "TagRegistry",
    "TagRegistryBuilder",
    "TagSpec",
    "create_default_registry",
    "create_registry_with_defaults",
]
