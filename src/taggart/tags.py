"""Tag builder and fragment combinator.

Every tag call, however it was spelled at the call site, reduces to one of:

- ``build_void_tag(name, attrs)``           -> ``<name attrs>``
- ``build_content_tag(name, attrs, content)`` -> ``<name attrs>content</name>``
- ``combine(elements)``                      -> siblings merged into one Safe

``build_tag()`` is the registry-aware front door that picks between the first
two. Tag names are trusted and emitted verbatim; attribute values and content
go through ``escape()`` exactly once.

Example:
    >>> build_tag("div", {"class": "bold"}, "Name").render()
    '<div class="bold">Name</div>'
    >>> taggart(build_tag("div"), build_tag("span")).render()
    '<div></div><span></span>'
"""

from __future__ import annotations

import types
from collections.abc import Iterator
from typing import Any

from taggart.attributes import AttributeEntries, render_attributes
from taggart.builder import FragmentBuilder
from taggart.config import get_markup_config
from taggart.errors import InvalidCombinatorElement, UnsupportedContent, VoidTagContent
from taggart.registry import TagRegistry
from taggart.safe import EMPTY, Raw, Safe, escape, is_scalar

# Containers whose members are siblings at the same level
_GROUPINGS = (list, tuple, types.GeneratorType)


def build_void_tag(name: str, attrs: AttributeEntries = ()) -> Safe:
    """Build ``<name attrs>``. No closing tag, never any content."""
    fb = FragmentBuilder()
    fb.append_markup("<").append_markup(name)
    fb.append_markup(render_attributes(attrs))
    fb.append_markup(">")
    return fb.build()


def build_content_tag(name: str, attrs: AttributeEntries = (), content: Any = None) -> Safe:
    """Build ``<name attrs>content</name>``.

    Args:
        name: Tag name (trusted, not escaped)
        attrs: Attribute entries
        content: Safe (kept as-is), scalar (escaped), None (empty), or a
            list/tuple of those (combined as siblings)
    """
    if isinstance(content, _GROUPINGS):
        body = combine(content)
    else:
        body = escape(content)

    fb = FragmentBuilder()
    fb.append_markup("<").append_markup(name)
    fb.append_markup(render_attributes(attrs))
    fb.append_markup(">")
    fb.append_fragment(body)
    fb.append_markup("</").append_markup(name).append_markup(">")
    return fb.build()


def build_tag(
    name: str,
    attrs: AttributeEntries = (),
    content: Any = None,
    *,
    registry: TagRegistry | None = None,
) -> Safe:
    """Build a registered tag.

    This is the single canonical constructor: the tag registry decides
    whether ``name`` is void or content-bearing.

    Args:
        name: Registered tag name
        attrs: Attribute entries
        content: Tag content (must be None for void tags)
        registry: Registry to consult (None = active MarkupConfig)

    Raises:
        UnknownTag: name is not registered
        VoidTagContent: content given for a void tag
    """
    if registry is None:
        registry = get_markup_config().get_registry()
    spec = registry.require(name)
    if spec.void:
        if content is not None:
            raise VoidTagContent(name)
        return build_void_tag(spec.name, attrs)
    return build_content_tag(spec.name, attrs, content)


def _append_element(fb: FragmentBuilder, element: Any) -> None:
    if not (
        element is None
        or isinstance(element, (Safe, Raw))
        or hasattr(element, "__html__")
        or is_scalar(element)
    ):
        raise InvalidCombinatorElement(element)
    try:
        fb.append_text(element)
    except UnsupportedContent as exc:
        raise InvalidCombinatorElement(element) from exc


def combine(elements: Any) -> Safe:
    """Merge an ordered sequence of fragments into one Safe.

    Nested lists, tuples and generators are flattened depth-first, keeping
    order. Raw scalars are escaped; Safe fragments are kept by reference.

    Raises:
        InvalidCombinatorElement: an element is none of the supported kinds
    """
    if not isinstance(elements, _GROUPINGS):
        raise InvalidCombinatorElement(elements)
    fb = FragmentBuilder()
    # Explicit stack, so nesting depth is not bounded by the recursion limit
    stack: list[Iterator[Any]] = [iter(elements)]
    while stack:
        for element in stack[-1]:
            if isinstance(element, _GROUPINGS):
                stack.append(iter(element))
                break
            _append_element(fb, element)
        else:
            stack.pop()
    if not fb:
        return EMPTY
    return fb.build()


def taggart(*elements: Any) -> Safe:
    """Group sibling fragments so all of them become part of the result.

    Example:
        >>> taggart().render()
        ''
        >>> taggart(build_tag("p", content="A & B"), "!").render()
        '<p>A &amp; B</p>!'
    """
    return combine(elements)


__all__ = [
    "build_content_tag",
    "build_tag",
    "build_void_tag",
    "combine",
    "taggart",
]
