"""Attribute normalization and rendering.

Turns caller-supplied attribute entries into the canonical attribute string
spliced after a tag name.

Pipeline:
1. Expand namespace prefixes (``aria``, ``data``) whose value is a mapping
   into one attribute per leaf: ``data={"user_id": 7}`` -> ``data-user-id``
2. Drop ``False``/``None``, turn ``True`` into a bare flag
3. Dasherize names (``http_equiv`` -> ``http-equiv``)
4. Render values: Safe verbatim, lists space-joined, everything else escaped
5. Sort, so output never depends on entry order
6. Join as `` name="value"`` / `` name`` tokens

Entries may be a mapping or any iterable of ``(key, value)`` pairs.
Duplicate keys are not merged; each pair renders independently.

Example:
    >>> render_attributes({"class": ["btn", "primary"], "disabled": True})
    ' class="btn primary" disabled'
    >>> render_attributes([("aria", {"checked": False, "label": "x"})])
    ' aria-label="x"'
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeAlias

from taggart.config import get_markup_config, prefix_set
from taggart.errors import UnsupportedAttributeValue, UnsupportedContent
from taggart.safe import Raw, Safe, escape, escape_text, is_scalar, to_text
from taggart.utils.logger import get_logger

logger = get_logger(__name__)

# A bare flag ("disabled",) or a name/value pair ("class", "a b")
RenderedAttribute: TypeAlias = tuple[str] | tuple[str, str]

AttributeEntries: TypeAlias = Mapping[str, Any] | Iterable[tuple[str, Any]]

_INVALID_ATTR_NAME = re.compile(r"[\s<>/\"'=]")


def dasherize(key: str) -> str:
    """Replace every ``_`` with ``-``."""
    return key.replace("_", "-")


def _check_name(name: str) -> str:
    if not name or _INVALID_ATTR_NAME.search(name):
        msg = f"Invalid attribute name {name!r}"
        raise ValueError(msg)
    return name


def _iter_entries(entries: AttributeEntries) -> Iterator[tuple[str, Any]]:
    items = entries.items() if isinstance(entries, Mapping) else entries
    for entry in items:
        if not isinstance(entry, tuple) or len(entry) != 2:
            msg = f"Attribute entries must be (key, value) pairs, got {entry!r}"
            raise TypeError(msg)
        key, value = entry
        if not isinstance(key, str):
            msg = f"Attribute keys must be str, got {type(key).__name__} {key!r}"
            raise TypeError(msg)
        yield key, value


def render_attribute_value(value: Any, key: str | None = None) -> str:
    """Render one attribute value to escaped text.

    Args:
        value: Safe, Raw, list/tuple, ``__html__`` object, string or number
        key: Attribute key, used only in error messages

    Raises:
        UnsupportedAttributeValue: value is not a recognized kind
    """
    if isinstance(value, Safe):
        return value.render()
    if isinstance(value, (list, tuple)):
        return " ".join(_render_list(value, key))
    if isinstance(value, bool):
        raise UnsupportedAttributeValue(key, value, "booleans only act as flags")
    if isinstance(value, Raw) or hasattr(value, "__html__"):
        try:
            return escape(value).render()
        except UnsupportedContent as exc:
            raise UnsupportedAttributeValue(key, value) from exc
    if is_scalar(value):
        return escape_text(to_text(value))
    raise UnsupportedAttributeValue(key, value)


def _render_list(values: list[Any] | tuple[Any, ...], key: str | None) -> list[str]:
    parts: list[str] = []
    for item in values:
        if item is None or item is False:
            continue
        if item is True or isinstance(item, Mapping):
            raise UnsupportedAttributeValue(key, item, "not allowed inside a list")
        if isinstance(item, (list, tuple)):
            parts.extend(_render_list(item, key))
        else:
            parts.append(render_attribute_value(item, key))
    return parts


def _add(key: str, name: str, value: Any, out: list[RenderedAttribute]) -> None:
    if value is True:
        out.append((name,))
    elif value is False or value is None:
        return
    elif isinstance(value, Mapping):
        raise UnsupportedAttributeValue(
            key, value, "mappings are only allowed under a namespace prefix"
        )
    else:
        out.append((name, render_attribute_value(value, key)))


def _expand_namespace(
    key: str, prefix: str, mapping: Mapping[Any, Any], out: list[RenderedAttribute]
) -> None:
    for sub_key, value in mapping.items():
        if not isinstance(sub_key, str):
            msg = f"Keys under {key!r} must be str, got {type(sub_key).__name__} {sub_key!r}"
            raise TypeError(msg)
        name = _check_name(f"{prefix}-{dasherize(sub_key)}")
        if isinstance(value, Mapping):
            _expand_namespace(key, name, value, out)
        else:
            _add(key, name, value, out)


def normalize_attributes(
    entries: AttributeEntries,
    *,
    prefixes: Iterable[str] | None = None,
) -> list[RenderedAttribute]:
    """Normalize entries into sorted rendered attributes.

    Args:
        entries: Mapping or iterable of (key, value) pairs
        prefixes: Namespace prefixes to expand (None = active MarkupConfig)

    Returns:
        Sorted list of ``(name,)`` flags and ``(name, escaped_value)`` pairs

    Raises:
        UnsupportedAttributeValue: a value is not a recognized kind
    """
    active = get_markup_config().attr_prefixes if prefixes is None else prefix_set(prefixes)
    rendered: list[RenderedAttribute] = []
    key_for_name: dict[str, str] = {}

    for key, value in _iter_entries(entries):
        name = _check_name(dasherize(key))

        first = key_for_name.setdefault(name, key)
        if first != key:
            # Kept as separate attributes, no merge
            logger.debug("Attribute keys %r and %r both render as %r", first, key, name)

        if key in active and isinstance(value, Mapping):
            _expand_namespace(key, name, value, rendered)
        else:
            _add(key, name, value, rendered)

    rendered.sort()
    return rendered


def render_attributes(
    entries: AttributeEntries,
    *,
    prefixes: Iterable[str] | None = None,
) -> str:
    """Render entries to the attribute string spliced after a tag name.

    Returns an empty string when nothing survives normalization, otherwise
    each attribute is preceded by a single space.
    """
    parts: list[str] = []
    for attr in normalize_attributes(entries, prefixes=prefixes):
        if len(attr) == 1:
            parts.append(f" {attr[0]}")
        else:
            parts.append(f' {attr[0]}="{attr[1]}"')
    return "".join(parts)


__all__ = [
    "AttributeEntries",
    "RenderedAttribute",
    "dasherize",
    "normalize_attributes",
    "render_attribute_value",
    "render_attributes",
]
