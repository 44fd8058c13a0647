"""Call-site sugar over build_tag().

``TagFactory`` turns a registered tag into a callable taking content as
positional arguments and attributes as keywords. Python keywords that clash
with reserved words take a trailing underscore, which is dropped:
``class_`` -> ``class``, ``for_`` -> ``for``. Remaining underscores become
hyphens during normalization, so ``http_equiv`` -> ``http-equiv``.

Example:
    >>> from taggart.dsl import html
    >>> html.div(html.span("A & B"), class_="bold").render()
    '<div class="bold"><span>A &amp; B</span></div>'
    >>> html.meta(charset="utf-8").render()
    '<meta charset="utf-8">'
    >>> html["del"]("old").render()
    '<del>old</del>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taggart.attributes import AttributeEntries
from taggart.config import get_markup_config
from taggart.errors import UnknownTag, VoidTagContent
from taggart.registry import TagRegistry, TagSpec
from taggart.safe import Safe
from taggart.tags import build_content_tag, build_void_tag


def _keyword_name(name: str) -> str:
    return name[:-1] if name.endswith("_") and len(name) > 1 else name


class TagFactory:
    """Callable producing one kind of tag.

    Positional arguments are content; several are combined as siblings.
    Attributes come from the optional ``attrs`` mapping (for names that are
    not identifiers) followed by keyword arguments.
    """

    __slots__ = ("_spec",)

    def __init__(self, spec: TagSpec) -> None:
        self._spec = spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def void(self) -> bool:
        return self._spec.void

    def __call__(
        self,
        *children: Any,
        attrs: AttributeEntries | None = None,
        **kwargs: Any,
    ) -> Safe:
        entries: list[tuple[str, Any]] = []
        if attrs is not None:
            entries.extend(attrs.items() if isinstance(attrs, Mapping) else attrs)
        entries.extend((_keyword_name(k), v) for k, v in kwargs.items())

        if self._spec.void:
            if children:
                raise VoidTagContent(self._spec.name)
            return build_void_tag(self._spec.name, entries)

        if not children:
            body = None
        elif len(children) == 1:
            body = children[0]
        else:
            body = list(children)
        return build_content_tag(self._spec.name, entries, body)

    def __repr__(self) -> str:
        kind = "void " if self._spec.void else ""
        return f"<{kind}tag factory '{self._spec.name}'>"


class TagNamespace:
    """Attribute and item access to tag factories.

    ``ns.div`` and ``ns["div"]`` both return the factory for ``div``. Names
    that are Python keywords take a trailing underscore (``ns.del_``).

    Args:
        registry: Registry to resolve names against (None = active
            MarkupConfig, looked up on each access)
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: TagRegistry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> TagRegistry:
        if self._registry is not None:
            return self._registry
        return get_markup_config().get_registry()

    def __getitem__(self, name: str) -> TagFactory:
        """Look up a tag factory by exact name.

        Raises:
            UnknownTag: name is not registered
        """
        return TagFactory(self.registry.require(name))

    def __getattr__(self, name: str) -> TagFactory:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[_keyword_name(name)]
        except UnknownTag as exc:
            raise AttributeError(str(exc)) from exc

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | self.registry.names)


#: Namespace over the active registry (standard HTML tags by default)
html = TagNamespace()


__all__ = ["TagFactory", "TagNamespace", "html"]
