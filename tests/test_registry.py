"""Tests for TagRegistry and TagRegistryBuilder."""

import pytest

from taggart.errors import UnknownTag
from taggart.registry import (
    HTML_CONTENT_TAGS,
    HTML_VOID_TAGS,
    TagRegistry,
    TagRegistryBuilder,
    TagSpec,
    create_default_registry,
    create_registry_with_defaults,
)


class TestTagSpec:
    def test_defaults_to_content_tag(self) -> None:
        """Tags are content-bearing unless declared void."""
        assert TagSpec("div").void is False

    def test_frozen(self) -> None:
        """TagSpec is immutable."""
        spec = TagSpec("div")
        with pytest.raises(AttributeError):
            spec.void = True  # type: ignore[misc]

    @pytest.mark.parametrize("name", ["", "a b", "<x", "x>", "a/b", 'q"', "a=b"])
    def test_rejects_invalid_names(self, name: str) -> None:
        """Names that could break out of the tag are rejected."""
        with pytest.raises(ValueError):
            TagSpec(name)

    def test_allows_custom_element_names(self) -> None:
        """Hyphenated and prefixed names are allowed."""
        assert TagSpec("my-widget").name == "my-widget"
        assert TagSpec("svg:rect").name == "svg:rect"


class TestDefaultRegistry:
    def test_is_cached(self) -> None:
        """The default registry is a singleton."""
        assert create_default_registry() is create_default_registry()

    def test_contains_standard_tags(self) -> None:
        """The default registry holds the standard HTML set."""
        registry = create_default_registry()
        assert len(registry) == len(HTML_CONTENT_TAGS) + len(HTML_VOID_TAGS)
        assert "div" in registry
        assert "span" in registry
        assert "blink" not in registry

    @pytest.mark.parametrize("name", ["br", "hr", "img", "input", "meta", "link", "wbr"])
    def test_void_tags(self, name: str) -> None:
        """Standard void elements are void."""
        assert create_default_registry().is_void(name)

    @pytest.mark.parametrize("name", ["div", "p", "script", "textarea", "title"])
    def test_content_tags(self, name: str) -> None:
        """Standard content elements are not void."""
        assert not create_default_registry().is_void(name)

    def test_void_and_content_sets_disjoint(self) -> None:
        assert not (HTML_VOID_TAGS & HTML_CONTENT_TAGS)


class TestTagRegistry:
    def test_get_and_has(self) -> None:
        """get returns None and has returns False for unknown names."""
        registry = TagRegistryBuilder().deftag("x").build()
        assert registry.get("x") == TagSpec("x")
        assert registry.get("y") is None
        assert registry.has("x")
        assert not registry.has("y")

    def test_require_unknown(self) -> None:
        """require raises UnknownTag for unknown names."""
        with pytest.raises(UnknownTag, match="Unknown tag 'y'"):
            TagRegistryBuilder().build().require("y")

    def test_is_void_unknown(self) -> None:
        with pytest.raises(UnknownTag):
            TagRegistryBuilder().build().is_void("y")

    def test_names_and_specs(self) -> None:
        """specs keeps registration order."""
        registry = TagRegistryBuilder().deftag("b").deftag("a", void=True).build()
        assert registry.names == frozenset({"a", "b"})
        assert registry.specs == (TagSpec("b"), TagSpec("a", void=True))
        assert list(registry) == list(registry.specs)

    def test_registry_isolated_from_builder(self) -> None:
        """Later builder changes do not reach a built registry."""
        builder = TagRegistryBuilder().deftag("a")
        registry = builder.build()
        builder.deftag("b")
        assert "b" not in registry
        assert isinstance(registry, TagRegistry)


class TestTagRegistryBuilder:
    def test_duplicate_rejected(self) -> None:
        """Declaring a name twice raises ValueError."""
        builder = TagRegistryBuilder().deftag("x")
        with pytest.raises(ValueError, match="already registered"):
            builder.deftag("x", void=True)

    def test_register_requires_spec(self) -> None:
        """register only accepts TagSpec."""
        with pytest.raises(TypeError):
            TagRegistryBuilder().register("div")  # type: ignore[arg-type]

    def test_register_all(self) -> None:
        builder = TagRegistryBuilder().register_all([TagSpec("a"), TagSpec("b")])
        assert len(builder) == 2
        assert "a" in builder

    def test_extend_defaults(self) -> None:
        """Custom tags extend the defaults without touching the cached registry."""
        builder = create_registry_with_defaults()
        builder.deftag("my-card")
        registry = builder.build()
        assert "my-card" in registry
        assert "div" in registry
        assert "my-card" not in create_default_registry()

    def test_defaults_cannot_be_redeclared(self) -> None:
        """A standard tag cannot be declared again."""
        with pytest.raises(ValueError):
            create_registry_with_defaults().deftag("div")
