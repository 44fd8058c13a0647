"""ContextVar-based markup configuration for Taggart.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The only knobs are the reserved attribute namespace prefixes and the tag
registry consulted by ``build_tag()``.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from taggart.config import MarkupConfig, markup_config_context
    from taggart.registry import create_registry_with_defaults

    registry = create_registry_with_defaults().deftag("my-card").build()
    with markup_config_context(MarkupConfig(tag_registry=registry)):
        card = build_tag("my-card", content="hi")

"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from taggart.registry import TagRegistry

DEFAULT_ATTR_PREFIXES: frozenset[str] = frozenset(("aria", "data"))


def prefix_set(prefixes: Iterable[str] | str) -> frozenset[str]:
    """Normalize namespace prefixes to a frozenset. A bare string is one prefix."""
    if isinstance(prefixes, str):
        return frozenset((prefixes,))
    return frozenset(prefixes)


@dataclass(frozen=True, slots=True)
class MarkupConfig:
    """Immutable markup configuration.

    Attributes:
        attr_prefixes: Attribute keys whose mapping values expand into
            hyphen-joined attributes (``data={"id": 1}`` -> ``data-id="1"``)
        tag_registry: Registry used to resolve tag names (None = defaults)

    """

    attr_prefixes: frozenset[str] = field(default=DEFAULT_ATTR_PREFIXES)
    tag_registry: "TagRegistry | None" = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attr_prefixes", prefix_set(self.attr_prefixes))

    def get_registry(self) -> "TagRegistry":
        """Return the configured registry, falling back to the defaults."""
        if self.tag_registry is not None:
            return self.tag_registry
        from taggart.registry import create_default_registry

        return create_default_registry()

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "MarkupConfig":
        """Create MarkupConfig from dictionary.

        Only includes keys that are valid MarkupConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = MarkupConfig.from_dict({
            ...     "attr_prefixes": ["aria", "data", "hx"],
            ...     "unknown_key": "ignored",
            ... })
            >>> sorted(config.attr_prefixes)
            ['aria', 'data', 'hx']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: MarkupConfig = MarkupConfig()

# Thread-local configuration via ContextVar
_markup_config: ContextVar[MarkupConfig] = ContextVar(
    "markup_config",
    default=_DEFAULT_CONFIG,
)


def get_markup_config() -> MarkupConfig:
    """Get current markup configuration (thread-local)."""
    return _markup_config.get()


def set_markup_config(config: MarkupConfig) -> None:
    """Set markup configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _markup_config.set(config)


def reset_markup_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _markup_config.set(_DEFAULT_CONFIG)


@contextmanager
def markup_config_context(config: MarkupConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with markup_config_context(MarkupConfig(attr_prefixes={"data"})):
        ...     render_attributes({"aria": {"label": "x"}})
        Traceback (most recent call last):
        ...
        UnsupportedAttributeValue: ...

    """
    previous = _markup_config.get()
    _markup_config.set(config)
    try:
        yield
    finally:
        _markup_config.set(previous)


__all__ = [
    "DEFAULT_ATTR_PREFIXES",
    "MarkupConfig",
    "get_markup_config",
    "markup_config_context",
    "reset_markup_config",
    "prefix_set",
    "set_markup_config",
]
