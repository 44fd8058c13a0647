"""Exception classes for Taggart.

Every error is raised synchronously to the immediate caller. No operation
returns a partially escaped fragment: either a complete Safe is produced or
one of these is raised.
"""

from __future__ import annotations

from typing import Any


class TaggartError(Exception):
    """Base exception for all Taggart errors.

    Subclass this for specific error categories.
    """

    pass


class UnsupportedAttributeValue(TaggartError, TypeError):
    """An attribute value is not a recognized kind.

    Recognized kinds are scalars, booleans, None, lists, and (under a
    namespace prefix) mappings. Anything else is rejected rather than
    stringified.
    """

    def __init__(self, key: Any, value: Any, reason: str | None = None) -> None:
        """Initialize with the offending attribute.

        Args:
            key: Attribute key as supplied by the caller
            value: The rejected value
            reason: Optional extra detail
        """
        self.key = key
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Unsupported value for attribute {key!r}: "
            f"{type(value).__name__} {value!r}{detail}"
        )


class InvalidCombinatorElement(TaggartError, TypeError):
    """An element handed to combine() is not a fragment, scalar or grouping."""

    def __init__(self, element: Any) -> None:
        self.element = element
        super().__init__(
            f"Cannot combine {type(element).__name__} {element!r}: "
            "expected a Safe fragment, a scalar, or a list/tuple of them"
        )


class UnsupportedContent(TaggartError, TypeError):
    """A value passed to escape() has no canonical text form."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Cannot escape {type(value).__name__} {value!r}")


class UnknownTag(TaggartError, LookupError):
    """A tag name is not registered in the active tag registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tag '{name}'")


class VoidTagContent(TaggartError, TypeError):
    """Content was supplied to a void tag, which never carries content."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Void tag '{name}' cannot have content")
