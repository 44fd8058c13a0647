"""Safe fragments and the escaping primitive.

Every generation operation in Taggart produces a ``Safe``: an immutable,
already-escaped piece of markup. ``escape()`` is the one trust boundary. Raw
values go in, Safe comes out, and a Safe handed back to ``escape()`` is
returned untouched, so content is escaped exactly once no matter how deeply
fragments are nested.

Content is tagged explicitly:

- ``Safe(chunks)``: trusted output, rendered verbatim.
- ``Raw(value)``: untrusted content, escaped when it meets ``escape()``.

Plain Python scalars are treated as implicitly raw.

Interop:
    ``Safe`` implements ``__html__``, the protocol shared by markupsafe,
    Jinja2 and friends, so a fragment embedded in another escaping-aware
    template system is not escaped a second time. Objects from those systems
    that implement ``__html__`` are likewise trusted here.

Example:
    >>> from taggart.safe import escape
    >>> escape("A & B").render()
    'A &amp; B'
    >>> frag = escape("<b>")
    >>> escape(frag) is frag
    True
"""

from __future__ import annotations

import html
import numbers
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from taggart.errors import UnsupportedContent


def escape_text(text: str) -> str:
    """Replace ``& < > " '`` with character references.

    All other characters pass through unchanged. Single quotes become
    ``&#x27;`` so escaped text is safe inside either attribute quote style.
    """
    return html.escape(text, quote=True)


def is_scalar(value: Any) -> bool:
    """Check whether value has a canonical text form."""
    return isinstance(value, (str, numbers.Number))


def to_text(value: Any) -> str:
    """Render a scalar to its canonical text form.

    Raises:
        UnsupportedContent: value is not a string or number
    """
    if isinstance(value, str):
        # Plain copy, so str subclasses with escaping methods are not consulted
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Number):
        return str(value)
    raise UnsupportedContent(value)


@dataclass(frozen=True, slots=True, eq=False)
class Safe:
    """Immutable accumulator of already-escaped chunks.

    Each chunk is either a trusted ``str`` or a nested ``Safe``. Nesting is
    logical only: rendering walks the chunks depth-first and concatenates
    them, so ``Safe((a, Safe((b, c))))`` renders the same as
    ``Safe((a, b, c))``.

    Equality and hashing use the rendered text.

    Thread Safety:
        Frozen. Safe to share and embed across threads.
    """

    chunks: tuple[str | Safe, ...] = ()

    def __post_init__(self) -> None:
        chunks = tuple(self.chunks)
        for chunk in chunks:
            if not isinstance(chunk, (str, Safe)):
                msg = f"Safe chunks must be str or Safe, got {type(chunk).__name__}"
                raise TypeError(msg)
        object.__setattr__(self, "chunks", tuple(c for c in chunks if c != ""))

    @classmethod
    def from_trusted(cls, text: str) -> Safe:
        """Wrap caller-trusted markup without escaping it.

        Only use this for text that is already valid, escaped markup.
        """
        if not isinstance(text, str):
            msg = f"from_trusted() expects str, got {type(text).__name__}"
            raise TypeError(msg)
        return cls((text,))

    def iter_chunks(self) -> Iterator[str]:
        """Yield the flat text chunks in render order.

        Iterative so arbitrarily deep nesting never hits the recursion limit.
        """
        stack: list[Iterator[str | Safe]] = [iter(self.chunks)]
        while stack:
            for chunk in stack[-1]:
                if isinstance(chunk, str):
                    yield chunk
                else:
                    stack.append(iter(chunk.chunks))
                    break
            else:
                stack.pop()

    def render(self) -> str:
        """Flatten and concatenate into the final markup string."""
        return "".join(self.iter_chunks())

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Safe({self.render()!r})"

    def __bool__(self) -> bool:
        return any(True for _ in self.iter_chunks())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Safe):
            return self.render() == other.render()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.render())

    def __add__(self, other: Any) -> Safe:
        try:
            right = escape(other)
        except UnsupportedContent:
            return NotImplemented
        return Safe((self, right))

    def __radd__(self, other: Any) -> Safe:
        try:
            left = escape(other)
        except UnsupportedContent:
            return NotImplemented
        return Safe((left, self))


@dataclass(frozen=True, slots=True)
class Raw:
    """Explicitly untrusted content.

    Wrapping is optional for plain strings and numbers. It exists so callers
    can mark a value as needing escaping even when it happens to implement
    ``__html__``. A wrapped ``Safe`` is still never escaped again.
    """

    value: Any


#: The empty fragment. Identity element of combine().
EMPTY = Safe()


def escape(value: Any) -> Safe:
    """Turn a value into a Safe fragment, escaping it at most once.

    Args:
        value: A Safe (returned as-is), a Raw, an object implementing
            ``__html__``, None, a string, or a number

    Returns:
        Safe fragment

    Raises:
        UnsupportedContent: value has no canonical text form

    Example:
        >>> escape(None).render()
        ''
        >>> escape(3.5).render()
        '3.5'
        >>> escape(Raw("<i>")).render()
        '&lt;i&gt;'
    """
    if isinstance(value, Safe):
        return value
    if isinstance(value, Raw):
        inner = value.value
        if inner is None:
            return EMPTY
        if isinstance(inner, Safe):
            return inner
        return Safe((escape_text(to_text(inner)),))
    if value is None:
        return EMPTY
    if hasattr(value, "__html__"):
        markup = value.__html__()
        if not isinstance(markup, str):
            raise UnsupportedContent(value)
        return Safe((str(markup),))
    return Safe((escape_text(to_text(value)),))


__all__ = [
    "EMPTY",
    "Raw",
    "Safe",
    "escape",
    "escape_text",
    "is_scalar",
    "to_text",
]
