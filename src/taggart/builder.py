"""FragmentBuilder for assembling one Safe from many chunks.

Adopts the StringBuilder pattern: append to a list, freeze once at the end.
The builder separates the two kinds of input a tag is made of:

- markup: trusted structural literals (``<``, tag names, ``</``), kept as-is
- text: anything else, routed through ``escape()``

Thread Safety:
FragmentBuilder instances are local to each build call.
No shared mutable state.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from taggart.safe import Safe, escape


class FragmentBuilder:
    """Mutable accumulator that produces an immutable Safe.

    Usage:
            >>> fb = FragmentBuilder()
            >>> fb.append_markup("<p>")
            >>> fb.append_text("A & B")
            >>> fb.append_markup("</p>")
            >>> fb.build().render()
            '<p>A &amp; B</p>'

    Thread Safety:
        Instance is local to each build call.
        No shared mutable state.

    """

    __slots__ = ("_chunks",)

    def __init__(self) -> None:
        self._chunks: list[str | Safe] = []

    def append_markup(self, s: str) -> FragmentBuilder:
        """Append a trusted markup literal.

        Args:
            s: Markup to append verbatim (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._chunks.append(s)
        return self

    def append_text(self, value: Any) -> FragmentBuilder:
        """Append a value, escaping it unless it is already Safe.

        Returns:
            self for method chaining
        """
        return self.append_fragment(escape(value))

    def append_fragment(self, fragment: Safe) -> FragmentBuilder:
        """Append an existing fragment by reference.

        Empty fragments are skipped.
        """
        if fragment.chunks:
            self._chunks.append(fragment)
        return self

    def extend(self, values: Iterable[Any]) -> FragmentBuilder:
        """Append several values with append_text semantics."""
        for value in values:
            self.append_text(value)
        return self

    def build(self) -> Safe:
        """Freeze the accumulated chunks into a Safe."""
        if len(self._chunks) == 1 and isinstance(self._chunks[0], Safe):
            return self._chunks[0]
        return Safe(tuple(self._chunks))

    def __len__(self) -> int:
        """Return number of chunks (not rendered length)."""
        return len(self._chunks)

    def __bool__(self) -> bool:
        return bool(self._chunks)
