"""Tests for FragmentBuilder."""

from taggart.builder import FragmentBuilder
from taggart.safe import EMPTY, Safe


class TestFragmentBuilder:
    def test_empty_build(self) -> None:
        """An empty builder is falsy and builds the empty fragment."""
        fb = FragmentBuilder()
        assert not fb
        assert len(fb) == 0
        assert fb.build().render() == ""

    def test_markup_is_trusted(self) -> None:
        assert FragmentBuilder().append_markup("<br>").build().render() == "<br>"

    def test_text_is_escaped(self) -> None:
        assert FragmentBuilder().append_text("<br>").build().render() == "&lt;br&gt;"

    def test_chaining_and_order(self) -> None:
        fb = FragmentBuilder()
        fb.append_markup("<p>").append_text("A & B").append_markup("</p>")
        assert len(fb) == 3
        assert fb.build().render() == "<p>A &amp; B</p>"

    def test_empty_parts_skipped(self) -> None:
        """Empty parts and None add nothing."""
        fb = FragmentBuilder().append_markup("").append_fragment(EMPTY).append_text(None)
        assert len(fb) == 0

    def test_extend(self) -> None:
        fb = FragmentBuilder().extend(["<", 1, Safe.from_trusted("&amp;")])
        assert fb.build().render() == "&lt;1&amp;"

    def test_single_fragment_returned_by_reference(self) -> None:
        """A lone fragment is returned without wrapping."""
        frag = Safe.from_trusted("<hr>")
        assert FragmentBuilder().append_fragment(frag).build() is frag

    def test_build_is_a_snapshot(self) -> None:
        """Appending after build() does not change earlier results."""
        fb = FragmentBuilder().append_markup("a")
        first = fb.build()
        fb.append_markup("b")
        assert first.render() == "a"
        assert fb.build().render() == "ab"
