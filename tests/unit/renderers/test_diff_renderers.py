"""Unit tests for the comparison renderers."""

from __future__ import annotations

import json

import pytest

from splitdiff import compare_texts
from splitdiff.api import DiffResult
from splitdiff.exceptions import DependencyError
from splitdiff.renderers import (
    CollapseState,
    HtmlDiffRenderer,
    JsonDiffRenderer,
    RichDiffRenderer,
    SideBySideRenderer,
    UnifiedRenderer,
)


@pytest.fixture()
def substitution_result() -> DiffResult:
    """Provide a comparison with one modified line."""
    return compare_texts("a\nb\nc", "a\nx\nc")


@pytest.fixture()
def sectioned_result(sectioned_original: str, sectioned_modified: str) -> DiffResult:
    """Provide a sectioned comparison with changes in one section."""
    return compare_texts(sectioned_original, sectioned_modified)


@pytest.mark.unit
class TestCollapseState:
    """Tests for the presentation-owned collapse mapping."""

    def test_sections_start_expanded(self):
        """Test that unknown ids are not collapsed."""
        assert not CollapseState().is_collapsed("original-section-0")

    def test_toggle_returns_new_state(self):
        """Test toggling twice returns to expanded."""
        state = CollapseState()
        assert state.toggle("s") is True
        assert state.is_collapsed("s")
        assert state.toggle("s") is False

    def test_collapse_and_expand(self):
        """Test explicit collapse and expand."""
        state = CollapseState({"a": True})
        state.collapse("b")
        state.expand("a")
        assert state.to_dict() == {"a": False, "b": True}
        assert list(state.collapsed_ids()) == ["b"]

    def test_collapse_unchanged(self, sectioned_result):
        """Test collapsing every section without changes."""
        state = CollapseState()
        state.collapse_unchanged(sectioned_result.iter_sections())
        assert not state.is_collapsed("modified-section-2")
        assert state.is_collapsed("modified-section-0")
        assert state.is_collapsed("original-section-3")

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(CollapseState({"x": True})) == "CollapseState({'x': True})"


@pytest.mark.unit
class TestSideBySideRenderer:
    """Tests for SideBySideRenderer."""

    def test_renders_header_and_rows(self, substitution_result):
        """Test titles, separator and aligned rows."""
        lines = list(SideBySideRenderer(use_color=False, width=60).render(substitution_result))

        assert lines[0] == "File Comparison"
        assert lines[1].startswith("Original")
        assert "| Modified" in lines[1]
        assert lines[2] == "-" * 59
        assert any("2 ~ b" in line and "2 ~ x" in line for line in lines)
        assert all("\033[" not in line for line in lines)

    def test_section_banner(self, substitution_result):
        """Test the banner printed where a section starts."""
        lines = list(SideBySideRenderer(use_color=False, width=60).render(substitution_result))
        assert lines[3].startswith("v a *")

    def test_hide_sections(self, substitution_result):
        """Test that banners can be turned off."""
        lines = list(SideBySideRenderer(use_color=False, width=60, show_sections=False).render(substitution_result))
        assert not any(line.startswith("v ") for line in lines)
        assert len(lines) == 6

    def test_colors(self, substitution_result):
        """Test that modified lines are yellow when color is on."""
        output = SideBySideRenderer(use_color=True, width=60).render_to_string(substitution_result)
        assert "\033[33m" in output
        assert "\033[0m" in output

    def test_added_and_removed_gaps(self):
        """Test that pure additions leave the original column empty."""
        result = compare_texts("a", "a\nnew", section_header_pattern=None)
        lines = list(SideBySideRenderer(use_color=False, width=60, show_sections=False).render(result))
        added = lines[-1]
        assert added.startswith(" " * 28 + " | ")
        assert "2 + new" in added

    def test_collapsed_sections_fold_rows(self):
        """Test that collapsed sections print a summary instead of rows."""
        result = compare_texts("x\ny", "x\ny")
        state = CollapseState()
        state.collapse_unchanged(result.iter_sections())

        lines = list(SideBySideRenderer(use_color=False, width=60, collapse_state=state).render(result))

        assert lines[3].startswith("> x")
        assert lines[4] == "  ... 2 rows in collapsed sections"
        assert len(lines) == 5

    def test_collapsed_side_is_blank_next_to_visible_side(self):
        """Test that lines of a collapsed section are blanked on their side only."""
        text = "SECTION A\nsecret line\nSECTION B\nother\n"
        result = compare_texts(text, text)
        state = CollapseState()
        state.collapse(result.original_sections[0].id)

        renderer = SideBySideRenderer(use_color=False, width=60, show_sections=False, collapse_state=state)
        rows = list(renderer.render(result))[3:]
        left = [row.split(" | ", 1)[0] for row in rows]
        right = [row.split(" | ", 1)[1] for row in rows]

        assert len(rows) == 4
        assert not any("secret line" in cell for cell in left)
        assert not any("SECTION A" in cell for cell in left)
        assert any("2   secret line" in cell for cell in right)
        assert left[2].startswith("3   SECTION B")

    def test_both_empty(self):
        """Test the placeholder for two empty inputs."""
        lines = list(SideBySideRenderer(use_color=False, width=60).render(compare_texts("", "")))
        assert lines[-1] == "(both inputs are empty)"

    def test_long_lines_are_cut(self):
        """Test that content wider than a column is truncated."""
        result = compare_texts("a" * 200, "b" * 200)
        for line in SideBySideRenderer(use_color=False, width=60).render(result):
            assert len(line) <= 60

    def test_minimum_width(self):
        """Test that very narrow widths are rejected."""
        with pytest.raises(ValueError):
            SideBySideRenderer(width=20)


@pytest.mark.unit
class TestUnifiedRenderer:
    """Tests for UnifiedRenderer."""

    def test_prefixes(self, substitution_result):
        """Test that a modified pair prints as a removal then an addition."""
        lines = list(UnifiedRenderer(use_color=False).render(substitution_result))
        assert lines == ["1   a", "2 - b", "2 + x", "3   c"]

    def test_without_line_numbers(self, substitution_result):
        """Test the bare prefix format."""
        output = UnifiedRenderer(use_color=False, show_line_numbers=False).render_to_string(substitution_result)
        assert output == "  a\n- b\n+ x\n  c"

    def test_colors(self, substitution_result):
        """Test red and green highlighting."""
        lines = list(UnifiedRenderer(use_color=True).render(substitution_result))
        assert lines[1] == "\033[31m2 - b\033[0m"
        assert lines[2] == "\033[32m2 + x\033[0m"
        assert lines[0] == "1   a"


@pytest.mark.unit
class TestHtmlDiffRenderer:
    """Tests for HtmlDiffRenderer."""

    def test_renders_page(self, substitution_result):
        """Test the document skeleton, summary and line classes."""
        html_output = HtmlDiffRenderer().render(substitution_result)

        assert html_output.startswith("<!DOCTYPE html>")
        assert "<div class='diff-summary'>" in html_output
        assert "<dt>Modified</dt><dd>1</dd>" in html_output
        assert "diff-side diff-side-original" in html_output
        assert "diff-side diff-side-modified" in html_output
        assert "<div class='diff-line line-modified' data-counterpart='2'>" in html_output
        assert "<style>" in html_output

    def test_without_styles_or_stats(self, substitution_result):
        """Test that optional blocks can be omitted."""
        html_output = HtmlDiffRenderer(inline_styles=False, show_stats=False).render(substitution_result)
        assert "<style>" not in html_output
        assert "diff-summary" not in html_output

    def test_escapes_content(self):
        """Test that line content and titles are HTML-escaped."""
        result = compare_texts("<script>alert(1)</script>", "safe", title="A & B")
        html_output = HtmlDiffRenderer().render(result)
        assert "<script>alert" not in html_output
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html_output
        assert "<title>A &amp; B</title>" in html_output

    def test_sections_open_unless_collapsed(self, sectioned_result):
        """Test that collapsed sections render closed."""
        state = CollapseState()
        state.collapse("original-section-1")
        html_output = HtmlDiffRenderer(collapse_state=state).render(sectioned_result)

        assert "<details class='diff-section' id='original-section-1'>" in html_output
        assert "<details class='diff-section' id='original-section-0' open>" in html_output
        assert "<details class='diff-section has-changes' id='modified-section-2' open>" in html_output

    def test_empty_side(self):
        """Test the placeholder for an empty side."""
        html_output = HtmlDiffRenderer().render(compare_texts("", "new"))
        assert "No lines" in html_output


@pytest.mark.unit
class TestJsonDiffRenderer:
    """Tests for JsonDiffRenderer."""

    def test_payload(self, substitution_result):
        """Test the structured payload."""
        data = json.loads(JsonDiffRenderer().render(substitution_result))

        assert data["type"] == "side_by_side_diff"
        assert data["collapsed"] == []
        assert data["statistics"]["modified"] == 1
        assert "operations" not in data
        first_section = data["original"]["sections"][0]
        assert first_section["id"] == "original-section-0"
        assert [line["type"] for line in first_section["lines"]] == ["unchanged", "modified", "unchanged"]

    def test_operations_and_collapsed(self, substitution_result):
        """Test optional operations and the collapsed id list."""
        state = CollapseState({"modified-section-0": True, "original-section-0": True})
        data = JsonDiffRenderer(include_operations=True, collapse_state=state).build_payload(substitution_result)

        assert data["collapsed"] == ["modified-section-0", "original-section-0"]
        assert [op["kind"] for op in data["operations"]] == ["match", "delete", "insert", "match"]

    def test_compact_output(self, substitution_result):
        """Test that pretty printing can be disabled."""
        output = JsonDiffRenderer(pretty_print=False).render(substitution_result)
        assert "\n" not in output

    def test_non_ascii_is_kept(self):
        """Test that non-ASCII text is written as-is."""
        output = JsonDiffRenderer().render(compare_texts("café", "naïve"))
        assert "café" in output
        assert "naïve" in output


@pytest.mark.unit
class TestRichDiffRenderer:
    """Tests for RichDiffRenderer."""

    def test_missing_rich_raises_dependency_error(self, monkeypatch):
        """Test the error raised when rich is not installed."""
        monkeypatch.setattr("splitdiff.renderers.rich_console.check_rich_available", lambda: False)
        with pytest.raises(DependencyError) as exc_info:
            RichDiffRenderer()
        assert "pip install splitdiff[rich]" in str(exc_info.value)

    def test_renders_table(self, substitution_result):
        """Test plain-text table output."""
        pytest.importorskip("rich")
        output = RichDiffRenderer(width=80, use_color=False).render_to_string(substitution_result)
        assert "Original" in output
        assert "Modified" in output
        assert "x" in output
        assert "\033[" not in output

    def test_collapsed_rows_are_skipped(self):
        """Test that rows of collapsed sections are left out."""
        pytest.importorskip("rich")
        result = compare_texts("keep me", "keep me")
        state = CollapseState()
        state.collapse_unchanged(result.iter_sections())
        table = RichDiffRenderer(width=80, use_color=False, collapse_state=state).build_table(result)
        assert table.row_count == 0

    def test_collapsed_side_is_blank_next_to_visible_side(self):
        """Test that a collapsed section's cells are empty while the other side shows."""
        pytest.importorskip("rich")
        text = "SECTION A\nsecret line\nSECTION B\nother\n"
        result = compare_texts(text, text)
        state = CollapseState()
        state.collapse(result.original_sections[0].id)

        table = RichDiffRenderer(width=80, use_color=False, collapse_state=state).build_table(result)
        left = [str(cell) for cell in table.columns[1]._cells]
        right = [str(cell) for cell in table.columns[3]._cells]

        assert table.row_count == 4
        assert left == ["", "", "SECTION B", "other"]
        assert right == ["SECTION A", "secret line", "SECTION B", "other"]
