#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/html.py
"""HTML renderer producing a standalone side-by-side diff page.

Each side is a column of ``<details>`` elements, one per section, so the
browser handles collapsing without any script. Sections start open unless
the supplied :class:`~splitdiff.renderers.collapse.CollapseState` marks
them collapsed. Lines are styled by type: removed lines red, added lines
green, modified lines yellow.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from typing import Optional

from splitdiff.api import DiffResult
from splitdiff.engine.models import DiffLine, Section
from splitdiff.renderers.collapse import CollapseState


class HtmlDiffRenderer:
    """Render a comparison as a visual HTML page.

    Parameters
    ----------
    inline_styles : bool, default = True
        If True, include CSS styles in the output
    show_stats : bool, default = True
        If True, include a summary block with line counts
    collapse_state : CollapseState, optional
        Sections marked collapsed are rendered closed

    Examples
    --------
    Render a comparison and save it:
        >>> from splitdiff import compare_texts
        >>> from splitdiff.renderers import HtmlDiffRenderer
        >>> html = HtmlDiffRenderer().render(compare_texts("a\\nb", "a\\nc"))
        >>> with open("diff.html", "w") as f:
        ...     f.write(html)

    """

    def __init__(
        self,
        inline_styles: bool = True,
        show_stats: bool = True,
        collapse_state: Optional[CollapseState] = None,
    ):
        """Initialize the HTML diff renderer."""
        self.inline_styles = inline_styles
        self.show_stats = show_stats
        self.collapse_state = collapse_state or CollapseState()

    def render(self, result: DiffResult) -> str:
        """Render the comparison to an HTML string.

        Parameters
        ----------
        result : DiffResult
            Comparison to render

        Returns
        -------
        str
            Complete HTML document

        """
        output = StringIO()
        self._write_html_prefix(result, output)

        if self.show_stats:
            self._render_summary(result, output)

        output.write("      <div class='split-view'>\n")
        self._render_side(result.original_title, result.original_sections, "original", output)
        self._render_side(result.modified_title, result.modified_sections, "modified", output)
        output.write("      </div>\n")

        self._write_html_suffix(output)
        return output.getvalue()

    def _write_html_prefix(self, result: DiffResult, output: StringIO) -> None:
        """Write the static HTML prefix and container."""
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        output.write(f"  <title>{escape(result.title)}</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write("  <div class='container'>\n")
        output.write(f"    <h1>{escape(result.title)}</h1>\n")
        output.write("    <div class='diff-content'>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        """Write the closing HTML tags."""
        output.write("    </div>\n")
        output.write("  </div>\n")
        output.write("</body>\n")
        output.write("</html>\n")

    def _get_css(self) -> str:
        """Get CSS styles for the HTML output."""
        return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            color: #e5e7eb;
            margin: 0 auto;
            padding: 20px;
            background-color: #030712;
        }
        .container {
            border: 1px solid #374151;
            border-radius: 8px;
            overflow: hidden;
            background-color: #111827;
        }
        h1 {
            margin: 0;
            padding: 8px 16px;
            font-family: 'Courier New', Courier, monospace;
            font-size: 14px;
            background-color: #1f2937;
            border-bottom: 1px solid #374151;
        }
        .diff-summary {
            padding: 8px 16px;
            border-bottom: 1px solid #374151;
            font-size: 13px;
        }
        .diff-summary dl {
            display: grid;
            grid-template-columns: repeat(5, max-content 1fr);
            gap: 4px 12px;
            margin: 0;
        }
        .diff-summary dt {
            font-weight: 600;
            color: #9ca3af;
        }
        .diff-summary dd {
            margin: 0;
        }
        .split-view {
            display: flex;
        }
        .diff-side {
            width: 50%;
            min-width: 0;
        }
        .diff-side + .diff-side {
            border-left: 1px solid #374151;
        }
        .side-title {
            padding: 8px 16px;
            font-weight: 500;
            border-bottom: 1px solid #374151;
        }
        details.diff-section {
            border-bottom: 1px solid #374151;
        }
        details.diff-section summary {
            cursor: pointer;
            padding: 4px 8px;
            font-family: 'Courier New', Courier, monospace;
            font-size: 12px;
            white-space: nowrap;
            overflow: hidden;
            text-overflow: ellipsis;
        }
        details.diff-section.has-changes summary {
            background-color: #1f2937;
        }
        .diff-line {
            display: flex;
            font-family: 'Courier New', Courier, monospace;
            font-size: 12px;
        }
        .line-number {
            width: 40px;
            flex-shrink: 0;
            padding-right: 8px;
            text-align: right;
            color: #6b7280;
            border-right: 1px solid #374151;
            user-select: none;
        }
        .line-text {
            margin: 0;
            padding: 1px 8px;
            white-space: pre;
            overflow-x: auto;
            color: #d1d5db;
        }
        .line-removed {
            background-color: rgba(69, 10, 10, 0.3);
        }
        .line-removed .line-text {
            color: #f87171;
        }
        .line-added {
            background-color: rgba(5, 46, 22, 0.3);
        }
        .line-added .line-text {
            color: #4ade80;
        }
        .line-modified {
            background-color: rgba(66, 32, 6, 0.3);
        }
        .line-modified .line-text {
            color: #facc15;
        }
        .empty-side {
            padding: 4px 16px;
            color: #6b7280;
            font-style: italic;
        }
        """

    def _render_summary(self, result: DiffResult, output: StringIO) -> None:
        """Render line-count statistics."""
        stats = result.statistics
        output.write("      <div class='diff-summary'>\n")
        output.write("        <dl>\n")
        output.write(f"          <dt>Unchanged</dt><dd>{stats.unchanged}</dd>\n")
        output.write(f"          <dt>Removed</dt><dd>{stats.removed}</dd>\n")
        output.write(f"          <dt>Added</dt><dd>{stats.added}</dd>\n")
        output.write(f"          <dt>Modified</dt><dd>{stats.modified}</dd>\n")
        output.write(f"          <dt>Total changes</dt><dd>{stats.total_changes}</dd>\n")
        output.write("        </dl>\n")
        output.write("      </div>\n")

    def _render_side(self, title: str, sections: tuple[Section, ...], side: str, output: StringIO) -> None:
        """Render one column of sections."""
        output.write(f"        <div class='diff-side diff-side-{side}'>\n")
        output.write(f"          <div class='side-title'>{escape(title)}</div>\n")

        if not sections:
            output.write("          <div class='empty-side'>No lines</div>\n")

        for section in sections:
            classes = "diff-section has-changes" if section.has_changes else "diff-section"
            open_attr = "" if self.collapse_state.is_collapsed(section.id) else " open"
            output.write(f"          <details class='{classes}' id='{escape(section.id)}'{open_attr}>\n")
            output.write(f"            <summary>{escape(section.title)}</summary>\n")
            for line in section.lines:
                self._render_line(line, output)
            output.write("          </details>\n")

        output.write("        </div>\n")

    def _render_line(self, line: DiffLine, output: StringIO, indent: str = "            ") -> None:
        """Render a single numbered line."""
        counterpart = f" data-counterpart='{line.counterpart}'" if line.counterpart is not None else ""
        text = escape(line.content) if line.content else "&nbsp;"
        output.write(f"{indent}<div class='diff-line line-{line.type.value}'{counterpart}>\n")
        output.write(f"{indent}  <span class='line-number'>{line.line_number}</span>\n")
        output.write(f"{indent}  <pre class='line-text'>{text}</pre>\n")
        output.write(f"{indent}</div>\n")
