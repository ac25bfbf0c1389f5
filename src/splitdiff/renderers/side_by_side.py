#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/side_by_side.py
"""Two-column terminal renderer with optional ANSI colors.

Each row shows the original line on the left and its counterpart on the
right. Section banners are printed where a section starts on either side,
and rows that only belong to collapsed sections are folded into a single
summary line.
"""

from __future__ import annotations

from typing import Iterator, Optional

from splitdiff.api import DiffResult
from splitdiff.constants import DEFAULT_TERMINAL_WIDTH, MIN_TERMINAL_WIDTH
from splitdiff.engine.models import DiffLine, LineType, Section
from splitdiff.renderers.collapse import CollapseState

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
BOLD = "\033[1m"
RESET = "\033[0m"

MARKERS = {
    LineType.UNCHANGED: " ",
    LineType.REMOVED: "-",
    LineType.ADDED: "+",
    LineType.MODIFIED: "~",
}

COLORS = {
    LineType.REMOVED: RED,
    LineType.ADDED: GREEN,
    LineType.MODIFIED: YELLOW,
}

SEPARATOR = " | "


def _fit(text: str, width: int) -> str:
    """Pad or cut ``text`` to exactly ``width`` characters."""
    if len(text) > width:
        return text[: max(width - 1, 0)] + "…" if width > 0 else ""
    return text.ljust(width)


def _section_index(sections: tuple[Section, ...]) -> tuple[dict[int, Section], dict[int, Section]]:
    """Map line numbers to their section, and section start lines to sections."""
    owner: dict[int, Section] = {}
    starts: dict[int, Section] = {}
    for section in sections:
        starts[section.first_line_number] = section
        for line in section.lines:
            owner[line.line_number] = section
    return owner, starts


class SideBySideRenderer:
    """Render a comparison as two aligned text columns.

    Parameters
    ----------
    use_color : bool, default = True
        If True, add ANSI color codes: red for removed, green for added,
        yellow for modified lines and cyan for section banners
    width : int, default = 120
        Total output width in characters
    show_sections : bool, default = True
        If True, print a banner where each section starts
    collapse_state : CollapseState, optional
        Collapsed sections are folded into one summary line, and their
        lines are blank next to visible lines of the other side

    Examples
    --------
    >>> from splitdiff import compare_texts
    >>> renderer = SideBySideRenderer(use_color=False, width=60)
    >>> for line in renderer.render(compare_texts("a\\nb", "a\\nc")):
    ...     print(line)  # doctest: +SKIP

    """

    def __init__(
        self,
        use_color: bool = True,
        width: int = DEFAULT_TERMINAL_WIDTH,
        show_sections: bool = True,
        collapse_state: Optional[CollapseState] = None,
    ):
        """Initialize the side-by-side renderer."""
        if width < MIN_TERMINAL_WIDTH:
            raise ValueError(f"width must be at least {MIN_TERMINAL_WIDTH}, got {width}")
        self.use_color = use_color
        self.width = width
        self.show_sections = show_sections
        self.collapse_state = collapse_state or CollapseState()

    def render(self, result: DiffResult) -> Iterator[str]:
        """Render the comparison.

        Parameters
        ----------
        result : DiffResult
            Comparison to render

        Yields
        ------
        str
            Output lines without trailing newlines

        """
        column_width = (self.width - len(SEPARATOR)) // 2
        number_width = max(
            len(str(len(result.original_lines))),
            len(str(len(result.modified_lines))),
            1,
        )

        yield self._paint(_fit(result.title, self.width).rstrip(), BOLD)
        yield self._join(
            self._paint(_fit(result.original_title, column_width), BOLD),
            self._paint(_fit(result.modified_title, column_width), BOLD),
        )
        yield "-" * (column_width * 2 + len(SEPARATOR))

        if not result.original_lines and not result.modified_lines:
            yield "(both inputs are empty)"
            return

        original_owner, original_starts = _section_index(result.original_sections)
        modified_owner, modified_starts = _section_index(result.modified_sections)

        hidden_rows = 0
        for row in result.rows:
            if self.show_sections:
                banner = self._banner(row.original, row.modified, original_starts, modified_starts, column_width)
                if banner is not None:
                    if hidden_rows:
                        yield self._hidden_summary(hidden_rows)
                        hidden_rows = 0
                    yield banner

            if self._is_hidden(row.original, original_owner) and self._is_hidden(row.modified, modified_owner):
                hidden_rows += 1
                continue

            if hidden_rows:
                yield self._hidden_summary(hidden_rows)
                hidden_rows = 0
            yield self._join(
                self._cell(row.original, original_owner, number_width, column_width),
                self._cell(row.modified, modified_owner, number_width, column_width),
            )

        if hidden_rows:
            yield self._hidden_summary(hidden_rows)

    def render_to_string(self, result: DiffResult) -> str:
        """Render the comparison as a single newline-joined string."""
        return "\n".join(self.render(result))

    def _is_hidden(self, line: Optional[DiffLine], owner: dict[int, Section]) -> bool:
        if line is None:
            return True
        return self.collapse_state.is_collapsed(owner[line.line_number].id)

    def _banner(
        self,
        original: Optional[DiffLine],
        modified: Optional[DiffLine],
        original_starts: dict[int, Section],
        modified_starts: dict[int, Section],
        column_width: int,
    ) -> Optional[str]:
        left = original_starts.get(original.line_number) if original is not None else None
        right = modified_starts.get(modified.line_number) if modified is not None else None
        if left is None and right is None:
            return None
        return self._join(
            self._section_cell(left, column_width),
            self._section_cell(right, column_width),
        )

    def _section_cell(self, section: Optional[Section], column_width: int) -> str:
        if section is None:
            return " " * column_width
        arrow = ">" if self.collapse_state.is_collapsed(section.id) else "v"
        changed = " *" if section.has_changes else ""
        return self._paint(_fit(f"{arrow} {section.title}{changed}", column_width), CYAN)

    def _cell(
        self, line: Optional[DiffLine], owner: dict[int, Section], number_width: int, column_width: int
    ) -> str:
        # A line from a collapsed section stays blank even when its counterpart is shown
        if line is None or self._is_hidden(line, owner):
            return " " * column_width
        text = f"{line.line_number:>{number_width}} {MARKERS[line.type]} {line.content.expandtabs(4)}"
        return self._paint(_fit(text, column_width), COLORS.get(line.type))

    def _hidden_summary(self, count: int) -> str:
        noun = "row" if count == 1 else "rows"
        return self._paint(f"  ... {count} {noun} in collapsed sections", CYAN)

    def _join(self, left: str, right: str) -> str:
        return f"{left}{SEPARATOR}{right}".rstrip()

    def _paint(self, text: str, color: Optional[str]) -> str:
        if not self.use_color or color is None:
            return text
        return f"{color}{text}{RESET}"
