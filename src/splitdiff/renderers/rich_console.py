#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/rich_console.py
"""Side-by-side renderer built on the optional ``rich`` package.

``rich`` handles column widths, wrapping and color detection. Install it
with ``pip install splitdiff[rich]``.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from splitdiff.api import DiffResult
from splitdiff.engine.models import DiffLine, LineType
from splitdiff.exceptions import DependencyError
from splitdiff.renderers.collapse import CollapseState

STYLES = {
    LineType.UNCHANGED: "grey70",
    LineType.REMOVED: "red",
    LineType.ADDED: "green",
    LineType.MODIFIED: "yellow",
}


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


class RichDiffRenderer:
    """Render a comparison as a ``rich`` table.

    Parameters
    ----------
    width : int, optional
        Console width; detected from the terminal when omitted
    use_color : bool, default = True
        If False, render without color codes
    collapse_state : CollapseState, optional
        Rows belonging only to collapsed sections are left out; cells of
        collapsed sections are empty elsewhere

    Raises
    ------
    DependencyError
        If ``rich`` is not installed

    """

    def __init__(
        self,
        width: Optional[int] = None,
        use_color: bool = True,
        collapse_state: Optional[CollapseState] = None,
    ):
        """Initialize the renderer, failing early when ``rich`` is missing."""
        if not check_rich_available():
            raise DependencyError(
                feature_name="Rich output",
                missing_packages=[("rich", "")],
                install_command="pip install splitdiff[rich]",
            )
        self.width = width
        self.use_color = use_color
        self.collapse_state = collapse_state or CollapseState()

    def build_table(self, result: DiffResult):  # type: ignore[no-untyped-def]
        """Build the ``rich.table.Table`` for a comparison."""
        from rich.table import Table
        from rich.text import Text

        table = Table(title=result.title, expand=True, show_lines=False, pad_edge=False)
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        table.add_column(result.original_title, ratio=1, overflow="fold")
        table.add_column("#", justify="right", style="dim", no_wrap=True)
        table.add_column(result.modified_title, ratio=1, overflow="fold")

        original_owner = {line.line_number: s.id for s in result.original_sections for line in s.lines}
        modified_owner = {line.line_number: s.id for s in result.modified_sections for line in s.lines}

        def hidden(line: Optional[DiffLine], owner: dict[int, str]) -> bool:
            return line is None or self.collapse_state.is_collapsed(owner[line.line_number])

        for row in result.rows:
            if hidden(row.original, original_owner) and hidden(row.modified, modified_owner):
                continue
            cells = []
            for line, owner in ((row.original, original_owner), (row.modified, modified_owner)):
                if line is None or hidden(line, owner):
                    cells.extend(["", ""])
                else:
                    cells.append(str(line.line_number))
                    cells.append(Text(line.content, style=STYLES[line.type]))
            table.add_row(*cells)

        return table

    def render_to_string(self, result: DiffResult) -> str:
        """Render the comparison to a string, with ANSI codes if enabled."""
        from rich.console import Console

        buffer = StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=self.use_color,
            no_color=not self.use_color,
            highlight=False,
        )
        console.print(self.build_table(result))
        return buffer.getvalue()
