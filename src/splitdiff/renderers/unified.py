#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/unified.py
"""Single-column renderer with ``+``/``-`` prefixes and optional ANSI colors.

Lines are printed in row order: unchanged lines once with a two-space
prefix, removed lines with ``- ``, added lines with ``+ ``. A modified
pair prints its original line as a removal followed by its new line as an
addition.
"""

from __future__ import annotations

from typing import Iterator

from splitdiff.api import DiffResult
from splitdiff.engine.models import DiffLine


class UnifiedRenderer:
    """Render a comparison as one interleaved column.

    Parameters
    ----------
    use_color : bool, default = True
        If True, color removals red and additions green
    show_line_numbers : bool, default = True
        If True, prefix each line with its number on its own side

    """

    def __init__(self, use_color: bool = True, show_line_numbers: bool = True):
        """Initialize the unified renderer."""
        self.use_color = use_color
        self.show_line_numbers = show_line_numbers

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
        RED = "\033[31m"
        GREEN = "\033[32m"
        RESET = "\033[0m"

        number_width = len(str(max(len(result.original_lines), len(result.modified_lines), 1)))

        for row in result.rows:
            if row.original is not None and row.modified is not None and not row.original.is_change:
                yield self._format("  ", row.original, number_width)
                continue

            if row.original is not None:
                line = self._format("- ", row.original, number_width)
                yield f"{RED}{line}{RESET}" if self.use_color else line
            if row.modified is not None:
                line = self._format("+ ", row.modified, number_width)
                yield f"{GREEN}{line}{RESET}" if self.use_color else line

    def render_to_string(self, result: DiffResult) -> str:
        return "\n".join(self.render(result))

    def _format(self, prefix: str, line: DiffLine, number_width: int) -> str:
        if not self.show_line_numbers:
            return f"{prefix}{line.content}"
        return f"{line.line_number:>{number_width}} {prefix}{line.content}"
