#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/__init__.py
"""Presentation adapters for comparison results.

Renderers only read a :class:`~splitdiff.api.DiffResult`; none of them
mutate it. Collapse state is passed in separately as a
:class:`CollapseState`.

Available Renderers
-------------------
- SideBySideRenderer: Two aligned terminal columns with optional ANSI colors
- UnifiedRenderer: Single interleaved column with +/- prefixes
- HtmlDiffRenderer: Standalone HTML page with collapsible sections
- JsonDiffRenderer: Structured JSON output for programmatic access
- RichDiffRenderer: Terminal table via the optional ``rich`` package

Examples
--------
Print a side-by-side view:
    >>> from splitdiff import compare_texts
    >>> from splitdiff.renderers import SideBySideRenderer
    >>> result = compare_texts("a\\nb\\n", "a\\nc\\n")
    >>> for line in SideBySideRenderer(use_color=False).render(result):
    ...     print(line)

Collapse unchanged sections in HTML:
    >>> from splitdiff.renderers import CollapseState, HtmlDiffRenderer
    >>> state = CollapseState()
    >>> state.collapse_unchanged(result.iter_sections())
    >>> html = HtmlDiffRenderer(collapse_state=state).render(result)

"""

from splitdiff.renderers.collapse import CollapseState
from splitdiff.renderers.html import HtmlDiffRenderer
from splitdiff.renderers.json import JsonDiffRenderer
from splitdiff.renderers.rich_console import RichDiffRenderer, check_rich_available
from splitdiff.renderers.side_by_side import SideBySideRenderer
from splitdiff.renderers.unified import UnifiedRenderer

__all__ = [
    "CollapseState",
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "RichDiffRenderer",
    "SideBySideRenderer",
    "UnifiedRenderer",
    "check_rich_available",
]
