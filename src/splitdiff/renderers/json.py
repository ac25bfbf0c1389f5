#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/json.py
"""JSON renderer for structured output.

The payload is :meth:`DiffResult.to_dict` plus the collapse state and,
optionally, the raw alignment ops. It is meant for presentation layers in
other runtimes and for snapshot tests.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from splitdiff.api import DiffResult
from splitdiff.renderers.collapse import CollapseState


class JsonDiffRenderer:
    """Render a comparison as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)
    include_operations : bool, default = False
        If True, add the alignment ops under ``"operations"``
    collapse_state : CollapseState, optional
        Collapsed section ids are listed under ``"collapsed"``

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
        include_operations: bool = False,
        collapse_state: Optional[CollapseState] = None,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent
        self.include_operations = include_operations
        self.collapse_state = collapse_state or CollapseState()

    def build_payload(self, result: DiffResult) -> Dict[str, Any]:
        """Build the plain-data payload that :meth:`render` serialises."""
        data = result.to_dict()
        data["type"] = "side_by_side_diff"
        data["collapsed"] = sorted(self.collapse_state.collapsed_ids())
        if self.include_operations:
            data["operations"] = [op.to_dict() for op in result.operations]
        return data

    def render(self, result: DiffResult) -> str:
        """Render the comparison to a JSON string.

        Parameters
        ----------
        result : DiffResult
            Comparison to render

        Returns
        -------
        str
            JSON-formatted diff output

        """
        data = self.build_payload(result)
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        else:
            return json.dumps(data, ensure_ascii=False)
