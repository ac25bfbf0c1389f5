#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/renderers/collapse.py
"""Presentation-side collapse state for sections.

Which sections are collapsed is a property of the view, not of the diff,
so it lives here keyed by ``Section.id`` instead of on ``Section``. A
fresh comparison produces fresh sections with the same position-based ids,
so the state carries over between renders of the same documents.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional

from splitdiff.engine.models import Section


class CollapseState:
    """Mapping of section id to collapsed flag; unknown ids are expanded."""

    def __init__(self, collapsed: Optional[Mapping[str, bool]] = None):
        """Initialize from an optional ``{section_id: collapsed}`` mapping."""
        self._collapsed: dict[str, bool] = dict(collapsed or {})

    def is_collapsed(self, section_id: str) -> bool:
        return self._collapsed.get(section_id, False)

    def toggle(self, section_id: str) -> bool:
        """Flip a section's state and return the new collapsed flag."""
        collapsed = not self.is_collapsed(section_id)
        self._collapsed[section_id] = collapsed
        return collapsed

    def collapse(self, section_id: str) -> None:
        self._collapsed[section_id] = True

    def expand(self, section_id: str) -> None:
        self._collapsed[section_id] = False

    def collapse_unchanged(self, sections: Iterable[Section]) -> None:
        """Collapse every section without changes and expand the rest."""
        for section in sections:
            self._collapsed[section.id] = not section.has_changes

    def collapsed_ids(self) -> Iterator[str]:
        return (section_id for section_id, collapsed in self._collapsed.items() if collapsed)

    def to_dict(self) -> dict[str, bool]:
        return dict(self._collapsed)

    def __repr__(self) -> str:
        return f"CollapseState({self._collapsed!r})"
