#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/api.py
"""Python API for comparing two texts side by side.

:func:`compare_texts` runs the full engine pipeline (tokenize, align,
classify, group) and bundles everything a presentation layer needs into a
:class:`DiffResult`. The result is plain, immutable data; ``to_dict()``
gives a JSON-serialisable snapshot.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from splitdiff.constants import (
    DEFAULT_MODIFIED_TITLE,
    DEFAULT_ORIGINAL_TITLE,
    DEFAULT_TITLE,
    MODIFIED_SECTION_ID_PREFIX,
    ORIGINAL_SECTION_ID_PREFIX,
)
from splitdiff.engine.alignment import align
from splitdiff.engine.classifier import build_rows, classify, compute_statistics
from splitdiff.engine.models import AlignmentOp, DiffLine, DiffRow, DiffStatistics, Section
from splitdiff.engine.sections import group, no_headers, resolve_header_predicate
from splitdiff.engine.tokenizer import tokenize
from splitdiff.options import DiffOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffResult:
    """Everything computed for one comparison.

    Attributes
    ----------
    original_lines, modified_lines : tuple of DiffLine
        Classified lines for each side
    original_sections, modified_sections : tuple of Section
        The same lines grouped into sections
    operations : tuple of AlignmentOp
        The underlying alignment
    rows : tuple of DiffRow
        Side-by-side layout of the classified lines
    statistics : DiffStatistics
        Line counts by type
    title, original_title, modified_title : str
        Display labels supplied by the caller

    """

    original_lines: tuple[DiffLine, ...]
    modified_lines: tuple[DiffLine, ...]
    original_sections: tuple[Section, ...]
    modified_sections: tuple[Section, ...]
    operations: tuple[AlignmentOp, ...]
    rows: tuple[DiffRow, ...]
    statistics: DiffStatistics
    title: str = DEFAULT_TITLE
    original_title: str = DEFAULT_ORIGINAL_TITLE
    modified_title: str = DEFAULT_MODIFIED_TITLE

    @property
    def has_changes(self) -> bool:
        return self.statistics.has_changes

    def iter_sections(self) -> Iterator[Section]:
        """Yield original-side sections followed by modified-side sections."""
        yield from self.original_sections
        yield from self.modified_sections

    def to_dict(self) -> dict[str, Any]:
        """Serialise the result to plain data.

        Sections already contain every line, so the flat line lists are
        not repeated.
        """
        return {
            "title": self.title,
            "original": {
                "title": self.original_title,
                "sections": [section.to_dict() for section in self.original_sections],
            },
            "modified": {
                "title": self.modified_title,
                "sections": [section.to_dict() for section in self.modified_sections],
            },
            "statistics": self.statistics.to_dict(),
        }


def compare_texts(
    original_text: str,
    modified_text: str,
    options: Optional[DiffOptions] = None,
    *,
    title: str = DEFAULT_TITLE,
    original_title: str = DEFAULT_ORIGINAL_TITLE,
    modified_title: str = DEFAULT_MODIFIED_TITLE,
    cancel_event: Optional[threading.Event] = None,
    **kwargs: Any,
) -> DiffResult:
    """Compare two texts line by line.

    Parameters
    ----------
    original_text : str
        The original text
    modified_text : str
        The modified text
    options : DiffOptions, optional
        Pipeline options; defaults to ``DiffOptions()``
    title : str, default = "File Comparison"
        Overall label for the comparison
    original_title : str, default = "Original"
        Label for the original side
    modified_title : str, default = "Modified"
        Label for the modified side
    cancel_event : threading.Event, optional
        Setting this event from another thread aborts the comparison with
        ``DiffCancelled``
    **kwargs
        Individual option overrides applied on top of ``options``

    Returns
    -------
    DiffResult

    Raises
    ------
    ResourceLimitExceeded
        If the inputs are too large for ``options.resource_limit``
    ValidationError
        If an option override is invalid

    Examples
    --------
    >>> result = compare_texts("a\\nb\\n", "a\\nb\\nc\\n")
    >>> [line.type.value for line in result.modified_lines]
    ['unchanged', 'unchanged', 'added']

    """
    if options is None:
        options = DiffOptions()
    if kwargs:
        options = options.create_updated(**kwargs)

    original = tokenize(original_text, keep_trailing_empty=options.keep_trailing_empty)
    modified = tokenize(modified_text, keep_trailing_empty=options.keep_trailing_empty)
    logger.debug("Comparing %d original lines with %d modified lines", len(original), len(modified))

    ops = align(original, modified, resource_limit=options.resource_limit, cancel_event=cancel_event)
    original_lines, modified_lines = classify(ops, pair_substitutions=options.pair_substitutions)

    header_predicate = resolve_header_predicate(options.section_header_pattern) or no_headers
    original_sections = group(
        original_lines,
        header_predicate,
        id_prefix=ORIGINAL_SECTION_ID_PREFIX,
        untitled=options.untitled_section_title,
    )
    modified_sections = group(
        modified_lines,
        header_predicate,
        id_prefix=MODIFIED_SECTION_ID_PREFIX,
        untitled=options.untitled_section_title,
    )

    statistics = compute_statistics(original_lines, modified_lines)
    logger.debug(
        "Comparison found %d unchanged, %d removed, %d added, %d modified lines",
        statistics.unchanged,
        statistics.removed,
        statistics.added,
        statistics.modified,
    )

    return DiffResult(
        original_lines=tuple(original_lines),
        modified_lines=tuple(modified_lines),
        original_sections=tuple(original_sections),
        modified_sections=tuple(modified_sections),
        operations=tuple(ops),
        rows=tuple(build_rows(ops, pair_substitutions=options.pair_substitutions)),
        statistics=statistics,
        title=title,
        original_title=original_title,
        modified_title=modified_title,
    )
