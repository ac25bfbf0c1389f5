#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/sections.py
"""Partition one side's classified lines into collapsible sections.

A section starts at the first line and at every header line. Header
detection is a predicate over :class:`~splitdiff.engine.models.DiffLine`;
:func:`header_predicate_from_pattern` builds the usual one from a regular
expression anchored at the start of the line.

Sections hold no collapse state. Presentation layers keep their own
``id -> collapsed`` mapping, see :mod:`splitdiff.renderers.collapse`.
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Sequence, Union

from splitdiff.constants import DEFAULT_SECTION_HEADER_PATTERN, DEFAULT_SECTION_ID_PREFIX, DEFAULT_UNTITLED_SECTION
from splitdiff.engine.models import DiffLine, Section
from splitdiff.exceptions import ValidationError

HeaderPredicate = Callable[[DiffLine], bool]
HeaderSpec = Union[str, re.Pattern[str], HeaderPredicate, None]


def header_predicate_from_pattern(pattern: Union[str, re.Pattern[str]]) -> HeaderPredicate:
    """Build a header predicate matching ``pattern`` at the start of a line.

    Parameters
    ----------
    pattern : str or compiled pattern
        Regular expression; it is applied with ``re.match`` so it only
        needs to describe the line's leading text

    Returns
    -------
    callable
        Predicate returning True for header lines

    Raises
    ------
    ValidationError
        If ``pattern`` is not a valid regular expression

    """
    if isinstance(pattern, str):
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise ValidationError(
                f"Invalid section header pattern {pattern!r}: {e}",
                parameter_name="section_header_pattern",
                parameter_value=pattern,
                original_error=e,
            ) from e
    else:
        compiled = pattern

    def is_header(line: DiffLine) -> bool:
        return compiled.match(line.content) is not None

    return is_header


def resolve_header_predicate(header: HeaderSpec) -> Optional[HeaderPredicate]:
    """Normalise a header specification into a predicate.

    Strings and compiled patterns go through
    :func:`header_predicate_from_pattern`, callables are used as they are
    and ``None`` means no header detection at all.
    """
    if header is None:
        return None
    if isinstance(header, (str, re.Pattern)):
        return header_predicate_from_pattern(header)
    if callable(header):
        return header
    raise ValidationError(
        f"section_header_pattern must be a string, compiled pattern, callable or None, got {type(header).__name__}",
        parameter_name="section_header_pattern",
        parameter_value=header,
    )


def _section_title(lines: Sequence[DiffLine], starts_with_header: bool, untitled: str) -> str:
    """Pick the display title for a section's lines."""
    if starts_with_header:
        title = lines[0].content.strip()
        if title:
            return title
    for line in lines:
        if line.content.strip():
            return line.content.strip()
    return untitled


def group(
    lines: Sequence[DiffLine],
    header_predicate: Optional[HeaderPredicate] = None,
    *,
    id_prefix: str = DEFAULT_SECTION_ID_PREFIX,
    untitled: str = DEFAULT_UNTITLED_SECTION,
) -> list[Section]:
    """Group lines into contiguous sections.

    Parameters
    ----------
    lines : sequence of DiffLine
        One side of a classified comparison
    header_predicate : callable, optional
        Returns True for lines that open a new section. Defaults to the
        ``SECTION`` / ``Sub-Section`` markers; pass
        :func:`no_headers` to keep everything in one section.
    id_prefix : str, default = "section"
        Prefix for section ids, which are ``f"{id_prefix}-{n}"``
    untitled : str, default = "Untitled Section"
        Title for sections without any non-blank line

    Returns
    -------
    list of Section
        Non-empty sections covering ``lines`` in order with no gaps or
        overlaps; empty when ``lines`` is empty

    """
    if header_predicate is None:
        header_predicate = DEFAULT_HEADER_PREDICATE

    sections: list[Section] = []
    current: list[DiffLine] = []
    current_is_headed = False

    def flush() -> None:
        if not current:
            return
        sections.append(
            Section(
                id=f"{id_prefix}-{len(sections)}",
                title=_section_title(current, current_is_headed, untitled),
                lines=tuple(current),
                has_changes=any(line.is_change for line in current),
            )
        )

    for line in lines:
        if header_predicate(line):
            flush()
            current = [line]
            current_is_headed = True
        else:
            current.append(line)

    flush()
    return sections


def no_headers(line: DiffLine) -> bool:
    """Header predicate that never matches, keeping a side in one section."""
    return False


DEFAULT_HEADER_PREDICATE: HeaderPredicate = header_predicate_from_pattern(DEFAULT_SECTION_HEADER_PATTERN)
