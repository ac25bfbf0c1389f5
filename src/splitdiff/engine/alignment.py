#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/alignment.py
"""Minimal-edit alignment of two line sequences.

The alignment is a longest common subsequence over line content, computed
with a dynamic programming table of suffix LCS lengths and walked forward
from the first line of each side. The walk makes three guarantees:

- equal lines are always matched, so duplicated lines pair the leftmost
  available original line with the leftmost available modified line and
  matches never cross;
- when no match is possible at a position and skipping either line keeps
  the LCS length, the original line is deleted first. Every gap between
  two matches is therefore a run of deletes followed by a run of inserts;
- the same inputs always produce the same ops.

The table needs ``len(original) * len(modified)`` cells, so inputs whose
product exceeds ``resource_limit`` are rejected up front with
:class:`~splitdiff.exceptions.ResourceLimitExceeded`.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Iterable, Optional, Sequence

from splitdiff.constants import DEFAULT_RESOURCE_LIMIT
from splitdiff.engine.models import AlignmentOp, Line
from splitdiff.exceptions import DiffCancelled, ResourceLimitExceeded, ValidationError

logger = logging.getLogger(__name__)


def check_resource_limit(original_size: int, modified_size: int, resource_limit: int) -> None:
    """Raise if comparing the given sizes needs more line pairs than allowed.

    Parameters
    ----------
    original_size : int
        Number of original lines
    modified_size : int
        Number of modified lines
    resource_limit : int
        Maximum allowed ``original_size * modified_size``

    Raises
    ------
    ValidationError
        If ``resource_limit`` is not a positive integer
    ResourceLimitExceeded
        If the pair count is above ``resource_limit``

    """
    if isinstance(resource_limit, bool) or not isinstance(resource_limit, int) or resource_limit <= 0:
        raise ValidationError(
            f"resource_limit must be a positive integer, got {resource_limit!r}",
            parameter_name="resource_limit",
            parameter_value=resource_limit,
        )
    if original_size * modified_size > resource_limit:
        raise ResourceLimitExceeded(original_size, modified_size, resource_limit)


def _build_suffix_table(
    old: Sequence[str],
    new: Sequence[str],
    cancel_event: Optional[threading.Event],
) -> list[list[int]]:
    """Build ``table[i][j]`` = LCS length of ``old[i:]`` and ``new[j:]``."""
    rows, cols = len(old), len(new)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]

    for i in range(rows - 1, -1, -1):
        if cancel_event is not None and cancel_event.is_set():
            raise DiffCancelled()
        row = table[i]
        below = table[i + 1]
        old_text = old[i]
        for j in range(cols - 1, -1, -1):
            if old_text == new[j]:
                row[j] = below[j + 1] + 1
            else:
                down = below[j]
                right = row[j + 1]
                row[j] = down if down >= right else right

    return table


def align(
    original: Sequence[Line],
    modified: Sequence[Line],
    *,
    resource_limit: int = DEFAULT_RESOURCE_LIMIT,
    cancel_event: Optional[threading.Event] = None,
) -> list[AlignmentOp]:
    """Compute the alignment between two line sequences.

    Parameters
    ----------
    original : sequence of Line
        Lines of the original text
    modified : sequence of Line
        Lines of the modified text
    resource_limit : int, default = DEFAULT_RESOURCE_LIMIT
        Maximum number of line pairs (``len(original) * len(modified)``)
        the comparison may consider
    cancel_event : threading.Event, optional
        When set from another thread, the computation stops and raises
        :class:`~splitdiff.exceptions.DiffCancelled`

    Returns
    -------
    list of AlignmentOp
        Ops in order; match and delete ops spell out ``original``, match and
        insert ops spell out ``modified``

    Raises
    ------
    ResourceLimitExceeded
        If the inputs are too large for ``resource_limit``
    DiffCancelled
        If ``cancel_event`` was set before the alignment finished

    """
    check_resource_limit(len(original), len(modified), resource_limit)
    if cancel_event is not None and cancel_event.is_set():
        raise DiffCancelled()

    started = time.perf_counter()

    # A shared prefix is matched exactly as the forward walk would match it
    prefix = 0
    limit = min(len(original), len(modified))
    while prefix < limit and original[prefix].text == modified[prefix].text:
        prefix += 1

    ops = [AlignmentOp.match(original[k], modified[k]) for k in range(prefix)]
    old_lines = original[prefix:]
    new_lines = modified[prefix:]

    if not old_lines or not new_lines:
        ops.extend(AlignmentOp.delete(line) for line in old_lines)
        ops.extend(AlignmentOp.insert(line) for line in new_lines)
        return ops

    old = [line.text for line in old_lines]
    new = [line.text for line in new_lines]
    logger.debug("Building %d x %d alignment table after %d shared leading lines", len(old), len(new), prefix)
    table = _build_suffix_table(old, new, cancel_event)

    i = j = 0
    rows, cols = len(old), len(new)
    while i < rows and j < cols:
        if old[i] == new[j]:
            ops.append(AlignmentOp.match(old_lines[i], new_lines[j]))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            ops.append(AlignmentOp.delete(old_lines[i]))
            i += 1
        else:
            ops.append(AlignmentOp.insert(new_lines[j]))
            j += 1

    ops.extend(AlignmentOp.delete(line) for line in old_lines[i:])
    ops.extend(AlignmentOp.insert(line) for line in new_lines[j:])

    logger.debug("Aligned %d ops in %.3fs", len(ops), time.perf_counter() - started)
    return ops


def project_original(ops: Iterable[AlignmentOp]) -> list[str]:
    """Rebuild the original line contents from match and delete ops."""
    return [op.original.text for op in ops if op.kind != "insert" and op.original is not None]


def project_modified(ops: Iterable[AlignmentOp]) -> list[str]:
    """Rebuild the modified line contents from match and insert ops."""
    return [op.modified.text for op in ops if op.kind != "delete" and op.modified is not None]


def common_line_count(ops: Iterable[AlignmentOp]) -> int:
    """Return the number of matched lines, i.e. the LCS length."""
    return sum(1 for op in ops if op.kind == "match")
