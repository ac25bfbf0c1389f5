#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/classifier.py
"""Turn alignment ops into numbered, classified lines for each side.

Matches become ``unchanged`` lines that reference each other. Everything
else is a change. Substitution detection is a heuristic layered on top of
the LCS, not part of it: a run of deletes directly followed by a run of
inserts (or the other way round) is read as the original lines having been
rewritten in place. The two runs are paired positionally and each pair is
reported as ``modified`` on both sides; whatever is left over in the longer
run stays ``removed`` or ``added``. With ``pair_substitutions=False`` no
pairing happens and every change is a plain removal or addition.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from splitdiff.engine.models import AlignmentOp, DiffLine, DiffRow, DiffStatistics, LineType

_Pair = tuple[Optional[DiffLine], Optional[DiffLine]]


def _take_run(ops: Sequence[AlignmentOp], start: int, kind: str) -> int:
    """Return the end index of the run of ``kind`` ops beginning at ``start``."""
    end = start
    while end < len(ops) and ops[end].kind == kind:
        end += 1
    return end


def _iter_classified(ops: Sequence[AlignmentOp], pair_substitutions: bool) -> Iterator[_Pair]:
    """Yield (original, modified) line pairs in display order."""
    original_number = 0
    modified_number = 0
    position = 0

    while position < len(ops):
        op = ops[position]

        if op.kind == "match":
            assert op.original is not None and op.modified is not None
            original_number += 1
            modified_number += 1
            yield (
                DiffLine(original_number, op.original.text, LineType.UNCHANGED, modified_number),
                DiffLine(modified_number, op.modified.text, LineType.UNCHANGED, original_number),
            )
            position += 1
            continue

        run_end = _take_run(ops, position, op.kind)
        first_run = ops[position:run_end]
        second_run: Sequence[AlignmentOp] = ()
        if pair_substitutions:
            other_kind = "insert" if op.kind == "delete" else "delete"
            second_end = _take_run(ops, run_end, other_kind)
            second_run = ops[run_end:second_end]
            run_end = second_end
        position = run_end

        if op.kind == "delete":
            deletes, inserts = first_run, second_run
        else:
            deletes, inserts = second_run, first_run

        paired = min(len(deletes), len(inserts))
        for offset in range(paired):
            old_line = deletes[offset].original
            new_line = inserts[offset].modified
            assert old_line is not None and new_line is not None
            old_number = original_number + offset + 1
            new_number = modified_number + offset + 1
            yield (
                DiffLine(old_number, old_line.text, LineType.MODIFIED, new_number),
                DiffLine(new_number, new_line.text, LineType.MODIFIED, old_number),
            )

        for offset in range(paired, len(deletes)):
            old_line = deletes[offset].original
            assert old_line is not None
            yield DiffLine(original_number + offset + 1, old_line.text, LineType.REMOVED), None

        for offset in range(paired, len(inserts)):
            new_line = inserts[offset].modified
            assert new_line is not None
            yield None, DiffLine(modified_number + offset + 1, new_line.text, LineType.ADDED)

        original_number += len(deletes)
        modified_number += len(inserts)


def classify(
    ops: Iterable[AlignmentOp],
    *,
    pair_substitutions: bool = True,
) -> tuple[list[DiffLine], list[DiffLine]]:
    """Classify alignment ops into per-side display lines.

    Parameters
    ----------
    ops : iterable of AlignmentOp
        Alignment produced by :func:`~splitdiff.engine.alignment.align`
    pair_substitutions : bool, default = True
        If True, adjacent delete/insert runs are paired into ``modified``
        lines; if False they stay ``removed`` and ``added``

    Returns
    -------
    tuple of (list of DiffLine, list of DiffLine)
        Original side and modified side, each numbered from 1

    Examples
    --------
    >>> from splitdiff.engine.alignment import align
    >>> from splitdiff.engine.tokenizer import tokenize
    >>> old, new = classify(align(tokenize("x"), tokenize("y")))
    >>> old[0].type.value, old[0].counterpart
    ('modified', 1)

    """
    original_lines: list[DiffLine] = []
    modified_lines: list[DiffLine] = []
    for old_line, new_line in _iter_classified(list(ops), pair_substitutions):
        if old_line is not None:
            original_lines.append(old_line)
        if new_line is not None:
            modified_lines.append(new_line)
    return original_lines, modified_lines


def build_rows(ops: Iterable[AlignmentOp], *, pair_substitutions: bool = True) -> list[DiffRow]:
    """Lay classified lines out as side-by-side rows.

    Unchanged and modified pairs share a row; removed lines get a row with
    an empty modified side and added lines a row with an empty original
    side. Reading one column top to bottom gives that side in order.
    """
    return [DiffRow(old_line, new_line) for old_line, new_line in _iter_classified(list(ops), pair_substitutions)]


def compute_statistics(original_lines: Sequence[DiffLine], modified_lines: Sequence[DiffLine]) -> DiffStatistics:
    """Count line types across both sides of a classified comparison."""
    unchanged = removed = modified = 0
    for line in original_lines:
        if line.type is LineType.UNCHANGED:
            unchanged += 1
        elif line.type is LineType.REMOVED:
            removed += 1
        elif line.type is LineType.MODIFIED:
            modified += 1

    added = sum(1 for line in modified_lines if line.type is LineType.ADDED)

    return DiffStatistics(
        unchanged=unchanged,
        added=added,
        removed=removed,
        modified=modified,
        original_line_count=len(original_lines),
        modified_line_count=len(modified_lines),
    )
