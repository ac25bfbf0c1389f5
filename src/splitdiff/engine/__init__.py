#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/__init__.py
"""Line-diff engine stages.

The engine is a pipeline of pure functions, each consuming the previous
stage's output:

1. :func:`tokenize` - raw text to :class:`Line` objects
2. :func:`align` - two line sequences to :class:`AlignmentOp` objects
3. :func:`classify` - ops to numbered :class:`DiffLine` objects per side
4. :func:`group` - one side's lines to :class:`Section` objects

Most callers want :func:`splitdiff.compare_texts`, which runs all four
stages with a single :class:`~splitdiff.options.DiffOptions`.
"""

from splitdiff.engine.alignment import align, common_line_count, project_modified, project_original
from splitdiff.engine.classifier import build_rows, classify, compute_statistics
from splitdiff.engine.models import AlignmentOp, DiffLine, DiffRow, DiffStatistics, Line, LineType, Section
from splitdiff.engine.sections import group, header_predicate_from_pattern, no_headers, resolve_header_predicate
from splitdiff.engine.tokenizer import split_lines, tokenize

__all__ = [
    "AlignmentOp",
    "DiffLine",
    "DiffRow",
    "DiffStatistics",
    "Line",
    "LineType",
    "Section",
    "align",
    "build_rows",
    "classify",
    "common_line_count",
    "compute_statistics",
    "group",
    "header_predicate_from_pattern",
    "no_headers",
    "project_modified",
    "project_original",
    "resolve_header_predicate",
    "split_lines",
    "tokenize",
]
