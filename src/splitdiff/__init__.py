"""splitdiff - side-by-side line comparison of two texts.

splitdiff aligns two texts line by line with a longest-common-subsequence
alignment, classifies every line on both sides as unchanged, added, removed
or modified, and groups the result into collapsible sections for display.

The engine is a set of pure functions with no I/O; presentation is left to
the bundled renderers (terminal, unified, HTML, JSON, rich) or to the
caller.

Key Features
------------
- Optimal LCS alignment with a deterministic tie-break
- Substitution pairing into modified lines with cross references
- Section grouping by header pattern or custom predicate
- Resource bound on the alignment table instead of silent degradation
- Cancellable comparisons and a debounced helper for interactive hosts

Requirements
------------
- Python 3.10+
- Optional: rich for rich terminal tables

Examples
--------
Compare two texts:

    >>> from splitdiff import compare_texts
    >>> result = compare_texts("a\\nb\\nc\\n", "a\\nx\\nc\\n")
    >>> [line.type.value for line in result.original_lines]
    ['unchanged', 'modified', 'unchanged']

Use the engine stages directly:

    >>> from splitdiff.engine import align, classify, tokenize
    >>> ops = align(tokenize("a\\nb"), tokenize("b"))
    >>> original, modified = classify(ops)

See Also
--------
splitdiff.engine : Individual pipeline stages
splitdiff.renderers : Presentation adapters

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "splitdiff requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from splitdiff.api import DiffResult, compare_texts
from splitdiff.engine import (
    AlignmentOp,
    DiffLine,
    DiffRow,
    DiffStatistics,
    Line,
    LineType,
    Section,
    align,
    classify,
    group,
    tokenize,
)
from splitdiff.exceptions import (
    ConfigError,
    DependencyError,
    DiffCancelled,
    ResourceLimitExceeded,
    SplitDiffError,
    ValidationError,
)
from splitdiff.options import DiffOptions
from splitdiff.scheduling import DebouncedComparer

__all__ = [
    "__version__",
    "compare_texts",
    "DiffResult",
    "DiffOptions",
    "DebouncedComparer",
    # Engine
    "tokenize",
    "align",
    "classify",
    "group",
    "AlignmentOp",
    "DiffLine",
    "DiffRow",
    "DiffStatistics",
    "Line",
    "LineType",
    "Section",
    # Exceptions
    "SplitDiffError",
    "ValidationError",
    "ConfigError",
    "ResourceLimitExceeded",
    "DiffCancelled",
    "DependencyError",
]
