#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/engine/tokenizer.py
"""Split raw text into the line sequence consumed by the alignment engine.

Line breaks are ``\\r\\n``, ``\\r`` or ``\\n``. Content between breaks is
kept verbatim, including leading and trailing whitespace.

Two trailing-break policies are supported:

- default: a final line break terminates the last line rather than opening
  a new, empty one, so ``"a\\nb\\n"`` and ``"a\\nb"`` both give two lines,
  and the empty string gives no lines at all.
- ``keep_trailing_empty=True``: every break separates two lines, as with
  ``str.split("\\n")``. ``"a\\n"`` gives ``["a", ""]`` and ``""`` gives a
  single empty line.
"""

from __future__ import annotations

import re

from splitdiff.engine.models import Line

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str, *, keep_trailing_empty: bool = False) -> list[str]:
    """Split text on line breaks according to the trailing-break policy.

    Parameters
    ----------
    text : str
        Raw input text
    keep_trailing_empty : bool, default = False
        If True, a trailing line break yields a trailing empty line and the
        empty string yields one empty line

    Returns
    -------
    list of str
        Line contents without terminators

    """
    parts = _LINE_BREAK_RE.split(text)
    if not keep_trailing_empty and parts[-1] == "":
        # Either the text was empty or it ended with a line break
        parts.pop()
    return parts


def tokenize(text: str, *, keep_trailing_empty: bool = False) -> list[Line]:
    """Tokenize text into indexed lines.

    Parameters
    ----------
    text : str
        Raw input text; treated as opaque, never validated
    keep_trailing_empty : bool, default = False
        Trailing line break policy, see :func:`split_lines`

    Returns
    -------
    list of Line
        Lines with 0-based indices in source order

    Examples
    --------
    >>> [line.text for line in tokenize("a\\n\\nb\\n")]
    ['a', '', 'b']
    >>> tokenize("")
    []

    """
    contents = split_lines(text, keep_trailing_empty=keep_trailing_empty)
    return [Line(index, content) for index, content in enumerate(contents)]
