#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/splitdiff/options.py
"""Configuration options for the diff pipeline.

Options are frozen dataclasses. Field metadata carries the help text used
by the CLI and config documentation, and ``__post_init__`` rejects values
the engine cannot work with.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from splitdiff.constants import (
    DEFAULT_KEEP_TRAILING_EMPTY,
    DEFAULT_PAIR_SUBSTITUTIONS,
    DEFAULT_RESOURCE_LIMIT,
    DEFAULT_SECTION_HEADER_PATTERN,
    DEFAULT_UNTITLED_SECTION,
)
from splitdiff.engine.sections import HeaderSpec, resolve_header_predicate
from splitdiff.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Options controlling tokenization, alignment and section grouping.

    Parameters
    ----------
    section_header_pattern : str, compiled pattern, callable or None
        Lines matching this regular expression (at line start) open a new
        section. A callable receives each ``DiffLine`` and returns True for
        headers. ``None`` disables headers so each side is one section.
    resource_limit : int
        Maximum ``len(original) * len(modified)`` the alignment may consider
        before failing with ``ResourceLimitExceeded``.
    pair_substitutions : bool
        Pair adjacent removal/addition runs into ``modified`` lines.
    keep_trailing_empty : bool
        Treat a trailing line break as opening a final empty line.
    untitled_section_title : str
        Title used for sections with no non-blank line.

    """

    section_header_pattern: HeaderSpec = field(
        default=DEFAULT_SECTION_HEADER_PATTERN,
        metadata={
            "help": "Regular expression matched at line start that opens a new section (None disables sections)",
            "importance": "core",
        },
    )
    resource_limit: int = field(
        default=DEFAULT_RESOURCE_LIMIT,
        metadata={
            "help": "Maximum number of line pairs (original lines x modified lines) to align",
            "type": int,
            "importance": "advanced",
        },
    )
    pair_substitutions: bool = field(
        default=DEFAULT_PAIR_SUBSTITUTIONS,
        metadata={
            "help": "Report adjacent removed/added lines as modified pairs",
            "importance": "core",
        },
    )
    keep_trailing_empty: bool = field(
        default=DEFAULT_KEEP_TRAILING_EMPTY,
        metadata={
            "help": "Count a trailing line break as an extra empty line",
            "importance": "advanced",
        },
    )
    untitled_section_title: str = field(
        default=DEFAULT_UNTITLED_SECTION,
        metadata={
            "help": "Title shown for sections that contain only blank lines",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field value is outside its valid range.

        """
        if isinstance(self.resource_limit, bool) or not isinstance(self.resource_limit, int):
            raise ValidationError(
                f"resource_limit must be an integer, got {type(self.resource_limit).__name__}",
                parameter_name="resource_limit",
                parameter_value=self.resource_limit,
            )
        if self.resource_limit <= 0:
            raise ValidationError(
                f"resource_limit must be positive, got {self.resource_limit}",
                parameter_name="resource_limit",
                parameter_value=self.resource_limit,
            )
        for name in ("pair_substitutions", "keep_trailing_empty"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValidationError(
                    f"{name} must be a boolean, got {type(value).__name__}",
                    parameter_name=name,
                    parameter_value=value,
                )
        if not isinstance(self.untitled_section_title, str):
            raise ValidationError(
                f"untitled_section_title must be a string, got {type(self.untitled_section_title).__name__}",
                parameter_name="untitled_section_title",
                parameter_value=self.untitled_section_title,
            )
        if isinstance(self.section_header_pattern, str) and not self.section_header_pattern:
            raise ValidationError(
                "section_header_pattern must not be empty; use None to disable sections",
                parameter_name="section_header_pattern",
                parameter_value=self.section_header_pattern,
            )
        # Surfaces bad regular expressions at construction time
        resolve_header_predicate(self.section_header_pattern)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> DiffOptions:
        """Build options from a configuration mapping.

        Keys may use underscores or dashes. Unknown keys are rejected so
        that typos in configuration files do not pass silently.

        Parameters
        ----------
        values : mapping
            Configuration values, e.g. loaded from ``.splitdiff.toml``

        Returns
        -------
        DiffOptions

        Raises
        ------
        ValidationError
            If a key is unknown or a value is invalid

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, value in values.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ValidationError(
                    f"Unknown option '{raw_key}'. Valid options: {', '.join(sorted(known))}",
                    parameter_name=str(raw_key),
                    parameter_value=value,
                )
            kwargs[key] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as plain data, with patterns as strings."""
        pattern = self.section_header_pattern
        if isinstance(pattern, re.Pattern):
            pattern = pattern.pattern
        elif callable(pattern):
            pattern = getattr(pattern, "__name__", repr(pattern))
        return {
            "section_header_pattern": pattern,
            "resource_limit": self.resource_limit,
            "pair_substitutions": self.pair_substitutions,
            "keep_trailing_empty": self.keep_trailing_empty,
            "untitled_section_title": self.untitled_section_title,
        }
