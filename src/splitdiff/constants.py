#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the splitdiff library.

This module centralizes the default configuration values, type aliases and
exit codes used across the engine, the renderers and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Engine Defaults - Tokenizer, alignment and section grouping settings
3. Presentation Defaults - Renderer and CLI settings
4. Exit Codes - CLI process exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OpKind = Literal["match", "delete", "insert"]
OutputFormat = Literal["side-by-side", "unified", "html", "json"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Engine Defaults
# =============================================================================

# Section markers recognised by the original side-by-side viewer
DEFAULT_SECTION_HEADER_PATTERN = r"^(?:SECTION|Sub-Section)"

# Maximum number of (original, modified) line pairs the DP table may hold.
# 2000 x 2000 lines fits comfortably in memory for pure-Python integer rows.
DEFAULT_RESOURCE_LIMIT = 4_000_000

DEFAULT_PAIR_SUBSTITUTIONS = True
DEFAULT_KEEP_TRAILING_EMPTY = False
DEFAULT_UNTITLED_SECTION = "Untitled Section"
DEFAULT_SECTION_ID_PREFIX = "section"

ORIGINAL_SECTION_ID_PREFIX = "original-section"
MODIFIED_SECTION_ID_PREFIX = "modified-section"

# =============================================================================
# Presentation Defaults
# =============================================================================

DEFAULT_TITLE = "File Comparison"
DEFAULT_ORIGINAL_TITLE = "Original"
DEFAULT_MODIFIED_TITLE = "Modified"

DEFAULT_OUTPUT_FORMAT: OutputFormat = "side-by-side"
DEFAULT_COLOR_MODE: ColorMode = "auto"
DEFAULT_TERMINAL_WIDTH = 120
MIN_TERMINAL_WIDTH = 40

# Interactive hosts typically debounce keystrokes for a few hundred ms
DEFAULT_DEBOUNCE_SECONDS = 0.3

CONFIG_ENV_VAR = "SPLITDIFF_CONFIG"

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RESOURCE_LIMIT = 5
