#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the textcompare library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Script Detection - Code-point ranges and sentence terminators
3. Engine Defaults - Resource bounds and streaming settings
4. Reporting - Export defaults shared by renderers and the CLI
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ExportFormatType = Literal["html", "json", "markdown", "text"]
ColorMode = Literal["auto", "always", "never"]

# =============================================================================
# Script Detection
# =============================================================================

# Inclusive (low, high) code-point ranges treated as CJK ideographs:
# CJK Unified Ideographs, Extension A and Extension B.
CJK_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
)

# Full-width terminators; they stay attached to the segment they close
CJK_SENTENCE_TERMINATORS = "。！？；"

# ASCII delimiters; they are discarded when splitting
LATIN_SENTENCE_DELIMITERS = ".!?;"

# =============================================================================
# Engine Defaults
# =============================================================================

# Upper bound on (m+1)*(n+1) for the in-memory LCS table. Larger inputs
# use the linear-space alignment instead.
DEFAULT_MAX_CHAR_DIFF_CELLS = 4_000_000

# Lines per window for streaming comparisons
DEFAULT_CHUNK_SIZE = 100

DIFF_ID_PREFIX = "diff-"

# =============================================================================
# Reporting
# =============================================================================

DEFAULT_EXPORT_FORMAT: ExportFormatType = "text"
DEFAULT_REPORT_TITLE = "Text Comparison Report"
DEFAULT_ADD_COLOR = "#22c55e"
DEFAULT_REMOVE_COLOR = "#ef4444"
DEFAULT_MODIFY_COLOR = "#3b82f6"

NAVIGATION_PREVIEW_LENGTH = 50

REPORT_VERSION = "1.0.0"
REPORT_GENERATOR = "textcompare"

CONFIG_FILENAMES = [".textcompare.toml", ".textcompare.yaml", ".textcompare.yml", ".textcompare.json"]
