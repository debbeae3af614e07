"""textcompare - A text comparison engine with typed differences and statistics.

textcompare turns two texts into an ordered sequence of typed difference
records (added, removed, modified, unchanged) plus aggregate statistics,
under case, whitespace and punctuation normalization options. Large inputs
can be compared incrementally, one window of lines at a time.

Key Features
------------
- Character-level diff based on the longest common subsequence
- Sentence-level diff with CJK-aware segmentation
- Streaming comparison of line windows for large inputs
- JSON round-trip of every result type
- HTML, JSON, Markdown and plain-text reports
- Command-line interface with config file discovery

Requirements
------------
- Python 3.10+

Examples
--------
Compare two strings:

    >>> from textcompare import compute_diff
    >>> result = compute_diff("hello world", "hello rust")
    >>> result.stats.similarity < 100.0
    True

Compare sentences of Chinese text:

    >>> from textcompare import DiffEngine, DiffOptions
    >>> engine = DiffEngine(DiffOptions(split_by_sentence=True))
    >>> result = engine.compute_diff("这是第一段。这是第二段。", "这是第一段。这是修改后的第二段。")
    >>> [item.kind.value for item in result.items]
    ['equal', 'modify']

"""

from textcompare.diff.engine import DiffEngine, build_navigation, compute_diff, compute_diff_stream
from textcompare.exceptions import (
    ConfigurationError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    OutputWriteError,
    RenderingError,
    TextCompareError,
    ValidationError,
)
from textcompare.models import (
    DiffChunk,
    DiffItem,
    DiffKind,
    DiffResult,
    DiffStats,
    NavigationItem,
    Position,
    TextChunk,
)
from textcompare.options import DiffOptions, ExportOptions

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DiffChunk",
    "DiffEngine",
    "DiffItem",
    "DiffKind",
    "DiffOptions",
    "DiffResult",
    "DiffStats",
    "ExportOptions",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "NavigationItem",
    "OutputWriteError",
    "Position",
    "RenderingError",
    "TextChunk",
    "TextCompareError",
    "ValidationError",
    "__version__",
    "build_navigation",
    "compute_diff",
    "compute_diff_stream",
]
