r"""
\file __init__.py
\brief Package metadata and public API for farsifake.

Exposes the generator, the dictionary source helpers, the error types and
the version used by the CLI banner.
"""

from ._errors import (
    CloseFailed,
    FarsiFakeError,
    GenerationFailed,
    InvalidCount,
    InvalidRange,
    SourceUnavailable,
)
from ._generator import FarsiFake
from ._source import BUNDLED_LINE_COUNT, DictionarySource, count_lines, detect_encoding

__all__ = [
    "__version__",
    "BUNDLED_LINE_COUNT",
    "CloseFailed",
    "DictionarySource",
    "FarsiFake",
    "FarsiFakeError",
    "GenerationFailed",
    "InvalidCount",
    "InvalidRange",
    "SourceUnavailable",
    "count_lines",
    "detect_encoding",
]
__version__ = "0.1.0"
