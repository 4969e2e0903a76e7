"""wwdcsearch: search bilingual WWDC session subtitles.

An in-memory engine that finds subtitle segments containing a query in
English and/or Chinese, browses the videos of a given year, and returns
results in chronological order with a relevance score and highlight markup.
"""

from .config import WWDCSearchSettings, get_logger, get_settings
from .exceptions import (
    ConfigurationError,
    CorpusError,
    InvalidTimestampError,
    ValidationError,
    WWDCSearchError,
)
from .loader import load_corpus, parse_corpus
from .models import Language, SearchResult, Subtitle, Video
from .search.engine import SearchEngine

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CorpusError",
    "InvalidTimestampError",
    "Language",
    "SearchEngine",
    "SearchResult",
    "Subtitle",
    "ValidationError",
    "Video",
    "WWDCSearchError",
    "WWDCSearchSettings",
    "__version__",
    "get_logger",
    "get_settings",
    "load_corpus",
    "parse_corpus",
]
