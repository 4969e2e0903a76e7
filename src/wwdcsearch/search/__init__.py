"""Search functionality for wwdcsearch.

Substring matching over bilingual subtitles with relevance scoring,
chronological ordering and highlight markup. The engine itself lives in
``wwdcsearch.search.engine``.
"""

from .highlight import highlight_text
from .scoring import calculate_relevance
from .timecode import time_to_seconds

__all__ = [
    "calculate_relevance",
    "highlight_text",
    "time_to_seconds",
]
