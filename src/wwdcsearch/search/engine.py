"""Search engine over an in-memory subtitle corpus."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable

from wwdcsearch.config import WWDCSearchSettings, get_logger
from wwdcsearch.exceptions import ValidationError
from wwdcsearch.models import Language, SearchResult, Video
from wwdcsearch.search.highlight import highlight_text
from wwdcsearch.search.scoring import CHINESE_MATCH_SCORE, calculate_relevance
from wwdcsearch.search.timecode import time_to_seconds

logger = get_logger(__name__)

# Score of the preview row emitted per video when browsing a year
BROWSE_SCORE = 1.0

CacheKey = tuple[str, str, int | None]


class SearchEngine:
    """Substring search over bilingual subtitles with a per-query cache.

    The corpus is held for the lifetime of the engine and never modified.
    Results for each ``(query, language, year)`` combination are cached
    until :meth:`clear_cache` is called; repeated identical searches return
    the very same tuple object.
    """

    def __init__(
        self,
        videos: Iterable[Video],
        settings: WWDCSearchSettings | None = None,
    ) -> None:
        """Initialize search engine.

        Args:
            videos: The corpus, in the order results should be scanned
            settings: Configuration settings
        """
        if settings is None:
            from wwdcsearch.config import get_settings

            settings = get_settings()

        self.settings = settings
        self._videos: tuple[Video, ...] = tuple(videos)
        self._cache: dict[CacheKey, tuple[SearchResult, ...]] = {}
        self._lock = threading.Lock()

        logger.debug(
            "Search engine initialized",
            videos=len(self._videos),
            subtitles=self.get_subtitle_count(),
        )

    @property
    def videos(self) -> tuple[Video, ...]:
        """The corpus the engine searches."""
        return self._videos

    @property
    def cache_size(self) -> int:
        """Number of cached query results."""
        return len(self._cache)

    def search(
        self,
        query: str | None = None,
        language: Language | str | None = None,
        year: int | None = None,
        limit: int | None = None,
    ) -> tuple[SearchResult, ...]:
        """Search subtitles for a query, or browse the videos of a year.

        With a non-empty query, every subtitle whose English and/or Chinese
        text contains the query (case-insensitively) is returned. With an
        empty query and a year, the first subtitle of each video from that
        year is returned as a preview. Results are ordered by video year and
        then by start time within the video.

        Args:
            query: Search text; trimmed and lower-cased before matching
            language: Which text field(s) to search (default from settings)
            year: Only consider videos from this year
            limit: Maximum number of results (default from settings)

        Returns:
            Ordered results, shared with the cache

        Raises:
            ValidationError: If ``language`` is not a known language mode
        """
        normalized = (query or "").strip().lower()
        if not normalized and year is None:
            return ()

        mode = self._resolve_language(language)
        if limit is None:
            limit = self.settings.search_default_limit

        key: CacheKey = (normalized, mode.value, year)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug(
                    "Search cache hit", query=normalized, language=mode.value, year=year
                )
                return cached

            start_time = time.perf_counter()
            matches = self._scan(normalized, mode, year)
            matches.sort(
                key=lambda result: (
                    result.video_year,
                    time_to_seconds(result.start_time),
                )
            )
            results = tuple(matches[: max(limit, 0)])
            self._cache[key] = results

        logger.debug(
            "Search completed",
            query=normalized,
            language=mode.value,
            year=year,
            matches=len(matches),
            returned=len(results),
            execution_time_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return results

    def _resolve_language(self, language: Language | str | None) -> Language:
        """Turn a language argument into a ``Language``, applying the default."""
        if language is None:
            return self.settings.search_default_language
        if isinstance(language, Language):
            return language
        try:
            return Language(str(language).strip().lower())
        except ValueError as e:
            raise ValidationError(
                message=f"Unknown language mode: {language!r}",
                hint="Use one of: " + ", ".join(lang.value for lang in Language),
                details={"language": language},
            ) from e

    def _scan(
        self, query: str, language: Language, year: int | None
    ) -> list[SearchResult]:
        """Collect unsorted results by scanning every subtitle."""
        results: list[SearchResult] = []

        for video in self._videos:
            if year is not None and video.year != year:
                continue

            if not query:
                # Year browse: one preview row per video
                if video.subtitles:
                    results.append(
                        SearchResult.from_match(video, video.subtitles[0], BROWSE_SCORE)
                    )
                continue

            for subtitle in video.subtitles:
                matched = False
                relevance_score = 0.0

                if language.matches_english:
                    text_lower = subtitle.text.lower()
                    if query in text_lower:
                        matched = True
                        relevance_score += calculate_relevance(text_lower, query)

                if language.matches_chinese and query in subtitle.text_cn.lower():
                    matched = True
                    relevance_score += CHINESE_MATCH_SCORE

                if matched:
                    results.append(
                        SearchResult.from_match(video, subtitle, relevance_score)
                    )

        return results

    def highlight_text(self, text: str | None, query: str | None) -> str | None:
        """Wrap occurrences of ``query`` in ``text`` with highlight markup."""
        return highlight_text(text, query, css_class=self.settings.highlight_class)

    def get_available_years(self) -> list[int]:
        """Distinct years present in the corpus, ascending."""
        return sorted({video.year for video in self._videos})

    def get_video_count(self) -> int:
        return len(self._videos)

    def get_subtitle_count(self) -> int:
        return sum(len(video.subtitles) for video in self._videos)

    def clear_cache(self) -> None:
        """Drop every cached search result."""
        with self._lock:
            self._cache.clear()
        logger.debug("Search cache cleared")
