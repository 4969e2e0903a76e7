"""wwdcsearch data models.

Videos and their subtitle segments are supplied by the caller and never
modified by the engine, so every model here is frozen. Attribute names are
snake_case; the camelCase names used by the corpus JSON (``startTime``,
``textCn``, ``videoUrl``, ...) are accepted as aliases and produced by
``model_dump(by_alias=True)``.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from wwdcsearch.exceptions import InvalidTimestampError
from wwdcsearch.search.timecode import time_to_seconds


class Language(str, Enum):
    """Which subtitle field(s) take part in substring matching."""

    EN = "en"
    CN = "cn"
    BOTH = "both"

    @property
    def matches_english(self) -> bool:
        """Whether the English text is searched."""
        return self in (Language.EN, Language.BOTH)

    @property
    def matches_chinese(self) -> bool:
        """Whether the Chinese text is searched."""
        return self in (Language.CN, Language.BOTH)


class CorpusModel(BaseModel):
    """Base for immutable corpus and result records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Subtitle(CorpusModel):
    """One timestamped caption segment of a video."""

    start_time: str
    end_time: str
    text: str
    text_cn: str = ""

    @field_validator("start_time", "end_time")
    @classmethod
    def check_timestamp(cls, v: str) -> str:
        """Reject timestamps that cannot be ordered."""
        try:
            time_to_seconds(v)
        except InvalidTimestampError as e:
            raise ValueError(e.message) from e
        return v


class Video(CorpusModel):
    """A session video with its subtitles in chronological order."""

    id: str | int
    title: str
    year: int
    session: str = ""
    thumbnail: str = ""
    video_url: str = ""
    subtitles: tuple[Subtitle, ...] = Field(default_factory=tuple)


class SearchResult(CorpusModel):
    """A matching subtitle together with the video it belongs to."""

    video_id: str | int
    video_title: str
    video_year: int
    video_session: str
    video_thumbnail: str
    video_url: str
    start_time: str
    end_time: str
    text: str
    text_cn: str
    relevance_score: float

    @classmethod
    def from_match(
        cls, video: Video, subtitle: Subtitle, relevance_score: float
    ) -> "SearchResult":
        """Build a result from a video and one of its subtitles."""
        return cls(
            video_id=video.id,
            video_title=video.title,
            video_year=video.year,
            video_session=video.session,
            video_thumbnail=video.thumbnail,
            video_url=video.video_url,
            start_time=subtitle.start_time,
            end_time=subtitle.end_time,
            text=subtitle.text,
            text_cn=subtitle.text_cn,
            relevance_score=relevance_score,
        )
