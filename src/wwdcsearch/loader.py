"""Load a subtitle corpus from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from wwdcsearch.config import get_logger
from wwdcsearch.exceptions import CorpusError
from wwdcsearch.models import Video

logger = get_logger(__name__)

_videos_adapter = TypeAdapter(list[Video])


def parse_corpus(data: Any) -> list[Video]:
    """Validate decoded JSON into videos.

    Accepts either a list of video objects or a mapping with a ``videos``
    list.

    Args:
        data: Decoded JSON document

    Returns:
        Videos in document order

    Raises:
        CorpusError: If the document does not describe a list of videos
    """
    if isinstance(data, dict):
        if "videos" not in data:
            raise CorpusError(
                message="Corpus object has no 'videos' list",
                hint="Provide a JSON array of videos or an object with a "
                "'videos' array",
                details={"keys": sorted(data)},
            )
        data = data["videos"]

    try:
        return _videos_adapter.validate_python(data)
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        raise CorpusError(
            message="Corpus contains invalid video records",
            hint="Each video needs id, title, year and a list of subtitles "
            "with startTime, endTime and text",
            details={
                "error_count": len(errors),
                "location": ".".join(str(part) for part in first.get("loc", ())),
                "reason": first.get("msg"),
            },
        ) from e


def load_corpus(path: Path | str) -> list[Video]:
    """Read and validate a corpus JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Videos in file order

    Raises:
        CorpusError: If the file is missing, unreadable, not JSON or invalid
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CorpusError(
            message=f"Corpus file not found: {path}",
            hint="Pass --corpus or set WWDCSEARCH_CORPUS_PATH",
            details={"path": str(path)},
        ) from e
    except json.JSONDecodeError as e:
        raise CorpusError(
            message=f"Corpus file is not valid JSON: {path}",
            details={"path": str(path), "line": e.lineno, "column": e.colno},
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(
            message=f"Could not read corpus file: {path}",
            details={"path": str(path), "error": str(e)},
        ) from e

    videos = parse_corpus(data)
    logger.info("Corpus loaded", path=str(path), videos=len(videos))
    return videos
