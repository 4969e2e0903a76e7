"""Pytest configuration and fixtures."""

import json
import os

import pytest

from wwdcsearch.config import WWDCSearchSettings, reset_settings, set_settings
from wwdcsearch.models import Subtitle, Video
from wwdcsearch.search.engine import SearchEngine


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Run every test with default settings, free of the caller's environment.

    Drops WWDCSEARCH_* variables, moves into an empty directory so no .env or
    project config file is picked up, and installs fresh global settings.
    """
    for var in [k for k in os.environ if k.startswith("WWDCSEARCH_")]:
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)

    set_settings(WWDCSearchSettings())

    yield

    reset_settings()


@pytest.fixture
def welcome_video():
    """A single 2021 video with two subtitles."""
    return Video(
        id="wwdc2021-10132",
        title="Meet async/await in Swift",
        year=2021,
        session="10132",
        thumbnail="thumbs/10132.jpg",
        video_url="https://example.com/videos/10132.mp4",
        subtitles=(
            Subtitle(
                start_time="00:00:05",
                end_time="00:00:09",
                text="Welcome to WWDC",
                text_cn="欢迎",
            ),
            Subtitle(
                start_time="00:10:00",
                end_time="00:10:04",
                text="Thanks everyone",
                text_cn="谢谢",
            ),
        ),
    )


@pytest.fixture
def sample_videos(welcome_video):
    """A small corpus spanning three years, deliberately not in year order."""
    return [
        welcome_video,
        Video(
            id="wwdc2019-204",
            title="Introducing SwiftUI",
            year=2019,
            session="204",
            thumbnail="thumbs/204.jpg",
            video_url="https://example.com/videos/204.mp4",
            subtitles=(
                Subtitle(
                    start_time="00:05",
                    end_time="00:09",
                    text="Welcome to SwiftUI",
                    text_cn="欢迎来到 SwiftUI",
                ),
                Subtitle(
                    start_time="01:30",
                    end_time="01:35",
                    text="SwiftUI is declarative",
                    text_cn="SwiftUI 是声明式的",
                ),
            ),
        ),
        Video(
            id="wwdc2021-10254",
            title="Swift concurrency: Behind the scenes",
            year=2021,
            session="10254",
            subtitles=(
                Subtitle(
                    start_time="00:02",
                    end_time="00:06",
                    text="Hi, I'm Varun",
                    text_cn="大家好",
                ),
                Subtitle(
                    start_time="00:45",
                    end_time="00:50",
                    text="Swift concurrency uses threads",
                    text_cn="Swift 并发使用线程",
                ),
            ),
        ),
        Video(
            id="wwdc2020-10041",
            title="What's new in SwiftUI",
            year=2020,
            session="10041",
            subtitles=(
                Subtitle(
                    start_time="1:02:03",
                    end_time="1:02:07",
                    text="Thanks for watching SwiftUI",
                    text_cn="感谢观看",
                ),
            ),
        ),
        Video(id="wwdc2020-empty", title="Placeholder", year=2020),
    ]


@pytest.fixture
def engine(sample_videos):
    """Search engine over the sample corpus."""
    return SearchEngine(sample_videos)


@pytest.fixture
def corpus_file(tmp_path, sample_videos):
    """The sample corpus written as camelCase JSON."""
    path = tmp_path / "corpus.json"
    path.write_text(
        json.dumps(
            [video.model_dump(mode="json", by_alias=True) for video in sample_videos],
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path
