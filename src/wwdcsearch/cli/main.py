"""Main CLI entry point for wwdcsearch."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from wwdcsearch.cli.utils.error_handler import handle_cli_error
from wwdcsearch.config import get_logger, get_settings_for_cli
from wwdcsearch.exceptions import ConfigurationError
from wwdcsearch.loader import load_corpus
from wwdcsearch.models import Language
from wwdcsearch.search.engine import SearchEngine
from wwdcsearch.search.formatter import ResultFormatter, results_to_json

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="wwdcsearch",
    help="Search bilingual WWDC session subtitles",
    pretty_exceptions_enable=False,
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

CorpusOption = Annotated[
    Path | None,
    typer.Option(
        "--corpus",
        "-c",
        help="Path to the corpus JSON file (defaults to WWDCSEARCH_CORPUS_PATH)",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to configuration file (YAML, TOML, or JSON)",
    ),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


def _build_engine(corpus: Path | None, config: Path | None) -> SearchEngine:
    """Load settings and corpus and construct the engine."""
    settings = get_settings_for_cli(
        config_file=config,
        cli_overrides={"corpus_path": corpus},
    )
    if settings.corpus_path is None:
        raise ConfigurationError(
            message="No corpus file configured",
            hint="Pass --corpus PATH or set WWDCSEARCH_CORPUS_PATH",
        )
    logger.debug("Loading corpus for CLI", corpus=str(settings.corpus_path))
    videos = load_corpus(settings.corpus_path)
    return SearchEngine(videos, settings=settings)


@app.command(name="search")
def search_command(
    query: Annotated[
        str,
        typer.Argument(help="Text to look for; may be empty when --year is given"),
    ] = "",
    corpus: CorpusOption = None,
    language: Annotated[
        Language | None,
        typer.Option(
            "--language",
            "-L",
            case_sensitive=False,
            help="Subtitle language(s) to search",
        ),
    ] = None,
    year: Annotated[
        int | None,
        typer.Option("--year", "-y", help="Only search videos from this year"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", help="Maximum number of results to return"),
    ] = None,
    brief: Annotated[
        bool,
        typer.Option("--brief", "-b", help="Show brief one-line results"),
    ] = False,
    json_output: JsonOption = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show links and relevance scores"),
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Search subtitles, or browse a year's videos with an empty query.

    Examples:
        # English and Chinese subtitles
        wwdcsearch search swiftui --corpus wwdc.json

        # Chinese subtitles from 2021 only
        wwdcsearch search 并发 --language cn --year 2021

        # One preview line per 2019 video
        wwdcsearch search --year 2019
    """
    try:
        engine = _build_engine(corpus, config)
        results = engine.search(query, language=language, year=year, limit=limit)

        if json_output:
            print(results_to_json(results))
            return

        formatter = ResultFormatter(console)
        if brief:
            console.print(formatter.format_brief(results), markup=False)
        else:
            formatter.format_results(results, query=query, verbose=verbose)

    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e, verbose=verbose)


@app.command(name="years")
def years_command(
    corpus: CorpusOption = None,
    json_output: JsonOption = False,
    config: ConfigOption = None,
) -> None:
    """List the years covered by the corpus."""
    try:
        engine = _build_engine(corpus, config)
        years = engine.get_available_years()
        if json_output:
            print(json.dumps(years))
        else:
            ResultFormatter(console).format_years(years)
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e)


@app.command(name="stats")
def stats_command(
    corpus: CorpusOption = None,
    json_output: JsonOption = False,
    config: ConfigOption = None,
) -> None:
    """Show video and subtitle counts of the corpus."""
    try:
        engine = _build_engine(corpus, config)
        stats = {
            "videos": engine.get_video_count(),
            "subtitles": engine.get_subtitle_count(),
            "years": len(engine.get_available_years()),
        }
        if json_output:
            print(json.dumps(stats, indent=2))
        else:
            ResultFormatter(console).format_stats(stats)
    except typer.Exit:
        raise
    except Exception as e:
        handle_cli_error(e)


def main() -> None:
    """Main entry point for the CLI."""
    app()
