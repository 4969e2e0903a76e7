"""Result formatter for search functionality."""

import json
from collections.abc import Sequence

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wwdcsearch.models import SearchResult

MATCH_STYLE = "bold black on yellow"


class ResultFormatter:
    """Format search results for display."""

    def __init__(self, console: Console | None = None):
        """Initialize formatter.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()

    def format_results(
        self,
        results: Sequence[SearchResult],
        query: str | None = None,
        verbose: bool = False,
    ) -> None:
        """Format and display search results.

        Args:
            results: Ordered search results
            query: Query to highlight in subtitle text
            verbose: Show video links and relevance scores
        """
        if not results:
            self.console.print(
                "[yellow]No results found for your search.[/yellow]",
                style="bold",
            )
            return

        videos = len({result.video_id for result in results})
        self.console.print(
            f"[dim]Found {len(results)} results in {videos} videos[/dim]\n"
        )

        for i, result in enumerate(results, 1):
            self._display_result(result, i, query, verbose)

    def _display_result(
        self, result: SearchResult, index: int, query: str | None, verbose: bool
    ) -> None:
        """Display a single search result as a panel."""
        title_parts = [
            f"[bold]{index}.[/bold]",
            f"[cyan]{escape(result.video_title)}[/cyan]",
            f"[magenta]WWDC{result.video_year}[/magenta]",
        ]
        if result.video_session:
            title_parts.append(f"[dim]{escape(result.video_session)}[/dim]")
        title = " - ".join(title_parts)

        body: list[Text] = [
            Text(f"{result.start_time} → {result.end_time}", style="yellow"),
            self._highlighted(result.text, query),
        ]
        if result.text_cn:
            body.append(self._highlighted(result.text_cn, query))

        if verbose:
            body.append(Text(f"Relevance: {result.relevance_score:.1f}", style="dim"))
            if result.video_url:
                body.append(Text(result.video_url, style="dim"))

        self.console.print(
            Panel(
                Group(*body),
                title=title,
                title_align="left",
                border_style="blue" if index == 1 else "dim",
                padding=(0, 1),
            )
        )

    @staticmethod
    def _highlighted(content: str, query: str | None) -> Text:
        text = Text(content)
        if query and query.strip():
            text.highlight_words([query.strip()], MATCH_STYLE, case_sensitive=False)
        return text

    def format_brief(self, results: Sequence[SearchResult]) -> str:
        """Format results as one line each.

        Args:
            results: Ordered search results

        Returns:
            Brief text summary
        """
        if not results:
            return "No results found."

        return "\n".join(
            f"{i}. [{result.video_year}] {result.video_title} "
            f"@{result.start_time}: {result.text}"
            for i, result in enumerate(results, 1)
        )

    def format_years(self, years: Sequence[int]) -> None:
        """Display the years available in the corpus."""
        if not years:
            self.console.print("[yellow]The corpus contains no videos.[/yellow]")
            return
        self.console.print(", ".join(str(year) for year in years))

    def format_stats(self, stats: dict[str, int]) -> None:
        """Display corpus statistics as a table."""
        table = Table(title="Corpus Statistics", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        for key, value in stats.items():
            table.add_row(key.replace("_", " ").title(), str(value))
        self.console.print(table)


def results_to_json(results: Sequence[SearchResult]) -> str:
    """Serialize results with the camelCase keys of the corpus format."""
    return json.dumps(
        [result.model_dump(mode="json", by_alias=True) for result in results],
        ensure_ascii=False,
        indent=2,
    )
