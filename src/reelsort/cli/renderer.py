"""Renderer for CLI output.

Prints pipeline results as a Rich table followed by a one-line summary.
Status colours follow the same conventions as the rest of the CLI: green for
applied, cyan for skipped, red for failed.
"""

from rich.console import Console
from rich.table import Table

from reelsort.core.pipeline import PipelineSummary
from reelsort.models.core import FileStatus

STATUS_STYLES = {
    FileStatus.APPLIED: "green bold",
    FileStatus.SKIPPED: "cyan",
    FileStatus.FAILED: "red",
}


def render_results(summary: PipelineSummary, console: Console | None = None) -> None:
    """Render per-file results and totals.

    Args:
        summary: The pipeline summary to render.
        console: Optional Console instance to use for rendering.
    """
    console = console or Console()

    if summary.results:
        table = Table(title="Results")
        table.add_column("Status", style="bold")
        table.add_column("Source", style="cyan")
        table.add_column("Target", style="green")
        table.add_column("Reason", style="yellow")
        for result in summary.results:
            status = result.status.value
            if result.dry_run and result.status == FileStatus.APPLIED:
                status = "dry run"
            table.add_row(
                status,
                str(result.source),
                str(result.target) if result.target else "",
                result.reason or "",
                style=STATUS_STYLES.get(result.status, "white"),
            )
        console.print(table)
    else:
        console.print("[yellow]No video files found.[/yellow]")

    console.print(
        f"Total: {len(summary.results)} | Applied: {summary.applied} | "
        f"Skipped: {summary.skipped} | Failed: {summary.failed}"
    )
