"""
Progress reporting using Rich library.

Provides a progress bar for batch runs and the final summaries.
"""
import time
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
)
from rich.table import Table

from ..core.types import BatchReport
from ..submission import expected_outputs, processing_status
from .tracker import BatchProgressTracker


class ProgressReporter:
    """
    Reports batch progress to the console using Rich.

    Shows settled/total submissions, the current status text and elapsed time.
    """

    def __init__(self, tracker: BatchProgressTracker, console: Optional[Console] = None):
        """
        Initialize progress reporter.

        Args:
            tracker: BatchProgressTracker to report on
            console: Console to draw on (a new stderr console if None)
        """
        self.tracker = tracker
        self.console = console or Console(stderr=True)
        self.progress: Optional[Progress] = None
        self.task_id = None
        self.start_time = time.time()

    def __enter__(self) -> "ProgressReporter":
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        )
        self.progress.start()
        self.task_id = self.progress.add_task(
            self.tracker.get_status_text(),
            total=max(self.tracker.total, 1),
        )
        self.tracker.on_update = self._on_progress_update
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracker.on_update = None
        if self.progress:
            self.progress.stop()

    def _on_progress_update(self, tracker: BatchProgressTracker):
        """Handle progress updates from tracker."""
        if not self.progress or self.task_id is None:
            return
        self.progress.update(
            self.task_id,
            completed=tracker.settled,
            description=tracker.get_status_text(),
        )

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time


def print_summary(report: BatchReport, console: Console, elapsed: Optional[float] = None):
    """
    Print the final batch summary.

    Args:
        report: Completed batch report
        console: Console to print on
        elapsed: Run time in seconds, shown when given
    """
    console.print()
    console.rule("[bold]BATCH PROCESSING SUMMARY")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("Total videos", str(report.total))
    table.add_row("[green]Successful", str(report.success_count))
    table.add_row("[red]Failed", str(report.failure_count))
    if elapsed is not None:
        minutes = int(elapsed // 60)
        seconds = int(elapsed % 60)
        table.add_row("Elapsed", f"{minutes}m {seconds}s")
    console.print(table)

    if report.successes:
        console.print("\n[green]Successfully submitted:")
        for outcome in report.successes:
            console.print(f"   - {outcome.video_id}", markup=False)

    if report.failures:
        console.print("\n[red]Failed to submit:")
        for outcome in report.failures:
            console.print(f"   - {outcome.video_id}: {outcome.error}", markup=False)

    if report.successes:
        console.print("\nNote: successful videos are being processed asynchronously by Cloudinary.")
        console.print("Transcript and chapter files will be generated when processing completes.")


def print_submission(
    video_id: str,
    result: Dict[str, Any],
    languages: List[str],
    console: Console,
    notification_url: Optional[str] = None,
):
    """
    Print the response summary of a single submission.

    Args:
        video_id: Submitted public ID
        result: explicit method response
        languages: Requested translation languages
        console: Console to print on
        notification_url: Webhook that will receive the completion notice
    """
    table = Table(title="Response Summary", show_header=False, title_justify="left")
    for label, key in (
        ("Public ID", "public_id"),
        ("Resource Type", "resource_type"),
        ("Type", "type"),
        ("Version", "version"),
        ("Format", "format"),
    ):
        table.add_row(label, str(result.get(key)))
    table.add_row("Duration", f"{result.get('duration')}s")
    for feature, status in processing_status(result).items():
        table.add_row(feature, status)
    console.print(table)

    console.print("\nExpected generated files:")
    for name in expected_outputs(video_id, languages):
        console.print(f"  - {name}", markup=False)

    console.print("\nNote: processing happens asynchronously. Files will be created when processing completes.")
    if notification_url:
        console.print(f"Completion notifications will be sent to: {notification_url}", markup=False)
