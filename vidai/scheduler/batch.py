"""
Batch scheduler.

Submits every video ID exactly once, either in fixed-size concurrent batches
or strictly one at a time, and collects the outcomes into a BatchReport.
"""
import re
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

from ..core.config import SchedulerConfig
from ..core.types import BatchReport, ExecutionMode, ModeKind, Outcome, ProcessingOptions
from ..logging import get_logger
from ..progress.tracker import BatchProgressTracker

logger = get_logger("scheduler")

DEFAULT_CONCURRENCY = 2
LEADING_INTEGER = re.compile(r"\s*[+-]?\d+")


class Submitter(Protocol):
    """Anything that can submit one video."""

    def submit(self, video_id: str, options: ProcessingOptions) -> Dict[str, Any]:
        ...


def coerce_concurrency(value: Any, default: int = DEFAULT_CONCURRENCY) -> int:
    """
    Turn a user-supplied concurrency limit into a positive integer.

    Strings are read up to the first non-digit, so "3.5" and "3x" give 3.
    None, zero, negative and non-numeric values fall back to ``default``.
    """
    if isinstance(value, int):
        concurrency = value
    else:
        match = LEADING_INTEGER.match(str(value))
        if match is None:
            return default
        concurrency = int(match.group(0))
    return concurrency if concurrency >= 1 else default


def chunk_identifiers(identifiers: Sequence[str], size: int) -> List[List[str]]:
    """Split identifiers into contiguous batches of ``size``, keeping order."""
    return [list(identifiers[i:i + size]) for i in range(0, len(identifiers), size)]


class BatchScheduler:
    """
    Drives a submitter over a list of video IDs.

    Parallel mode:
    1. Split IDs into batches of ``concurrency``
    2. Submit every member of a batch concurrently
    3. Wait until the whole batch has settled
    4. Pause ``batch_delay`` seconds if more batches remain

    Sequential mode submits one ID at a time with ``item_delay`` seconds between
    items. In both modes a failed submission is recorded and the run goes on.
    """

    def __init__(
        self,
        submitter: Submitter,
        batch_delay: float = 2.0,
        item_delay: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize scheduler.

        Args:
            submitter: Object whose submit(video_id, options) starts processing
            batch_delay: Pause between parallel batches (seconds)
            item_delay: Pause between sequential items (seconds)
            sleep: Sleep function, replaceable in tests
        """
        self.submitter = submitter
        self.batch_delay = max(0.0, batch_delay)
        self.item_delay = max(0.0, item_delay)
        self.sleep = sleep

    @classmethod
    def from_config(cls, submitter: Submitter, config: SchedulerConfig) -> "BatchScheduler":
        return cls(submitter, batch_delay=config.batch_delay, item_delay=config.item_delay)

    def run(
        self,
        identifiers: Sequence[str],
        options: ProcessingOptions,
        mode: ExecutionMode,
        tracker: Optional[BatchProgressTracker] = None,
    ) -> BatchReport:
        """Run in the given execution mode."""
        if mode.kind == ModeKind.SEQUENTIAL:
            return self.run_sequential(identifiers, options, tracker=tracker)
        return self.run_parallel(identifiers, options, mode.concurrency, tracker=tracker)

    def run_parallel(
        self,
        identifiers: Sequence[str],
        options: ProcessingOptions,
        concurrency: Any = DEFAULT_CONCURRENCY,
        tracker: Optional[BatchProgressTracker] = None,
    ) -> BatchReport:
        """
        Submit videos in concurrent batches.

        Args:
            identifiers: Video public IDs, processed in input order by batch
            options: Options shared by every submission
            concurrency: Batch size; invalid values fall back to 2
            tracker: Optional progress tracker

        Returns:
            BatchReport with outcomes in settlement order
        """
        concurrency = coerce_concurrency(concurrency)
        total = len(identifiers)
        report = BatchReport(total=total)
        if not identifiers:
            logger.info("No videos to process")
            return report

        batches = chunk_identifiers(identifiers, concurrency)
        logger.info(f"Processing {total} videos with concurrency: {concurrency}")
        logger.info(f"Video IDs: {', '.join(identifiers)}")

        with ThreadPoolExecutor(max_workers=concurrency) as executor:
            for batch_index, batch in enumerate(batches):
                offset = batch_index * concurrency
                batch_number = batch_index + 1
                logger.info(
                    f"Processing batch {batch_number}/{len(batches)}: [{', '.join(batch)}]",
                    extra={"batch": batch_number},
                )
                if tracker:
                    tracker.start_batch(batch_number)

                futures = [
                    executor.submit(
                        self._submit_one,
                        video_id,
                        options,
                        f"[{offset + position + 1}/{total}]",
                        tracker,
                    )
                    for position, video_id in enumerate(batch)
                ]

                # Barrier: the next batch starts only after every member settled
                for future in as_completed(futures):
                    outcome = future.result()
                    report.record(outcome)
                    if tracker:
                        tracker.settle_item(outcome)

                if batch_number < len(batches):
                    logger.info(f"Waiting {self.batch_delay:g} seconds before next batch...")
                    self.sleep(self.batch_delay)

        self._log_totals(report)
        return report

    def run_sequential(
        self,
        identifiers: Sequence[str],
        options: ProcessingOptions,
        tracker: Optional[BatchProgressTracker] = None,
    ) -> BatchReport:
        """
        Submit videos one at a time in input order.

        Args:
            identifiers: Video public IDs
            options: Options shared by every submission
            tracker: Optional progress tracker

        Returns:
            BatchReport with outcomes in input order
        """
        total = len(identifiers)
        report = BatchReport(total=total)
        if not identifiers:
            logger.info("No videos to process")
            return report

        logger.info(f"Processing {total} videos sequentially")
        logger.info(f"Video IDs: {', '.join(identifiers)}")

        for index, video_id in enumerate(identifiers):
            outcome = self._submit_one(video_id, options, f"[{index + 1}/{total}]", tracker)
            report.record(outcome)
            if tracker:
                tracker.settle_item(outcome)

            if index < total - 1:
                logger.info(f"Waiting {self.item_delay:g} second(s) before next video...")
                self.sleep(self.item_delay)

        self._log_totals(report)
        return report

    def _submit_one(
        self,
        video_id: str,
        options: ProcessingOptions,
        label: str,
        tracker: Optional[BatchProgressTracker],
    ) -> Outcome:
        """Submit one video and convert any error into a failure outcome."""
        extra = {"video_id": video_id}
        logger.info(f"{label} Starting: {video_id}", extra=extra)
        if tracker:
            tracker.start_item(video_id)

        try:
            result = self.submitter.submit(video_id, options)
        except Exception as e:  # noqa: BLE001
            logger.error(f"{label} Failed: {video_id} - {e}", extra=extra)
            return Outcome.failure(video_id, str(e))

        logger.info(f"{label} Completed: {video_id}", extra=extra)
        return Outcome.success(video_id, result)

    def _log_totals(self, report: BatchReport):
        logger.info(
            f"Run finished: {report.success_count} submitted, "
            f"{report.failure_count} failed, {report.total} total"
        )
