"""
Progress tracking for batch submission runs.

Counts started and settled submissions across batches. Items start on worker
threads, so every update is taken under a lock.
"""
import math
import threading
from typing import Optional, Callable

from ..core.types import Outcome


class BatchProgressTracker:
    """
    Tracks progress of a scheduler run.

    Supports a callback for UI updates, invoked after every change.
    """

    def __init__(
        self,
        total: int,
        concurrency: int = 1,
        on_update: Optional[Callable[["BatchProgressTracker"], None]] = None,
    ):
        """
        Initialize progress tracker.

        Args:
            total: Number of identifiers in the run
            concurrency: Batch size (1 for sequential runs)
            on_update: Callback invoked on progress updates
        """
        self.total = total
        self.concurrency = max(1, concurrency)
        self.on_update = on_update

        self.current_batch: int = 0
        self.started: int = 0
        self.succeeded: int = 0
        self.failed: int = 0
        self.last_video_id: Optional[str] = None

        self._lock = threading.Lock()

    @property
    def total_batches(self) -> int:
        return math.ceil(self.total / self.concurrency) if self.total else 0

    @property
    def settled(self) -> int:
        return self.succeeded + self.failed

    def start_batch(self, batch_number: int):
        """Mark the start of batch ``batch_number`` (1-based)."""
        with self._lock:
            self.current_batch = batch_number
        self._notify()

    def start_item(self, video_id: str):
        """Record that a submission was dispatched."""
        with self._lock:
            self.started += 1
            self.last_video_id = video_id
        self._notify()

    def settle_item(self, outcome: Outcome):
        """Record a settled submission."""
        with self._lock:
            if outcome.succeeded:
                self.succeeded += 1
            else:
                self.failed += 1
            self.last_video_id = outcome.video_id
        self._notify()

    @property
    def progress(self) -> float:
        """Settled fraction (0.0 - 1.0)."""
        if self.total <= 0:
            return 0.0
        return min(1.0, self.settled / self.total)

    @property
    def percent(self) -> float:
        return self.progress * 100

    def _notify(self):
        if self.on_update:
            self.on_update(self)

    def get_status_text(self) -> str:
        """Get a human-readable status string."""
        if self.total == 0:
            return "Nothing to process"
        if self.started == 0:
            return "Initializing..."

        text = f"{self.settled}/{self.total} settled"
        if self.concurrency > 1 and self.current_batch:
            text = f"Batch {self.current_batch}/{self.total_batches}: {text}"
        if self.failed:
            text += f" ({self.failed} failed)"
        return text
