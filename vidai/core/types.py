"""
Type definitions for VIDAI.

Dataclasses for processing options, execution modes and batch outcomes.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class AssetType(str, Enum):
    """Cloudinary delivery types accepted by the explicit method."""
    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"


class ModeKind(str, Enum):
    """How the scheduler dispatches submissions."""
    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"


class OutcomeStatus(str, Enum):
    """Settled submission states."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class ProcessingOptions:
    """Options shared by every submission in a run."""
    asset_type: AssetType = AssetType.UPLOAD
    notification_url: Optional[str] = None   # Webhook called when processing completes
    invalidate: bool = False                 # Invalidate CDN-cached versions


@dataclass(frozen=True)
class ExecutionMode:
    """Parallel batches of ``concurrency`` videos, or one video at a time."""
    kind: ModeKind = ModeKind.PARALLEL
    concurrency: int = 2

    @classmethod
    def parallel(cls, concurrency: int = 2) -> "ExecutionMode":
        return cls(kind=ModeKind.PARALLEL, concurrency=concurrency)

    @classmethod
    def sequential(cls) -> "ExecutionMode":
        return cls(kind=ModeKind.SEQUENTIAL, concurrency=1)


@dataclass(frozen=True)
class Outcome:
    """Result of one settled submission."""
    video_id: str
    status: OutcomeStatus
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, video_id: str, result: Optional[Dict[str, Any]] = None) -> "Outcome":
        return cls(video_id=video_id, status=OutcomeStatus.SUCCESS, result=result)

    @classmethod
    def failure(cls, video_id: str, error: str) -> "Outcome":
        return cls(video_id=video_id, status=OutcomeStatus.FAILURE, error=error)

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS


@dataclass
class BatchReport:
    """Successes and failures of a run, in settlement order."""
    total: int = 0
    successes: List[Outcome] = field(default_factory=list)
    failures: List[Outcome] = field(default_factory=list)

    def record(self, outcome: Outcome):
        """Append a settled outcome to its partition."""
        if outcome.succeeded:
            self.successes.append(outcome)
        else:
            self.failures.append(outcome)

    @property
    def success_count(self) -> int:
        return len(self.successes)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def settled(self) -> int:
        """Number of outcomes recorded so far."""
        return self.success_count + self.failure_count

    @property
    def all_succeeded(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        """Process exit code for this report: 0 on full success, 1 otherwise."""
        return 0 if self.all_succeeded else 1
