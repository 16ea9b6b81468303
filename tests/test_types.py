import dataclasses

import pytest

from vidai.core.types import (
    AssetType,
    BatchReport,
    ExecutionMode,
    ModeKind,
    Outcome,
    OutcomeStatus,
    ProcessingOptions,
)


def test_processing_options_defaults_and_immutability() -> None:
    options = ProcessingOptions()

    assert options.asset_type == AssetType.UPLOAD
    assert options.notification_url is None
    assert options.invalidate is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.invalidate = True


def test_execution_modes() -> None:
    assert ExecutionMode.parallel(3) == ExecutionMode(kind=ModeKind.PARALLEL, concurrency=3)
    assert ExecutionMode.sequential().kind == ModeKind.SEQUENTIAL
    assert ExecutionMode().concurrency == 2


def test_report_partitions_in_record_order() -> None:
    report = BatchReport(total=3)
    report.record(Outcome.failure("b", "boom"))
    report.record(Outcome.success("a", {"public_id": "a"}))
    report.record(Outcome.success("c"))

    assert [o.video_id for o in report.successes] == ["a", "c"]
    assert report.failures == [Outcome("b", OutcomeStatus.FAILURE, error="boom")]
    assert report.settled == 3
    assert not report.all_succeeded
    assert report.exit_code == 1


def test_empty_report_is_a_success() -> None:
    report = BatchReport()

    assert report.total == 0
    assert report.all_succeeded
    assert report.exit_code == 0
