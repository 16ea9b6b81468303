import io

from rich.console import Console

from vidai.core.types import BatchReport, Outcome
from vidai.progress import BatchProgressTracker, ProgressReporter, print_submission, print_summary


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


def test_tracker_status_text() -> None:
    tracker = BatchProgressTracker(total=5, concurrency=2)
    assert tracker.total_batches == 3
    assert tracker.get_status_text() == "Initializing..."

    tracker.start_batch(1)
    tracker.start_item("a")
    tracker.settle_item(Outcome.failure("a", "boom"))

    assert tracker.get_status_text() == "Batch 1/3: 1/5 settled (1 failed)"
    assert tracker.percent == 20.0


def test_tracker_notifies_on_every_update() -> None:
    seen = []
    tracker = BatchProgressTracker(total=1, on_update=lambda t: seen.append(t.settled))

    tracker.start_item("a")
    tracker.settle_item(Outcome.success("a"))

    assert seen == [0, 1]


def test_empty_tracker() -> None:
    tracker = BatchProgressTracker(total=0, concurrency=2)

    assert tracker.total_batches == 0
    assert tracker.progress == 0.0
    assert tracker.get_status_text() == "Nothing to process"


def test_reporter_follows_tracker() -> None:
    tracker = BatchProgressTracker(total=2, concurrency=2)

    with ProgressReporter(tracker, _console()) as reporter:
        tracker.start_item("a")
        tracker.settle_item(Outcome.success("a"))
        task = reporter.progress.tasks[0]
        assert task.completed == 1
        assert task.total == 2

    assert tracker.on_update is None


def test_summary_lists_every_outcome() -> None:
    report = BatchReport(total=3)
    report.record(Outcome.success("a"))
    report.record(Outcome.failure("bad1", "Resource not found"))
    report.record(Outcome.success("folder/[b]"))
    console = _console()

    print_summary(report, console, elapsed=75)

    output = console.file.getvalue()
    assert "BATCH PROCESSING SUMMARY" in output
    assert "Total videos" in output
    assert "   - a" in output
    assert "   - folder/[b]" in output
    assert "   - bad1: Resource not found" in output
    assert "1m 15s" in output


def test_submission_summary_lists_expected_files() -> None:
    console = _console()
    result = {"public_id": "clip", "resource_type": "video", "duration": 12.5,
              "info": {"auto_transcription": {}}}

    print_submission("clip", result, ["es"], console, notification_url="https://example.com/hook")

    output = console.file.getvalue()
    assert "clip-chapters.vtt" in output
    assert "clip.es.transcript" in output
    assert "Transcription" in output
    assert "initiated" in output
    assert "https://example.com/hook" in output
