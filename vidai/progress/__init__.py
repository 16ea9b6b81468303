"""Progress tracking and reporting."""
from .tracker import BatchProgressTracker
from .reporter import ProgressReporter, print_summary, print_submission

__all__ = ["BatchProgressTracker", "ProgressReporter", "print_summary", "print_submission"]
