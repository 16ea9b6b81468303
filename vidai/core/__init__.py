"""Core configuration and types."""
from .config import Config, get_config
from .types import AssetType, ProcessingOptions, ExecutionMode, ModeKind, Outcome, OutcomeStatus, BatchReport

__all__ = [
    "Config", "get_config",
    "AssetType", "ProcessingOptions", "ExecutionMode", "ModeKind",
    "Outcome", "OutcomeStatus", "BatchReport",
]
