"""Remote video AI submission."""
from .submitter import VideoSubmitter, build_explicit_params, expected_outputs, processing_status

__all__ = ["VideoSubmitter", "build_explicit_params", "expected_outputs", "processing_status"]
