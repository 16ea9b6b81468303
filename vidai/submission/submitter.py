"""
Cloudinary video AI submission.

Calls the Upload API explicit method on an existing video to start:
- Auto-chaptering (AI-generated chapters)
- Auto-transcription (speech-to-text)
- Translation of the transcript into several languages

Processing happens asynchronously on Cloudinary's side; a successful call only
means the request was accepted.
"""
from typing import Any, Dict, List, Optional

import cloudinary.uploader
from cloudinary.exceptions import (
    Error as CloudinaryError,
    BadRequest,
    AuthorizationRequired,
    NotAllowed,
    NotFound,
    AlreadyExists,
    RateLimited,
    GeneralError,
)

from ..core.config import CloudinaryConfig, TRANSLATION_LANGUAGES
from ..core.exceptions import SubmissionError
from ..core.types import ProcessingOptions
from ..logging import get_logger

logger = get_logger("submission")


# HTTP status behind each SDK exception class
HTTP_CODES = {
    BadRequest: 400,
    AuthorizationRequired: 401,
    NotAllowed: 403,
    NotFound: 404,
    AlreadyExists: 409,
    RateLimited: 420,
    GeneralError: 500,
}


def build_explicit_params(options: ProcessingOptions, languages: List[str]) -> Dict[str, Any]:
    """
    Build explicit method parameters for the AI features.

    Args:
        options: Run-wide processing options
        languages: Translation target languages

    Returns:
        Keyword arguments for cloudinary.uploader.explicit
    """
    params = {
        "resource_type": "video",
        "type": options.asset_type.value,
        "auto_chaptering": True,
        "auto_transcription": {"translate": list(languages)},
        "invalidate": options.invalidate,
    }
    if options.notification_url:
        params["notification_url"] = options.notification_url
    return params


def expected_outputs(video_id: str, languages: List[str]) -> List[str]:
    """Files Cloudinary generates once processing completes."""
    outputs = [f"{video_id}-chapters.vtt", f"{video_id}.transcript"]
    outputs.extend(f"{video_id}.{lang}.transcript" for lang in languages)
    return outputs


def http_code_for(error: Exception) -> Optional[int]:
    """HTTP status for a Cloudinary SDK error, if known."""
    for error_class, code in HTTP_CODES.items():
        if isinstance(error, error_class):
            return code
    return None


class VideoSubmitter:
    """
    Submits videos to Cloudinary for AI processing.

    Credentials are passed on every call rather than through the SDK's
    global configuration.
    """

    def __init__(self, credentials: CloudinaryConfig, languages: Optional[List[str]] = None):
        """
        Initialize submitter.

        Args:
            credentials: Cloudinary account credentials
            languages: Translation languages (defaults to TRANSLATION_LANGUAGES)
        """
        self.credentials = credentials
        self.languages = list(languages) if languages is not None else list(TRANSLATION_LANGUAGES)

    def submit(self, video_id: str, options: ProcessingOptions) -> Dict[str, Any]:
        """
        Start AI processing for one video.

        Args:
            video_id: Cloudinary public ID (may include folders)
            options: Run-wide processing options

        Returns:
            The explicit method response

        Raises:
            SubmissionError: If Cloudinary rejects the request
        """
        params = build_explicit_params(options, self.languages)
        logger.debug(
            f"Calling explicit for {video_id} (type={params['type']}, "
            f"languages={', '.join(self.languages)})",
            extra={"video_id": video_id},
        )

        try:
            result = cloudinary.uploader.explicit(video_id, **params, **self.credentials.as_options())
        except CloudinaryError as e:
            code = http_code_for(e)
            logger.debug(f"Explicit call failed for {video_id}: {e}", extra={"video_id": video_id})
            raise SubmissionError(video_id, str(e), http_code=code) from e

        self._log_response(video_id, result)
        return result

    def _log_response(self, video_id: str, result: Dict[str, Any]):
        """Log a summary of the explicit response."""
        extra = {"video_id": video_id}
        logger.debug(
            f"Response for {video_id}: public_id={result.get('public_id')}, "
            f"resource_type={result.get('resource_type')}, type={result.get('type')}, "
            f"version={result.get('version')}, format={result.get('format')}, "
            f"duration={result.get('duration')}s",
            extra=extra,
        )
        for feature, status in processing_status(result).items():
            logger.debug(f"{video_id} {feature}: {status}", extra=extra)


def processing_status(result: Dict[str, Any]) -> Dict[str, str]:
    """
    Extract AI feature status from an explicit response.

    Features present in ``info`` without a status are reported as 'initiated'.
    """
    info = result.get("info") or {}
    status = {}
    if info.get("auto_chaptering") is not None:
        status["Chaptering"] = info["auto_chaptering"].get("status") or "initiated"
    if info.get("auto_transcription") is not None:
        status["Transcription"] = info["auto_transcription"].get("status") or "initiated"
    return status
