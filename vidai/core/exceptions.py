"""
Custom exceptions for VIDAI.

Provides meaningful error messages and suggestions for common issues.
"""
from typing import List, Optional


class VidaiError(Exception):
    """Base exception for VIDAI errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.suggestions = suggestions or []


class ConfigurationError(VidaiError):
    """Configuration is incomplete or invalid."""
    pass


class MissingCredentialsError(ConfigurationError):
    """Required Cloudinary credentials are missing."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.missing),
            suggestions=[
                "Set these in your .env file or environment variables",
                "Example .env file:\n"
                "     CLOUDINARY_CLOUD_NAME=your_cloud_name\n"
                "     CLOUDINARY_API_KEY=your_api_key\n"
                "     CLOUDINARY_API_SECRET=your_api_secret",
            ]
        )


class InvalidSettingError(ConfigurationError):
    """A configuration value is out of range or malformed."""

    def __init__(self, name: str, value: object, reason: str):
        super().__init__(
            f"Invalid value for {name}: {value!r} ({reason})",
            suggestions=[
                f"Fix or unset {name} in your .env file or environment variables",
            ]
        )
        self.name = name
        self.value = value


class InputError(VidaiError):
    """Video identifiers could not be acquired."""
    pass


class IdentifierFileError(InputError):
    """Identifier file could not be read."""

    def __init__(self, file_path: str, error: str = ""):
        message = f"Error reading file {file_path}"
        if error:
            message += f": {error}"
        super().__init__(
            message,
            suggestions=[
                "Check the file path is correct",
                "Ensure the file exists and is readable",
            ]
        )
        self.file_path = file_path


class NoIdentifiersError(InputError):
    """Nothing to process after parsing the input."""

    def __init__(self):
        super().__init__(
            "No video IDs provided",
            suggestions=[
                "Pass public IDs as arguments: vidai batch video1 video2",
                "Or list them in a file, one per line: vidai batch --file=video-ids.txt",
                "Lines starting with '#' and blank lines are ignored",
            ]
        )


class SubmissionError(VidaiError):
    """The remote service rejected or failed a submission."""

    def __init__(self, video_id: str, message: str, http_code: Optional[int] = None):
        suggestions = []
        if "Invalid public ID" in message or http_code == 404:
            suggestions += [
                "Make sure the video exists in your Cloudinary account",
                'For videos in folders, include the folder path (e.g., "folder/video-name")',
            ]
        if "Invalid credentials" in message or http_code == 401:
            suggestions.append("Check your CLOUDINARY_* environment variables or .env file")
        super().__init__(message, suggestions=suggestions)
        self.video_id = video_id
        self.http_code = http_code
