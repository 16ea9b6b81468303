"""
Configuration management for VIDAI.

Uses environment variables (optionally from a .env file) and sensible defaults.
"""
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, List, Dict

from dotenv import load_dotenv

from .exceptions import InvalidSettingError, MissingCredentialsError


# Languages requested from the auto-transcription translate option
TRANSLATION_LANGUAGES = [
    "fr-FR",   # French (France)
    "fr-CA",   # French (Canada)
    "es",      # Spanish
    "de",      # German
    "pt-PT",   # Portuguese (Portugal)
    "pt-BR",   # Portuguese (Brazil)
    "hi",      # Hindi
    "ja",      # Japanese
    "zh-CN",   # Chinese (Simplified)
    "vi",      # Vietnamese
]


@dataclass
class CloudinaryConfig:
    """Cloudinary account credentials."""
    cloud_name: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    secure: bool = True

    ENV_VARS = {
        "cloud_name": "CLOUDINARY_CLOUD_NAME",
        "api_key": "CLOUDINARY_API_KEY",
        "api_secret": "CLOUDINARY_API_SECRET",
    }

    def missing_variables(self) -> List[str]:
        """Names of the environment variables that are not set."""
        return [env for attr, env in self.ENV_VARS.items() if not getattr(self, attr)]

    def as_options(self) -> Dict[str, object]:
        """Credentials as per-call options for the Cloudinary SDK."""
        return {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "secure": self.secure,
        }


@dataclass
class SchedulerConfig:
    """Batch scheduling configuration."""
    concurrency: int = 2           # Videos submitted together in parallel mode
    batch_delay: float = 2.0       # Pause between parallel batches (seconds)
    item_delay: float = 1.0        # Pause between sequential items (seconds)


@dataclass
class SubmissionConfig:
    """Remote AI feature configuration."""
    translation_languages: List[str] = field(default_factory=lambda: list(TRANSLATION_LANGUAGES))


# Accepted values for the log level setting
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5


@dataclass
class Config:
    """Main application configuration."""
    cloudinary: CloudinaryConfig = field(default_factory=CloudinaryConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    submission: SubmissionConfig = field(default_factory=SubmissionConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def __post_init__(self):
        self._load_from_env()

    def _load_from_env(self):
        """Load configuration from environment variables."""
        for attr, env in CloudinaryConfig.ENV_VARS.items():
            if os.environ.get(env):
                setattr(self.cloudinary, attr, os.environ[env])
        if os.environ.get("VIDAI_CONCURRENCY"):
            self.scheduler.concurrency = _env_number("VIDAI_CONCURRENCY", int)
        if os.environ.get("VIDAI_BATCH_DELAY"):
            self.scheduler.batch_delay = _env_number("VIDAI_BATCH_DELAY", float)
        if os.environ.get("VIDAI_ITEM_DELAY"):
            self.scheduler.item_delay = _env_number("VIDAI_ITEM_DELAY", float)
        if os.environ.get("VIDAI_LANGUAGES"):
            self.submission.translation_languages = [
                lang.strip() for lang in os.environ["VIDAI_LANGUAGES"].split(",") if lang.strip()
            ]
        if os.environ.get("VIDAI_LOG_LEVEL"):
            self.log.level = os.environ["VIDAI_LOG_LEVEL"]

    def validate_settings(self):
        """
        Check scheduling and logging values before anything runs.

        Raises:
            InvalidSettingError: If a delay is negative or the log level is unknown
        """
        for name, value in (
            ("VIDAI_BATCH_DELAY", self.scheduler.batch_delay),
            ("VIDAI_ITEM_DELAY", self.scheduler.item_delay),
        ):
            if value < 0:
                raise InvalidSettingError(name, value, "must not be negative")
        if self.log.level.upper() not in LOG_LEVELS:
            raise InvalidSettingError(
                "VIDAI_LOG_LEVEL", self.log.level, "expected one of " + ", ".join(LOG_LEVELS)
            )

    def validate_credentials(self):
        """
        Check that the Cloudinary credentials are present.

        Raises:
            MissingCredentialsError: If any required variable is missing
        """
        missing = self.cloudinary.missing_variables()
        if missing:
            raise MissingCredentialsError(missing)


def _env_number(name: str, cast: Callable[[str], Any]):
    """Read a numeric environment variable."""
    raw = os.environ[name]
    try:
        return cast(raw)
    except ValueError:
        raise InvalidSettingError(name, raw, "must be a number") from None


# Global config instance, built once at process entry
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance, reading .env on first use."""
    global _config
    if _config is None:
        load_dotenv()
        _config = Config()
    return _config


def set_config(config: Optional[Config]):
    """Set (or reset with None) the global configuration instance."""
    global _config
    _config = config
