import pytest

from vidai.core.config import Config, TRANSLATION_LANGUAGES, get_config, set_config
from vidai.core.exceptions import ConfigurationError, InvalidSettingError


def test_defaults() -> None:
    config = Config()

    assert config.scheduler.concurrency == 2
    assert config.scheduler.batch_delay == 2.0
    assert config.scheduler.item_delay == 1.0
    assert config.submission.translation_languages == TRANSLATION_LANGUAGES
    assert config.log.level == "INFO"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
    monkeypatch.setenv("VIDAI_CONCURRENCY", "4")
    monkeypatch.setenv("VIDAI_BATCH_DELAY", "0.5")
    monkeypatch.setenv("VIDAI_ITEM_DELAY", "0")
    monkeypatch.setenv("VIDAI_LANGUAGES", "es, de ,,ja")
    monkeypatch.setenv("VIDAI_LOG_LEVEL", "DEBUG")

    config = Config()

    assert config.cloudinary.cloud_name == "demo"
    assert config.scheduler.concurrency == 4
    assert config.scheduler.batch_delay == 0.5
    assert config.scheduler.item_delay == 0.0
    assert config.submission.translation_languages == ["es", "de", "ja"]
    assert config.log.level == "DEBUG"


def test_missing_credentials_are_listed(monkeypatch) -> None:
    monkeypatch.setenv("CLOUDINARY_API_KEY", "123456")

    with pytest.raises(ConfigurationError) as exc_info:
        Config().validate_credentials()

    assert exc_info.value.missing == ["CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_SECRET"]
    assert any("CLOUDINARY_API_SECRET=" in tip for tip in exc_info.value.suggestions)


def test_complete_credentials_pass(credentials) -> None:
    credentials.validate_credentials()

    assert credentials.cloudinary.as_options() == {
        "cloud_name": "demo",
        "api_key": "123456",
        "api_secret": "s3cr3t",
        "secure": True,
    }


def test_get_config_is_cached() -> None:
    config = Config()
    set_config(config)

    assert get_config() is config
    assert get_config() is get_config()


def test_negative_delays_are_rejected() -> None:
    config = Config()
    config.validate_settings()

    config.scheduler.item_delay = -0.5
    with pytest.raises(InvalidSettingError) as exc_info:
        config.validate_settings()

    assert exc_info.value.name == "VIDAI_ITEM_DELAY"
    assert isinstance(exc_info.value, ConfigurationError)


def test_log_level_is_checked_case_insensitively(monkeypatch) -> None:
    monkeypatch.setenv("VIDAI_LOG_LEVEL", "debug")
    Config().validate_settings()

    monkeypatch.setenv("VIDAI_LOG_LEVEL", "verbose")
    with pytest.raises(InvalidSettingError) as exc_info:
        Config().validate_settings()

    assert exc_info.value.name == "VIDAI_LOG_LEVEL"


def test_non_numeric_environment_values(monkeypatch) -> None:
    monkeypatch.setenv("VIDAI_CONCURRENCY", "many")

    with pytest.raises(InvalidSettingError) as exc_info:
        Config()

    assert exc_info.value.value == "many"
