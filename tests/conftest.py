import threading
import time

import pytest

from vidai.core.config import Config, set_config
from vidai.core.exceptions import SubmissionError

ENV_VARS = [
    "CLOUDINARY_CLOUD_NAME",
    "CLOUDINARY_API_KEY",
    "CLOUDINARY_API_SECRET",
    "VIDAI_CONCURRENCY",
    "VIDAI_BATCH_DELAY",
    "VIDAI_ITEM_DELAY",
    "VIDAI_LANGUAGES",
    "VIDAI_LOG_LEVEL",
]


class FakeSubmitter:
    """Fails every ID containing 'bad', records start/end events."""

    def __init__(self, work_seconds: float = 0.0):
        self.work_seconds = work_seconds
        self.events = []
        self.calls = []
        self._lock = threading.Lock()

    def submit(self, video_id, options):
        with self._lock:
            self.events.append(("start", video_id))
            self.calls.append((video_id, options))
        try:
            if self.work_seconds:
                time.sleep(self.work_seconds)
            if "bad" in video_id:
                raise SubmissionError(video_id, f"Resource not found - {video_id}", http_code=404)
            return {"public_id": video_id, "resource_type": "video", "type": options.asset_type.value}
        finally:
            with self._lock:
                self.events.append(("end", video_id))

    def started(self):
        return [video_id for kind, video_id in self.events if kind == "start"]


class RecordingSleep:
    def __init__(self):
        self.delays = []

    def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_config(Config())
    yield
    set_config(None)


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("CLOUDINARY_CLOUD_NAME", "demo")
    monkeypatch.setenv("CLOUDINARY_API_KEY", "123456")
    monkeypatch.setenv("CLOUDINARY_API_SECRET", "s3cr3t")
    config = Config()
    config.scheduler.batch_delay = 0
    config.scheduler.item_delay = 0
    set_config(config)
    return config


@pytest.fixture
def fake_submitter():
    return FakeSubmitter()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_submitter():
    return FakeSubmitter
