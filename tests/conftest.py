"""Shared fixtures for replaygen tests."""

import json

import pytest

from replaygen.recording.models import ActionRecord
from replaygen.utils.logging import configure_logging


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test (fast, critical path - included in CI)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep REPLAYGEN_* variables from the outer shell out of the tests."""
    for name in ("REPLAYGEN_DEFAULT_FORMAT", "REPLAYGEN_LOG_LEVEL", "REPLAYGEN_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route log output to stderr at WARNING, as the CLI does."""
    configure_logging(level="WARNING")


@pytest.fixture
def chromium_header():
    """Header line of a headless chromium recording."""
    return {"browserName": "chromium", "launchOptions": {"headless": True}}


@pytest.fixture
def make_jsonl(chromium_header):
    """Build JSONL text from a header and action dicts."""

    def _make(*actions, header=None):
        records = [header if header is not None else chromium_header, *actions]
        return "\n".join(json.dumps(record) for record in records) + "\n"

    return _make


@pytest.fixture
def make_action():
    """Build an ActionRecord from keyword fields of the JSON record."""

    def _make(name, **fields):
        return ActionRecord.from_dict({"name": name, **fields})

    return _make


@pytest.fixture
def login_recording(make_jsonl):
    """A short login flow covering page, element and assertion actions."""
    return make_jsonl(
        {"name": "openPage", "url": "about:blank", "pageAlias": "page"},
        {"name": "navigate", "url": "https://example.com/login", "pageAlias": "page"},
        {
            "name": "fill",
            "pageAlias": "page",
            "locator": {"label": "Email"},
            "text": "user@example.com",
        },
        {
            "name": "fill",
            "pageAlias": "page",
            "locator": {"placeholder": "Password"},
            "text": "secret",
        },
        {
            "name": "click",
            "pageAlias": "page",
            "locator": {"role": "button", "name": "Sign in"},
            "button": "left",
            "modifiers": 0,
            "clickCount": 1,
        },
        {
            "name": "assertText",
            "pageAlias": "page",
            "locator": {"testId": "welcome"},
            "text": "Welcome",
            "substring": True,
        },
    )


@pytest.fixture
def sample_file(tmp_path, login_recording):
    """The login recording written to a .jsonl file."""
    path = tmp_path / "recording.jsonl"
    path.write_text(login_recording, encoding="utf-8")
    return path
