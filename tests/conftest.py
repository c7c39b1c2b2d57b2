"""Global pytest fixtures and configuration."""

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from actions_core.config import get_core_settings  # noqa: E402
from actions_core.io.serializer import ResponseSerializer  # noqa: E402
from actions_core.schemas.fulfillment import (  # noqa: E402
    RichResponse,
    RichResponseItem,
    SimpleResponse,
)


SETTINGS_ENV_VARS = (
    "ACTIONS_INCLUDE_VERSION_METADATA",
    "ACTIONS_LIBRARY_LANGUAGE",
    "ACTIONS_APP_DATA_CONTEXT",
    "ACTIONS_APP_DATA_CONTEXT_LIFESPAN",
)


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Run every test against default settings, whatever the environment holds."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_core_settings.cache_clear()
    yield
    get_core_settings.cache_clear()


@pytest.fixture()
def session_id() -> str:
    return "projects/demo/agent/sessions/sess1"


@pytest.fixture()
def serializer(session_id: str) -> ResponseSerializer:
    return ResponseSerializer(session_id)


@pytest.fixture()
def rich_response() -> RichResponse:
    """A one-bubble rich response."""
    return RichResponse(
        items=[
            RichResponseItem(
                simple_response=SimpleResponse(
                    text_to_speech="Welcome back", display_text="Welcome back!"
                )
            )
        ]
    )
