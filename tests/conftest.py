import pytest

from tincture.config import ENV_BACKGROUND, ENV_FORMAT


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Run every test against the built-in settings unless it sets its own."""
    monkeypatch.delenv(ENV_BACKGROUND, raising=False)
    monkeypatch.delenv(ENV_FORMAT, raising=False)
