import pytest

from lengthparse.config import reset_settings
from lengthparse.formatter import reset_default_formatter

_ENV_VARS = (
    "LENGTHPARSE_CONFIG_FILE",
    "LENGTHPARSE_UNIT_SYSTEM",
    "LENGTHPARSE_LOG_PATH",
    "LENGTHPARSE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_default_formatter()
    yield
    reset_settings()
    reset_default_formatter()
