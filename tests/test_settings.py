"""Tests for environment driven configuration"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tongue.config.settings import (
    AppSettings,
    DisplaySettings,
    LoggingSettings,
    StoreSettings,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run without a stray .env file or TONGUE_* variables"""
    monkeypatch.chdir(tmp_path)
    for name in (
        "TONGUE_FILE",
        "TONGUE_INDENT",
        "TONGUE_NO_NATIVE",
        "TONGUE_NO_FOREIGN",
        "TONGUE_VERBOSE",
        "TONGUE_DEBUG",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        cfg = AppSettings()

        assert cfg.store.file == Path("collection.json")
        assert cfg.store.indent == 2
        assert cfg.display.no_native is False
        assert cfg.display.no_foreign is False
        assert cfg.logging.level == "WARNING"
        assert cfg.verbose is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TONGUE_FILE", "italiano.json")
        monkeypatch.setenv("TONGUE_NO_NATIVE", "true")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert StoreSettings().file == Path("italiano.json")
        assert DisplaySettings().no_native is True
        assert LoggingSettings().level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("TONGUE_FILE=from_env_file.json\n")
        assert StoreSettings().file == Path("from_env_file.json")

    def test_negative_indent_rejected(self, monkeypatch):
        monkeypatch.setenv("TONGUE_INDENT", "-1")
        with pytest.raises(ValidationError):
            StoreSettings()

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            LoggingSettings()
