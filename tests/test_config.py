"""Tests for configuration loading."""

from pathlib import Path

import pytest

from bookshelf.config import Settings, load_settings


class TestLoadSettings:
    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("BOOKSHELF_HOST", "BOOKSHELF_PORT", "BOOKSHELF_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings == Settings()
        assert settings.server.port == 9000

    def test_reads_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "server:\n  host: 0.0.0.0\n  port: 8080\nlogging:\n  level: DEBUG\n"
        )
        settings = load_settings(config_file)
        assert settings.server.host == "0.0.0.0"
        assert settings.server.port == 8080
        assert settings.logging.level == "DEBUG"
        assert settings.app.name == "Bookshelf API"

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        assert load_settings(config_file) == Settings()

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BOOKSHELF_HOST", "10.0.0.1")
        monkeypatch.setenv("BOOKSHELF_PORT", "5000")
        monkeypatch.setenv("BOOKSHELF_LOG_LEVEL", "warning")
        settings = load_settings(tmp_path / "nope.yaml")
        assert settings.server.host == "10.0.0.1"
        assert settings.server.port == 5000
        assert settings.logging.level == "WARNING"
