"""Tests for ParserSettings and load_settings()."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from user_parser.config import ParserSettings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("USER_PARSER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("USER_PARSER_REJECT_EXTRANEOUS_FIELDS", raising=False)


class TestLoadSettings:
    def test_defaults_without_file(self):
        settings = load_settings()
        assert settings == ParserSettings()
        assert settings.log_level == "INFO"
        assert settings.reject_extraneous_fields is False

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("log_level: debug\nreject_extraneous_fields: true\n")
        settings = load_settings(path)
        assert settings.log_level == "DEBUG"
        assert settings.reject_extraneous_fields is True

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path) == ParserSettings()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.yaml"
        path.write_text("log_level: ERROR\n")
        monkeypatch.setenv("USER_PARSER_LOG_LEVEL", "warning")
        monkeypatch.setenv("USER_PARSER_REJECT_EXTRANEOUS_FIELDS", "true")
        settings = load_settings(path)
        assert settings.log_level == "WARNING"
        assert settings.reject_extraneous_fields is True

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("log_level: LOUD\n")
        with pytest.raises(ValidationError, match="unknown log level"):
            load_settings(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")
