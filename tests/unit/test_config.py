"""Unit tests for configuration settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from linebreak.config import (
    DEFAULT_CLASS_ALIASES,
    DEFAULT_SKIP_LINES,
    UNICODE_VERSION,
    ConformanceConfig,
    DataConfig,
    LinebreakSettings,
    default_data_dir,
    get_default_settings,
)


class TestDataConfig:
    """Tests for data file locations."""

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LINEBREAK_DATA_FILE", str(tmp_path / "lb.txt"))
        monkeypatch.setenv("LINEBREAK_TEST_FILE", str(tmp_path / "lbt.txt"))
        config = DataConfig()
        assert config.line_break_file == tmp_path / "lb.txt"
        assert config.test_file == tmp_path / "lbt.txt"

    def test_cache_dir_default(self, monkeypatch, tmp_path):
        monkeypatch.delenv("LINEBREAK_DATA_FILE", raising=False)
        monkeypatch.delenv("LINEBREAK_TEST_FILE", raising=False)
        monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path))
        config = DataConfig()
        assert config.line_break_file == tmp_path / "linebreak" / "LineBreak.txt"
        assert config.test_file == tmp_path / "linebreak" / "LineBreakTest.txt"

    def test_home_cache_without_xdg(self, monkeypatch):
        monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
        assert default_data_dir() == Path.home() / ".cache" / "linebreak"

    def test_aliases_are_copied(self):
        config = DataConfig()
        config.class_aliases["NEW"] = "AL"
        assert "NEW" not in DEFAULT_CLASS_ALIASES
        assert config.class_aliases["ZWJ"] == "CM"

    def test_explicit_path(self, tmp_path):
        config = DataConfig(line_break_file=str(tmp_path / "x.txt"))
        assert config.line_break_file == tmp_path / "x.txt"

    def test_base_url_is_pinned_to_release(self):
        """Test downloads default to the release the skip list was built for."""
        config = DataConfig()
        assert config.base_url == f"https://www.unicode.org/Public/{UNICODE_VERSION}/ucd/"
        assert "latest" not in config.base_url


class TestConformanceConfig:
    """Tests for conformance settings."""

    def test_defaults(self):
        config = ConformanceConfig()
        assert config.skip_lines == DEFAULT_SKIP_LINES
        assert not config.stop_on_failure
        assert config.max_reported_failures == 20

    def test_skip_lines_are_zero_based_indices(self):
        assert min(DEFAULT_SKIP_LINES) == 812
        assert 6332 in DEFAULT_SKIP_LINES

    def test_skip_lines_from_list(self):
        config = ConformanceConfig(skip_lines=[1, 2, 2])
        assert config.skip_lines == frozenset({1, 2})

    def test_negative_failure_limit_rejected(self):
        with pytest.raises(ValidationError):
            ConformanceConfig(max_reported_failures=-1)


class TestSettings:
    """Tests for the top-level settings model."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, LinebreakSettings)
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.data.base_url.startswith("https://www.unicode.org/")

    def test_instances_are_independent(self):
        first = LinebreakSettings()
        second = LinebreakSettings()
        first.conformance.stop_on_failure = True
        assert not second.conformance.stop_on_failure
