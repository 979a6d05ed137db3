"""Unit tests for user settings.

Tests for loading the [defaults] table and the case sensitivity override.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from xdir.core.settings import (
    CASE_SENSITIVE_ENV,
    Settings,
    SettingsError,
    SettingsParseError,
    case_sensitive_from_env,
    load_settings,
)
from xdir.listing.models import DisplayMode, SortMode


class TestSettingsModel:
    """Tests for the Settings model."""

    def test_defaults(self) -> None:
        """Settings defer to built-in behaviour by default."""
        settings = Settings()
        assert settings.sort is None
        assert settings.display is None
        assert settings.wide_width == 80
        assert settings.comma_separators is True
        assert settings.full_path is False
        assert settings.case_sensitive is None

    @pytest.mark.parametrize("width", [19, 1001])
    def test_wide_width_bounds(self, width: int) -> None:
        """Wide width must stay within 20-1000."""
        with pytest.raises(ValueError):
            Settings(wide_width=width)

    def test_unknown_key_rejected(self) -> None:
        """Typos in settings are rejected."""
        with pytest.raises(ValueError):
            Settings(sorting="name")  # type: ignore[call-arg]


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """No file means built-in defaults."""
        assert load_settings(tmp_path / "config.toml") == Settings()

    def test_loads_defaults_table(self, tmp_path: Path) -> None:
        """Values are read from the [defaults] table."""
        path = tmp_path / "config.toml"
        path.write_text(
            "[defaults]\n"
            'sort = "size"\n'
            'display = "wide"\n'
            "wide_width = 120\n"
            "comma_separators = false\n"
            "case_sensitive = true\n"
        )

        settings = load_settings(path)

        assert settings.sort == SortMode.SIZE
        assert settings.display == DisplayMode.WIDE
        assert settings.wide_width == 120
        assert settings.comma_separators is False
        assert settings.case_sensitive is True

    def test_missing_defaults_table(self, tmp_path: Path) -> None:
        """A file without [defaults] gives defaults."""
        path = tmp_path / "config.toml"
        path.write_text("[other]\nkey = 1\n")
        assert load_settings(path) == Settings()

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Malformed TOML raises SettingsParseError."""
        path = tmp_path / "config.toml"
        path.write_text("[defaults\n")
        with pytest.raises(SettingsParseError, match="Invalid TOML syntax"):
            load_settings(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Unknown values raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text('[defaults]\nsort = "random"\n')
        with pytest.raises(SettingsError, match="Invalid settings"):
            load_settings(path)

    def test_defaults_not_a_table(self, tmp_path: Path) -> None:
        """A scalar defaults key is rejected."""
        path = tmp_path / "config.toml"
        path.write_text('defaults = "wide"\n')
        with pytest.raises(SettingsError, match=r"Invalid \[defaults\]"):
            load_settings(path)

    def test_default_path_from_xdg(self, tmp_path: Path) -> None:
        """Without a path, the XDG config location is used."""
        config_dir = tmp_path / "xdir"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[defaults]\nfull_path = true\n")

        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            settings = load_settings()

        assert settings.full_path is True


class TestCaseSensitiveFromEnv:
    """Tests for the environment override."""

    def test_unset(self) -> None:
        """Unset means no override."""
        with patch.dict(os.environ, {}, clear=True):
            assert case_sensitive_from_env() is None

    @pytest.mark.parametrize(("value", "expected"), [("1", True), ("Yes", True), ("off", False)])
    def test_recognised(self, value: str, expected: bool) -> None:
        """Common boolean spellings are understood."""
        with patch.dict(os.environ, {CASE_SENSITIVE_ENV: value}):
            assert case_sensitive_from_env() is expected

    def test_unrecognised(self) -> None:
        """Other values are ignored."""
        with patch.dict(os.environ, {CASE_SENSITIVE_ENV: "maybe"}):
            assert case_sensitive_from_env() is None
