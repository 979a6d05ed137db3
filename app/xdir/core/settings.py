"""User defaults for xdir.

Defaults are read from ``~/.config/xdir/config.toml``::

    [defaults]
    sort = "name"
    display = "wide"
    wide_width = 120
    comma_separators = false
    full_path = false
    case_sensitive = true

Command-line options always win over these values. Case sensitivity
can also be forced with the XDIR_CASE_SENSITIVE environment variable.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from xdir.core.paths import get_settings_path
from xdir.listing.config import DEFAULT_WIDE_WIDTH
from xdir.listing.models import DisplayMode, SortMode

logger = logging.getLogger(__name__)

CASE_SENSITIVE_ENV = "XDIR_CASE_SENSITIVE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class Settings(BaseModel):
    """Persistent user defaults.

    Attributes:
        sort: Default sort order (None = directories first, then name).
        display: Default display mode (None = Windows-style long listing).
        wide_width: Line width of the wide grid.
        comma_separators: Group file sizes with commas.
        full_path: Show absolute paths.
        case_sensitive: Match patterns case-sensitively (None = platform default).
    """

    model_config = ConfigDict(extra="forbid")

    sort: Annotated[SortMode | None, Field(description="Default sort order")] = None
    display: Annotated[DisplayMode | None, Field(description="Default display mode")] = None
    wide_width: Annotated[
        int,
        Field(ge=20, le=1000, description="Wide grid line width (20-1000)"),
    ] = DEFAULT_WIDE_WIDTH
    comma_separators: Annotated[bool, Field(description="Comma-group sizes")] = True
    full_path: Annotated[bool, Field(description="Show absolute paths")] = False
    case_sensitive: Annotated[
        bool | None,
        Field(description="Case-sensitive matching (None = platform default)"),
    ] = None


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load user defaults from a TOML file.

    A missing file is not an error; built-in defaults are used.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or its content is invalid.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        raise SettingsError(f"Invalid [defaults] section in {settings_path}")

    try:
        return Settings.model_validate(defaults)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e


def case_sensitive_from_env() -> bool | None:
    """Read the case sensitivity override from the environment.

    Returns:
        True or False when XDIR_CASE_SENSITIVE holds a recognised value,
        None when it is unset or unrecognised.
    """
    raw = os.environ.get(CASE_SENSITIVE_ENV)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning("Ignoring unrecognised %s value %r", CASE_SENSITIVE_ENV, raw)
    return None
