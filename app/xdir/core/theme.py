"""Colour theme for xdir output.

The bundled ``data/theme.toml`` can be overridden colour by colour from
``~/.config/xdir/theme.toml``. Each colour maps to the Rich style of the
same name.
"""

import functools
import logging
import re
import tomllib
from importlib import resources
from importlib.resources.abc import Traversable

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from xdir.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colours (#RGB or #RRGGBB) of the styles xdir prints with.

    Attributes:
        listing: Entry lines.
        header: The volume header.
        summary: Grand total, free space and "No file found".
        warning: Skipped entries and directories.
        error: Fatal errors.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    listing: str = "#ffffff"
    header: str = "#69B9A1"
    summary: str = "#b2bec3"
    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*")
    @classmethod
    def validate_hex_color(cls, v: str) -> str:
        if not _HEX_COLOR.fullmatch(v):
            msg = f"invalid hex color {v!r}"
            raise ValueError(msg)
        return v

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme; header and error are bold."""
        return Theme(
            {
                "listing": self.listing,
                "header": f"bold {self.header}",
                "summary": self.summary,
                "warning": self.warning,
                "error": f"bold {self.error}",
            }
        )


def bundled_theme() -> Traversable:
    """Return the theme file shipped in xdir.data."""
    return resources.files("xdir.data").joinpath("theme.toml")


def read_colors(source: Traversable) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    A missing file gives an empty table. Unreadable or malformed files
    are logged and ignored the same way.
    """
    try:
        with source.open("rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", source)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Merge the user's colours over the bundled ones.

    An invalid colour anywhere discards the merge in favour of the
    built-in defaults.
    """
    user_path = get_user_theme_path()
    merged = {**read_colors(bundled_theme()), **read_colors(user_path)}
    try:
        return ThemeColors(**merged)
    except ValidationError as e:
        logger.warning("Invalid colours in %s, using defaults: %s", user_path, e)
        return ThemeColors()


@functools.cache
def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    return load_theme().to_rich_theme()
