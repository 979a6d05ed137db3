"""Main CLI application entry point.

Defines the Typer application: option parsing, resolution of the
immutable listing Config, and the run-level output around the
directory listings (volume header, grand total, free space).
"""

import logging
import os
from datetime import datetime, timedelta
from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.logging import RichHandler

from xdir import __version__
from xdir.attributes import AttributeProbe, get_probe
from xdir.core.settings import (
    Settings,
    SettingsError,
    case_sensitive_from_env,
    load_settings,
)
from xdir.listing import (
    Config,
    DisplayMode,
    GrandTotals,
    PathDisplay,
    PatternError,
    SortMode,
    TargetError,
    Targets,
    Walker,
    resolve_targets,
    select_sort_mode,
)
from xdir.listing.summary import (
    NO_FILE_FOUND,
    format_free_space,
    format_grand_total,
    format_volume_header,
)
from xdir.utils.formatting import (
    err_console,
    print_error,
    print_line,
    print_warning,
)

logger = logging.getLogger(__name__)

# Line count used when --head/--tail is given as 0
DEFAULT_TRUNCATE_LINES = 25

app = typer.Typer(
    name="xdir",
    help="List directory contents like the Windows dir command.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["--help"]},
)


class AttrChoice(str, Enum):
    """Attribute filters (a leading '-' excludes instead of selecting)."""

    DIRECTORY = "d"
    NOT_DIRECTORY = "-d"
    HIDDEN = "h"
    NOT_HIDDEN = "-h"
    SYSTEM = "s"
    NOT_SYSTEM = "-s"
    READ_ONLY = "o"
    NOT_READ_ONLY = "-o"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"xdir version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr through Rich when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _select_display(
    settings: Settings,
    *,
    wide: bool,
    unix: bool,
    bare: bool,
) -> DisplayMode:
    """Pick the display mode: wide, then unix, then bare, then the default."""
    if wide:
        return DisplayMode.WIDE
    if unix:
        return DisplayMode.UNIX_LONG
    if bare:
        return DisplayMode.BARE
    return settings.display or DisplayMode.WINDOWS_LONG


def _ignore_case(
    settings: Settings,
    probe: AttributeProbe,
    case_sensitive: bool | None,
) -> bool:
    """Resolve case-insensitive matching: option, environment, settings, platform."""
    for choice in (case_sensitive, case_sensitive_from_env(), settings.case_sensitive):
        if choice is not None:
            return not choice
    return not probe.case_sensitive_default()


def _truncate_count(value: int | None) -> int | None:
    if value is None:
        return None
    return value or DEFAULT_TRUNCATE_LINES


def build_config(
    targets: Targets,
    settings: Settings,
    probe: AttributeProbe,
    *,
    sort: list[SortMode] | None = None,
    attrs: list[AttrChoice] | None = None,
    wide: bool = False,
    width: int | None = None,
    bare: bool = False,
    quote: bool = False,
    unix: bool = False,
    numeric_mode: bool = False,
    full_path: bool = False,
    recurse: bool = False,
    head: int | None = None,
    tail: int | None = None,
    days: int | None = None,
    no_commas: bool = False,
    volume: bool = False,
    case_sensitive: bool | None = None,
    now: datetime | None = None,
) -> Config:
    """Resolve command-line options, settings and targets into a Config.

    Raises:
        ValidationError: If the options contradict each other.
    """
    chosen = set(attrs or ())
    directory_only = AttrChoice.DIRECTORY in chosen
    exclude_directory = AttrChoice.NOT_DIRECTORY in chosen
    hidden_explicit = bool(
        chosen
        & {AttrChoice.HIDDEN, AttrChoice.SYSTEM, AttrChoice.NOT_HIDDEN, AttrChoice.NOT_SYSTEM}
    )
    hidden_only = bool(chosen & {AttrChoice.HIDDEN, AttrChoice.SYSTEM})
    exclude_hidden = bool(chosen & {AttrChoice.NOT_HIDDEN, AttrChoice.NOT_SYSTEM})

    display = _select_display(
        settings,
        wide=wide or width is not None,
        unix=unix or numeric_mode,
        bare=bare or quote,
    )

    # Recursive bare listings show files only unless directories were asked for
    if recurse and display == DisplayMode.BARE and not directory_only:
        exclude_directory = True

    # Listing everything hides hidden files unless they were asked about,
    # or * / *.* was given explicitly
    if (
        targets.match_all
        and not targets.explicit_match_all
        and not targets.is_path_list
        and not hidden_explicit
    ):
        exclude_hidden = True

    cutoff = None
    if days is not None:
        cutoff = (now or datetime.now()) - timedelta(days=days or 1)

    return Config(
        sort=select_sort_mode(sort) if sort else settings.sort or SortMode.DIRECTORY_THEN_NAME,
        display=display,
        path_display=PathDisplay.FULL if full_path or settings.full_path else PathDisplay.NAME,
        patterns=targets.patterns,
        match_all=targets.match_all,
        recurse=recurse,
        exclude_directory=exclude_directory,
        directory_only=directory_only,
        exclude_hidden=exclude_hidden,
        hidden_only=hidden_only,
        exclude_readonly=AttrChoice.NOT_READ_ONLY in chosen,
        readonly_only=AttrChoice.READ_ONLY in chosen,
        cutoff=cutoff,
        head=_truncate_count(head),
        tail=_truncate_count(tail),
        quote_spaces=quote,
        wide_width=width or settings.wide_width,
        ignore_case=_ignore_case(settings, probe, case_sensitive),
        numeric_mode=numeric_mode,
        comma_separators=settings.comma_separators and not no_commas,
        show_volume=volume,
    )


@app.command()
def main(
    patterns: Annotated[
        list[str] | None,
        typer.Argument(
            help="Wildcard patterns, a directory, or explicit paths.",
            show_default=False,
        ),
    ] = None,
    wide: Annotated[
        bool,
        typer.Option("--wide", "-w", help="Wide multi-column listing."),
    ] = False,
    width: Annotated[
        int | None,
        typer.Option("--width", min=20, help="Line width of the wide listing (implies --wide)."),
    ] = None,
    bare: Annotated[
        bool,
        typer.Option("--bare", "-b", help="Bare names, no metadata."),
    ] = False,
    quote: Annotated[
        bool,
        typer.Option("--quote", "-q", help="Quote names with spaces (implies --bare)."),
    ] = False,
    unix: Annotated[
        bool,
        typer.Option("--unix", "-u", help="Unix style long listing."),
    ] = False,
    numeric_mode: Annotated[
        bool,
        typer.Option("--numeric-mode", "-x", help="Unix listing with octal modes."),
    ] = False,
    full_path: Annotated[
        bool,
        typer.Option("--full-path", "-f", help="Show absolute paths."),
    ] = False,
    recurse: Annotated[
        bool,
        typer.Option("--recurse", "-s", "-r", help="Search in subdirectories."),
    ] = False,
    recurse_full: Annotated[
        bool,
        typer.Option("-z", help="Like --recurse but show absolute paths."),
    ] = False,
    head: Annotated[
        int | None,
        typer.Option("--head", min=0, help="Show the first N lines of each listing (0 = 25)."),
    ] = None,
    tail: Annotated[
        int | None,
        typer.Option("--tail", min=0, help="Show the last N lines of each listing (0 = 25)."),
    ] = None,
    days: Annotated[
        int | None,
        typer.Option("--days", "-d", min=0, help="Only entries modified in the last N days."),
    ] = None,
    sort: Annotated[
        list[SortMode] | None,
        typer.Option("--sort", "-o", help="Sort order (repeatable; fixed precedence)."),
    ] = None,
    attrs: Annotated[
        list[AttrChoice] | None,
        typer.Option(
            "--attr",
            "-a",
            help="Attribute filter: d, h/s, o to select; -d, -h/-s, -o to exclude.",
        ),
    ] = None,
    no_commas: Annotated[
        bool,
        typer.Option("--no-commas", help="Do not group file sizes with commas."),
    ] = False,
    volume: Annotated[
        bool,
        typer.Option("--volume", "-v", help="Show volume information."),
    ] = False,
    case_sensitive: Annotated[
        bool | None,
        typer.Option(
            "--case-sensitive/--ignore-case",
            help="Pattern case sensitivity (default: platform, XDIR_CASE_SENSITIVE).",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log traversal details to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List files and directories.

    Unlike the Windows dir command, hidden files are shown when a
    pattern is given. Use *.* to list everything including hidden
    files, or --attr -h to hide them.
    """
    _configure_logging(verbose)

    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    probe = get_probe()
    cwd = os.getcwd()
    recursive = recurse or recurse_full

    try:
        targets = resolve_targets(patterns or [], cwd=cwd, recurse=recursive)
        config = build_config(
            targets,
            settings,
            probe,
            sort=sort,
            attrs=attrs,
            wide=wide,
            width=width,
            bare=bare,
            quote=quote,
            unix=unix,
            numeric_mode=numeric_mode,
            full_path=full_path or recurse_full,
            recurse=recursive,
            head=head,
            tail=tail,
            days=days,
            no_commas=no_commas,
            volume=volume,
            case_sensitive=case_sensitive,
        )
        walker = Walker(config, emit=print_line, warn=print_warning, probe=probe, cwd=cwd)
    except ValidationError as e:
        print_error("; ".join(str(err["msg"]) for err in e.errors()))
        raise typer.Exit(code=1) from e
    except (TargetError, PatternError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    start = targets.start_directory
    volume_info = probe.volume_info(start)
    if (
        volume_info is not None
        and volume_info.name
        and config.display != DisplayMode.BARE
        and (config.match_all or config.show_volume)
    ):
        print_line(format_volume_header(volume_info, start), style="header")

    try:
        if targets.is_path_list:
            totals = walker.list_paths(targets.paths)
        else:
            totals = walker.walk(start)
    except OSError as e:
        print_error(f"{e.filename or start}: {e.strerror or e}")
        raise typer.Exit(code=1) from e

    _print_totals(totals, show_total=config.recurse or targets.is_path_list)

    if config.show_volume or config.display != DisplayMode.BARE:
        try:
            free = probe.free_space(start)
        except OSError as e:
            print_warning(f'Warning "{start}": cannot query free space: {e.strerror or e}')
        else:
            print_line(format_free_space(free, volume_info), style="summary")


def _print_totals(totals: GrandTotals, *, show_total: bool) -> None:
    """Print the run-level result line."""
    logger.debug(
        "Totals: %d files, %d directories, %d bytes",
        totals.file_count,
        totals.directory_count,
        totals.total_size,
    )
    if totals.is_empty:
        print_line(NO_FILE_FOUND, style="summary")
    elif totals.file_count > 1 and show_total:
        print_line(format_grand_total(totals), style="summary")


if __name__ == "__main__":
    app()
