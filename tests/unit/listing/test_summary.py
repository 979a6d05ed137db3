"""Unit tests for summary lines."""

import pytest
from xdir.attributes.base import VolumeInfo
from xdir.listing.models import GrandTotals, TraversalState
from xdir.listing.summary import (
    format_free_space,
    format_grand_total,
    format_level_summary,
    format_volume_header,
    summary_directory,
)


def _state(files: int = 0, dirs: int = 0, size: int = 0) -> TraversalState:
    return TraversalState(file_count=files, directory_count=dirs, total_size=size)


class TestSummaryDirectory:
    """Tests for directory naming in summaries."""

    def test_cwd_itself_is_absolute(self) -> None:
        """The working directory is shown in full."""
        assert summary_directory("/work", "/work") == "/work"

    def test_direct_child(self) -> None:
        """A direct child gets a ./ prefix."""
        assert summary_directory("/work/sub", "/work") == "./sub"

    def test_deeper_descendant(self) -> None:
        """Deeper directories are plain relative paths."""
        assert summary_directory("/work/sub/deep", "/work") == "sub/deep"

    def test_outside_cwd(self) -> None:
        """Directories outside the working directory are shown in full."""
        assert summary_directory("/other/sub", "/work") == "/other/sub"

    def test_sibling_with_common_prefix(self) -> None:
        """A name prefix alone does not make a directory a child."""
        assert summary_directory("/workshop", "/work") == "/workshop"


class TestFormatLevelSummary:
    """Tests for per-directory summaries."""

    def test_one_file(self) -> None:
        """A single file is reported as such."""
        line = format_level_summary(_state(files=1, size=10), "/work", "/work")
        assert line == " " * 19 + " Only one file in /work"

    def test_one_file_bare(self) -> None:
        """A single file is not summarised in bare mode."""
        assert format_level_summary(_state(files=1), "/work", "/work", bare=True) is None

    def test_one_file_bare_reports_directories(self) -> None:
        """In bare mode a single file gives way to the directory count."""
        line = format_level_summary(_state(files=1, dirs=2), "/work", "/work", bare=True)
        assert line == f"{2:>14} directories in /work"

    def test_one_file_bare_one_directory(self) -> None:
        """In bare mode a single file gives way to a single directory."""
        line = format_level_summary(_state(files=1, dirs=1), "/work/sub", "/work", bare=True)
        assert line == " " * 14 + " Only one directory in ./sub"

    def test_many_files(self) -> None:
        """Several files report count and size, right-justified."""
        line = format_level_summary(_state(files=2, size=1234), "/work", "/work")
        assert line == f"{'2 Files 1,234 (1234 bytes)':>36} /work"

    def test_files_take_precedence_over_directories(self) -> None:
        """Directories are not mentioned when files were found."""
        line = format_level_summary(_state(files=2, dirs=3, size=30), "/w", "/w")
        assert line is not None
        assert "directories" not in line

    def test_one_directory(self) -> None:
        """A single directory is reported as such."""
        line = format_level_summary(_state(dirs=1), "/work/sub", "/work")
        assert line == " " * 14 + " Only one directory in ./sub"

    def test_many_directories(self) -> None:
        """Several directories report their count."""
        line = format_level_summary(_state(dirs=3), "/work", "/work")
        assert line == f"{3:>14} directories in /work"

    def test_nothing(self) -> None:
        """An empty level has no summary."""
        assert format_level_summary(_state(), "/work", "/work") is None


class TestRunSummaries:
    """Tests for grand total, volume and free space lines."""

    def test_grand_total(self) -> None:
        """Grand total shows files and comma-grouped bytes."""
        line = format_grand_total(GrandTotals(file_count=3, total_size=1234567))
        assert line == f"    3 File(s)  {'1,234,567':>14} bytes total"

    def test_volume_header(self) -> None:
        """The header names the volume and its serial."""
        volume = VolumeInfo(name="DATA", serial=0x1234ABCD)
        line = format_volume_header(volume, "/work")
        assert line.endswith("is DATA, Serial 1234-ABCD")

    @pytest.mark.parametrize(
        ("volume", "suffix"),
        [(None, "bytes free"), (VolumeInfo("DATA", 1), "bytes free in volume DATA")],
    )
    def test_free_space(self, volume, suffix: str) -> None:
        """Free space is right-justified, with the volume name when known."""
        line = format_free_space(1_000_000, volume)
        assert line == f"{'1,000,000':>32} {suffix}"
