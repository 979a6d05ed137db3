"""Unit tests for command-line target resolution."""

from pathlib import Path

import pytest
from xdir.listing.targets import TargetError, Targets, has_wildcard, resolve_targets


@pytest.fixture
def workdir(tmp_path: Path) -> str:
    """Working directory holding a.txt, b.txt and sub/."""
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "sub").mkdir()
    return str(tmp_path)


class TestHasWildcard:
    """Tests for wildcard detection."""

    @pytest.mark.parametrize("arg", ["*", "a?", "[ab]", "dir/*.txt"])
    def test_wildcards(self, arg: str) -> None:
        """Star, question mark and bracket are wildcards."""
        assert has_wildcard(arg)

    def test_plain(self) -> None:
        """Plain names have no wildcard."""
        assert not has_wildcard("notes.txt")


class TestResolveTargets:
    """Tests for resolve_targets."""

    def test_no_arguments(self, workdir: str) -> None:
        """Nothing given lists the working directory."""
        targets = resolve_targets([], cwd=workdir)
        assert targets == Targets(start_directory=workdir)
        assert targets.match_all
        assert not targets.is_path_list

    def test_single_directory(self, workdir: str) -> None:
        """A directory argument becomes the start directory."""
        targets = resolve_targets(["sub"], cwd=workdir)
        assert targets.start_directory == str(Path(workdir) / "sub")
        assert targets.match_all
        assert not targets.explicit_match_all

    def test_single_directory_recursive(self, workdir: str) -> None:
        """A directory argument is still a start directory when recursing."""
        targets = resolve_targets(["sub"], cwd=workdir, recurse=True)
        assert targets.start_directory == str(Path(workdir) / "sub")
        assert targets.patterns == ()

    def test_pattern(self, workdir: str) -> None:
        """A wildcard argument is a pattern in the working directory."""
        targets = resolve_targets(["*.txt"], cwd=workdir)
        assert targets.start_directory == workdir
        assert targets.patterns == ("*.txt",)
        assert not targets.match_all

    def test_pattern_with_directory(self, workdir: str) -> None:
        """The directory part of the first pattern is the start directory."""
        targets = resolve_targets(["sub/*.py"], cwd=workdir)
        assert targets.start_directory == str(Path(workdir) / "sub")
        assert targets.patterns == ("*.py",)

    def test_parent_components_collapsed(self, workdir: str) -> None:
        """.. in the directory part is resolved lexically."""
        targets = resolve_targets(["sub/../*.txt"], cwd=workdir)
        assert targets.start_directory == workdir
        assert targets.patterns == ("*.txt",)

    def test_directory_then_patterns(self, workdir: str) -> None:
        """A leading directory is followed by patterns."""
        targets = resolve_targets(["sub", "*.py", "*.md"], cwd=workdir)
        assert targets.start_directory == str(Path(workdir) / "sub")
        assert targets.patterns == ("*.py", "*.md")

    def test_later_patterns_lose_directories(self, workdir: str) -> None:
        """Only the base name of later patterns is kept."""
        targets = resolve_targets(["*.txt", "other/*.md"], cwd=workdir)
        assert targets.patterns == ("*.txt", "*.md")

    @pytest.mark.parametrize("pattern", ["*", "*.*"])
    def test_explicit_match_all(self, workdir: str, pattern: str) -> None:
        """* and *.* match everything explicitly."""
        targets = resolve_targets([pattern], cwd=workdir)
        assert targets.match_all
        assert targets.explicit_match_all
        assert targets.patterns == ()

    def test_match_all_with_other_patterns(self, workdir: str) -> None:
        """* cannot be combined with more patterns."""
        with pytest.raises(TargetError, match="in combination with"):
            resolve_targets(["*", "*.txt"], cwd=workdir)

    def test_plain_names_are_paths(self, workdir: str) -> None:
        """Arguments without wildcards are listed as explicit paths."""
        targets = resolve_targets(["a.txt", "sub", "missing"], cwd=workdir)
        assert targets.is_path_list
        assert targets.paths == tuple(
            str(Path(workdir) / name) for name in ("a.txt", "sub", "missing")
        )
        assert targets.start_directory == workdir

    def test_plain_name_recursive_is_pattern(self, workdir: str) -> None:
        """When recursing, a plain file name is a pattern."""
        targets = resolve_targets(["a.txt"], cwd=workdir, recurse=True)
        assert not targets.is_path_list
        assert targets.patterns == ("a.txt",)
        assert targets.start_directory == workdir
