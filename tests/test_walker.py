"""Tests for recursive filename matching."""

import os
from pathlib import Path

from lps.walker import collect_files


def _rel(root: Path, paths: list[str]) -> list[str]:
    return [Path(p).relative_to(root).as_posix() for p in paths]


class TestCollectFiles:
    def test_no_filter_returns_every_regular_file(self, sample_tree):
        files = collect_files(str(sample_tree))

        assert sorted(_rel(sample_tree, files)) == [
            "a.txt",
            "b.log",
            "docs/README.md",
            "docs/deep/c.txt",
            "docs/notes.TXT",
        ]

    def test_paths_are_joined_to_root(self, sample_tree):
        files = collect_files(str(sample_tree), name_filter="a.txt")

        assert files == [os.path.join(str(sample_tree), "a.txt")]

    def test_substring_filter_is_case_sensitive_by_default(self, sample_tree):
        files = collect_files(str(sample_tree), name_filter=".txt")

        assert sorted(_rel(sample_tree, files)) == ["a.txt", "docs/deep/c.txt"]

    def test_ignore_case_yields_superset(self, sample_tree):
        sensitive = set(collect_files(str(sample_tree), name_filter=".txt"))
        folded = set(collect_files(str(sample_tree), name_filter=".TXT", ignore_case=True))

        assert sensitive < folded
        assert os.path.join(str(sample_tree), "docs", "notes.TXT") in folded

    def test_directories_are_never_returned(self, tmp_path):
        (tmp_path / "match.dir").mkdir()
        (tmp_path / "match.dir" / "inner").write_text("x")

        files = collect_files(str(tmp_path), name_filter="match")

        assert files == []

    def test_order_is_deterministic(self, sample_tree):
        assert collect_files(str(sample_tree)) == collect_files(str(sample_tree))

    def test_no_match_returns_empty_list(self, sample_tree):
        assert collect_files(str(sample_tree), name_filter="does-not-exist") == []

    def test_empty_filter_matches_everything(self, sample_tree):
        assert collect_files(str(sample_tree), name_filter="") == collect_files(
            str(sample_tree)
        )

    def test_unreadable_directory_is_reported_and_skipped(self, tmp_path):
        errors: list[OSError] = []

        files = collect_files(str(tmp_path / "missing"), on_error=errors.append)

        assert files == []
        assert len(errors) == 1

    def test_walk_continues_past_failing_directory(self, sample_tree, monkeypatch):
        real_scandir = os.scandir
        blocked = os.path.join(str(sample_tree), "docs", "deep")

        def scandir(path="."):
            if os.fspath(path) == blocked:
                raise PermissionError(13, "Permission denied", blocked)
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)
        errors: list[OSError] = []

        files = collect_files(str(sample_tree), on_error=errors.append)

        assert "docs/deep/c.txt" not in _rel(sample_tree, files)
        assert "docs/README.md" in _rel(sample_tree, files)
        assert len(errors) == 1


class TestNonRecursive:
    def test_only_top_level_files(self, sample_tree):
        files = collect_files(str(sample_tree), recursive=False)

        assert _rel(sample_tree, files) == ["a.txt", "b.log"]

    def test_missing_directory_reports_error(self, tmp_path):
        errors: list[OSError] = []

        assert collect_files(str(tmp_path / "nope"), recursive=False, on_error=errors.append) == []
        assert len(errors) == 1
