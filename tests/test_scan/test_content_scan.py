"""Tests for content globbing and candidate extraction."""

from pathlib import Path

import pytest

from twconfig.scan import base_class, enumerate_files, expand_braces, extract_candidates


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")


# ---------------------------------------------------------------------------
# expand_braces
# ---------------------------------------------------------------------------


class TestExpandBraces:
    def test_no_braces(self):
        assert expand_braces("src/*.rs") == ["src/*.rs"]

    def test_alternation(self):
        assert expand_braces("src/*.{html,rs}") == ["src/*.html", "src/*.rs"]

    def test_multiple_groups(self):
        assert expand_braces("{a,b}/*.{x,y}") == ["a/*.x", "a/*.y", "b/*.x", "b/*.y"]


# ---------------------------------------------------------------------------
# enumerate_files
# ---------------------------------------------------------------------------


class TestEnumerateFiles:
    def test_relative_pattern_with_dot_prefix(self, tmp_path: Path) -> None:
        _touch(tmp_path, "src/main.rs", "src/lib.rs", "src/notes.txt")
        files = enumerate_files(["./src/*.rs"], tmp_path)
        assert [f.name for f in files] == ["lib.rs", "main.rs"]

    def test_recursive_glob(self, tmp_path: Path) -> None:
        _touch(tmp_path, "t/a.html", "t/deep/b.html")
        files = enumerate_files(["t/**/*.html"], tmp_path)
        assert sorted(f.name for f in files) == ["a.html", "b.html"]

    def test_nonexistent_directory_matches_nothing(self, tmp_path: Path) -> None:
        assert enumerate_files(["./nonexistent/*.ext"], tmp_path) == []

    def test_duplicates_removed(self, tmp_path: Path) -> None:
        _touch(tmp_path, "src/main.rs")
        files = enumerate_files(["src/*.rs", "./src/main.rs"], tmp_path)
        assert len(files) == 1

    def test_negation(self, tmp_path: Path) -> None:
        _touch(tmp_path, "src/main.rs", "src/gen.rs")
        files = enumerate_files(["src/*.rs", "!src/gen.rs"], tmp_path)
        assert [f.name for f in files] == ["main.rs"]

    def test_directories_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "nested.rs").mkdir(parents=True)
        assert enumerate_files(["src/*.rs"], tmp_path) == []

    def test_absolute_pattern(self, tmp_path: Path) -> None:
        _touch(tmp_path, "a.html")
        files = enumerate_files([str(tmp_path / "*.html")], "/")
        assert [f.name for f in files] == ["a.html"]


# ---------------------------------------------------------------------------
# extract_candidates
# ---------------------------------------------------------------------------


class TestExtractCandidates:
    def test_html_class_attribute(self):
        found = extract_candidates('<main class="container mx-auto max-w-xl">')
        assert {"container", "mx-auto", "max-w-xl"} <= found

    def test_variants_and_arbitrary_values(self):
        found = extract_candidates('class="lg:prose-lg w-[50%] w-1/2"')
        assert {"lg:prose-lg", "w-[50%]", "w-1/2"} <= found

    def test_important_marker_and_container_variants(self):
        found = extract_candidates('<input class="md:!form-input"><div class="@lg:prose-lg">')
        assert {"md:!form-input", "@lg:prose-lg"} <= found

    def test_pure_numbers_skipped(self):
        assert "8080" not in extract_candidates("let port = 8080;")

    def test_trailing_punctuation_stripped(self):
        assert "prose" in extract_candidates("use prose.")

    def test_empty_text(self):
        assert extract_candidates("") == set()


class TestBaseClass:
    @pytest.mark.parametrize(
        "candidate, expected",
        [
            ("prose", "prose"),
            ("lg:prose-lg", "prose-lg"),
            ("dark:hover:prose-invert", "prose-invert"),
            ("md:!form-input", "form-input"),
        ],
    )
    def test_strips_variants(self, candidate, expected):
        assert base_class(candidate) == expected
