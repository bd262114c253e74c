"""Unit tests for path helpers, slugs, titles and path-embedded dates."""

from __future__ import annotations

from datetime import date

import pytest

from mdlens.extractors.paths import (
    directory_of,
    extract_date_from_path,
    file_name_without_extension,
    filename_to_slug,
    filename_to_title,
    git_hash,
    group_paths_by_directory,
    is_markdown_file,
    normalize_path,
    relative_to,
    slugify,
    sort_paths_by_date,
)

# ---------------------------------------------------------------------------
# Separators and components
# ---------------------------------------------------------------------------

class TestComponents:
    def test_normalize_path(self):
        assert normalize_path("docs\\guides\\intro.md") == "docs/guides/intro.md"
        assert normalize_path("already/posix.md") == "already/posix.md"

    def test_file_name_without_extension(self):
        assert file_name_without_extension("docs/2024-01-02_intro.md") == "2024-01-02_intro"
        assert file_name_without_extension("docs\\notes.markdown") == "notes"
        assert file_name_without_extension("README") == "README"

    def test_directory_of(self):
        assert directory_of("a/b/c.md") == "a/b"
        assert directory_of("a\\b\\c.md") == "a/b"
        assert directory_of("c.md") == ""

    def test_git_hash(self):
        assert git_hash("notes_3fa9c1") == "3fa9c1"
        assert git_hash("notes.md") == "-"
        assert git_hash("") == "-"


class TestRelativeTo:
    @pytest.mark.parametrize(
        "path, base, expected",
        [
            ("content/posts/a.md", "content", "posts/a.md"),
            ("content/posts/a.md", "content/", "posts/a.md"),
            ("/srv/site/content/a.md", "content", "a.md"),
            ("C:\\site\\content\\a.md", "content", "a.md"),
            ("content", "content", ""),
        ],
    )
    def test_related_paths(self, path, base, expected):
        assert relative_to(path, base) == expected

    def test_unrelated_path_unchanged(self):
        assert relative_to("other/a.md", "content") == "other/a.md"

    def test_plain_prefix_not_segment_bound(self):
        assert relative_to("content-old/a.md", "content") == "-old/a.md"

    def test_prefix_strips_one_leading_slash(self):
        assert relative_to("/srv//a.md", "/srv") == "/a.md"

    def test_partial_segment_is_not_a_match(self):
        assert relative_to("mycontent/a.md", "content") == "mycontent/a.md"

    def test_empty_base(self):
        assert relative_to("a/b.md", "") == "a/b.md"


# ---------------------------------------------------------------------------
# Slugs and titles
# ---------------------------------------------------------------------------

class TestFilenameToSlug:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("My Great Article!.md", "my-great-article"),
            ("2023-12-01_my_article.md", "2023-12-01-my-article"),
            ("--Hello   World--", "hello-world"),
            ("C++ & Rust.md", "c-rust"),
            ("", ""),
        ],
    )
    def test_examples(self, filename, expected):
        assert filename_to_slug(filename) == expected

    @pytest.mark.parametrize("filename", ["My Great Article!.md", "a__b--c", "Ünïcode Title.md"])
    def test_idempotent(self, filename):
        once = filename_to_slug(filename)
        assert filename_to_slug(once) == once
        assert filename_to_slug(once + ".md") == once

    def test_only_safe_characters(self):
        slug = filename_to_slug("Weird: name (draft) #2.md")
        assert all(c.isascii() and (c.isalnum() or c == "-") for c in slug)
        assert not slug.startswith("-") and not slug.endswith("-")


class TestSlugify:
    def test_keeps_dotted_words(self):
        assert slugify("Release v1.2 notes") == "release-v12-notes"

    def test_matches_filename_slug_without_extension(self):
        assert slugify("My Great Article!") == filename_to_slug("My Great Article!.md")


class TestFilenameToTitle:
    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("2023-12-01_my-article.md", "My Article"),
            ("hello_world.md", "Hello World"),
            ("getting-started", "Getting Started"),
            ("2024-01-05-release-notes.markdown", "Release Notes"),
        ],
    )
    def test_examples(self, filename, expected):
        assert filename_to_title(filename) == expected


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

class TestExtractDateFromPath:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("posts/2024-01-15_intro.md", date(2024, 1, 15)),
            ("posts/2024_01_15_intro.md", date(2024, 1, 15)),
            ("20240115-notes.md", date(2024, 1, 15)),
            ("01-15-2024.md", date(2024, 1, 15)),
            ("01_15_2024.md", date(2024, 1, 15)),
            ("logs\\2023-12-01_standup.md", date(2023, 12, 1)),
        ],
    )
    def test_formats(self, path, expected):
        assert extract_date_from_path(path) == expected

    @pytest.mark.parametrize("path", ["notes.md", "2024-13-45.md", "", "v2-release.md"])
    def test_no_date(self, path):
        assert extract_date_from_path(path) is None


class TestSortPathsByDate:
    PATHS = ["a.md", "2023-05-01_y.md", "b.md", "2024-01-01_x.md"]

    def test_desc_newest_first_undated_last(self):
        assert sort_paths_by_date(self.PATHS) == [
            "2024-01-01_x.md",
            "2023-05-01_y.md",
            "a.md",
            "b.md",
        ]

    def test_asc_undated_first(self):
        assert sort_paths_by_date(self.PATHS, "asc") == [
            "a.md",
            "b.md",
            "2023-05-01_y.md",
            "2024-01-01_x.md",
        ]

    def test_equal_dates_keep_input_order(self):
        paths = ["b/2024-01-01_z.md", "a/2024-01-01_a.md", "c/2023-01-01_m.md"]
        assert sort_paths_by_date(paths, "desc") == paths
        assert sort_paths_by_date(paths, "asc") == [
            "c/2023-01-01_m.md",
            "b/2024-01-01_z.md",
            "a/2024-01-01_a.md",
        ]

    def test_undated_keep_input_order(self):
        paths = ["z.md", "a.md", "m.md"]
        assert sort_paths_by_date(paths, "desc") == paths
        assert sort_paths_by_date(paths, "asc") == paths

    def test_input_not_modified(self):
        paths = list(self.PATHS)
        sort_paths_by_date(paths)
        assert paths == self.PATHS

    def test_bad_order_rejected(self):
        with pytest.raises(ValueError):
            sort_paths_by_date(self.PATHS, "newest")


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

class TestGroupPathsByDirectory:
    def test_groups_in_first_seen_order(self):
        groups = group_paths_by_directory(
            ["docs/a.md", "blog/c.md", "docs/b.md", "top.md"],
        )
        assert groups == {
            "docs": ["docs/a.md", "docs/b.md"],
            "blog": ["blog/c.md"],
            "root": ["top.md"],
        }
        assert list(groups) == ["docs", "blog", "root"]

    def test_absolute_paths(self):
        groups = group_paths_by_directory(
            ["/content/a/x.md", "/content/a/y.md", "/content/b/z.md"],
        )
        assert groups == {
            "/content/a": ["/content/a/x.md", "/content/a/y.md"],
            "/content/b": ["/content/b/z.md"],
        }

    def test_empty(self):
        assert group_paths_by_directory([]) == {}


class TestIsMarkdownFile:
    @pytest.mark.parametrize("path", ["a.md", "README.MD", "notes/x.markdown"])
    def test_markdown(self, path):
        assert is_markdown_file(path)

    @pytest.mark.parametrize("path", ["a.txt", "md", "a.md.bak", ""])
    def test_not_markdown(self, path):
        assert not is_markdown_file(path)
