"""Unit tests for heading, paragraph, link, image and code-block extraction."""

from __future__ import annotations

from mdlens.extractors.structure import (
    all_headings,
    extract_code_blocks,
    extract_images,
    extract_links,
    first_heading,
    first_paragraph,
    heading_anchor,
)
from mdlens.items import Heading, Image, Link

# ---------------------------------------------------------------------------
# Headings
# ---------------------------------------------------------------------------

class TestFirstHeading:
    def test_extracts_first_h1(self):
        text = "\n# First Heading\n\n## Second Heading\n\nSome content.\n"
        assert first_heading(text) == "First Heading"

    def test_skips_lower_levels(self):
        assert first_heading("## Sub\n# Main\n") == "Main"

    def test_no_heading_returns_empty(self):
        assert first_heading("Just some text without headings.") == ""

    def test_marker_without_space_is_not_heading(self):
        assert first_heading("#hashtag\n") == ""

    def test_empty_input(self):
        assert first_heading("") == ""


class TestAllHeadings:
    def test_extracts_all_levels(self):
        text = "\n# Level 1\n## Level 2\n### Level 3\n#### Level 4\n"
        headings = all_headings(text)
        assert len(headings) == 4
        assert headings[0] == Heading(level=1, text="Level 1", anchor="level-1")
        assert [h.level for h in headings] == [1, 2, 3, 4]

    def test_respects_max_level(self):
        headings = all_headings("# A\n## B\n### C\n#### D", 2)
        assert headings == [
            Heading(level=1, text="A", anchor="a"),
            Heading(level=2, text="B", anchor="b"),
        ]

    def test_seven_hashes_is_not_heading(self):
        assert all_headings("####### Too deep") == []

    def test_marker_does_not_swallow_next_line(self):
        assert all_headings("#\nnot a heading") == []

    def test_document_order(self):
        headings = all_headings("## Two\n# One\n### Three")
        assert [h.text for h in headings] == ["Two", "One", "Three"]


class TestHeadingAnchor:
    def test_punctuation_removed(self):
        assert heading_anchor("Hello, World!") == "hello-world"

    def test_whitespace_runs_collapse(self):
        assert heading_anchor("Getting   Started") == "getting-started"

    def test_hyphens_kept(self):
        assert heading_anchor("Step-by-step guide") == "step-by-step-guide"


# ---------------------------------------------------------------------------
# Paragraphs
# ---------------------------------------------------------------------------

class TestFirstParagraph:
    def test_extracts_first_paragraph(self):
        text = (
            "\n# Heading\n\nThis is the first paragraph with some text.\n\n"
            "This is the second paragraph.\n"
        )
        assert first_paragraph(text) == "This is the first paragraph with some text."

    def test_unwraps_emphasis_and_links(self):
        text = "**Bold** and *italic* with [a link](https://example.com)."
        assert first_paragraph(text) == "Bold and italic with a link."

    def test_skips_code_and_images(self):
        text = "```python\nprint('x')\n```\n\n![logo](logo.png)\n\nReal prose starts here."
        assert first_paragraph(text) == "Real prose starts here."

    def test_only_headings_returns_empty(self):
        assert first_paragraph("# One\n\n## Two\n") == ""

    def test_empty_input(self):
        assert first_paragraph("") == ""


# ---------------------------------------------------------------------------
# Links and images
# ---------------------------------------------------------------------------

class TestExtractLinks:
    def test_links_in_order(self):
        text = "[Google](https://google.com) and [GitHub](https://github.com)"
        assert extract_links(text) == [
            Link(text="Google", url="https://google.com"),
            Link(text="GitHub", url="https://github.com"),
        ]

    def test_images_are_not_links(self):
        text = "![img](a.png) and [docs](/docs)"
        assert extract_links(text) == [Link(text="docs", url="/docs")]

    def test_empty_url_kept(self):
        assert extract_links("[empty]()") == [Link(text="empty", url="")]

    def test_no_links(self):
        assert extract_links("plain text [not a link]") == []


class TestExtractImages:
    def test_images_with_and_without_title(self):
        text = '![Alt text](image.jpg "Title") and ![Another](image2.png).'
        images = extract_images(text)
        assert len(images) == 2
        assert images[0] == Image(alt="Alt text", src="image.jpg", title="Title")
        assert images[1].src == "image2.png"
        assert images[1].title is None

    def test_empty_title_is_absent(self):
        images = extract_images('![a](b.png "")')
        assert images[0].title is None

    def test_no_images(self):
        assert extract_images("[a link](x)") == []


# ---------------------------------------------------------------------------
# Code blocks
# ---------------------------------------------------------------------------

class TestExtractCodeBlocks:
    def test_language_and_content(self):
        text = "```python\nprint('hi')\n```\n\n```\nplain\n```"
        blocks = extract_code_blocks(text)
        assert len(blocks) == 2
        assert blocks[0].language == "python"
        assert blocks[0].content == "print('hi')"
        assert blocks[1].language == "text"
        assert blocks[1].content == "plain"

    def test_content_trimmed_and_fences_excluded(self):
        blocks = extract_code_blocks("```sh\n\n  echo hi  \n\n```")
        assert blocks[0].content == "echo hi"
        assert "```" not in blocks[0].content

    def test_fence_info_after_language(self):
        blocks = extract_code_blocks("```js {1,3}\nconst a = 1;\n```")
        assert blocks[0].language == "js"
        assert blocks[0].content == "const a = 1;"

    def test_no_blocks(self):
        assert extract_code_blocks("no code `inline` here") == []


class TestArticleFixture:
    def test_structure(self, article_md):
        assert first_heading(article_md) == "Getting Started with mdlens"
        assert [h.text for h in all_headings(article_md)] == [
            "Getting Started with mdlens",
            "Installation",
            "Usage",
            "Changelog",
        ]
        assert [link.url for link in extract_links(article_md)] == [
            "https://example.com/markdown",
            "/docs/api.md",
            "#changelog",
        ]
        assert extract_images(article_md)[0].title == "Pipeline diagram"
        assert extract_code_blocks(article_md)[0].language == "bash"
