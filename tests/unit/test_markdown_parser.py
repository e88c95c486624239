"""Test markdown rendering and slide splitting."""

import pytest
from showdeck.markdown_parser import MarkdownParser, split_slides


@pytest.fixture
def parser():
    return MarkdownParser()


def test_basic_markdown_parsing(parser):
    """Test basic markdown to HTML conversion."""
    markdown_text = """# Hello World

This is a paragraph with *emphasis* and **strong** text.

## Section 2

- Item 1
- Item 2

1. First
2. Second"""

    html = parser.parse(markdown_text)

    assert "<h1>Hello World</h1>" in html
    assert "<h2>Section 2</h2>" in html
    assert "<em>emphasis</em>" in html
    assert "<strong>strong</strong>" in html
    assert "<ul>" in html
    assert "<li>Item 1</li>" in html
    assert "<ol>" in html
    assert "<li>Second</li>" in html


def test_fragment_has_no_document_wrapper(parser):
    html = parser.parse("# Title")
    assert "<html" not in html
    assert "<body" not in html


def test_indented_code_block_shape(parser):
    """Indented code renders as a bare <pre><code> opener."""
    html = parser.parse("Intro\n\n    @@@python\n    print(1)\n")
    assert "<pre><code>@@@python\nprint(1)\n</code></pre>" in html


def test_fenced_code_and_inline_code(parser):
    html = parser.parse("```\nx = 1\n```\n\nUse `inline code` here.")
    assert "<pre><code>x = 1\n</code></pre>" in html
    assert "<code>inline code</code>" in html


def test_images_render_as_img_tags(parser):
    html = parser.parse("![logo](logo.png)")
    assert '<img src="logo.png" alt="logo"' in html


def test_raw_html_is_not_passed_through(parser):
    html = parser.parse("<style>body { color: red }</style>\n\n<script>alert(1)</script>\n")
    assert "<style>" not in html
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_table_parsing(parser):
    html = parser.parse("| Name | Age |\n|------|-----|\n| John | 25  |")
    assert "<th>Name</th>" in html
    assert "<td>John</td>" in html


def test_split_without_delimiters_is_empty():
    assert split_slides("") == []
    assert split_slides("# Just a preamble\n\nno slides here") == []


def test_split_discards_preamble():
    segments = split_slides("preamble text\n!SLIDE\none\n!SLIDE center\ntwo\n")
    assert segments == ["\none\n", " center\ntwo"]


def test_split_trims_whole_blob_only():
    segments = split_slides(" \t\r\n!SLIDE\nbody\n\n\n!SLIDE\n  padded  \n\n")
    # Trailing spaces on the last line go too, since they end the blob.
    assert segments == ["\nbody\n\n\n", "\n  padded"]


def test_split_is_case_sensitive():
    assert split_slides("!slide\nnope\n") == []
    assert len(split_slides("!SLIDE\nyes\n!Slide\nstill the same slide\n")) == 1


@pytest.mark.parametrize(
    "raw",
    [
        "!SLIDE\na",
        "x!SLIDE\na!SLIDE\nb!SLIDE",
        "!SLIDE!SLIDE!SLIDE",
        "\n\n!SLIDE\n.notes\n!SLIDE bullets\n* a\n",
    ],
)
def test_segment_count_matches_delimiter_count(raw):
    assert len(split_slides(raw)) == raw.count("!SLIDE")
