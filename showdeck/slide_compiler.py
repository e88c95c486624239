"""
Compile slide segments into :class:`~showdeck.models.Slide` objects.

A segment looks like::

    center
    # Some markdown
    .notes
    Things to say out loud

The first line picks the slide type, everything up to ``.notes`` is the body
and the rest is speaker notes.  Indented code blocks whose first line is
``@@@<lang>`` are tagged for the shjs syntax highlighter after rendering.
"""
import logging
import re
from typing import List, Optional

from .errors import MalformedSegmentError
from .markdown_parser import MarkdownParser, split_slides
from .models import Slide, SlideType

logger = logging.getLogger(__name__)

NOTES_TOKEN = ".notes"
CODE_TAG_MARKER = "    @@@"

_IMG_SRC = '<img src="'
_IMG_SRC_REWRITTEN = '<img src="images/'

_RENDERED_CODE_BLOCK = re.compile(r"<pre><code>@@@( *[^\n]*)\n")


def rewrite_image_sources(html: str) -> str:
    """
    Point every ``<img src="`` at the deck's ``images/`` route.

    This is a plain substring replacement, so running it twice yields
    ``images/images/``.
    """
    return html.replace(_IMG_SRC, _IMG_SRC_REWRITTEN)


def _tag_code_block(match: "re.Match") -> str:
    lang = match.group(1).strip()
    if lang:
        return f'<pre class="sh_{lang} sh_sourceCode"><code>\n'
    return '<pre class="sh_sourceCode"><code>\n'


def tag_code_blocks(html: str) -> str:
    """Turn ``<pre><code>@@@lang`` openers into shjs-classed ``<pre>`` tags."""
    return _RENDERED_CODE_BLOCK.sub(_tag_code_block, html)


def compile_slide(
    segment: str,
    parser: Optional[MarkdownParser] = None,
    index: Optional[int] = None,
) -> Slide:
    """
    Compile one slide segment.

    Args:
        segment: Raw segment text as returned by :func:`split_slides`
        parser: Markdown renderer; a fresh one is created when omitted
        index: 1-based position of the segment, used in error messages

    Returns:
        The compiled slide

    Raises:
        MalformedSegmentError: If there is no line after the type line
        InvalidSlideTypeError: If the type line is not a known keyword
    """
    type_line, newline, rest = segment.partition("\n")
    if not newline:
        raise MalformedSegmentError("segment has no body after the slide type line", index=index)

    slide_type = SlideType.from_keyword(type_line.strip(" \t"), index=index)

    body, _, notes = rest.partition(NOTES_TOKEN)
    notes = notes.strip(" \t\r\n")

    if parser is None:
        parser = MarkdownParser()

    rendered = rewrite_image_sources(parser.parse(body))
    content = (
        f'<div class="{slide_type.css_class} innerContent" '
        f'style="{slide_type.style}">{rendered}</div>'
    )
    if CODE_TAG_MARKER in body:
        content = tag_code_blocks(content)

    return Slide(content=content, notes=notes, slide_type=slide_type)


def compile_deck(raw_deck: str, parser: Optional[MarkdownParser] = None) -> List[Slide]:
    """
    Split *raw_deck* and compile every segment, in order.

    The first bad segment aborts the whole deck; no partial list is returned.
    """
    if parser is None:
        parser = MarkdownParser()

    slides = []
    for index, segment in enumerate(split_slides(raw_deck), 1):
        slides.append(compile_slide(segment, parser=parser, index=index))

    logger.debug("Compiled %d slides", len(slides))
    return slides
