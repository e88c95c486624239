"""
Markdown rendering and slide splitting on top of markdown-it-py.
"""
from typing import List

from markdown_it import MarkdownIt

SLIDE_DELIMITER = "!SLIDE"

# Characters stripped from both ends of the raw deck before splitting.
_DECK_WHITESPACE = " \n\r\t"


class MarkdownParser:
    """
    Renders a markdown fragment to an HTML fragment using markdown-it-py.

    The processor is configured once and never mutated afterwards, so a single
    instance can be shared between decks and threads.
    """

    def __init__(self):
        # Raw HTML is escaped rather than passed through, so a slide can
        # never inject <style> or <script> into the deck page.
        self.markdown_processor = MarkdownIt('commonmark', {
            'html': False,
        })

        # GFM tables and ~~strikethrough~~ on top of plain CommonMark
        self.markdown_processor.enable(['table', 'strikethrough'])

    def parse(self, markdown_text: str) -> str:
        """
        Parse markdown text to an HTML fragment (no <html>/<body> wrapper).

        Args:
            markdown_text: Raw markdown content

        Returns:
            HTML string
        """
        return self.markdown_processor.render(markdown_text)


def split_slides(raw_deck: str) -> List[str]:
    """
    Split a concatenated deck into slide segments.

    Everything before the first ``!SLIDE`` is preamble and is always dropped,
    so the number of segments equals the number of delimiters.  Segments are
    returned untrimmed.

    Args:
        raw_deck: All markdown files of the deck joined together

    Returns:
        Slide segments in source order
    """
    return raw_deck.strip(_DECK_WHITESPACE).split(SLIDE_DELIMITER)[1:]
