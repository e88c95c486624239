#!/usr/bin/env python3
"""
Deck assembler: manifest + section directories in, compiled :class:`Deck` out.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import DeckConfig
from .errors import DeckError
from .manifest import load_manifest
from .markdown_parser import MarkdownParser
from .models import Deck
from .paths import list_section
from .slide_compiler import compile_deck
from .theme_loader import get_css, get_template

logger = logging.getLogger(__name__)

SHJS_EXTRA_HEAD = """
<script type="text/javascript" src="/shjs/sh_main.min.js"></script>
<link type="text/css" rel="stylesheet" href="/shjs/css/sh_emacs.min.css">
"""

SHJS_ONLOAD = "sh_highlightDocument('shjs/lang/', '.min.js');"

FILE_SEPARATOR = "\n\n"


class DeckGenerator:
    """
    Builds a :class:`Deck` from a slides directory.

    Nothing is cached: every :meth:`load` re-reads the manifest and all
    section files, so edits show up on the next request.
    """

    def __init__(self, config: DeckConfig):
        """Create a new :class:`DeckGenerator`.

        Parameters
        ----------
        config
            Runtime configuration; ``slides_root`` locates the deck and
            ``theme`` names the CSS theme inlined into the page.
        """
        self.config = config
        self.theme = config.theme
        self.slides_root = Path(config.slides_root)
        self.parser = MarkdownParser()

    def read_raw_deck(self, sections):
        """
        Concatenate every markdown file of *sections*, in order.

        Returns:
            tuple: ``(raw_deck, images)`` where ``images`` maps basenames to paths
        """
        chunks = []
        images = {}
        for section in sections:
            markdown_files, image_files = list_section(self.slides_root, section)
            for path in markdown_files:
                logger.debug(f"Reading {path}")
                try:
                    chunks.append(path.read_text(encoding="utf-8"))
                except (OSError, UnicodeDecodeError) as exc:
                    raise DeckError(f"Error reading file {path}: {exc}") from exc
                chunks.append(FILE_SEPARATOR)
            for path in image_files:
                if path.name in images:
                    logger.debug(f"Image {path.name} in {section} replaces {images[path.name]}")
                images[path.name] = str(path)

        return "".join(chunks), images

    def load(self) -> Deck:
        """
        Load and compile the whole deck.

        Raises:
            DeckError: On any manifest, file or slide problem; no partial
                deck is returned.
        """
        manifest = load_manifest(self.slides_root)
        raw_deck, images = self.read_raw_deck(manifest.sections)
        slides = compile_deck(raw_deck, parser=self.parser)
        view = manifest.viewport

        logger.info(
            f"Loaded deck '{manifest.name}': {len(slides)} slides, {len(images)} images"
        )

        return Deck(
            title=manifest.name,
            slides=slides,
            view=view,
            images=images,
            css=get_css(view, theme=self.theme),
            extra_head=SHJS_EXTRA_HEAD,
            onload=SHJS_ONLOAD,
        )

    def render_html(self, deck: Optional[Deck] = None) -> str:
        """Render *deck* (loaded fresh when omitted) into the full deck page."""
        if deck is None:
            deck = self.load()
        return get_template("deck.html").render(deck=deck)

    def write_html(self, output_path) -> Path:
        """Render the deck and write it to *output_path*."""
        output_path = Path(output_path)
        html = self.render_html()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.info(f"Deck written to {output_path}")
        return output_path


def render_presenter() -> str:
    """Presenter (onstage) page; it loads the deck itself from ``/``."""
    return get_template("onstage.html").render()
