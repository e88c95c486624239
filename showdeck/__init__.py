"""showdeck - top-level package

Compiles a directory of markdown fragments into an in-browser slide deck.
"""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    DeckError,
    InvalidSlideTypeError,
    MalformedSegmentError,
    ManifestError,
    SectionNotFoundError,
    SlideError,
)
from .generator import DeckGenerator  # noqa: E402
from .markdown_parser import MarkdownParser, split_slides  # noqa: E402
from .models import Deck, Slide, SlideType, Viewport  # noqa: E402
from .slide_compiler import compile_deck, compile_slide  # noqa: E402

__all__ = [
    "DeckError",
    "DeckGenerator",
    "InvalidSlideTypeError",
    "MalformedSegmentError",
    "ManifestError",
    "MarkdownParser",
    "SectionNotFoundError",
    "SlideError",
    "Deck",
    "Slide",
    "SlideType",
    "Viewport",
    "compile_deck",
    "compile_slide",
    "split_slides",
]
