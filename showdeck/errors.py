"""
Exceptions raised while building a deck.

Every failure is fatal to the current render: nothing here is retried and no
partial deck is ever returned.  The CLI and the HTTP layer are the only places
that catch :class:`DeckError`.
"""
from typing import Optional


class DeckError(Exception):
    """Base class for all deck build failures."""


class ManifestError(DeckError):
    """``showoff.json`` is missing, unreadable or has the wrong shape."""


class SectionNotFoundError(DeckError):
    """A section listed in the manifest has no directory on disk."""


class SlideError(DeckError):
    """A single slide segment could not be compiled.

    ``index`` is the 1-based position of the segment in the deck, or ``None``
    when the segment was compiled on its own.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"slide {index}: {message}"
        super().__init__(message)
        self.index = index


class MalformedSegmentError(SlideError):
    """Segment has a type line but no body line after it."""


class InvalidSlideTypeError(SlideError):
    """Type line is not one of the recognised keywords."""

    def __init__(self, slide_type: str, index: Optional[int] = None):
        super().__init__(f"invalid slide type {slide_type}", index=index)
        self.slide_type = slide_type
