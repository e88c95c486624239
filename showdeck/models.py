"""
Data models for the deck compiler.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .errors import InvalidSlideTypeError


class SlideType(Enum):
    """
    Layout of a slide, decoded from the first line of its segment.
    """
    DEFAULT = ""
    CENTER = "center"
    BULLETS = "bullets"

    @property
    def css_class(self) -> str:
        return self.value or "default"

    @property
    def style(self) -> str:
        """Inline style applied to the slide's wrapping div."""
        if self is SlideType.DEFAULT:
            return " padding: 2em; "
        if self is SlideType.CENTER:
            return "text-align: center; "
        return ""

    @classmethod
    def from_keyword(cls, keyword: str, index: Optional[int] = None) -> "SlideType":
        """
        Map a type line to a slide type.

        Args:
            keyword: Type line with surrounding spaces/tabs already removed
            index: 1-based segment position, reported in the error

        Raises:
            InvalidSlideTypeError: If the keyword is not recognised
        """
        for slide_type in cls:
            if slide_type.value == keyword:
                return slide_type
        raise InvalidSlideTypeError(keyword, index=index)


@dataclass(frozen=True)
class Slide:
    """
    One compiled slide: embeddable HTML plus plain-text speaker notes.
    """
    content: str
    notes: str = ""
    slide_type: SlideType = SlideType.DEFAULT


@dataclass(frozen=True)
class Viewport:
    height: int = 768
    width: int = 1024

    @property
    def height_half(self) -> int:
        return self.height // 2

    @property
    def width_half(self) -> int:
        return self.width // 2


@dataclass
class Deck:
    """
    The full compiled presentation.

    ``images`` maps an image basename to its path on disk.  Basenames are
    shared across sections, so a later section overwrites an earlier one.
    """
    title: str
    slides: List[Slide] = field(default_factory=list)
    view: Viewport = field(default_factory=Viewport)
    images: Dict[str, str] = field(default_factory=dict)
    css: str = ""  # inline CSS injected into the page template
    extra_head: str = ""  # extra markup placed inside <head>
    onload: str = ""  # javascript run after the slides script, if any
