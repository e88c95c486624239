"""Theme and page-template loading for rendered decks."""
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, Template, StrictUndefined

from .models import Viewport

PACKAGE_DIR = Path(__file__).parent
THEMES_DIR = PACKAGE_DIR / "themes"
TEMPLATES_DIR = PACKAGE_DIR / "templates"

DEFAULT_THEME = "showoff"

# Slide content is already-rendered HTML, so nothing is autoescaped here;
# templates escape plain-text fields (title, notes) explicitly.
_env = Environment(
    loader=FileSystemLoader([str(TEMPLATES_DIR), str(THEMES_DIR)]),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def get_css(view: Optional[Viewport] = None, theme: str = DEFAULT_THEME) -> str:
    """
    Render the inline CSS for the specified theme.

    Args:
        view: Viewport the slide cells are sized to (1024x768 if omitted)
        theme: Theme name

    Returns:
        CSS content as string

    Raises:
        FileNotFoundError: If theme file doesn't exist
        ValueError: If theme name is invalid
    """
    # Validate theme name (security: prevent path traversal)
    if not theme.replace("_", "").replace("-", "").isalnum():
        raise ValueError(f"Invalid theme name: {theme}")

    theme_path = THEMES_DIR / f"{theme}.css"
    if not theme_path.exists():
        raise FileNotFoundError(
            f"Theme '{theme}' not found. Available themes: {list_available_themes()}"
        )

    return _env.get_template(theme_path.name).render(view=view or Viewport())


def list_available_themes() -> List[str]:
    """
    List all available themes.

    Returns:
        List of theme names
    """
    if not THEMES_DIR.exists():
        return []

    return sorted(f.stem for f in THEMES_DIR.glob("*.css") if f.is_file())


def validate_theme(theme: str) -> bool:
    """Check if a theme exists."""
    try:
        get_css(theme=theme)
        return True
    except (FileNotFoundError, ValueError):
        return False


def get_template(name: str) -> Template:
    """Page template (``deck.html`` or ``onstage.html``) by file name."""
    return _env.get_template(name)
