"""
Runtime configuration for the deck server and CLI.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .theme_loader import DEFAULT_THEME

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def parse_port(value) -> int:
    """Validate a TCP port number given as text or int.

    Raises
    ------
    ValueError
        If *value* is not an integer between 1 and 65535.
    """
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid port {value!r}: not an integer") from None
    if not 0 < port < 65536:
        raise ValueError(f"invalid port {port}: must be between 1 and 65535")
    return port


@dataclass(frozen=True)
class DeckConfig:
    """Where the deck lives and how it is served.

    Passed explicitly to :class:`~showdeck.generator.DeckGenerator` and
    :func:`~showdeck.server.create_app`.
    """
    slides_root: Path = Path(".")
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    shjs_dir: Optional[Path] = None  # syntax highlighter assets served under /shjs/
    theme: str = DEFAULT_THEME
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None) -> "DeckConfig":
        """Build a config from ``SHOWDECK_*`` environment variables.

        Raises ``ValueError`` if ``SHOWDECK_PORT`` is not a valid port.
        """
        env = os.environ if environ is None else environ
        shjs_dir = env.get("SHOWDECK_SHJS_DIR")
        return cls(
            slides_root=Path(env.get("SHOWDECK_SLIDES_ROOT", ".")),
            host=env.get("SHOWDECK_HOST", DEFAULT_HOST),
            port=parse_port(env.get("SHOWDECK_PORT", DEFAULT_PORT)),
            shjs_dir=Path(shjs_dir) if shjs_dir else None,
            theme=env.get("SHOWDECK_THEME", DEFAULT_THEME),
        )

    def override(self, **changes) -> "DeckConfig":
        """Copy with every non-``None`` value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
