"""
Zip export of a rendered deck.

The archive holds ``index.html`` plus every image under ``images/``, which is
exactly the layout the rewritten ``<img src="images/...">`` tags expect.
"""
from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Union
from urllib.parse import quote

from .errors import DeckError
from .generator import DeckGenerator
from .models import Deck

logger = logging.getLogger(__name__)


def archive_filename(deck: Deck) -> str:
    return f"{deck.title}.zip"


def content_disposition(deck: Deck) -> str:
    """``Content-Disposition`` header value for downloading *deck*.

    HTTP headers are latin-1, so the plain ``filename`` is an ASCII-only
    fallback and the real name goes in the RFC 5987 ``filename*`` parameter.
    """
    filename = archive_filename(deck)
    fallback = "".join(
        c if 32 <= ord(c) < 127 and c not in '"\\' else "_" for c in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def build_archive(generator: DeckGenerator, deck: Deck = None) -> bytes:
    """Zip the deck in memory and return the archive bytes.

    Raises:
        DeckError: If any image cannot be read
    """
    if deck is None:
        deck = generator.load()
    html = generator.render_html(deck)

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("index.html", html)
        for name, fullpath in sorted(deck.images.items()):
            try:
                zf.write(fullpath, arcname=f"images/{name}")
            except OSError as exc:
                raise DeckError(f"Error adding image {fullpath} to archive: {exc}") from exc
    logger.debug(f"Archived {len(deck.images)} images")
    return buf.getvalue()


def write_archive(generator: DeckGenerator, deck: Deck, target: Union[str, Path]) -> Path:
    """Write *deck* as a zip file to *target*.

    The archive is built in memory first, so nothing is written when any
    part of it fails.
    """
    data = build_archive(generator, deck)
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    return target
