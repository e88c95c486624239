"""
Loading of ``showoff.json`` deck manifests.

Shape::

    {
      "name": "My talk",
      "sections": [{"section": "intro"}, {"section": "demo"}],
      "view": {"height": 768, "width": 1024}
    }

Unknown keys are ignored.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .errors import ManifestError
from .models import Viewport

MANIFEST_NAME = "showoff.json"


@dataclass
class Manifest:
    name: str = ""
    sections: List[str] = field(default_factory=list)
    view_height: int = 0
    view_width: int = 0

    @property
    def viewport(self) -> Viewport:
        """Manifest viewport, or the 1024x768 default unless both sides are set."""
        if self.view_height and self.view_width:
            return Viewport(height=self.view_height, width=self.view_width)
        return Viewport()

    @classmethod
    def from_dict(cls, data: dict, source: str = MANIFEST_NAME) -> "Manifest":
        if not isinstance(data, dict):
            raise ManifestError(f"{source}: top level must be an object")

        sections = data.get("sections") or []
        if not isinstance(sections, list):
            raise ManifestError(f"{source}: 'sections' must be a list")

        names = []
        for i, entry in enumerate(sections):
            if not isinstance(entry, dict) or not isinstance(entry.get("section"), str):
                raise ManifestError(f"{source}: sections[{i}] has no 'section' path")
            names.append(entry["section"])

        name = data.get("name")
        if name is None:
            name = ""
        elif not isinstance(name, str):
            raise ManifestError(f"{source}: 'name' must be a string")

        view = data.get("view") or {}
        if not isinstance(view, dict):
            raise ManifestError(f"{source}: 'view' must be an object")
        try:
            height = int(view.get("height") or 0)
            width = int(view.get("width") or 0)
        except (TypeError, ValueError) as exc:
            raise ManifestError(f"{source}: invalid view size: {exc}") from exc

        return cls(
            name=name,
            sections=names,
            view_height=height,
            view_width=width,
        )


def load_manifest(slides_root: str | Path) -> Manifest:
    """
    Read and validate ``showoff.json`` from *slides_root*.

    Raises:
        ManifestError: If the file cannot be opened or parsed
    """
    manifest_path = Path(slides_root) / MANIFEST_NAME
    try:
        with open(manifest_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except OSError as exc:
        raise ManifestError(f"Error opening {manifest_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Error parsing json in {manifest_path}: {exc}") from exc

    return Manifest.from_dict(data, source=str(manifest_path))
