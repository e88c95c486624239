import json
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import showdeck` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def write_deck(root: Path, sections: dict, name: str = "Demo deck", view=None) -> Path:
    """Create a slides directory: ``sections`` maps section name -> {filename: content}."""
    root.mkdir(parents=True, exist_ok=True)
    manifest = {"name": name, "sections": [{"section": s} for s in sections]}
    if view is not None:
        manifest["view"] = view
    (root / "showoff.json").write_text(json.dumps(manifest), encoding="utf-8")
    for section, files in sections.items():
        section_dir = root / section
        section_dir.mkdir(parents=True, exist_ok=True)
        for filename, content in files.items():
            data = content.encode("utf-8") if isinstance(content, str) else content
            (section_dir / filename).write_bytes(data)
    return root


@pytest.fixture
def sample_deck(tmp_path):
    """Two-section deck with an image that the second section overrides."""
    return write_deck(
        tmp_path / "slides",
        {
            "intro": {
                "01_title.md": "!SLIDE\n# Hello **world**\n\n![logo](logo.png)\n",
                "logo.png": PNG_BYTES,
            },
            "body": {
                "01_points.md": "!SLIDE center\nMiddle\n.notes\nSay <hi>\n",
                "02_code.md": "!SLIDE bullets\n* one\n* two\n\nCode:\n\n    @@@python\n    print(1)\n",
                "logo.png": PNG_BYTES + b"2",
                "diagram.svg": "<svg xmlns='http://www.w3.org/2000/svg'></svg>",
            },
        },
    )


@pytest.fixture
def deck_factory(tmp_path):
    """Build ad-hoc slides directories under tmp_path."""
    def _make(sections, name="Demo deck", view=None, dirname="slides"):
        return write_deck(tmp_path / dirname, sections, name=name, view=view)
    return _make
