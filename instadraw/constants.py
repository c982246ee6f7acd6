"""Project-wide constants and helpers for locating bundled assets."""

from __future__ import annotations

from pathlib import Path

PROJECT_NAME = "Rust Rendering"
PROJECT_DIRECTORY = "rust-rendering"
OPENGL_VERSION = (3, 3)

VERTEX_SHADER_PATH = "assets/shader/vertex.glsl"
FRAGMENT_SHADER_PATH = "assets/shader/fragment.glsl"
SPRITES_IMAGE_PATH = "assets/icon/icon.png"
FONT_IMAGE_PATH = "assets/font/font.png"
FONT_DATA_PATH = "assets/font/font.txt"


def asset_path(relative: str | Path, root: str | Path | None = None) -> Path:
    """Return the path of an asset below ``root`` (the working directory by default)."""
    base = Path.cwd() if root is None else Path(root)
    return base / relative


def load_text(relative: str | Path, root: str | Path | None = None) -> str:
    """Read an asset as UTF-8 text."""
    return asset_path(relative, root).read_text(encoding="utf-8")


def load_bytes(relative: str | Path, root: str | Path | None = None) -> bytes:
    """Read an asset as raw bytes."""
    return asset_path(relative, root).read_bytes()