"""Icon theme file reading and parsing."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Iterable

from iconthemes.themes.models import (
    IconTheme,
    ThemeContribution,
    ThemeParseError,
    ThemeReadError,
)


def find_contribution(
    theme_id: str, contributions: Iterable[ThemeContribution]
) -> ThemeContribution | None:
    """Return the first contribution with a matching id and a usable path."""
    for contribution in contributions:
        if contribution.id == theme_id:
            return contribution if contribution.path else None
    return None


def read_theme_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeReadError(f"Unable to read icon theme {path}: {exc}") from exc


def parse_icon_theme(content: str, source_path: Path | None = None) -> IconTheme:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        where = source_path if source_path is not None else "<string>"
        raise ThemeParseError(f"Invalid JSON in {where}: {exc}") from exc
    return IconTheme.from_json(data, source_path=source_path)


def load_icon_theme(path: Path) -> IconTheme:
    """Read and parse an icon theme file synchronously."""
    return parse_icon_theme(read_theme_text(path), source_path=path)


async def load_icon_theme_async(path: Path) -> IconTheme:
    """Read the theme file off the event loop, then parse it."""
    content = await asyncio.to_thread(read_theme_text, path)
    return parse_icon_theme(content, source_path=path)
