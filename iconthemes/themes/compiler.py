"""Icon theme to CSS compilation."""

from __future__ import annotations

import os
from pathlib import Path
import re

from iconthemes.runtime_paths import default_font_path
from iconthemes.themes.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_FORMAT, PRIMARY_CLASS
from iconthemes.themes.models import IconFontSource, IconTheme

# Two or more characters so Windows drive letters are not taken for schemes.
_URI_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+:")


class StyleWriter:
    """Accumulates CSS blocks for one primary icon class."""

    def __init__(self, primary_class: str) -> None:
        self._primary_class = primary_class
        self._style = ""

    @property
    def style(self) -> str:
        return self._style

    def write_font_face(self, font_family: str, source_url: str, font_format: str) -> None:
        self._append(
            [
                "@font-face {",
                f"   font-family: {font_family};",
                f"   src: url('{source_url}') format('{font_format}');",
                "}",
            ]
        )
        self._append(
            [
                f".fa.{self._primary_class} {{",
                f"font-family: {font_family};",
                "}",
            ]
        )

    def write_icon(self, icon_name: str, font_color: str | None, font_character: str) -> None:
        selector = f".fa.{self._primary_class}.{self._primary_class}-{icon_name}"
        if font_color:
            self._append([f"{selector} {{", f"color: {font_color};", "}"])
        self._append(
            [
                f"{selector}:before {{",
                f"   content: '{font_character}';",
                "}",
            ]
        )

    def _append(self, lines: list[str]) -> None:
        self._style += os.linesep.join(lines) + os.linesep


def resolve_font_source(
    theme: IconTheme, font_source: IconFontSource | None = None
) -> IconFontSource:
    """Pick the font for ``@font-face``: explicit, then the theme's, then packaged."""
    if font_source is not None:
        return font_source
    if theme.fonts is not None:
        path = theme.fonts.path
        if theme.source_path is not None and not _is_absolute_location(path):
            path = (theme.source_path.parent / path).resolve().as_posix()
        return IconFontSource(path=path, format=theme.fonts.format or DEFAULT_FONT_FORMAT)
    return IconFontSource(path=default_font_path().as_posix(), format=DEFAULT_FONT_FORMAT)


def compile_theme_stylesheet(
    theme: IconTheme,
    *,
    font_source: IconFontSource | None = None,
    font_family: str = DEFAULT_FONT_FAMILY,
    primary_class: str = PRIMARY_CLASS,
) -> str:
    """Compile an icon theme into a stylesheet."""
    source = resolve_font_source(theme, font_source)
    writer = StyleWriter(primary_class)
    writer.write_font_face(font_family, source.path, source.format)
    for name, definition in theme.icon_definitions.items():
        writer.write_icon(name, definition.font_color, definition.font_character)
    return writer.style


def _is_absolute_location(path: str) -> bool:
    return bool(_URI_SCHEME_RE.match(path)) or Path(path).is_absolute()
