"""Icon theme models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


class ThemeLoadError(Exception):
    """Raised when an icon theme file cannot be loaded."""


class ThemeReadError(ThemeLoadError):
    """Raised when the theme file cannot be read from disk."""


class ThemeParseError(ThemeLoadError, ValueError):
    """Raised when the theme file is not valid JSON."""


@dataclass(frozen=True, slots=True)
class IconDefinition:
    """A single glyph from the icon font."""

    font_character: str
    font_color: str | None = None


@dataclass(frozen=True, slots=True)
class IconFontSource:
    """Where the icon font lives and what format it is in."""

    path: str
    format: str


@dataclass(frozen=True, slots=True)
class ThemeContribution:
    """A candidate icon theme file declared by a plugin."""

    id: str
    path: str
    label: str = ""


@dataclass(frozen=True, slots=True)
class IconTheme:
    """An icon theme as parsed from its JSON file.

    The mapping fields are ``None`` when the theme file does not provide
    them; resolution skips those tiers.
    """

    icon_definitions: dict[str, IconDefinition] = field(default_factory=dict)
    fonts: IconFontSource | None = None
    file: str | None = None
    file_extensions: dict[str, str] | None = None
    file_names: dict[str, str] | None = None
    language_ids: dict[str, str] | None = None
    source_path: Path | None = None

    @classmethod
    def from_json(cls, data: Any, source_path: Path | None = None) -> IconTheme:
        """Build a theme from decoded JSON, ignoring fields of the wrong shape."""
        if not isinstance(data, Mapping):
            return cls(source_path=source_path)

        definitions: dict[str, IconDefinition] = {}
        raw_definitions = data.get("iconDefinitions")
        if isinstance(raw_definitions, Mapping):
            for key, raw in raw_definitions.items():
                if not isinstance(raw, Mapping):
                    continue
                character = raw.get("fontCharacter")
                color = raw.get("fontColor")
                definitions[key] = IconDefinition(
                    font_character="" if character is None else str(character),
                    font_color=color if isinstance(color, str) else None,
                )

        default_file = data.get("file")
        return cls(
            icon_definitions=definitions,
            fonts=_parse_fonts(data.get("fonts")),
            file=default_file if isinstance(default_file, str) else None,
            file_extensions=_string_map(data.get("fileExtensions")),
            file_names=_string_map(data.get("fileNames")),
            language_ids=_string_map(data.get("languageIds")),
            source_path=source_path,
        )


def _string_map(raw: Any) -> dict[str, str] | None:
    if not isinstance(raw, Mapping):
        return None
    return {key: value for key, value in raw.items() if isinstance(value, str)}


def _parse_fonts(raw: Any) -> IconFontSource | None:
    # Accepts {"path", "format"} or [{"id", "src": [{"path", "format"}], ...}]
    if isinstance(raw, list):
        for font in raw:
            if not isinstance(font, Mapping):
                continue
            sources = font.get("src")
            if isinstance(sources, list):
                for source in sources:
                    parsed = _parse_fonts(source)
                    if parsed is not None:
                        return parsed
        return None
    if isinstance(raw, Mapping):
        path = raw.get("path")
        if isinstance(path, str) and path:
            font_format = raw.get("format")
            return IconFontSource(
                path=path,
                format=font_format if isinstance(font_format, str) else "",
            )
    return None
