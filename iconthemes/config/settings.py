"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from iconthemes.themes.constants import DEFAULT_ICON_THEME_ID
from iconthemes.themes.models import IconFontSource


class AppSettings:
    """Wraps QSettings for persistent icon theme configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("IconThemes", "IconThemes")

    # -- icon theme --

    @property
    def icon_theme_id(self) -> str:
        raw = self._qs.value("ui/icon_theme", DEFAULT_ICON_THEME_ID, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_ICON_THEME_ID

    @icon_theme_id.setter
    def icon_theme_id(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_ICON_THEME_ID
        self._qs.setValue("ui/icon_theme", cleaned)

    # -- font source --

    @property
    def font_source_override(self) -> IconFontSource | None:
        """Stored as ``path|format``; empty means use the theme's own font."""
        raw = self._qs.value("ui/icon_font_source", "", type=str)
        value = (raw or "").strip()
        if not value:
            return None
        path, _, font_format = value.rpartition("|")
        if not path:
            return IconFontSource(path=font_format, format="woff")
        return IconFontSource(path=path, format=font_format or "woff")

    @font_source_override.setter
    def font_source_override(self, value: IconFontSource | None) -> None:
        if value is None:
            self._qs.setValue("ui/icon_font_source", "")
            return
        self._qs.setValue("ui/icon_font_source", f"{value.path}|{value.format}")

    # -- plugins --

    @property
    def plugins_dir(self) -> Path:
        raw = self._qs.value("dirs/plugins", "", type=str)
        value = (raw or "").strip()
        if value:
            return Path(value)
        return self.app_data_dir / "plugins"

    @plugins_dir.setter
    def plugins_dir(self, value: Path | str) -> None:
        self._qs.setValue("dirs/plugins", str(value))

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def logs_dir(self) -> Path:
        path = self.app_data_dir / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "iconthemes"
