"""Runtime icon theme apply service."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from PySide6.QtCore import QObject, Signal

from iconthemes.themes.compiler import compile_theme_stylesheet
from iconthemes.themes.loader import find_contribution, load_icon_theme_async
from iconthemes.themes.models import IconFontSource, IconTheme, ThemeContribution
from iconthemes.themes.registry import ContributionRegistry
from iconthemes.themes.resolver import resolve_icon_class

logger = logging.getLogger(__name__)

StylesheetSink = Callable[[str], None]


class IconThemeService(QObject):
    """Owns the active icon theme and notifies listeners when it changes.

    ``icon_theme_changed`` carries no payload; slots read ``active_theme``
    which is already updated when the signal fires.
    """

    icon_theme_changed = Signal()

    def __init__(
        self,
        registry: ContributionRegistry | None = None,
        settings=None,
        stylesheet_sink: StylesheetSink | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._registry = registry
        self._settings = settings
        self._stylesheet_sink = stylesheet_sink
        self._active_theme: IconTheme | None = None
        self._active_theme_id = ""
        self._active_stylesheet = ""

    @property
    def active_theme(self) -> IconTheme | None:
        return self._active_theme

    @property
    def active_theme_id(self) -> str:
        return self._active_theme_id

    @property
    def active_stylesheet(self) -> str:
        return self._active_stylesheet

    def reload_contributions(self) -> list[str]:
        if self._registry is None:
            return []
        self._registry.reload()
        return self._registry.load_errors()

    def available_contributions(self) -> list[ThemeContribution]:
        if self._registry is None:
            return []
        return self._registry.contributions()

    async def apply_theme(
        self,
        theme_id: str,
        contributions: Iterable[ThemeContribution] | None = None,
    ) -> IconTheme | None:
        """Load ``theme_id`` and make it active.

        Returns None without touching state when no contribution matches.
        ThemeReadError and ThemeParseError propagate, as does any error
        raised by the stylesheet sink; the previous theme stays active in
        those cases.
        """
        if contributions is None:
            contributions = self.available_contributions()
        contribution = find_contribution(theme_id, contributions)
        if contribution is None:
            logger.info("icon theme not found: %s", theme_id)
            return None

        theme = await load_icon_theme_async(Path(contribution.path))
        stylesheet = compile_theme_stylesheet(theme, font_source=self._font_source())
        # The sink runs before the swap so a failing sink leaves state as it was.
        if self._stylesheet_sink is not None:
            self._stylesheet_sink(stylesheet)

        self._active_theme = theme
        self._active_theme_id = theme_id
        self._active_stylesheet = stylesheet
        logger.info(
            "applied icon theme %s from %s (%d definitions)",
            theme_id,
            contribution.path,
            len(theme.icon_definitions),
        )
        if self._settings is not None:
            self._settings.icon_theme_id = theme_id
        self.icon_theme_changed.emit()
        return theme

    async def apply_startup_theme(self) -> IconTheme | None:
        if self._settings is None:
            return None
        return await self.apply_theme(self._settings.icon_theme_id)

    def icon_class_for_file(self, file_name: str, language: str | None = None) -> str | None:
        return resolve_icon_class(self._active_theme, file_name, language)

    def _font_source(self) -> IconFontSource | None:
        if self._settings is None:
            return None
        return self._settings.font_source_override
