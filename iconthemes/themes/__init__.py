"""Icon theme framework exports."""

from iconthemes.themes.constants import DEFAULT_ICON_THEME_ID, ICON_CLASS_PREFIX
from iconthemes.themes.models import (
    IconDefinition,
    IconFontSource,
    IconTheme,
    ThemeContribution,
    ThemeLoadError,
    ThemeParseError,
    ThemeReadError,
)
from iconthemes.themes.compiler import compile_theme_stylesheet
from iconthemes.themes.registry import ContributionRegistry
from iconthemes.themes.resolver import resolve_icon_class
from iconthemes.themes.service import IconThemeService

__all__ = [
    "DEFAULT_ICON_THEME_ID",
    "ICON_CLASS_PREFIX",
    "IconDefinition",
    "IconFontSource",
    "IconTheme",
    "ThemeContribution",
    "ThemeLoadError",
    "ThemeParseError",
    "ThemeReadError",
    "ContributionRegistry",
    "IconThemeService",
    "compile_theme_stylesheet",
    "resolve_icon_class",
]
