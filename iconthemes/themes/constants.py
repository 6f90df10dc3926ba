"""Icon theme constants."""

from __future__ import annotations

DEFAULT_ICON_THEME_ID = "theme-icons-seti"

PRIMARY_CLASS = "oni-icon"
ICON_CLASS_PREFIX = f"fa {PRIMARY_CLASS} {PRIMARY_CLASS}-"

DEFAULT_FONT_FAMILY = "seti"
DEFAULT_FONT_FORMAT = "woff"

PLUGIN_MANIFEST = "package.json"
