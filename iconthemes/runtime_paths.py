"""Runtime path helpers for packaged resources."""

from __future__ import annotations

from pathlib import Path


def package_root() -> Path:
    """Return the directory of the installed `iconthemes` package."""
    return Path(__file__).resolve().parent


def builtin_plugins_root() -> Path:
    """Resolve the bundled plugin directory."""
    return package_root() / "plugins"


def default_font_path() -> Path:
    """Icon font used when neither the caller nor the theme names one.

    The font binary is not bundled; drop ``seti.woff`` next to the bundled
    theme JSON, or configure a font source override.
    """
    return builtin_plugins_root() / "theme-icons-seti" / "icons" / "seti.woff"
