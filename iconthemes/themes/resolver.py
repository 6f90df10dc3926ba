"""File name to icon class resolution."""

from __future__ import annotations

import os

from iconthemes.themes.constants import ICON_CLASS_PREFIX
from iconthemes.themes.models import IconTheme


def resolve_icon_class(
    theme: IconTheme | None, file_name: str, language: str | None = None
) -> str | None:
    """Return the CSS class for ``file_name``, or None when nothing matches.

    Precedence is exact file name, then extension, then language id, then
    the theme's default ``file`` icon.
    """
    if theme is None:
        return None

    key = resolve_icon_key(theme, file_name, language)
    if not key:
        return None
    return ICON_CLASS_PREFIX + key


def resolve_icon_key(
    theme: IconTheme, file_name: str, language: str | None = None
) -> str | None:
    if theme.file_names:
        key = theme.file_names.get(file_name.lower())
        if key:
            return key

    if theme.file_extensions:
        extension = _extension(file_name)
        if extension:
            # Exact case first so mixed-case theme keys keep working.
            key = theme.file_extensions.get(extension) or theme.file_extensions.get(
                extension.lower()
            )
            if key:
                return key

    if language and theme.language_ids:
        key = theme.language_ids.get(language)
        if key:
            return key

    return theme.file or None


def _extension(file_name: str) -> str:
    suffix = os.path.splitext(file_name)[1]
    return suffix[1:] if len(suffix) > 1 else ""
