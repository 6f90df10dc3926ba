"""Command line bootstrap."""

from __future__ import annotations

import argparse
import asyncio
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from PySide6.QtCore import QCoreApplication

from iconthemes.config.settings import AppSettings
from iconthemes.errors import ErrorCode, IconThemeError, classify_exception, format_error_for_user
from iconthemes.runtime_paths import builtin_plugins_root, package_root
from iconthemes.themes.models import ThemeLoadError
from iconthemes.themes.registry import ContributionRegistry
from iconthemes.themes.service import IconThemeService

EXIT_OK = 0
EXIT_APPLY_FAILED = 1
EXIT_THEME_NOT_FOUND = 2


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("iconthemes")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RotatingFileHandler(
        settings.logs_dir / "iconthemes.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iconthemes",
        description="Apply an icon theme and print the icon class for each file.",
    )
    parser.add_argument("files", nargs="*", help="file names to resolve")
    parser.add_argument("--theme", help="icon theme id (defaults to the saved setting)")
    parser.add_argument("--language", help="language id used when no name or extension matches")
    parser.add_argument("--css", type=Path, help="write the compiled stylesheet to this path")
    parser.add_argument("--plugins-dir", type=Path, help="extra directory of user plugins")
    return parser


def _file_sink(path: Path):
    def write(stylesheet: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(stylesheet, encoding="utf-8")

    return write


def run_app(argv: list[str] | None = None, settings: AppSettings | None = None) -> int:
    """Apply the requested icon theme and report resolved classes."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    app = QCoreApplication.instance() or QCoreApplication([sys.argv[0]])
    app.setApplicationName("IconThemes")
    app.setOrganizationName("IconThemes")

    settings = settings if settings is not None else AppSettings()
    logger = _configure_logger(settings)
    logger.info("startup package_root=%s", package_root())

    builtin_plugins = builtin_plugins_root()
    if not builtin_plugins.exists():
        logger.warning("builtin plugin root missing at %s", builtin_plugins)

    user_root = args.plugins_dir if args.plugins_dir is not None else settings.plugins_dir
    registry = ContributionRegistry(builtin_root=builtin_plugins, user_root=user_root)
    service = IconThemeService(
        registry,
        settings=settings,
        stylesheet_sink=_file_sink(args.css) if args.css is not None else None,
    )
    errors = service.reload_contributions()
    if errors:
        logger.warning("plugin load warnings: %s", " | ".join(errors[:6]))

    theme_id = args.theme or settings.icon_theme_id
    try:
        theme = asyncio.run(service.apply_theme(theme_id))
    except (ThemeLoadError, OSError) as exc:
        error = classify_exception(exc, path=args.css if isinstance(exc, OSError) else None)
        logger.error("failed to apply icon theme %s: %s", theme_id, error.to_dict())
        print(format_error_for_user(error), file=sys.stderr)
        return EXIT_APPLY_FAILED

    if theme is None:
        known = ", ".join(registry.theme_ids()) or "none"
        error = IconThemeError(
            ErrorCode.THEME_NOT_FOUND,
            message=f"Icon theme not found: {theme_id}",
            details={"available": known},
        )
        print(format_error_for_user(error), file=sys.stderr)
        return EXIT_THEME_NOT_FOUND

    for file_name in args.files:
        icon_class = service.icon_class_for_file(file_name, args.language)
        print(f"{file_name}\t{icon_class or ''}")
    return EXIT_OK
