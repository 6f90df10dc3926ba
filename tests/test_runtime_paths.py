from __future__ import annotations

from iconthemes import runtime_paths
from iconthemes.themes.compiler import compile_theme_stylesheet
from iconthemes.themes.loader import load_icon_theme


def test_source_package_root_points_to_repo_package() -> None:
    root = runtime_paths.package_root()
    assert root.name == "iconthemes"
    assert (root / "themes").exists()


def test_builtin_plugins_and_default_font_paths_resolve() -> None:
    assert runtime_paths.builtin_plugins_root().name == "plugins"
    font = runtime_paths.default_font_path()
    assert font.name == "seti.woff"
    assert font.parent.parent.name == "theme-icons-seti"


def test_bundled_theme_font_face_points_into_plugin_icons_dir() -> None:
    theme_path = runtime_paths.builtin_plugins_root() / "theme-icons-seti" / "icons" / "seti-icon-theme.json"
    css = compile_theme_stylesheet(load_icon_theme(theme_path))

    expected = runtime_paths.default_font_path().resolve().as_posix()
    assert f"src: url('{expected}') format('woff');" in css
