"""Tests for icon theme stylesheet compilation."""

from __future__ import annotations

import os
from pathlib import Path

from iconthemes import runtime_paths
from iconthemes.themes.compiler import StyleWriter, compile_theme_stylesheet, resolve_font_source
from iconthemes.themes.models import IconDefinition, IconFontSource, IconTheme

NL = os.linesep


def _two_icon_theme() -> IconTheme:
    return IconTheme(
        icon_definitions={
            "a": IconDefinition(font_character="", font_color="#fff"),
            "b": IconDefinition(font_character=""),
        }
    )


def test_compile_emits_font_face_base_and_icon_rules() -> None:
    css = compile_theme_stylesheet(
        _two_icon_theme(), font_source=IconFontSource(path="/fonts/seti.woff", format="woff")
    )

    assert css.count("@font-face {") == 1
    assert "   src: url('/fonts/seti.woff') format('woff');" in css
    assert f".fa.oni-icon {{{NL}font-family: seti;{NL}}}{NL}" in css
    assert f".fa.oni-icon.oni-icon-a {{{NL}color: #fff;{NL}}}{NL}" in css
    assert f".fa.oni-icon.oni-icon-a:before {{{NL}   content: '';{NL}}}{NL}" in css
    assert f".fa.oni-icon.oni-icon-b:before {{{NL}   content: '';{NL}}}{NL}" in css
    assert ".fa.oni-icon.oni-icon-b {" not in css


def test_compile_keeps_definition_order() -> None:
    css = compile_theme_stylesheet(_two_icon_theme())
    assert css.index("oni-icon-a:before") < css.index("oni-icon-b:before")
    assert css.index("oni-icon-a {") < css.index("oni-icon-a:before")


def test_compile_is_deterministic() -> None:
    theme = _two_icon_theme()
    assert compile_theme_stylesheet(theme) == compile_theme_stylesheet(theme)


def test_compile_without_definitions_only_has_font_rules() -> None:
    css = compile_theme_stylesheet(IconTheme())
    assert css.count("{") == 2
    assert css.endswith(f"}}{NL}")


def test_style_writer_exact_output() -> None:
    writer = StyleWriter("custom")
    writer.write_font_face("icons", "font.woff", "woff")
    writer.write_icon("x", "red", "X")

    expected = NL.join(
        [
            "@font-face {",
            "   font-family: icons;",
            "   src: url('font.woff') format('woff');",
            "}",
            ".fa.custom {",
            "font-family: icons;",
            "}",
            ".fa.custom.custom-x {",
            "color: red;",
            "}",
            ".fa.custom.custom-x:before {",
            "   content: 'X';",
            "}",
        ]
    ) + NL
    assert writer.style == expected


def test_empty_font_color_emits_no_color_rule() -> None:
    writer = StyleWriter("oni-icon")
    writer.write_icon("plain", "", "P")
    assert "color:" not in writer.style


def test_font_source_defaults_to_packaged_font() -> None:
    source = resolve_font_source(IconTheme())
    assert source.path == runtime_paths.default_font_path().as_posix()
    assert source.format == "woff"


def test_font_source_uses_theme_fonts_relative_to_theme_file(tmp_path: Path) -> None:
    theme = IconTheme(
        fonts=IconFontSource(path="./seti.woff", format="woff2"),
        source_path=tmp_path / "icons" / "theme.json",
    )
    source = resolve_font_source(theme)
    assert source.path == (tmp_path / "icons" / "seti.woff").resolve().as_posix()
    assert source.format == "woff2"


def test_font_source_keeps_urls_as_is() -> None:
    theme = IconTheme(
        fonts=IconFontSource(path="https://cdn.example.com/seti.woff", format="woff"),
        source_path=Path("/themes/theme.json"),
    )
    assert resolve_font_source(theme).path == "https://cdn.example.com/seti.woff"


def test_explicit_font_source_wins_over_theme() -> None:
    override = IconFontSource(path="/override.woff", format="truetype")
    theme = IconTheme(fonts=IconFontSource(path="theme.woff", format="woff"))
    assert resolve_font_source(theme, override) is override


def test_font_source_keeps_data_uris_as_is() -> None:
    theme = IconTheme(
        fonts=IconFontSource(path="data:font/woff;base64,d09GRgABAAAA", format="woff"),
        source_path=Path("/themes/theme.json"),
    )
    assert resolve_font_source(theme).path == "data:font/woff;base64,d09GRgABAAAA"
