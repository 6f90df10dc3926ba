"""Tests for icon theme contribution discovery."""

from __future__ import annotations

import json
from pathlib import Path

from iconthemes import runtime_paths
from iconthemes.themes.registry import ContributionRegistry


def _write_plugin(plugin_dir: Path, icon_themes: object) -> None:
    plugin_dir.mkdir(parents=True, exist_ok=True)
    manifest = {"name": plugin_dir.name, "contributes": {"iconThemes": icon_themes}}
    (plugin_dir / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")


def test_registry_collects_builtin_then_user(tmp_path: Path) -> None:
    builtin_root = tmp_path / "builtin"
    user_root = tmp_path / "user"
    _write_plugin(builtin_root / "seti", [{"id": "seti", "label": "Seti", "path": "icons/seti.json"}])
    _write_plugin(user_root / "my-seti", [{"id": "seti", "path": "theme.json"}])

    registry = ContributionRegistry(builtin_root=builtin_root, user_root=user_root)
    registry.reload()

    contributions = registry.contributions()
    assert [c.id for c in contributions] == ["seti", "seti"]
    assert contributions[0].path == str(builtin_root / "seti" / "icons" / "seti.json")
    assert contributions[0].label == "Seti"
    assert contributions[1].path == str(user_root / "my-seti" / "theme.json")
    assert registry.theme_ids() == ["seti"]
    assert registry.load_errors() == []


def test_registry_ignores_plugins_without_icon_themes(tmp_path: Path) -> None:
    root = tmp_path / "plugins"
    plugin = root / "language-only"
    plugin.mkdir(parents=True)
    (plugin / "package.json").write_text(json.dumps({"contributes": {"languages": []}}), encoding="utf-8")
    (root / "no-manifest").mkdir()

    registry = ContributionRegistry(builtin_root=root)
    registry.reload()

    assert registry.contributions() == []
    assert registry.load_errors() == []


def test_registry_records_bad_manifests(tmp_path: Path) -> None:
    root = tmp_path / "plugins"
    broken = root / "broken"
    broken.mkdir(parents=True)
    (broken / "package.json").write_text("{oops", encoding="utf-8")
    _write_plugin(root / "no-path", [{"id": "lonely"}])
    _write_plugin(root / "not-a-list", {"id": "x", "path": "x.json"})
    _write_plugin(root / "good", [{"id": "good", "path": "good.json"}])

    registry = ContributionRegistry(builtin_root=root)
    registry.reload()

    assert [c.id for c in registry.contributions()] == ["good"]
    errors = registry.load_errors()
    assert any("Invalid JSON" in msg for msg in errors)
    assert any("'lonely' is missing a path" in msg for msg in errors)
    assert any("must be a list" in msg for msg in errors)


def test_registry_missing_roots_are_empty(tmp_path: Path) -> None:
    registry = ContributionRegistry(builtin_root=tmp_path / "nope", user_root=tmp_path / "also-nope")
    registry.reload()
    assert registry.contributions() == []


def test_reload_replaces_previous_results(tmp_path: Path) -> None:
    root = tmp_path / "plugins"
    _write_plugin(root / "one", [{"id": "one", "path": "one.json"}])
    registry = ContributionRegistry(builtin_root=root)
    registry.reload()
    _write_plugin(root / "two", [{"id": "two", "path": "two.json"}])
    registry.reload()

    assert registry.theme_ids() == ["one", "two"]


def test_bundled_plugin_is_discovered() -> None:
    registry = ContributionRegistry(builtin_root=runtime_paths.builtin_plugins_root())
    registry.reload()

    assert "theme-icons-seti" in registry.theme_ids()
    assert Path(registry.contributions()[0].path).is_file()
