"""Icon theme contribution discovery."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from iconthemes.themes.constants import PLUGIN_MANIFEST
from iconthemes.themes.models import ThemeContribution

_MAX_PLUGIN_DIR_CANDIDATES = 512
_MAX_MANIFEST_BYTES = 256 * 1024


class ContributionRegistry:
    """Collects icon theme contributions from builtin and user plugin directories."""

    def __init__(self, builtin_root: Path, user_root: Path | None = None) -> None:
        self._builtin_root = builtin_root
        self._user_root = user_root
        self._contributions: list[ThemeContribution] = []
        self._load_errors: list[str] = []

    def reload(self) -> None:
        self._contributions = []
        self._load_errors = []
        self._load_from_root(self._builtin_root)
        if self._user_root is not None:
            self._load_from_root(self._user_root)

    def contributions(self) -> list[ThemeContribution]:
        return list(self._contributions)

    def theme_ids(self) -> list[str]:
        seen: dict[str, None] = {}
        for contribution in self._contributions:
            seen.setdefault(contribution.id, None)
        return list(seen)

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def _load_from_root(self, root: Path) -> None:
        if not root.exists():
            return
        try:
            all_dirs = sorted(path for path in root.iterdir() if path.is_dir())
        except OSError as exc:
            self._load_errors.append(f"Failed to list plugins in {root}: {exc}")
            return

        candidates: list[Path] = []
        for path in all_dirs:
            if path.is_symlink():
                self._load_errors.append(f"Skipping symlink plugin directory: {path}")
                continue
            candidates.append(path)
        if len(candidates) > _MAX_PLUGIN_DIR_CANDIDATES:
            self._load_errors.append(
                f"Plugin directory limit exceeded in {root}; "
                f"only first {_MAX_PLUGIN_DIR_CANDIDATES} folders were scanned."
            )
            candidates = candidates[:_MAX_PLUGIN_DIR_CANDIDATES]

        for plugin_dir in candidates:
            manifest_path = plugin_dir / PLUGIN_MANIFEST
            if not manifest_path.is_file():
                continue
            manifest = self._read_manifest(manifest_path)
            if manifest is None:
                continue
            self._contributions.extend(self._parse_icon_themes(manifest, plugin_dir))

    def _read_manifest(self, path: Path) -> Mapping[str, object] | None:
        try:
            if path.stat().st_size > _MAX_MANIFEST_BYTES:
                self._load_errors.append(f"{path}: file exceeds max size ({_MAX_MANIFEST_BYTES} bytes)")
                return None
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            self._load_errors.append(f"Unable to read {path}: {exc}")
            return None
        except json.JSONDecodeError as exc:
            self._load_errors.append(f"Invalid JSON in {path}: {exc}")
            return None
        if not isinstance(data, dict):
            self._load_errors.append(f"Expected JSON object in {path}")
            return None
        return data

    def _parse_icon_themes(
        self, manifest: Mapping[str, object], plugin_dir: Path
    ) -> list[ThemeContribution]:
        contributes = manifest.get("contributes")
        if not isinstance(contributes, Mapping):
            return []
        entries = contributes.get("iconThemes")
        if entries is None:
            return []
        if not isinstance(entries, list):
            self._load_errors.append(f"{plugin_dir}: contributes.iconThemes must be a list")
            return []

        found: list[ThemeContribution] = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                self._load_errors.append(f"{plugin_dir}: icon theme entry must be an object")
                continue
            theme_id = entry.get("id")
            theme_path = entry.get("path")
            if not isinstance(theme_id, str) or not theme_id:
                self._load_errors.append(f"{plugin_dir}: icon theme entry is missing an id")
                continue
            if not isinstance(theme_path, str) or not theme_path:
                self._load_errors.append(f"{plugin_dir}: icon theme {theme_id!r} is missing a path")
                continue
            label = entry.get("label")
            found.append(
                ThemeContribution(
                    id=theme_id,
                    path=str(plugin_dir / theme_path),
                    label=label if isinstance(label, str) else "",
                )
            )
        return found
