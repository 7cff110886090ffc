"""Tests for the installed-component state file."""

import json
import os
from pathlib import Path

import pytest

from pushui.io.installed import FilesystemInstalledStore
from pushui.models.installation import InstalledComponent, InstalledRegistry

requires_non_root = pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permission bits are not enforced for root",
)


def _registry() -> InstalledRegistry:
    return InstalledRegistry().update_component(
        InstalledComponent(
            name="button",
            version="1.2.0",
            installed_at="2024-01-15T12:00:00+00:00",
            files=["/project/src/components/ui/button.tsx"],
        )
    )


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)

    assert store.load() == InstalledRegistry()


def test_save_then_load(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)

    store.save(_registry())

    assert store.load() == _registry()


def test_saved_file_uses_wire_format(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)

    store.save(_registry())

    installed_path = tmp_path / ".pushui" / "installed.json"
    assert store.path() == installed_path
    content = installed_path.read_text(encoding="utf-8")
    assert content.startswith("{\n  \"components\"")
    data = json.loads(content)
    assert data["components"]["button"]["installedAt"] == "2024-01-15T12:00:00+00:00"
    assert data["components"]["button"]["version"] == "1.2.0"


def test_corrupt_file_loads_empty(tmp_path: Path) -> None:
    installed_path = tmp_path / ".pushui" / "installed.json"
    installed_path.parent.mkdir()
    installed_path.write_text("][", encoding="utf-8")

    assert FilesystemInstalledStore(tmp_path).load() == InstalledRegistry()


def test_wrong_shape_loads_empty(tmp_path: Path) -> None:
    installed_path = tmp_path / ".pushui" / "installed.json"
    installed_path.parent.mkdir()
    installed_path.write_text(json.dumps({"components": {"button": {}}}), encoding="utf-8")

    assert FilesystemInstalledStore(tmp_path).load() == InstalledRegistry()


def test_external_edits_are_visible_on_next_load(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)
    store.save(_registry())

    store.path().write_text(json.dumps({"components": {}}), encoding="utf-8")

    assert store.load() == InstalledRegistry()


def test_save_failure_is_swallowed(tmp_path: Path) -> None:
    (tmp_path / ".pushui").write_text("not a directory", encoding="utf-8")
    store = FilesystemInstalledStore(tmp_path)

    store.save(_registry())

    assert store.load() == InstalledRegistry()


def test_invalid_utf8_file_loads_empty(tmp_path: Path) -> None:
    installed_path = tmp_path / ".pushui" / "installed.json"
    installed_path.parent.mkdir()
    installed_path.write_bytes(b'{"components": "\xff\xfe"}')

    assert FilesystemInstalledStore(tmp_path).load() == InstalledRegistry()


@requires_non_root
def test_unreadable_state_directory_loads_empty(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)
    store.save(_registry())
    state_dir = tmp_path / ".pushui"
    state_dir.chmod(0o000)
    try:
        assert store.load() == InstalledRegistry()
    finally:
        state_dir.chmod(0o755)
