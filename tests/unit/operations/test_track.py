"""Tests for installation tracking."""

from pathlib import Path

from pushui.integrations.time import FakeTime
from pushui.io.installed import FilesystemInstalledStore, InMemoryInstalledStore
from pushui.operations.track import (
    DEFAULT_COMPONENT_VERSION,
    get_installed_components,
    is_component_installed,
    track_installation,
)
from tests.test_utils.registry_helpers import make_component


def test_track_records_version_timestamp_and_files() -> None:
    store = InMemoryInstalledStore()
    time = FakeTime()

    record = track_installation(
        store,
        time,
        "button",
        make_component("button", version="2.1.0"),
        [Path("/p/src/components/ui/button.tsx")],
    )

    assert record.version == "2.1.0"
    assert record.installed_at == "2024-01-15T12:00:00+00:00"
    assert record.files == ["/p/src/components/ui/button.tsx"]
    assert get_installed_components(store).components["button"] == record


def test_missing_version_defaults() -> None:
    store = InMemoryInstalledStore()

    record = track_installation(store, FakeTime(), "card", make_component("card"), [])

    assert record.version == DEFAULT_COMPONENT_VERSION
    assert record.files == []


def test_reinstall_replaces_previous_record() -> None:
    store = InMemoryInstalledStore()
    component = make_component("button")

    track_installation(store, FakeTime(), "button", component, [Path("a.tsx")])
    track_installation(store, FakeTime(), "button", component, [])

    installed = get_installed_components(store)
    assert list(installed.components) == ["button"]
    assert installed.components["button"].files == []


def test_tracking_keeps_other_components(tmp_path: Path) -> None:
    store = FilesystemInstalledStore(tmp_path)

    track_installation(store, FakeTime(), "button", make_component("button"), [])
    track_installation(store, FakeTime(), "card", make_component("card"), [])

    assert is_component_installed(store, "button")
    assert is_component_installed(store, "card")
    assert not is_component_installed(store, "dialog")
