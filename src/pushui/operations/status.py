"""Installed-status queries across the catalog."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from pushui.io.installed import InstalledStore
from pushui.models.registry import Registry
from pushui.operations.track import is_component_installed
from pushui.registry.lookup import get_available_components

MAX_STATUS_WORKERS = 8


@dataclass(frozen=True)
class ComponentStatus:
    """Catalog entry annotated with installed state."""

    name: str
    installed: bool
    description: str
    version: str


def fetch_installed_status(store: InstalledStore, names: list[str]) -> dict[str, bool]:
    """Check installed status for many components concurrently.

    Each check reads the store independently. Result keys keep the order of
    ``names``.
    """
    if not names:
        return {}

    workers = min(MAX_STATUS_WORKERS, len(names))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        statuses = list(pool.map(lambda name: is_component_installed(store, name), names))

    return dict(zip(names, statuses, strict=True))


def list_component_status(store: InstalledStore, registry: Registry) -> list[ComponentStatus]:
    """Get every registry component with its installed state."""
    names = get_available_components(registry)
    installed = fetch_installed_status(store, names)

    return [
        ComponentStatus(
            name=name,
            installed=installed[name],
            description=registry.components[name].description or "",
            version=registry.components[name].version or "",
        )
        for name in names
    ]
