"""Installation tracking."""

from pathlib import Path

from pushui.integrations.time import Time
from pushui.io.installed import InstalledStore
from pushui.models.installation import InstalledComponent, InstalledRegistry
from pushui.models.registry import Component

DEFAULT_COMPONENT_VERSION = "1.0.0"


def track_installation(
    store: InstalledStore,
    time: Time,
    name: str,
    component: Component,
    files: list[Path],
) -> InstalledComponent:
    """Record a component installation, replacing any previous record for it.

    Args:
        store: Installed-component store
        time: Clock for the installation timestamp
        name: Component name
        component: Registry definition (for the version)
        files: Paths actually written by this install (possibly empty)

    Returns:
        The InstalledComponent that was recorded
    """
    installed = InstalledComponent(
        name=name,
        version=component.version or DEFAULT_COMPONENT_VERSION,
        installed_at=time.now().isoformat(),
        files=[str(path) for path in files],
    )

    registry = store.load()
    store.save(registry.update_component(installed))
    return installed


def get_installed_components(store: InstalledStore) -> InstalledRegistry:
    return store.load()


def is_component_installed(store: InstalledStore, name: str) -> bool:
    """Check if a component is installed. Reads the store on every call."""
    return store.load().is_installed(name)
