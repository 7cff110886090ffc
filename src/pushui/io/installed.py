"""Installed-component state file I/O for .pushui/installed.json."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pushui.models.installation import InstalledComponent, InstalledRegistry

logger = logging.getLogger(__name__)

INSTALLED_FILE = Path(".pushui") / "installed.json"


class InstalledStore(ABC):
    """Abstract interface for the installed-component record.

    Every call to load() reads fresh state; there is no in-memory caching
    across calls.
    """

    @abstractmethod
    def load(self) -> InstalledRegistry:
        """Load the installed registry.

        Returns:
            InstalledRegistry; empty if the record is missing or corrupt
        """
        ...

    @abstractmethod
    def save(self, registry: InstalledRegistry) -> None:
        """Persist the installed registry. Failures are logged and ignored."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the record (for messages and debugging)."""
        ...


class FilesystemInstalledStore(InstalledStore):
    """Production implementation backed by a pretty-printed JSON file."""

    def __init__(self, project_dir: Path) -> None:
        self._project_dir = project_dir

    def load(self) -> InstalledRegistry:
        installed_path = self.path()
        try:
            data = json.loads(installed_path.read_text(encoding="utf-8"))
            return _parse_installed(data)
        except FileNotFoundError:
            return InstalledRegistry()
        except (
            OSError,
            UnicodeDecodeError,
            json.JSONDecodeError,
            KeyError,
            TypeError,
            AttributeError,
        ) as e:
            # Corrupt record resets tracked state
            logger.warning("Ignoring unreadable %s: %s", installed_path, e)
            return InstalledRegistry()

    def save(self, registry: InstalledRegistry) -> None:
        installed_path = self.path()
        try:
            installed_path.parent.mkdir(parents=True, exist_ok=True)
            installed_path.write_text(
                json.dumps(_serialize_installed(registry), indent=2) + "\n", encoding="utf-8"
            )
        except OSError as e:
            logger.warning("Could not write %s: %s", installed_path, e)

    def path(self) -> Path:
        return self._project_dir / INSTALLED_FILE


class InMemoryInstalledStore(InstalledStore):
    """Test implementation that keeps the record in memory."""

    def __init__(self, registry: InstalledRegistry | None = None) -> None:
        self._registry = registry if registry is not None else InstalledRegistry()
        self._save_count = 0

    @property
    def save_count(self) -> int:
        """Number of save() calls, for test assertions."""
        return self._save_count

    def load(self) -> InstalledRegistry:
        return self._registry

    def save(self, registry: InstalledRegistry) -> None:
        self._save_count += 1
        self._registry = registry

    def path(self) -> Path:
        return Path("/fake/project") / INSTALLED_FILE


def _parse_installed(data: dict[str, Any]) -> InstalledRegistry:
    components: dict[str, InstalledComponent] = {}
    for name, entry in data.get("components", {}).items():
        components[name] = InstalledComponent(
            name=entry["name"],
            version=entry["version"],
            installed_at=entry["installedAt"],
            files=[str(f) for f in entry["files"]],
        )
    return InstalledRegistry(components=components)


def _serialize_installed(registry: InstalledRegistry) -> dict[str, Any]:
    return {
        "components": {
            name: {
                "name": component.name,
                "version": component.version,
                "installedAt": component.installed_at,
                "files": component.files,
            }
            for name, component in registry.components.items()
        }
    }
