"""Registry manifest cache.

The last fetched manifest is kept as JSON on disk. Freshness is the file's
modification time; the file itself carries no metadata.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from pushui.integrations.time import Time
from pushui.models.registry import Registry

logger = logging.getLogger(__name__)


def default_cache_path() -> Path:
    """Get the per-user registry cache file path.

    Returns:
        Path to ~/.pushui/cache/registry.json
    """
    return Path.home() / ".pushui" / "cache" / "registry.json"


class RegistryCache(ABC):
    """Abstract interface for the registry manifest cache."""

    @abstractmethod
    def read(self, max_age_seconds: float | None) -> Registry | None:
        """Read the cached registry.

        Args:
            max_age_seconds: Entries older than this are treated as absent.
                None accepts an entry of any age (stale fallback).

        Returns:
            Cached Registry, or None if absent, expired or unreadable
        """
        ...

    @abstractmethod
    def write(self, registry: Registry) -> None:
        """Store the registry. Failures are logged and ignored."""
        ...


class FilesystemRegistryCache(RegistryCache):
    """Production implementation that reads/writes a JSON cache file."""

    def __init__(self, time: Time, cache_path: Path | None = None) -> None:
        self._time = time
        self._path = cache_path if cache_path is not None else default_cache_path()

    @property
    def path(self) -> Path:
        return self._path

    def read(self, max_age_seconds: float | None) -> Registry | None:
        try:
            mtime = self._path.stat().st_mtime
            age = self._time.time() - mtime
            if max_age_seconds is not None and age > max_age_seconds:
                logger.debug("Registry cache expired (age %.0fs)", age)
                return None

            data = json.loads(self._path.read_text(encoding="utf-8"))
            return Registry.model_validate(data)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.debug("Ignoring unreadable registry cache %s: %s", self._path, e)
            return None

    def write(self, registry: Registry) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(registry.to_json_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            logger.debug("Could not write registry cache %s: %s", self._path, e)


class InMemoryRegistryCache(RegistryCache):
    """Test implementation holding a registry and a fixed age in memory."""

    def __init__(self, registry: Registry | None = None, age_seconds: float = 0.0) -> None:
        """Initialize in-memory cache.

        Args:
            registry: Initial cached registry (None = no cache)
            age_seconds: Age reported for the cached entry
        """
        self._registry = registry
        self._age_seconds = age_seconds
        self._writes: list[Registry] = []

    @property
    def writes(self) -> list[Registry]:
        """Registries written to the cache, for test assertions."""
        return self._writes

    def read(self, max_age_seconds: float | None) -> Registry | None:
        if self._registry is None:
            return None
        if max_age_seconds is not None and self._age_seconds > max_age_seconds:
            return None
        return self._registry

    def write(self, registry: Registry) -> None:
        self._writes.append(registry)
        self._registry = registry
        self._age_seconds = 0.0
