"""Application context with dependency injection.

The PushUIContext dataclass holds all dependencies (registry access, installed
record, clock) and is created once at CLI entry point, then threaded through
the application.
"""

from dataclasses import dataclass
from pathlib import Path

from pushui.integrations.http import HttpClient, RealHttpClient
from pushui.integrations.time import RealTime, Time
from pushui.io.cache import FilesystemRegistryCache, RegistryCache
from pushui.io.installed import FilesystemInstalledStore, InstalledStore
from pushui.registry.client import RegistryClient


@dataclass(frozen=True)
class PushUIContext:
    """Immutable context holding all dependencies for pushui operations.

    Created at CLI entry point via create_context() and threaded through
    the application via Click's context system. Frozen to prevent accidental
    modification at runtime.

    Attributes:
        registry_client: Manifest and component file access
        installed_store: Record of installed components for the project
        time: Clock for cache freshness and installation timestamps
        cwd: Project directory (current working directory at CLI invocation)
    """

    registry_client: RegistryClient
    installed_store: InstalledStore
    time: Time
    cwd: Path

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        registry_cache: RegistryCache | None = None,
        installed_store: InstalledStore | None = None,
        time: Time | None = None,
        cwd: Path | None = None,
    ) -> "PushUIContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default so no network or home-directory access happens.

        Args:
            http: Optional HttpClient. If None, creates an empty FakeHttpClient.
            registry_cache: Optional RegistryCache. If None, creates an empty
                InMemoryRegistryCache.
            installed_store: Optional InstalledStore. If None, creates an
                InMemoryInstalledStore.
            time: Optional Time. If None, creates FakeTime.
            cwd: Project directory (defaults to Path("/fake/project"))

        Example:
            >>> http = FakeHttpClient(responses={url: manifest_json})
            >>> ctx = PushUIContext.for_test(http=http, cwd=tmp_path)
        """
        from pushui.integrations.http import FakeHttpClient
        from pushui.integrations.time import FakeTime
        from pushui.io.cache import InMemoryRegistryCache
        from pushui.io.installed import InMemoryInstalledStore

        resolved_http: HttpClient = http if http is not None else FakeHttpClient()
        resolved_cache: RegistryCache = (
            registry_cache if registry_cache is not None else InMemoryRegistryCache()
        )
        resolved_store: InstalledStore = (
            installed_store if installed_store is not None else InMemoryInstalledStore()
        )
        resolved_time: Time = time if time is not None else FakeTime()
        resolved_cwd: Path = cwd if cwd is not None else Path("/fake/project")

        return PushUIContext(
            registry_client=RegistryClient(http=resolved_http, cache=resolved_cache),
            installed_store=resolved_store,
            time=resolved_time,
            cwd=resolved_cwd,
        )


def create_context(cwd: Path | None = None) -> PushUIContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Args:
        cwd: Project directory (defaults to the current working directory)
    """
    project_dir = cwd if cwd is not None else Path.cwd()
    time = RealTime()
    return PushUIContext(
        registry_client=RegistryClient(
            http=RealHttpClient(),
            cache=FilesystemRegistryCache(time),
        ),
        installed_store=FilesystemInstalledStore(project_dir),
        time=time,
        cwd=project_dir,
    )
