"""I/O operations for pushui."""

from pushui.io.cache import FilesystemRegistryCache, InMemoryRegistryCache, RegistryCache
from pushui.io.config import (
    config_exists,
    get_component_path,
    get_lib_path,
    load_config,
    save_config,
)
from pushui.io.installed import FilesystemInstalledStore, InMemoryInstalledStore, InstalledStore

__all__ = [
    "FilesystemInstalledStore",
    "FilesystemRegistryCache",
    "InMemoryInstalledStore",
    "InMemoryRegistryCache",
    "InstalledStore",
    "RegistryCache",
    "config_exists",
    "get_component_path",
    "get_lib_path",
    "load_config",
    "save_config",
]
