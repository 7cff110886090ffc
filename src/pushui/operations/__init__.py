"""Operations for pushui."""

from pushui.operations.add import AddResult, ComponentInstallResult, add_components
from pushui.operations.install import install_component, install_utils
from pushui.operations.resolve import resolve_component_dependencies, resolve_install_set
from pushui.operations.status import ComponentStatus, fetch_installed_status, list_component_status
from pushui.operations.track import (
    get_installed_components,
    is_component_installed,
    track_installation,
)
from pushui.operations.transform import transform_component

__all__ = [
    "AddResult",
    "ComponentInstallResult",
    "ComponentStatus",
    "add_components",
    "fetch_installed_status",
    "get_installed_components",
    "install_component",
    "install_utils",
    "is_component_installed",
    "list_component_status",
    "resolve_component_dependencies",
    "resolve_install_set",
    "track_installation",
    "transform_component",
]
