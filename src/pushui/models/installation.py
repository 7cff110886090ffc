"""Installed component tracking models."""

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class InstalledComponent:
    """Represents an installed component in .pushui/installed.json."""

    name: str
    version: str
    installed_at: str  # ISO-8601 timestamp of last install/overwrite
    files: list[str]


@dataclass(frozen=True)
class InstalledRegistry:
    """All components installed in a project."""

    components: dict[str, InstalledComponent] = field(default_factory=dict)

    def update_component(self, component: InstalledComponent) -> "InstalledRegistry":
        """Return new registry with the component record replaced."""
        new_components = {**self.components, component.name: component}
        return replace(self, components=new_components)

    def is_installed(self, name: str) -> bool:
        return name in self.components
