"""Read-only queries over a fetched registry."""

from dataclasses import dataclass

from pushui.models.registry import Component, Registry


@dataclass(frozen=True)
class NpmDependencies:
    """Package names required by a set of components."""

    dependencies: list[str]
    dev_dependencies: list[str]

    @property
    def is_empty(self) -> bool:
        return not self.dependencies and not self.dev_dependencies


def get_component(registry: Registry, name: str) -> Component | None:
    """Get a component by name, or None if the registry doesn't have it."""
    return registry.components.get(name)


def get_available_components(registry: Registry) -> list[str]:
    """Get all component names in manifest order."""
    return list(registry.components)


def get_npm_dependencies(names: list[str], registry: Registry) -> NpmDependencies:
    """Collect npm dependencies for the given components.

    Names are deduplicated keeping first-seen order; unknown components are skipped.
    """
    deps: dict[str, None] = {}
    dev_deps: dict[str, None] = {}

    for name in names:
        component = get_component(registry, name)
        if component is None:
            continue
        for dep in component.dependencies.npm:
            deps[dep] = None
        for dep in component.dev_dependencies:
            dev_deps[dep] = None

    return NpmDependencies(dependencies=list(deps), dev_dependencies=list(dev_deps))
