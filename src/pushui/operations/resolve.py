"""Dependency resolution over the component graph."""

from pushui.models.registry import Registry


def resolve_component_dependencies(
    name: str,
    registry: Registry,
    resolved: set[str] | None = None,
) -> list[str]:
    """Resolve a component and everything it transitively depends on.

    Both registryDependencies and dependencies.components are followed. A
    component is recorded before its dependencies are visited, so the result
    is in depth-first pre-order: a dependency can appear after its dependent.

    Names already in ``resolved`` are not revisited, which also breaks cycles
    silently. Names missing from the registry are skipped.

    Args:
        name: Component to resolve
        registry: Registry manifest
        resolved: Shared set of already-resolved names; mutated in place

    Returns:
        Names newly resolved by this call, in pre-order. Empty if ``name`` was
        already resolved or is unknown.
    """
    if resolved is None:
        resolved = set()

    order: list[str] = []
    stack = [name]

    while stack:
        current = stack.pop()
        if current in resolved:
            continue

        component = registry.components.get(current)
        if component is None:
            continue

        resolved.add(current)
        order.append(current)

        # Reversed so the first declared dependency is visited first
        stack.extend(reversed(component.dependency_names()))

    return order


def resolve_install_set(names: list[str], registry: Registry) -> list[str]:
    """Resolve the union of dependency closures for a batch of requested names."""
    resolved: set[str] = set()
    install_set: list[str] = []
    for name in names:
        install_set.extend(resolve_component_dependencies(name, registry, resolved))
    return install_set
