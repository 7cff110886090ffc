"""Batch installation of requested components and their dependencies."""

import logging
from dataclasses import dataclass
from pathlib import Path

from pushui.context import PushUIContext
from pushui.models.config import PushUIConfig
from pushui.models.registry import Registry
from pushui.operations.install import install_component, install_utils
from pushui.operations.resolve import resolve_install_set
from pushui.registry.exceptions import RegistryError
from pushui.registry.lookup import NpmDependencies, get_component, get_npm_dependencies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentInstallResult:
    """Outcome of installing one component in a batch."""

    name: str
    files: list[Path]
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def wrote_files(self) -> bool:
        return len(self.files) > 0


@dataclass(frozen=True)
class AddResult:
    """Outcome of a batch installation."""

    requested: list[str]
    install_set: list[str]
    results: list[ComponentInstallResult]
    npm: NpmDependencies
    utils_created: bool

    @property
    def installed_count(self) -> int:
        """Number of components that wrote at least one file."""
        return sum(1 for r in self.results if r.succeeded and r.wrote_files)

    @property
    def failed(self) -> list[ComponentInstallResult]:
        return [r for r in self.results if not r.succeeded]


def add_components(
    ctx: PushUIContext,
    names: list[str],
    registry: Registry,
    config: PushUIConfig,
    *,
    overwrite: bool = False,
) -> AddResult:
    """Install requested components together with their dependencies.

    Names are expected to have been checked against the registry already.
    The shared utils file is created first. Components are installed one at
    a time; a failure in one is recorded and the batch moves on.

    Args:
        ctx: Application context
        names: Requested component names
        registry: Fetched registry manifest
        config: Project configuration
        overwrite: Replace files that already exist

    Returns:
        AddResult with per-component outcomes and npm dependencies to install
    """
    install_set = resolve_install_set(names, registry)
    utils_created = install_utils(config, ctx.cwd)

    results: list[ComponentInstallResult] = []
    for name in install_set:
        component = get_component(registry, name)
        if component is None:
            continue

        try:
            files = install_component(
                ctx,
                name,
                component,
                config,
                overwrite=overwrite,
                registry_url=config.registry,
            )
        except (RegistryError, OSError) as e:
            logger.debug("Installing %s failed: %s", name, e)
            results.append(ComponentInstallResult(name=name, files=[], error=str(e)))
            continue

        results.append(ComponentInstallResult(name=name, files=files))

    return AddResult(
        requested=list(names),
        install_set=install_set,
        results=results,
        npm=get_npm_dependencies(install_set, registry),
        utils_created=utils_created,
    )
