"""Component installation into the project tree."""

import logging
from pathlib import Path

import click

from pushui.context import PushUIContext
from pushui.io.config import get_component_path, get_lib_path
from pushui.models.config import PushUIConfig
from pushui.models.registry import Component, FileSpec
from pushui.naming import to_kebab_case
from pushui.operations.track import track_installation
from pushui.operations.transform import transform_component
from pushui.output import user_output, warning_output
from pushui.registry.exceptions import RegistryError

logger = logging.getLogger(__name__)

UTILS_FILE_NAME = "utils.ts"

UTILS_TEMPLATE = """import { type ClassValue, clsx } from 'clsx';
import { twMerge } from 'tailwind-merge';

/**
 * Merge Tailwind CSS classes with clsx
 */
export function cn(...inputs: ClassValue[]) {
  return twMerge(clsx(inputs));
}
"""


def install_component(
    ctx: PushUIContext,
    name: str,
    component: Component,
    config: PushUIConfig,
    *,
    overwrite: bool = False,
    registry_url: str | None = None,
) -> list[Path]:
    """Install a component's files into the configured component directory.

    Files are processed in declared order. Style files are skipped under the
    tailwind-only strategy and story files when Storybook is disabled. An
    existing target is left alone unless ``overwrite`` is set.

    A failing optional file is skipped; a failing required file aborts this
    component by re-raising. The installation is recorded with whatever files
    were written.

    Args:
        ctx: Application context
        name: Component name (used for the remote path and local file names)
        component: Registry definition
        config: Project configuration
        overwrite: Replace files that already exist
        registry_url: Registry base URL override

    Returns:
        Paths written by this install

    Raises:
        RegistryError: If a required file cannot be fetched
        OSError: If a required file cannot be written
    """
    component_dir = get_component_path(config, ctx.cwd)
    component_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []

    for spec in component.file_specs():
        if not _should_install(spec, config):
            continue

        target_path = component_dir / target_file_name(name, spec.path)

        if target_path.exists() and not overwrite:
            warning_output(f"Skipping {target_path.name} (already exists)")
            continue

        try:
            content = ctx.registry_client.fetch_component_file(name, spec.path, registry_url)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(transform_component(content, config), encoding="utf-8")
        except (RegistryError, OSError) as e:
            if not spec.optional:
                raise
            logger.debug("Skipping optional file %s for %s: %s", spec.path, name, e)
            continue

        written.append(target_path)
        user_output(click.style(f"  → {target_path}", dim=True))

    track_installation(ctx.installed_store, ctx.time, name, component, written)

    return written


def install_utils(config: PushUIConfig, project_dir: Path) -> bool:
    """Create the shared utils.ts in the lib directory if missing.

    Components import cn() from it, so this must run before installing any
    component in a batch.

    Returns:
        True if the file was created, False if it already existed
    """
    lib_path = get_lib_path(config, project_dir)
    utils_path = lib_path / UTILS_FILE_NAME

    if utils_path.exists():
        return False

    lib_path.mkdir(parents=True, exist_ok=True)
    utils_path.write_text(UTILS_TEMPLATE, encoding="utf-8")
    user_output(click.style("✓ ", fg="green") + f"Created {utils_path}")
    return True


def target_file_name(component_name: str, remote_name: str) -> str:
    """Get the local file name for a remote component file.

    Remote names already prefixed with the component name are kept. Others
    become ``{kebab-case component name}{extension}``.
    """
    if remote_name.startswith(component_name):
        return remote_name
    return f"{to_kebab_case(component_name)}{Path(remote_name).suffix}"


def _should_install(spec: FileSpec, config: PushUIConfig) -> bool:
    if spec.type == "style" and config.style.strategy == "tailwind-only":
        return False
    if spec.type == "story" and not config.storybook.enabled:
        return False
    return True
