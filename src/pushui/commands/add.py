"""Add command for installing components into the project."""

import click

from pushui.context import PushUIContext
from pushui.error_boundary import cli_error_boundary
from pushui.io.config import config_exists, load_config
from pushui.operations.add import AddResult, add_components
from pushui.operations.resolve import resolve_install_set
from pushui.operations.status import fetch_installed_status
from pushui.output import user_output
from pushui.registry.lookup import get_available_components


@click.command("add")
@click.argument("components", nargs=-1)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.option("--overwrite", "-o", is_flag=True, help="Overwrite existing files")
@click.option("--all", "-a", "install_all", is_flag=True, help="Install all available components")
@click.pass_obj
@cli_error_boundary
def add_cmd(
    ctx: PushUIContext,
    components: tuple[str, ...],
    yes: bool,
    overwrite: bool,
    install_all: bool,
) -> None:
    """Add components to your project.

    Dependencies declared in the registry are installed as well.

    Examples:

        # Add a single component
        pushui add button

        # Reinstall everything, replacing local copies
        pushui add --all --overwrite
    """
    if not config_exists(ctx.cwd):
        user_output(
            click.style("Error: ", fg="red") + "No pushui.toml found. Run `pushui init` first."
        )
        raise SystemExit(1)

    config = load_config(ctx.cwd)
    registry = ctx.registry_client.fetch_registry(config.registry)
    available = get_available_components(registry)

    requested = list(components)
    if install_all:
        requested = available

    if not requested:
        requested = _prompt_selection(ctx, available)
        if not requested:
            user_output("No components selected.")
            return

    unknown = [name for name in requested if name not in available]
    if unknown:
        user_output(click.style("Error: ", fg="red") + f"Unknown components: {', '.join(unknown)}")
        user_output()
        user_output("Available components:")
        for name in available:
            user_output(f"  • {name}")
        raise SystemExit(1)

    install_set = resolve_install_set(requested, registry)
    if not yes and len(install_set) > len(requested):
        user_output(f"Installing {len(install_set)} components (including dependencies):")
        for name in install_set:
            user_output(f"  • {name}")
        if not click.confirm("Continue?", default=True, err=True):
            user_output("Installation cancelled.")
            return

    user_output()
    user_output(click.style(f"Installing {len(install_set)} component(s)...", bold=True))

    result = add_components(ctx, requested, registry, config, overwrite=overwrite)
    _report(result)


def _prompt_selection(ctx: PushUIContext, available: list[str]) -> list[str]:
    installed = fetch_installed_status(ctx.installed_store, available)

    user_output("Available components:")
    for name in available:
        suffix = click.style(" (installed)", dim=True) if installed[name] else ""
        user_output(f"  • {name}{suffix}")
    user_output()

    answer = click.prompt(
        "Select components to add (comma-separated)",
        default="",
        show_default=False,
        err=True,
    )
    return [name.strip() for name in answer.split(",") if name.strip()]


def _report(result: AddResult) -> None:
    for component_result in result.results:
        if not component_result.succeeded:
            user_output(click.style("✖ ", fg="red") + f"Failed to install {component_result.name}")
            user_output(f"  {component_result.error}")
        elif component_result.wrote_files:
            user_output(click.style("✓ ", fg="green") + f"Installed {component_result.name}")
        else:
            user_output(f"ℹ {component_result.name} (no new files)")

    user_output()
    user_output(click.style("✓ ", fg="green") + f"Installed {result.installed_count} component(s)")

    if result.npm.is_empty:
        return

    user_output()
    user_output(click.style("Install required dependencies:", bold=True))
    if result.npm.dependencies:
        user_output(click.style(f"  $ npm install {' '.join(result.npm.dependencies)}", fg="cyan"))
    if result.npm.dev_dependencies:
        dev = " ".join(result.npm.dev_dependencies)
        user_output(click.style(f"  $ npm install -D {dev}", fg="cyan"))
