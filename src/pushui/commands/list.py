"""List command for showing the component catalog."""

import click

from pushui.context import PushUIContext
from pushui.error_boundary import cli_error_boundary
from pushui.io.config import load_config
from pushui.operations.status import list_component_status
from pushui.output import machine_output, user_output


@click.command(name="list")
@click.option("--installed", "-i", is_flag=True, help="Show only installed components")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: PushUIContext, installed: bool) -> None:
    """List available components."""
    config = load_config(ctx.cwd)
    registry = ctx.registry_client.fetch_registry(config.registry)

    statuses = list_component_status(ctx.installed_store, registry)
    shown = [s for s in statuses if s.installed] if installed else statuses

    if not shown:
        if installed:
            user_output("No components installed yet.")
            user_output("Run `pushui add` to install components.")
        else:
            user_output("No components available in registry.")
        return

    user_output(click.style("Available Components", bold=True))
    user_output()

    for status in shown:
        marker = click.style("✓", fg="green") if status.installed else click.style("○", dim=True)
        version = click.style(f" v{status.version}", dim=True) if status.version else ""
        description = click.style(f" - {status.description}", dim=True) if status.description else ""
        machine_output(f"  {marker} {status.name}{version}{description}")

    installed_count = sum(1 for s in statuses if s.installed)
    available_count = len(statuses) - installed_count

    user_output()
    user_output(click.style(f"{installed_count} installed, {available_count} available", dim=True))

    if available_count > 0:
        user_output(click.style("Run `pushui add <component>` to install", dim=True))
