"""Init command for creating pushui.toml."""

import click

from pushui.context import PushUIContext
from pushui.error_boundary import cli_error_boundary
from pushui.io.config import config_exists, get_component_path, save_config
from pushui.models.config import (
    STYLE_STRATEGIES,
    PushUIConfig,
    StorybookConfig,
    StyleConfig,
    validate_style_strategy,
)
from pushui.operations.install import install_utils
from pushui.output import user_output

BASE_NPM_DEPENDENCIES = ["clsx", "tailwind-merge", "class-variance-authority"]


@click.command("init")
@click.option("--yes", "-y", is_flag=True, help="Skip prompts and use defaults")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: PushUIContext, yes: bool, force: bool) -> None:
    """Initialize pushui in your project.

    Writes pushui.toml, creates the component directory and the shared
    utils file.
    """
    project_dir = ctx.cwd

    if not (project_dir / "package.json").exists():
        user_output(
            click.style("Error: ", fg="red")
            + "No package.json found. Please run this in a project directory."
        )
        raise SystemExit(1)

    if config_exists(project_dir) and not force:
        if not click.confirm("pushui.toml already exists. Overwrite?", default=False, err=True):
            user_output("Initialization cancelled.")
            return

    config = PushUIConfig() if yes else _prompt_config()

    cfg_path = save_config(project_dir, config)
    user_output(click.style("✓ ", fg="green") + f"Created {cfg_path.name}")

    get_component_path(config, project_dir).mkdir(parents=True, exist_ok=True)
    user_output(click.style("✓ ", fg="green") + f"Created {config.component_path}")

    install_utils(config, project_dir)

    (project_dir / ".pushui").mkdir(parents=True, exist_ok=True)

    user_output()
    user_output(click.style("✓ ", fg="green") + "PushUI initialized successfully!")
    user_output()
    user_output(click.style("Next steps:", bold=True))
    user_output("  1. Install required dependencies:")
    user_output(click.style(f"  $ npm install {' '.join(BASE_NPM_DEPENDENCIES)}", fg="cyan"))
    user_output("  2. Add components:")
    user_output(click.style("  $ pushui add button", fg="cyan"))


def _prompt_config() -> PushUIConfig:
    defaults = PushUIConfig()

    component_path = click.prompt(
        "Where should components be installed?",
        default=defaults.component_path,
        err=True,
    )
    strategy = click.prompt(
        "How do you want to handle styles?",
        type=click.Choice(STYLE_STRATEGIES),
        default=defaults.style.strategy,
        err=True,
    )
    storybook_enabled = click.confirm("Enable Storybook integration?", default=False, err=True)

    return PushUIConfig(
        component_path=component_path,
        style=StyleConfig(strategy=validate_style_strategy(strategy)),
        storybook=StorybookConfig(enabled=storybook_enabled, auto_generate=storybook_enabled),
    )
