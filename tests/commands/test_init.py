"""Tests for the init command."""

from pathlib import Path

from click.testing import CliRunner

from pushui.cli import cli
from pushui.context import PushUIContext
from pushui.io.config import load_config
from pushui.models.config import PushUIConfig


def test_init_with_defaults(cli_runner: CliRunner, tmp_project: Path) -> None:
    result = cli_runner.invoke(
        cli, ["init", "--yes"], obj=PushUIContext.for_test(cwd=tmp_project)
    )

    assert result.exit_code == 0, result.output
    assert "Created pushui.toml" in result.output
    assert "npm install clsx tailwind-merge class-variance-authority" in result.output
    assert load_config(tmp_project) == PushUIConfig()
    assert (tmp_project / "src" / "components" / "ui").is_dir()
    assert (tmp_project / "src" / "lib" / "utils.ts").exists()
    assert (tmp_project / ".pushui").is_dir()


def test_init_requires_package_json(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["init", "--yes"], obj=PushUIContext.for_test(cwd=tmp_path))

    assert result.exit_code == 1
    assert "No package.json found" in result.output
    assert not (tmp_path / "pushui.toml").exists()


def test_init_prompts_for_settings(cli_runner: CliRunner, tmp_project: Path) -> None:
    result = cli_runner.invoke(
        cli,
        ["init"],
        obj=PushUIContext.for_test(cwd=tmp_project),
        input="app/ui\ntailwind+css\ny\n",
    )

    assert result.exit_code == 0, result.output
    config = load_config(tmp_project)
    assert config.component_path == "app/ui"
    assert config.style.strategy == "tailwind+css"
    assert config.style.css_path == "src/styles/components"
    assert config.storybook.enabled
    assert (tmp_project / "app" / "ui").is_dir()


def test_existing_config_declined_keeps_file(cli_runner: CliRunner, tmp_project: Path) -> None:
    (tmp_project / "pushui.toml").write_text('component_path = "custom"\n', encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["init", "--yes"], obj=PushUIContext.for_test(cwd=tmp_project), input="n\n"
    )

    assert result.exit_code == 0
    assert "Initialization cancelled." in result.output
    assert load_config(tmp_project).component_path == "custom"


def test_force_overwrites_existing_config(cli_runner: CliRunner, tmp_project: Path) -> None:
    (tmp_project / "pushui.toml").write_text('component_path = "custom"\n', encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["init", "--yes", "--force"], obj=PushUIContext.for_test(cwd=tmp_project)
    )

    assert result.exit_code == 0, result.output
    assert load_config(tmp_project).component_path == "src/components/ui"


def test_init_keeps_existing_utils(cli_runner: CliRunner, tmp_project: Path) -> None:
    utils_path = tmp_project / "src" / "lib" / "utils.ts"
    utils_path.parent.mkdir(parents=True)
    utils_path.write_text("custom", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["init", "--yes"], obj=PushUIContext.for_test(cwd=tmp_project)
    )

    assert result.exit_code == 0, result.output
    assert utils_path.read_text(encoding="utf-8") == "custom"
