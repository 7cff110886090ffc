from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """A project directory with a package.json, as `pushui init` expects."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    (project_dir / "package.json").write_text('{"name": "demo"}\n', encoding="utf-8")
    return project_dir
