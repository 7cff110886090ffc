"""Project configuration I/O for pushui.toml."""

import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from pushui.models.config import (
    AliasConfig,
    PushUIConfig,
    StorybookConfig,
    StyleConfig,
    validate_style_strategy,
)

CONFIG_FILE_NAME = "pushui.toml"


def config_path(project_dir: Path) -> Path:
    return project_dir / CONFIG_FILE_NAME


def config_exists(project_dir: Path) -> bool:
    """Check if pushui.toml exists in the project directory."""
    return config_path(project_dir).exists()


def load_config(project_dir: Path) -> PushUIConfig:
    """Load pushui.toml from the project directory if present; otherwise return defaults.

    Example config:
      component_path = "src/components/ui"

      [style]
      strategy = "tailwind+css"
      css_path = "src/styles/components"

      [aliases]
      components = "@/components"
      lib = "@/lib"

    Raises:
        ValueError: If the file is not valid TOML or holds invalid values
    """
    cfg_path = config_path(project_dir)
    if not cfg_path.exists():
        return PushUIConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    defaults = PushUIConfig()

    style_data = _table(data, "style", cfg_path)
    strategy = validate_style_strategy(
        _str(style_data, "strategy", defaults.style.strategy, cfg_path)
    )
    css_path = _optional_str(style_data, "css_path", cfg_path)

    alias_data = _table(data, "aliases", cfg_path)
    storybook_data = _table(data, "storybook", cfg_path)

    return PushUIConfig(
        component_path=_str(data, "component_path", defaults.component_path, cfg_path),
        style=StyleConfig(strategy=strategy, css_path=css_path),
        aliases=AliasConfig(
            components=_str(alias_data, "components", defaults.aliases.components, cfg_path),
            lib=_str(alias_data, "lib", defaults.aliases.lib, cfg_path),
        ),
        storybook=StorybookConfig(
            enabled=_bool(storybook_data, "enabled", defaults.storybook.enabled, cfg_path),
            path=_str(storybook_data, "path", defaults.storybook.path, cfg_path),
            auto_generate=_bool(
                storybook_data, "auto_generate", defaults.storybook.auto_generate, cfg_path
            ),
        ),
        registry=_optional_str(data, "registry", cfg_path),
    )


def save_config(project_dir: Path, config: PushUIConfig) -> Path:
    """Save PushUIConfig to pushui.toml.

    Uses tomlkit so the generated file carries explanatory comments.

    Returns:
        Path to the written file
    """
    doc = tomlkit.document()
    doc.add(tomlkit.comment("pushui configuration"))
    doc.add(tomlkit.nl())

    doc.add(tomlkit.comment("Where to install components"))
    doc["component_path"] = config.component_path
    if config.registry is not None:
        doc["registry"] = config.registry

    style = tomlkit.table()
    style["strategy"] = config.style.strategy
    if config.style.strategy == "tailwind+css":
        style["css_path"] = config.style.css_path or "src/styles/components"
    doc["style"] = style

    aliases = tomlkit.table()
    aliases.add(tomlkit.comment("Should match your tsconfig.json paths"))
    aliases["components"] = config.aliases.components
    aliases["lib"] = config.aliases.lib
    doc["aliases"] = aliases

    storybook = tomlkit.table()
    storybook["enabled"] = config.storybook.enabled
    storybook["path"] = config.storybook.path
    storybook["auto_generate"] = config.storybook.auto_generate
    doc["storybook"] = storybook

    cfg_path = config_path(project_dir)
    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return cfg_path


def get_component_path(config: PushUIConfig, cwd: Path) -> Path:
    """Get the resolved directory components are installed into."""
    return (cwd / config.component_path).resolve()


def get_lib_path(config: PushUIConfig, cwd: Path) -> Path:
    """Get the resolved lib directory.

    The lib alias is mapped to a real path by turning its leading "@/" into
    "src/" (e.g. "@/lib" -> "src/lib").
    """
    actual_path = config.aliases.lib.replace("@/", "src/", 1)
    return (cwd / actual_path).resolve()


def _table(data: dict[str, Any], key: str, cfg_path: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a table in {cfg_path}")
    return value


def _str(data: dict[str, Any], key: str, default: str, cfg_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string in {cfg_path}")
    return value


def _optional_str(data: dict[str, Any], key: str, cfg_path: Path) -> str | None:
    if key not in data:
        return None
    return _str(data, key, "", cfg_path)


def _bool(data: dict[str, Any], key: str, default: bool, cfg_path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false in {cfg_path}")
    return value
