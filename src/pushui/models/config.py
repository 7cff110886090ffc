"""Configuration models for pushui."""

from dataclasses import dataclass, field
from typing import Literal, cast

StyleStrategy = Literal["tailwind-only", "tailwind+css"]

STYLE_STRATEGIES: tuple[StyleStrategy, ...] = ("tailwind-only", "tailwind+css")


def validate_style_strategy(value: str) -> StyleStrategy:
    """Validate and return style strategy.

    Args:
        value: String to validate

    Returns:
        Valid StyleStrategy

    Raises:
        ValueError: If value is not a valid style strategy
    """
    if value not in STYLE_STRATEGIES:
        raise ValueError(f"Invalid style strategy: {value}")
    return cast(StyleStrategy, value)


@dataclass(frozen=True)
class StyleConfig:
    """How component styles are delivered."""

    strategy: StyleStrategy = "tailwind-only"
    css_path: str | None = None  # Only used with tailwind+css


@dataclass(frozen=True)
class AliasConfig:
    """Path aliases; must match the project's tsconfig paths."""

    components: str = "@/components"
    lib: str = "@/lib"


@dataclass(frozen=True)
class StorybookConfig:
    """Storybook integration settings."""

    enabled: bool = False
    path: str = "src/stories"
    auto_generate: bool = False


@dataclass(frozen=True)
class PushUIConfig:
    """Project configuration from pushui.toml.

    Loaded once per invocation and read-only thereafter.
    """

    component_path: str = "src/components/ui"
    style: StyleConfig = field(default_factory=StyleConfig)
    aliases: AliasConfig = field(default_factory=AliasConfig)
    storybook: StorybookConfig = field(default_factory=StorybookConfig)
    registry: str | None = None  # None = default registry URL
