"""Placeholder rewriting for fetched component sources."""

import re

from pushui.models.config import PushUIConfig

ALIAS_COMPONENTS_PLACEHOLDER = "__ALIAS_COMPONENTS__"
ALIAS_LIB_PLACEHOLDER = "__ALIAS_LIB__"
IMPORT_CSS_PLACEHOLDER = "// __IMPORT_CSS__"

# Placeholder, rest of its line, and one trailing newline if present
_IMPORT_CSS_LINE = re.compile(re.escape(IMPORT_CSS_PLACEHOLDER) + r".*\n?")


def transform_component(content: str, config: PushUIConfig) -> str:
    """Replace placeholders in component content with project config values.

    All occurrences are replaced. With the tailwind+css strategy the CSS import
    placeholder line is kept as-is; with tailwind-only it is removed along with
    its line terminator.
    """
    result = content.replace(ALIAS_COMPONENTS_PLACEHOLDER, config.aliases.components)
    result = result.replace(ALIAS_LIB_PLACEHOLDER, config.aliases.lib)

    if config.style.strategy == "tailwind-only":
        result = _IMPORT_CSS_LINE.sub("", result)

    return result
