"""Naming utilities for component and file names.

Pure functions, no I/O.
"""

import re


def to_kebab_case(name: str) -> str:
    """Convert a component name to kebab-case.

    - Inserts a hyphen where a lowercase letter is followed by an uppercase one
    - Replaces runs of whitespace and underscores with a single hyphen
    - Lowercases the result

    Examples:
        >>> to_kebab_case("MyButton")
        'my-button'
        >>> to_kebab_case("date_picker")
        'date-picker'
    """
    hyphenated = re.sub(r"([a-z])([A-Z])", r"\1-\2", name)
    separated = re.sub(r"[\s_]+", "-", hyphenated)
    return separated.lower()


def to_pascal_case(name: str) -> str:
    """Convert a component name to PascalCase.

    Splits on hyphens, underscores and whitespace, capitalizes each word and
    lowercases the rest of it.

    Examples:
        >>> to_pascal_case("my-button")
        'MyButton'
        >>> to_pascal_case("date_picker input")
        'DatePickerInput'
    """
    words = re.split(r"[-_\s]+", name)
    return "".join(word[:1].upper() + word[1:].lower() for word in words)


def generate_css_import(component_name: str) -> str:
    """Build the CSS import statement for a component's stylesheet."""
    return f"import './{to_kebab_case(component_name)}.css';"
