"""Remote registry access."""
