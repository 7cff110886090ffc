"""Add predesigned UI components to your project."""

__version__ = "1.0.0"
