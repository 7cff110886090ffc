"""Data models for pushui.

Import from submodules:
- config: PushUIConfig, StyleConfig, AliasConfig, StorybookConfig
- installation: InstalledComponent, InstalledRegistry
- registry: Registry, Component, ComponentFile, FileSpec
"""
