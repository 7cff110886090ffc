"""Pydantic models for the component registry manifest."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ComponentFileType = Literal["component", "style", "story"]
ComponentType = Literal["registry:ui", "registry:util"]


class ComponentFile(BaseModel):
    """File descriptor entry in a component's file list."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1)
    type: ComponentFileType
    optional: bool = False


class ComponentDependencies(BaseModel):
    """Package and component dependencies declared by a component."""

    model_config = ConfigDict(frozen=True)

    npm: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class FileSpec:
    """Normalized view of a component file entry.

    Registry file lists mix bare filenames and full descriptors. Both are
    turned into a FileSpec before the installer sees them.
    """

    path: str
    type: ComponentFileType
    optional: bool

    @staticmethod
    def from_name(name: str) -> "FileSpec":
        """Create a FileSpec for a bare filename entry."""
        return FileSpec(path=name, type="component", optional=False)

    @staticmethod
    def from_descriptor(descriptor: ComponentFile) -> "FileSpec":
        """Create a FileSpec from a full file descriptor."""
        return FileSpec(path=descriptor.path, type=descriptor.type, optional=descriptor.optional)


class Component(BaseModel):
    """Component definition in the registry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str | None = None
    description: str | None = None
    type: ComponentType
    files: list[str | ComponentFile]
    dependencies: ComponentDependencies = Field(default_factory=ComponentDependencies)
    dev_dependencies: list[str] = Field(default_factory=list, alias="devDependencies")
    registry_dependencies: list[str] = Field(default_factory=list, alias="registryDependencies")

    def file_specs(self) -> list[FileSpec]:
        """Return the file list normalized to FileSpec, in declared order."""
        specs: list[FileSpec] = []
        for entry in self.files:
            if isinstance(entry, str):
                specs.append(FileSpec.from_name(entry))
            else:
                specs.append(FileSpec.from_descriptor(entry))
        return specs

    def dependency_names(self) -> list[str]:
        """Return component names this component depends on.

        registryDependencies come first, then dependencies.components. Both edge
        kinds mean the same thing.
        """
        return [*self.registry_dependencies, *self.dependencies.components]


class Registry(BaseModel):
    """Registry manifest served as index.json."""

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    components: dict[str, Component]
    utils: dict[str, Component] | None = None

    def to_json_dict(self) -> dict[str, object]:
        """Serialize using the wire field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
