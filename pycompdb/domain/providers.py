from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Protocol


class SettingsProvider(Protocol):
    def get_enable_compiler_commands_generation(self) -> bool:
        ...

    def get_c_standard(self) -> str:
        ...

    def get_cpp_standard(self) -> str:
        ...

    def get_defines(self) -> tuple[str, ...]:
        ...


class WorkspaceProvider(Protocol):
    @property
    def root(self) -> Path | None:
        ...

    @property
    def file_associations(self) -> Mapping[str, str]:
        ...


@dataclass(frozen=True)
class Settings:
    enable_generation: bool = True
    c_standard: str = "c99"
    cpp_standard: str = "c++14"
    defines: tuple[str, ...] = ()

    def get_enable_compiler_commands_generation(self) -> bool:
        return self.enable_generation

    def get_c_standard(self) -> str:
        return self.c_standard

    def get_cpp_standard(self) -> str:
        return self.cpp_standard

    def get_defines(self) -> tuple[str, ...]:
        return self.defines


@dataclass
class Workspace:
    """Open workspace folders. The first folder is the root."""

    folders: list[Path] = field(default_factory=list)
    associations: dict[str, str] = field(default_factory=dict)

    @property
    def root(self) -> Path | None:
        return self.folders[0] if self.folders else None

    @property
    def file_associations(self) -> Mapping[str, str]:
        return self.associations
