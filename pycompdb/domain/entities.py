from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pycompdb.types import Args

if TYPE_CHECKING:
    from pycompdb.domain.source_file import SourceFile


@dataclass(frozen=True)
class Define:
    identifier: str
    value: str

    @classmethod
    def from_string(cls, define: str) -> "Define":
        """Parses 'NAME=VALUE'. A bare 'NAME' means the same as '-DNAME' does: 1"""
        identifier, sep, value = define.partition("=")
        return cls(identifier=identifier.strip(), value=value.strip() if sep else "1")

    def to_flag(self) -> str:
        return f"-D{self.identifier}={self.value}"


@dataclass(frozen=True)
class IncludePath:
    workspace_path: Path | str

    def to_flag(self) -> str:
        return f"-I{self.workspace_path}"


@dataclass(frozen=True)
class PreIncludePath:
    workspace_relative_path: Path | str

    def to_flag(self) -> str:
        return f"-include {self.workspace_relative_path}"


@dataclass(frozen=True)
class Config:
    name: str
    defines: tuple[Define, ...] = ()
    includes: tuple[IncludePath, ...] = ()
    pre_includes: tuple[PreIncludePath, ...] = ()


@dataclass(frozen=True)
class Compiler:
    name: str = ""
    defines: tuple[Define, ...] = ()
    include_paths: tuple[IncludePath, ...] = ()


@dataclass(frozen=True)
class Project:
    path: Path
    source_files: tuple["SourceFile", ...] = ()
    configurations: tuple[Config, ...] = ()

    def find_configuration(self, name: str) -> Config | None:
        return next((c for c in self.configurations if c.name == name), None)


@dataclass(frozen=True)
class CompileCommandRecord:
    """One entry of the compile_commands.json array"""

    directory: str
    file: str
    arguments: Args

    def to_json(self) -> dict:
        # key order is the serialised field order
        return {
            "directory": self.directory,
            "file": self.file,
            "arguments": list(self.arguments),
        }
