import os
from pathlib import Path
from typing import Any, TypedDict

import toml

from returns.io import IOResultE, impure_safe

from pycompdb.domain.entities import Compiler, Define, IncludePath
from pycompdb.domain.paths import workspace_relative
from pycompdb.domain.providers import Settings, Workspace

CONFIG_NAME = "pycompdb.toml"


class ToolConfig(TypedDict, total=False):
    project: str
    config: str
    output: str
    enable_generation: bool
    c_standard: str
    cpp_standard: str
    defines: list[str]
    workspace: list[str]


class CompilerConfig(TypedDict, total=False):
    name: str
    defines: list[str]
    include_paths: list[str]


class ConfigFile(TypedDict):
    directory: Path
    pycompdb: ToolConfig
    associations: dict[str, str]
    compiler: CompilerConfig


@impure_safe
def load_config_file(config_path: Path) -> ConfigFile:
    dic: dict[str, Any] = toml.loads(config_path.read_text())
    return ConfigFile(
        directory=config_path.parent,
        pycompdb=dic.get("pycompdb", {}),
        associations=dic.get("files", {}).get("associations", {}),
        compiler=dic.get("compiler", {}),
    )


def create_settings(config: ConfigFile) -> Settings:
    tool = config["pycompdb"]
    return Settings(
        enable_generation=bool(tool.get("enable_generation", True)),
        c_standard=tool.get("c_standard", "c99"),
        cpp_standard=tool.get("cpp_standard", "c++14"),
        defines=tuple(tool.get("defines", ())),
    )


def create_workspace(config: ConfigFile) -> Workspace:
    folders = config["pycompdb"].get("workspace", ["."])
    return Workspace(
        folders=[Path(os.path.abspath(config["directory"] / folder)) for folder in folders],
        associations=dict(config["associations"]),
    )


def _compiler_include(path: str, config: ConfigFile, workspace: Workspace) -> Path | str:
    """Relative paths are relative to the toml and end up workspace relative like the config's."""
    if os.path.isabs(path):
        return path
    return workspace_relative(Path(os.path.abspath(config["directory"] / path)), workspace.root)


def create_compiler(config: ConfigFile, workspace: Workspace) -> Compiler:
    compiler = config["compiler"]
    return Compiler(
        name=compiler.get("name", ""),
        defines=tuple(map(Define.from_string, compiler.get("defines", ()))),
        include_paths=tuple(
            IncludePath(_compiler_include(path, config, workspace))
            for path in compiler.get("include_paths", ())
        ),
    )


def load_config(directory: Path) -> IOResultE[ConfigFile]:
    return load_config_file(Path(directory, CONFIG_NAME))


def project_file(config: ConfigFile, override: Path | None = None) -> IOResultE[Path]:
    path = override or config["pycompdb"].get("project")
    if not path:
        return IOResultE.from_failure(
            ValueError(f"No project file given in '{config['directory']}'")
        )
    return IOResultE.from_value(Path(config["directory"], path))
