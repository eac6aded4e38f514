from dataclasses import dataclass
from pathlib import Path

from returns.io import IOResultE

from pycompdb.config.project import load_project, select_config
from pycompdb.config.settings import (
    ConfigFile,
    create_compiler,
    create_settings,
    create_workspace,
    project_file,
)
from pycompdb.domain.entities import Compiler, Config, Project
from pycompdb.domain.providers import Settings, Workspace


@dataclass()
class GenerateContext:
    project: Project
    config: Config
    compiler: Compiler
    settings: Settings
    workspace: Workspace
    output: Path | None
    verbose: bool

    @classmethod
    def create_from_config_file(
        cls,
        config_file: ConfigFile,
        project: Path | None = None,
        config_name: str | None = None,
        output: Path | None = None,
        verbose: bool = False,
    ) -> IOResultE["GenerateContext"]:
        tool = config_file["pycompdb"]
        out = output or tool.get("output")
        workspace = create_workspace(config_file)
        return (
            project_file(config_file, project)
            .bind(lambda path: load_project(path, workspace))
            .bind(
                lambda loaded: select_config(loaded, config_name or tool.get("config")).map(
                    lambda config: cls(
                        project=loaded,
                        config=config,
                        compiler=create_compiler(config_file, workspace),
                        settings=create_settings(config_file),
                        workspace=workspace,
                        output=Path(config_file["directory"], out) if out else None,
                        verbose=verbose,
                    )
                )
            )
        )
