from pathlib import Path
import xml.etree.ElementTree as ET

from returns.io import IOResultE, impure_safe

from pycompdb.domain.entities import Config, Define, IncludePath, PreIncludePath, Project
from pycompdb.domain.paths import resolve_project_path, workspace_relative
from pycompdb.domain.providers import WorkspaceProvider
from pycompdb.domain.source_file import source_files_from_xml

DEFINES_OPTION = "CCDefines"
INCLUDES_OPTION = "CCIncludePath2"
PRE_INCLUDE_OPTION = "PreInclude"


def _option_states(configuration: ET.Element, option: str) -> tuple[str, ...]:
    """Non empty 'state' values of every option called option."""
    return tuple(
        state.text.strip()
        for node in configuration.iter("option")
        if node.findtext("name") == option
        for state in node.findall("state")
        if state.text and state.text.strip()
    )


def create_config(
    configuration: ET.Element, project_dir: Path, workspace: WorkspaceProvider
) -> Config:
    def to_workspace_path(path: str) -> Path:
        return workspace_relative(resolve_project_path(path, project_dir), workspace.root)

    return Config(
        name=configuration.findtext("name", default=""),
        defines=tuple(map(Define.from_string, _option_states(configuration, DEFINES_OPTION))),
        includes=tuple(
            IncludePath(to_workspace_path(path))
            for path in _option_states(configuration, INCLUDES_OPTION)
        ),
        pre_includes=tuple(
            PreIncludePath(to_workspace_path(path))
            for path in _option_states(configuration, PRE_INCLUDE_OPTION)
        ),
    )


def parse_project(root: ET.Element, project_path: Path, workspace: WorkspaceProvider) -> Project:
    project_dir = project_path.parent
    return Project(
        path=project_path,
        source_files=source_files_from_xml(root, project_dir, workspace),
        configurations=tuple(
            create_config(configuration, project_dir, workspace)
            for configuration in root.findall("configuration")
        ),
    )


@impure_safe
def load_project(project_path: Path, workspace: WorkspaceProvider) -> Project:
    project_path = Path(project_path).absolute()
    return parse_project(ET.parse(project_path).getroot(), project_path, workspace)


def select_config(project: Project, name: str | None) -> IOResultE[Config]:
    """The configuration called name, or the first one when no name is given."""
    if name is None and project.configurations:
        return IOResultE.from_value(project.configurations[0])

    config = project.find_configuration(name) if name else None
    if config is None:
        return IOResultE.from_failure(
            ValueError(
                f"Configuration '{name}' not found in '{project.path}' -> "
                f"{{{', '.join(c.name for c in project.configurations)}}}"
            )
        )
    return IOResultE.from_value(config)
