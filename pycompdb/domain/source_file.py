from pathlib import Path
import xml.etree.ElementTree as ET

from returns.pipeline import is_successful
from returns.result import Failure, ResultE, Success

from pycompdb.domain.errors import MalformedDeclaration
from pycompdb.domain.paths import resolve_project_path, workspace_relative
from pycompdb.domain.providers import WorkspaceProvider


class SourceFile:
    """A translation unit declared in the project file.

    The paths are derived on every access because the workspace root can change
    while the project directory can't.
    """

    def __init__(self, name: ET.Element, project_path: Path, workspace: WorkspaceProvider):
        self._name = name
        self.project_path = project_path
        self.workspace = workspace

    @property
    def path(self) -> str:
        return self._name.text or ""

    @property
    def absolute_path(self) -> Path:
        return resolve_project_path(self.path, self.project_path)

    @property
    def workspace_path(self) -> Path:
        return workspace_relative(self.absolute_path, self.workspace.root)

    def __repr__(self) -> str:
        return f"SourceFile({self.path!r})"


def parse_source_file(
    node: ET.Element, project_path: Path, workspace: WorkspaceProvider
) -> ResultE[SourceFile]:
    if node.tag != "file":
        return Failure(
            MalformedDeclaration(f"Expected an xml element 'file' instead of '{node.tag}'.")
        )

    name = node.find("name")
    if name is None:
        return Failure(MalformedDeclaration("Name node not present in file definition!"))

    return Success(SourceFile(name, project_path, workspace))


def source_files_from_xml(
    node: ET.Element, project_path: Path, workspace: WorkspaceProvider
) -> tuple[SourceFile, ...]:
    """All well formed 'file' declarations below node, in document order."""
    return tuple(
        result.unwrap()
        for result in map(
            lambda file: parse_source_file(file, project_path, workspace),
            node.iter("file"),
        )
        if is_successful(result)
    )
