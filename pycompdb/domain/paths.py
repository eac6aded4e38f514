import os
from pathlib import Path

PROJECT_DIR_TOKEN = "$PROJ_DIR$"


def resolve_project_path(path: str, project_dir: Path | str) -> Path:
    """Substitutes every '$PROJ_DIR$' and normalises the result to an absolute path.

    Only the path text is touched, the file system is never consulted.
    """
    return Path(os.path.abspath(path.replace(PROJECT_DIR_TOKEN, str(project_dir))))


def workspace_relative(path: Path, workspace_root: Path | None) -> Path:
    if workspace_root is None:
        return path
    return Path(os.path.relpath(path, workspace_root))
