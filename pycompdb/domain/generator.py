from fnmatch import fnmatchcase
import json
import os
import stat
from pathlib import Path
import tempfile
from typing import Iterable, Mapping

from returns.io import IOResultE, impure_safe
from returns.maybe import Maybe, Nothing, Some
from returns.pipeline import is_successful

from pycompdb.domain.entities import (
    CompileCommandRecord,
    Compiler,
    Config,
    Define,
    IncludePath,
    PreIncludePath,
    Project,
)
from pycompdb.domain.errors import MissingWorkspaceContext
from pycompdb.domain.providers import SettingsProvider, WorkspaceProvider
from pycompdb.types import Args

OUTPUT_NAME = "compile_commands.json"

DEFAULT_ASSOCIATIONS: Mapping[str, str] = {
    "*.c": "c",
    "*.cpp": "cpp",
}

OTHER_ARGUMENTS: Args = ("-nobuiltininc",)


def default_output_path(project_path: Path) -> Path:
    return Path(project_path).parent / OUTPUT_NAME


def _defines_to_flags(defines: Iterable[Define]) -> Args:
    return tuple(map(lambda d: d.to_flag(), defines))


def _includes_to_flags(includes: Iterable[IncludePath]) -> Args:
    return tuple(map(lambda i: i.to_flag(), includes))


def _pre_includes_to_flags(pre_includes: Iterable[PreIncludePath]) -> Args:
    return tuple(map(lambda pi: pi.to_flag(), pre_includes))


def shared_arguments(config: Config, compiler: Compiler, settings: SettingsProvider) -> Args:
    """Arguments every file gets, before its '-std=' flag.

    Config values come before the compiler's. Nothing is deduplicated.
    """
    return (
        *_defines_to_flags((*config.defines, *compiler.defines)),
        *map(lambda d: f"-D{d}", settings.get_defines()),
        *_includes_to_flags((*config.includes, *compiler.include_paths)),
        *_pre_includes_to_flags(config.pre_includes),
        *OTHER_ARGUMENTS,
    )


def _match(name: str, associations: Mapping[str, str]) -> Maybe[str]:
    return next(
        (Some(language) for pattern, language in associations.items() if fnmatchcase(name, pattern)),
        Nothing,
    )


def classify(file: Path, associations: Mapping[str, str] | None) -> Maybe[str]:
    """Language of file by its basename: user associations first, then the defaults."""
    name = Path(file).name
    return _match(name, associations or {}).lash(
        lambda _: _match(name, DEFAULT_ASSOCIATIONS)
    )


def standard_for(language: str, settings: SettingsProvider) -> Maybe[str]:
    match language:
        case "cpp":
            return Some(settings.get_cpp_standard())
        case "c":
            return Some(settings.get_c_standard())
        case _:
            return Nothing


def generate_database(
    project: Project,
    config: Config,
    compiler: Compiler,
    settings: SettingsProvider,
    workspace: WorkspaceProvider,
) -> IOResultE[tuple[CompileCommandRecord, ...]]:
    directory = workspace.root
    if directory is None:
        return IOResultE.from_failure(MissingWorkspaceContext("No workspace folder opened."))

    args = shared_arguments(config, compiler, settings)
    associations = workspace.file_associations

    def record(file: Path, standard: str) -> CompileCommandRecord:
        return CompileCommandRecord(
            directory=str(directory),
            file=str(file),
            arguments=(*args, f"-std={standard}"),
        )

    records = (
        classify(file, associations)
        .bind(lambda language: standard_for(language, settings))
        .map(lambda standard: record(file, standard))
        for file in map(lambda sf: sf.workspace_path, project.source_files)
    )
    return IOResultE.from_value(
        tuple(r.unwrap() for r in records if is_successful(r))
    )


def serialize(database: Iterable[CompileCommandRecord]) -> str:
    return json.dumps([r.to_json() for r in database], indent=4, ensure_ascii=False)


def database_changed(out_path: Path, database: Iterable[CompileCommandRecord]) -> bool:
    """False only if out_path holds a structurally equal database."""
    if not out_path.is_file():
        return True
    try:
        current = json.loads(out_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return True
    return current != [r.to_json() for r in database]


@impure_safe
def _write_database(out_path: Path, content: str) -> Path:
    """Atomically replaces the file out_path points to, keeping symlinks and the mode."""
    target = Path(os.path.realpath(out_path))
    target.parent.mkdir(parents=True, exist_ok=True)
    mode = stat.S_IMODE(target.stat().st_mode) if target.is_file() else 0o644
    fd, tmp = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp, mode)
        os.replace(tmp, target)
    except BaseException:
        os.unlink(tmp)
        raise
    return out_path


def _persist(
    out_path: Path, database: tuple[CompileCommandRecord, ...], verbose: bool
) -> IOResultE[None]:
    if not database_changed(out_path, database):
        if verbose:
            print(f"\033[93m[pycompdb]\033[0m '{out_path}' is up to date")
        return IOResultE.from_value(None)

    if verbose:
        print(f"\033[93m[pycompdb]\033[0m writing '{out_path}' ({len(database)} files)")
    return _write_database(out_path, serialize(database)).map(lambda _: None)


def generate(
    project: Project,
    config: Config,
    compiler: Compiler,
    settings: SettingsProvider,
    workspace: WorkspaceProvider,
    out_path: Path | None = None,
    verbose: bool = False,
) -> IOResultE[None]:
    """Writes the compile commands of every recognized source file of project.

    The file is only rewritten when its content would change.
    """
    output = Path(out_path) if out_path else default_output_path(project.path)
    return generate_database(project, config, compiler, settings, workspace).bind(
        lambda database: _persist(output, database, verbose)
    )
