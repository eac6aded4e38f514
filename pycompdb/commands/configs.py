from returns.io import IOResultE

from pycompdb.config.project import load_project
from pycompdb.config.settings import create_workspace, load_config, project_file
from pycompdb.domain.entities import Project


def _print_configs(project: Project) -> int:
    print(f"\033[93m[pycompdb]\033[0m '{project.path}'")
    for config in project.configurations:
        print(f"  {config.name}")
    return 0


def configs(args) -> IOResultE[int]:
    return load_config(args.dir).bind(
        lambda config_file: project_file(config_file, args.project).bind(
            lambda path: load_project(path, create_workspace(config_file))
        )
    ).map(_print_configs)
