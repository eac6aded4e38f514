from pathlib import Path
from typing import Protocol
import argparse

from pycompdb.__version__ import __version__
from pycompdb.types import Action


class ArgsConfig(Protocol):
    action: Action
    dir: Path
    project: Path | None
    config: str | None
    output: Path | None
    auto: bool
    verbose: bool


def args_parse(argv: list[str]) -> ArgsConfig:
    parser = argparse.ArgumentParser(
        prog="pycompdb",
        description="Generates compile_commands.json for C/C++ projects",
        epilog="",
    )
    parser.add_argument("-d", "--dir", type=Path, default=Path.cwd())
    parser.add_argument("-p", "--project", type=Path, default=None)
    parser.add_argument("--version", action="version", version=__version__)

    subparser = parser.add_subparsers(dest="action", required=True)

    generate = subparser.add_parser("generate")
    generate.add_argument("-c", "--config", default=None)
    generate.add_argument("-o", "--output", type=Path, default=None)
    generate.add_argument(
        "--auto",
        action="store_true",
        help="skip generation if 'enable_generation' is false",
    )
    generate.add_argument("-v", "--verbose", action="store_true")

    subparser.add_parser("configs")

    return parser.parse_args(argv)  # type: ignore
