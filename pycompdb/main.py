import sys

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from pycompdb import commands
from pycompdb.args import ArgsConfig, args_parse


def pycompdb(args: ArgsConfig) -> IOResultE[int]:
    match args.action:
        case "generate":
            return commands.generate(args)

        case "configs":
            return commands.configs(args)

        case action:
            return IOResultE.from_failure(
                NotImplementedError(f"{action} is not implemented yet")
            )


def main(argv: list[str] | None = None) -> int:
    args = args_parse(sys.argv[1:] if argv is None else argv)
    result = unsafe_perform_io(pycompdb(args))
    if not is_successful(result):
        print(f"\033[91m[pycompdb]\033[0m Error: {result.failure()}")
        return 1
    return result.unwrap()


if __name__ == "__main__":
    sys.exit(main())
