from returns.io import IOResultE

from pycompdb.config.settings import ConfigFile, create_settings, load_config
from pycompdb.domain.context import GenerateContext
from pycompdb.domain.generator import generate as generate_commands


def _run(context: GenerateContext) -> IOResultE[int]:
    return generate_commands(
        context.project,
        context.config,
        context.compiler,
        context.settings,
        context.workspace,
        context.output,
        verbose=context.verbose,
    ).map(lambda _: 0)


def generate(args) -> IOResultE[int]:
    def create(config_file: ConfigFile) -> IOResultE[int]:
        # before the project is loaded
        if args.auto and not create_settings(config_file).get_enable_compiler_commands_generation():
            if args.verbose:
                print("\033[93m[pycompdb]\033[0m automatic generation is disabled")
            return IOResultE.from_value(0)

        return GenerateContext.create_from_config_file(
            config_file,
            project=args.project,
            config_name=args.config,
            output=args.output,
            verbose=args.verbose,
        ).bind(_run)

    return load_config(args.dir).bind(create)
