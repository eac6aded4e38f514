from returns.io import IOResultE

from pycompdb.commands.configs import configs as list_configs
from pycompdb.commands.generate import generate as generate_commands


def generate(args) -> IOResultE[int]:
    return generate_commands(args)


def configs(args) -> IOResultE[int]:
    return list_configs(args)
