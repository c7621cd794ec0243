from functools import reduce
import sys

from returns.io import IOResultE
from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io

from godo.args import ArgsConfig, args_parse
from godo.commands import Command, parse_commands, usage
from godo.config import Config, config_load
from godo.errors import UnknownCommandError
from godo.platforms import Platform, identify


def execute_all(
    commands: tuple[Command, ...], platform: Platform, config: Config
) -> IOResultE[None]:
    """Runs the commands in order, stopping at the first failure."""
    return reduce(
        lambda result, command: result.bind(
            lambda _: command.execute(platform, config)
        ),
        commands,
        IOResultE.from_value(None),
    )


def godo(args: ArgsConfig, platform: Platform) -> IOResultE[None]:
    return parse_commands(args.commands).bind(
        lambda commands: config_load(args.dir, args.verbose).bind(
            lambda config: execute_all(commands, platform, config)
        )
    )


def _error(result: IOResultE) -> Exception:
    return unsafe_perform_io(result.failure())


def main(argv: list[str] | None = None) -> int:
    args = args_parse(sys.argv[1:] if argv is None else argv)

    found = identify()
    if not is_successful(found):
        print(f"[godo] error: {_error(found)}", file=sys.stderr)
        return 1
    platform = unsafe_perform_io(found.unwrap())
    print(f"[godo] platform: {platform.tag}")

    if not args.commands:
        print(usage(), file=sys.stderr)
        return 1

    result = godo(args, platform)
    if is_successful(result):
        return 0

    error = _error(result)
    if isinstance(error, UnknownCommandError):
        print(f"[godo] {error}", file=sys.stderr)
        print(usage(), file=sys.stderr)
    else:
        print(f"[godo] error: {error}", file=sys.stderr)
    return 1
