from collections.abc import Callable, Iterable
from dataclasses import dataclass

from returns.io import IOFailure, IOResultE, IOSuccess
from returns.iterables import Fold
from returns.maybe import Maybe

from godo.commands.build import build
from godo.commands.clean import clean
from godo.commands.run_cmd import run
from godo.config import Config
from godo.errors import UnknownCommandError
from godo.platforms import Platform
from godo.types import CommandName


@dataclass(frozen=True)
class Command:
    name: CommandName
    execute: Callable[[Platform, Config], IOResultE[None]]


COMMANDS: tuple[Command, ...] = (
    Command("clean", clean),
    Command("build", build),
    Command("run", run),
)


def resolve(token: str) -> Maybe[Command]:
    token = token.lower()
    return Maybe.from_optional(next((c for c in COMMANDS if c.name == token), None))


def _resolve_or_fail(token: str) -> IOResultE[Command]:
    command = resolve(token).value_or(None)
    if command is None:
        return IOFailure(UnknownCommandError(token))
    return IOSuccess(command)


def parse_commands(tokens: Iterable[str]) -> IOResultE[tuple[Command, ...]]:
    """Resolves every token before anything runs; fails on the first unknown one."""
    return Fold.collect(map(_resolve_or_fail, tokens), IOSuccess(()))


def usage(prog: str = "godo") -> str:
    return (
        "Usage:\n"
        f"\t{prog} 'command' [command...]\n"
        "Commands:\n"
        f"\t{', '.join(c.name for c in COMMANDS)}\n"
        "Examples:\n"
        f"\t{prog} run\n"
        f"\t{prog} clean build\n"
    )
