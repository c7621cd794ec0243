from pathlib import Path
from typing import Protocol
import argparse

from godo.__version__ import __version__


class ArgsConfig(Protocol):
    commands: list[str]
    dir: Path
    verbose: bool


def args_parse(argv: list[str]) -> ArgsConfig:
    parser = argparse.ArgumentParser(
        prog="godo",
        description="Builds Java projects",
        epilog="commands: clean, build, run",
    )
    parser.add_argument("-d", "--dir", type=Path, default=Path.cwd())
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("commands", nargs="*", metavar="command")

    return parser.parse_intermixed_args(argv)  # type: ignore
