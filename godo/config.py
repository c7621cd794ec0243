from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

import tomllib

from returns.curry import partial
from returns.io import IOResultE, impure_safe

from godo.errors import ConfigError
from godo.types import Cmd

CONFIG_FILE = "godo.toml"


class GodoTable(TypedDict, total=False):
    javac: str | list[str]
    extension: str


@dataclass(frozen=True)
class Config:
    """Project layout and toolchain settings, fixed for the whole run."""

    root: Path
    src: Path
    build: Path
    classes: Path
    srcs_file: Path

    javac: Cmd
    extension: str

    verbose: bool


def _javac_command(value: Any) -> Cmd:
    if isinstance(value, str):
        return (value,)
    if isinstance(value, list) and value and all(isinstance(v, str) for v in value):
        return tuple(value)
    raise ValueError(f"'javac' must be a string or a list of strings, got {value!r}")


@impure_safe
def _config_from_table(root: Path, table: GodoTable, verbose: bool) -> Config:
    build = root / "build"
    return Config(
        root=root,
        src=root / "src",
        build=build,
        classes=build / "classes",
        srcs_file=build / "srcs.txt",
        javac=_javac_command(table.get("javac", "javac")),
        extension=str(table.get("extension", ".java")),
        verbose=verbose,
    )


@impure_safe
def _read_table(filename: Path) -> GodoTable:
    if not filename.exists():
        return GodoTable()
    table = tomllib.loads(filename.read_text()).get("godo", {})
    if not isinstance(table, dict):
        raise ValueError("'godo' must be a table")
    return table  # type: ignore


def config_load(directory: Path, verbose: bool = False) -> IOResultE[Config]:
    root = directory.resolve()
    filename = root / CONFIG_FILE
    return (
        _read_table(filename)
        .bind(partial(_config_from_table, root, verbose=verbose))
        .alt(lambda e: ConfigError(filename, e))
    )
