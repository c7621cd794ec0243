from pathlib import Path

from returns.curry import partial
from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe

from godo.config import Config
from godo.errors import BuildError
from godo.files import ensure_dir, find_files, write_path_list
from godo.platforms import Platform


def _find_sources(config: Config) -> IOResultE[tuple[Path, ...]]:
    if not config.src.is_dir():
        return IOFailure(BuildError(f"source directory '{config.src}' not found"))
    sources = find_files(config.src, config.extension)
    print(f"[godo] found {len(sources)} '{config.extension}' file(s)")
    return IOSuccess(sources)


@impure_safe
def _write_sources(config: Config, sources: tuple[Path, ...]) -> Path:
    ensure_dir(config.build)
    ensure_dir(config.classes)
    return write_path_list(sources, config.srcs_file)


def _check_exit_code(exit_code: int) -> IOResultE[None]:
    if exit_code != 0:
        # the compiler already streamed its diagnostics to stderr
        return IOFailure(BuildError("javac failed: check err output"))
    return IOSuccess(None)


def build(platform: Platform, config: Config) -> IOResultE[None]:
    print("[godo] building...")
    return (
        _find_sources(config)
        .bind(partial(_write_sources, config))
        .bind(lambda _: platform.javac(config))
        .bind(_check_exit_code)
    )
