from collections.abc import Iterable
from pathlib import Path
import shutil


def find_files(directory: Path, extension: str) -> tuple[Path, ...]:
    return tuple(
        sorted(f for f in directory.rglob(f"*{extension}") if f.is_file())
    )


def remove_dir(directory: Path) -> bool:
    # rmtree removes children before their parents
    if directory.exists():
        shutil.rmtree(directory)
        return True
    return False


def ensure_dir(directory: Path) -> bool:
    if directory.exists():
        return False
    print(f"[godo] mkdir: {directory}")
    directory.mkdir(parents=True)
    return True


def write_path_list(paths: Iterable[Path], destination: Path) -> Path:
    destination.write_text("".join(f"{p}\n" for p in paths))
    return destination
