from dataclasses import dataclass
import platform

from returns.io import IOFailure, IOResultE, IOSuccess

from godo import process
from godo.config import Config
from godo.errors import UnsupportedPlatformError
from godo.types import Cmd, PlatformTag


@dataclass(frozen=True)
class Platform:
    tag: PlatformTag

    def javac_command(self, config: Config) -> Cmd:
        """The sources are passed by reference to the list file, not inline."""
        return (
            *config.javac,
            f"@{config.srcs_file}",
            "-d",
            str(config.classes),
        )

    def javac(self, config: Config) -> IOResultE[int]:
        cmd = self.javac_command(config)
        if config.verbose:
            print(" ".join(cmd))
        return process.run(cmd)


def identify(system: str | None = None) -> IOResultE[Platform]:
    """Selects the platform for the host OS. Only unix is supported."""
    name = (platform.system() if system is None else system).lower()
    if "nix" in name or "nux" in name or "aix" in name:
        return IOSuccess(Platform("unix"))
    return IOFailure(UnsupportedPlatformError(name))
