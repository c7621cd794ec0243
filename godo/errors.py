from pathlib import Path

from godo.types import Cmd


class GodoError(Exception):
    pass


class UnsupportedPlatformError(GodoError):
    def __init__(self, system: str):
        super().__init__(f"OS not supported: '{system}'")
        self.system = system


class UnknownCommandError(GodoError):
    def __init__(self, token: str):
        super().__init__(f"Unknown command '{token}'")
        self.token = token


class LaunchError(GodoError):
    def __init__(self, cmd: Cmd, cause: OSError):
        super().__init__(f"could not start '{' '.join(cmd)}': {cause}")
        self.cmd = cmd
        self.cause = cause


class ExecutionError(GodoError):
    def __init__(self, cmd: Cmd, cause: Exception):
        super().__init__(f"'{' '.join(cmd)}' failed while running: {cause}")
        self.cmd = cmd
        self.cause = cause


class BuildError(GodoError):
    pass


class ConfigError(GodoError):
    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"invalid config '{path}': {cause}")
        self.path = path
        self.cause = cause
