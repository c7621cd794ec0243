from returns.io import IOResultE

from godo.config import Config
from godo.platforms import Platform


def run(platform: Platform, config: Config) -> IOResultE[None]:
    print("[godo] running...")
    print("[godo] 'run' not implemented yet!")
    return IOResultE.from_value(None)
