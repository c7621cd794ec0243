from returns.io import IOResultE, impure_safe

from godo.config import Config
from godo.files import remove_dir
from godo.platforms import Platform


def clean(platform: Platform, config: Config) -> IOResultE[None]:
    print("[godo] cleaning...")
    return impure_safe(remove_dir)(config.build).map(lambda _: None)
