from typing import Literal

CommandName = Literal["clean", "build", "run"]
PlatformTag = Literal["unix"]


Cmd = tuple[str, ...]
