from concurrent.futures import ThreadPoolExecutor, wait
import subprocess
import sys
from typing import IO, TextIO

from returns.io import IOFailure, IOResultE, IOSuccess

from godo.errors import ExecutionError, LaunchError
from godo.types import Cmd

# Seconds the drain tasks get to finish once the child has exited.
DRAIN_GRACE = 0.2


def _forward_lines(stream: IO[str], out: TextIO) -> None:
    with stream:
        for line in stream:
            out.write(line)
            out.flush()


def run(
    cmd: Cmd,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> IOResultE[int]:
    """Runs `cmd` and streams its output to `stdout` and `stderr` as it arrives.

    Both pipes are drained concurrently while waiting for the child, so a
    child that writes more than a pipe buffer can hold never blocks. Returns
    the exit code of the child.
    """
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        process = subprocess.Popen(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        return IOFailure(LaunchError(cmd, e))

    # 1x out stream, 1x err stream
    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="godo-drain")
    try:
        drains = (
            executor.submit(_forward_lines, process.stdout, stdout),
            executor.submit(_forward_lines, process.stderr, stderr),
        )
        try:
            exit_code = process.wait()
        except OSError as e:
            process.kill()
            return IOFailure(ExecutionError(cmd, e))

        done, pending = wait(drains, timeout=DRAIN_GRACE)
        for drain in done:
            if (error := drain.exception()) is not None:
                return IOFailure(ExecutionError(cmd, error))
        if pending:
            print(
                f"[godo] warning: output of '{cmd[0]}' still draining after {DRAIN_GRACE}s",
                file=sys.stderr,
            )
        return IOSuccess(exit_code)
    finally:
        executor.shutdown(wait=False)
