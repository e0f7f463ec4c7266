"""
Engine launcher.

Runs awk as a child process with inherited stdin, stdout and stderr and
hands its exit status back. From the caller's side this behaves like
exec: all output is awk's own.
"""

import shlex
import subprocess
from typing import List, Sequence

from fieldprint.errors import EngineLaunchError


def build_command(engine: str, engine_args: Sequence[str], program: str) -> List[str]:
    """
    Assemble the awk command line.

    Args:
        engine: awk binary
        engine_args: Options passed through unchanged
        program: Generated awk program text

    Returns:
        argv list, one element per argument (no shell involved)
    """
    return [engine, *engine_args, program]


def render_command_line(command: Sequence[str]) -> str:
    """Shell-quoted form of a command, safe to paste into a terminal."""
    return shlex.join(command)


def run_engine(command: Sequence[str]) -> int:
    """
    Run the engine and wait for it.

    Returns:
        The engine's exit status; 128 + N if it was killed by signal N

    Raises:
        EngineLaunchError: If the engine binary cannot be started
    """
    try:
        completed = subprocess.run(list(command))
    except OSError as e:
        raise EngineLaunchError(command[0], e) from e

    if completed.returncode < 0:
        return 128 - completed.returncode
    return completed.returncode


__all__ = ["build_command", "render_command_line", "run_engine"]
