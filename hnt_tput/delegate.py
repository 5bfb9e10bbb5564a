"""Hands a request to the real tput and reports its exit status."""

import subprocess
import sys

from .config import tput_command
from .log import debug_log

# What a shell reports when the command cannot be executed.
STATUS_NOT_FOUND = 127
STATUS_NOT_EXECUTABLE = 126


def run_tput(argv, command=None):
    """
    Runs `command + argv` and waits for it. stdin, stdout and stderr are
    inherited so tput's output reaches the terminal untouched. Returns the
    exit status verbatim (128 + N when the child dies from signal N).
    """
    if command is None:
        command = tput_command()
    cmd = list(command) + list(argv)
    debug_log("delegating:", cmd)

    # Anything we wrote ourselves must land before the child's output.
    sys.stdout.flush()

    try:
        process = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        print(f"hnt-tput: {cmd[0]}: command not found", file=sys.stderr)
        return STATUS_NOT_FOUND
    except PermissionError as e:
        print(f"hnt-tput: {cmd[0]}: {e.strerror}", file=sys.stderr)
        return STATUS_NOT_EXECUTABLE

    status = process.returncode
    if status < 0:
        status = 128 - status
    debug_log(f"{cmd[0]} exited with status {status}")
    return status
