"""
Resolves the command used when a request is delegated to the real tput.

$HINATA_TPUT_CMD overrides the default and is split like a shell command line,
e.g. HINATA_TPUT_CMD="/usr/bin/tput" or HINATA_TPUT_CMD="ncurses-tput --strict".
Without it, `tput` is looked up on PATH, skipping any entry that is this
program itself so a wrapper installed as `tput` never calls itself.
"""

import os
import shlex
import shutil
import sys

from .log import debug_log, warn

TPUT_CMD_ENV = "HINATA_TPUT_CMD"
DEFAULT_TPUT = "tput"


def _same_file(a, b):
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def find_tput(name=DEFAULT_TPUT, path=None, self_path=None):
    """
    Returns the full path of the first `name` on PATH that is not `self_path`
    (defaults to the running script), or None if there is none.
    """
    if path is None:
        path = os.environ.get("PATH", os.defpath)
    if self_path is None:
        self_path = sys.argv[0] if sys.argv and sys.argv[0] else None

    for directory in path.split(os.pathsep):
        candidate = shutil.which(name, path=directory or os.curdir)
        if candidate is None:
            continue
        if self_path and _same_file(candidate, self_path):
            debug_log(f"skipping {candidate}: it is hnt-tput itself")
            continue
        return candidate
    return None


def tput_command():
    """
    The argv prefix for delegation. Always non-empty; when nothing is found the
    bare name is returned and the exec failure is reported by the caller.
    """
    env_cmd_str = os.environ.get(TPUT_CMD_ENV)
    if env_cmd_str:
        try:
            command = shlex.split(env_cmd_str)
            if command:
                debug_log(f"using ${TPUT_CMD_ENV}: {command}")
                return command
            warn(
                f"{TPUT_CMD_ENV} is set but resulted in an empty command after parsing: '{env_cmd_str}'. Using default."
            )
        except ValueError as e:
            warn(f"Could not parse {TPUT_CMD_ENV}: '{env_cmd_str}'. Error: {e}. Using default.")

    executable = find_tput()
    if executable is None:
        debug_log(f"'{DEFAULT_TPUT}' not found in PATH")
        return [DEFAULT_TPUT]
    return [executable]
