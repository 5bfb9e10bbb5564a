"""
hnt-tput [-S] [-T term] [-V] capability [arg1 [arg2]]

Drop-in for the tput capabilities scripts use most. Unknown capabilities and
-S go to the real tput ($HINATA_TPUT_CMD, or `tput` on PATH).
"""

import sys

from .dispatch import dispatch
from .log import debug_log


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    debug_log("Arguments:", argv)

    try:
        return dispatch(argv)
    except BrokenPipeError:
        # e.g. piped into `head`; nothing useful left to report
        sys.stderr.close()
        return 0
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
