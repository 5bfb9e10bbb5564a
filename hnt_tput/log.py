"""stderr diagnostics. stdout carries nothing but control-sequence bytes."""

import os
import sys

DEBUG_ENV = "HINATA_TPUT_DEBUG"


def debug_enabled():
    return bool(os.environ.get(DEBUG_ENV))


def debug_log(*print_args, **print_kwargs):
    """Prints debug messages to stderr if $HINATA_TPUT_DEBUG is set."""
    if debug_enabled():
        print("[DEBUG] hnt-tput:", *print_args, file=sys.stderr, **print_kwargs)


def warn(message):
    print(f"Warning: {message}", file=sys.stderr)
