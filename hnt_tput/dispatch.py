"""
The capability dispatcher.

A request resolves to exactly one of three outcomes:

- Version: -V was given; print the version line.
- Builtin: the name is in the capability table; write its bytes.
- Delegate: -S was given, or the name is unknown or missing; run the real
  tput with the original argument list, flags included.

resolve() is pure. dispatch() carries out the resolution and returns the exit
status.
"""

import sys
from collections import namedtuple

from . import __version__
from .capabilities import lookup, render
from .delegate import run_tput
from .log import debug_log
from .options import scan_options

Version = namedtuple("Version", ["text"])
Builtin = namedtuple("Builtin", ["data"])
Delegate = namedtuple("Delegate", ["argv"])

VERSION_TEXT = f"hnt-tput ({__version__})"


def resolve(argv):
    """Decides what to do with `argv` (the arguments after the program name)."""
    argv = tuple(argv)
    options = scan_options(argv)

    if options.version:
        return Version(VERSION_TEXT)
    if options.delegate:
        return Delegate(argv)
    if options.terminal is not None:
        debug_log(f"ignoring terminal type '{options.terminal}'")

    if not options.operands:
        return Delegate(argv)
    name, arguments = options.operands[0], options.operands[1:]
    rule = lookup(name)
    if rule is None:
        debug_log(f"'{name}' is not built in")
        return Delegate(argv)
    return Builtin(render(rule, arguments))


def dispatch(argv, out=None, runner=None):
    """
    Resolves `argv` and acts on it.

    `out` is a binary stream (defaults to stdout's buffer); `runner` is called
    as runner(argv) -> status for delegation (defaults to run_tput).
    """
    if out is None:
        out = sys.stdout.buffer
    if runner is None:
        runner = run_tput

    resolution = resolve(argv)

    if isinstance(resolution, Version):
        out.write(resolution.text.encode() + b"\n")
        out.flush()
        return 0

    if isinstance(resolution, Builtin):
        out.write(resolution.data)
        out.flush()
        return 0

    return runner(list(resolution.argv))
