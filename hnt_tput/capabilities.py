"""
The fixed table of capabilities hnt-tput answers without calling tput.

Each name maps to an emission rule:

- Constant: a byte sequence written as-is; arguments are ignored.
- Template: a byte sequence with one or two argument slots. One-slot
  templates take the first argument verbatim. Two-slot templates read both
  arguments as integers and add `offset` to each (cup converts 0-based
  row/column to the 1-based coordinates the terminal expects).
"""

import os
import re
from collections import namedtuple
from types import MappingProxyType

ESC = b"\x1b"

Constant = namedtuple("Constant", ["data"])
Template = namedtuple("Template", ["template", "arity", "offset"])


def _const(*parts):
    return Constant(b"".join(parts))


def _one(template):
    return Template(template, 1, 0)


def _two(template, offset):
    return Template(template, 2, offset)


# Aliases share the rule object rather than pointing at another name.
_SGR0 = _const(ESC, b"[0m")
_SETAF = _one(ESC + b"[38;5;%sm")
_SETAB = _one(ESC + b"[48;5;%sm")

CAPABILITIES = MappingProxyType(
    {
        "bel": _const(b"\x07"),
        "sgr0": _SGR0,
        "me": _SGR0,
        "bold": _const(ESC, b"[1m"),
        "dim": _const(ESC, b"[2m"),
        "rev": _const(ESC, b"[7m"),
        "blink": _const(ESC, b"[5m"),
        "setaf": _SETAF,
        "AF": _SETAF,
        "setab": _SETAB,
        "AB": _SETAB,
        "sc": _const(ESC, b"[7"),
        "rc": _const(ESC, b"[8"),
        "cnorm": _const(ESC, b"[?25h"),
        "civis": _const(ESC, b"[?25l"),
        "smcup": _const(ESC, b"[?1049h"),
        "rmcup": _const(ESC, b"[?1049l"),
        "clear": _const(ESC, b"[H", ESC, b"[2J"),
        "home": _const(ESC, b"[H"),
        "cuu": _one(ESC + b"[%sA"),
        "cud": _one(ESC + b"[%sB"),
        "cuf": _one(ESC + b"[%sC"),
        "cub": _one(ESC + b"[%sD"),
        "cup": _two(ESC + b"[%d;%dH", 1),
    }
)

# Shell arithmetic literals: 0x hex, leading-zero octal, decimal. Anything
# else (including "09") counts as 0, like an unset shell variable.
_INTEGER = re.compile(r"\s*([-+]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)\s*\Z")


def lookup(name):
    """Exact-match lookup. Returns the rule, or None if tput must handle it."""
    return CAPABILITIES.get(name)


def to_int(token):
    """Shell-arithmetic leniency: missing or non-numeric arguments are 0."""
    match = _INTEGER.match(token) if token is not None else None
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def render(rule, arguments=()) -> bytes:
    """
    Produces the bytes for `rule` given the capability's positional arguments
    (everything after the name). Extra arguments are ignored and nothing is
    validated.
    """
    if isinstance(rule, Constant):
        return rule.data

    if rule.arity == 1:
        # Inserted as the caller's raw bytes, no numeric re-encoding.
        first = arguments[0] if len(arguments) > 0 else ""
        return rule.template % os.fsencode(first)

    row = arguments[0] if len(arguments) > 0 else None
    col = arguments[1] if len(arguments) > 1 else None
    return rule.template % (to_int(row) + rule.offset, to_int(col) + rule.offset)


def aliases():
    """Groups the table's names by rule, in table order: [(rule, [names...]), ...]"""
    groups = []
    for name, rule in CAPABILITIES.items():
        for existing, names in groups:
            if existing is rule:
                names.append(name)
                break
        else:
            groups.append((rule, [name]))
    return groups
