"""
hnt-tput-caps: shows which capabilities hnt-tput answers itself.

Everything not listed here is passed through to the real tput.
"""

import argparse
import sys

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .capabilities import Constant, aliases

_PRINTABLE = {0x1B: "\\e", 0x07: "\\a"}


def _escape(data):
    out = []
    for byte in data:
        if byte in _PRINTABLE:
            out.append(_PRINTABLE[byte])
        elif 0x20 <= byte < 0x7F and byte != 0x5C:
            out.append(chr(byte))
        else:
            out.append(f"\\x{byte:02x}")
    return "".join(out)


def describe(rule):
    """
    Printable form of a rule's output, slots shown as {1} and {2}.
    The +1 of cup shows up as {1+1};{2+1}.
    """
    if isinstance(rule, Constant):
        return _escape(rule.data)

    if rule.arity == 1:
        slots = ("{1}",)
    else:
        suffix = f"+{rule.offset}" if rule.offset else ""
        slots = ("{1" + suffix + "}", "{2" + suffix + "}")

    pieces = rule.template.replace(b"%d", b"%s").split(b"%s")
    text = _escape(pieces[0])
    for slot, piece in zip(slots, pieces[1:]):
        text += slot + _escape(piece)
    return text


def arity(rule):
    return 0 if isinstance(rule, Constant) else rule.arity


def build_table():
    table = Table(title="hnt-tput built-in capabilities")
    table.add_column("Name", style="bold")
    table.add_column("Aliases")
    table.add_column("Args", justify="right")
    table.add_column("Output", style="cyan")

    for rule, names in aliases():
        # Text, not markup: the escaped sequences contain "["
        table.add_row(
            names[0], ", ".join(names[1:]), str(arity(rule)), Text(describe(rule))
        )
    return table


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="List the capabilities hnt-tput emits without calling tput.",
        epilog="Anything not listed is run through the real tput.",
    )
    parser.add_argument(
        "--names-only",
        action="store_true",
        help="Print every name (aliases included), one per line.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable styling. Also respected: $NO_COLOR.",
    )
    args = parser.parse_args(argv)

    if args.names_only:
        for _, names in aliases():
            for name in names:
                sys.stdout.write(name + "\n")
        return 0

    console = Console(no_color=args.no_color or None, highlight=False)
    console.print(build_table())
    return 0


if __name__ == "__main__":
    sys.exit(main())
