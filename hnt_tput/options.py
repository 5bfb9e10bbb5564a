"""
Leading option scanning with the same rules as the shell's `getopts ST:V`.

Scanning stops at the first operand, a lone "-", or after "--". Flags can be
clustered ("-xT") and -T takes its value attached ("-Txterm") or as the next
token. Unknown flags and a -T with no value are ignored rather than fatal, so
a capability name that starts with "-" is read as options, as with tput.
"""

from collections import namedtuple

from .log import debug_log

Options = namedtuple("Options", ["delegate", "version", "terminal", "operands"])


def scan_options(argv):
    """
    Scans `argv` (without the program name) and returns an Options tuple.
    `operands` is the remainder: capability name first, then its arguments.
    -S and -V each stop the scan at once, so whichever comes first wins;
    `operands` is then whatever was left unread.
    """
    terminal = None
    index = 0

    while index < len(argv):
        token = argv[index]
        if token == "--":
            index += 1
            break
        if not token.startswith("-") or token == "-":
            break

        index += 1
        position = 1
        while position < len(token):
            flag = token[position]
            position += 1

            if flag == "S":
                return Options(True, False, terminal, tuple(argv[index:]))
            elif flag == "V":
                return Options(False, True, terminal, tuple(argv[index:]))
            elif flag == "T":
                if position < len(token):
                    terminal = token[position:]
                elif index < len(argv):
                    terminal = argv[index]
                    index += 1
                else:
                    debug_log("option requires an argument -- T")
                break
            else:
                debug_log(f"illegal option -- {flag}")

    return Options(False, False, terminal, tuple(argv[index:]))
