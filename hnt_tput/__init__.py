"""
hnt-tput: a fast tput(1) substitute for the common capabilities.

Known capabilities are emitted directly from a fixed table of ANSI/VT100
sequences. Anything else is handed to the real tput unchanged.
"""

__version__ = "1.0.0"
