"""Number of worker threads chosen on the command line."""

import os
import re
import sys

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_OPTION = 'Command line option "-t <n>" / "--threads=<n>"'


def _interpret(text):
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        raise ValueError(f"{_OPTION} needs an integral parameter.")
    value = int(stripped)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{_OPTION} needs an integral parameter.")
    if value <= 0:
        raise ValueError(f"{_OPTION} needs an integral parameter greater zero.")
    return value


def number_of_threads(argv=None):
    """Return the thread count given by ``-t <n>``, ``-t=<n>`` or ``--threads=<n>``.

    ``argv`` includes the program name. Without the option, the number of
    processors is returned (at least 1).
    """
    if argv is None:
        argv = sys.argv
    arguments = list(argv)[1:]
    for position, argument in enumerate(arguments):
        if argument == "-t":
            if position + 1 == len(arguments):
                raise ValueError(
                    'Command line option "-t <n>" needs an integral parameter.'
                )
            return _interpret(arguments[position + 1])
        if argument.startswith("-t="):
            return _interpret(argument[3:])
        if argument.startswith("--threads="):
            return _interpret(argument[10:])
        if argument.startswith("-t") or argument.startswith("--t"):
            raise ValueError(
                'Illegal parameter. Did you mean "-t <n>" or "--threads=<n>"?'
            )
    count = os.cpu_count()
    return count if count and count > 0 else 1