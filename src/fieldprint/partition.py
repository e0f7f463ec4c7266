"""
Argument partitioner (argv -> engine arguments + print specification).

Syntax Notes:
    - Everything before a literal "--" goes to awk, everything after it is
      print specification. The "--" itself is dropped.
    - Without "--", the print specification starts at the first argument
      that does not look like an option. "-<digits>" never looks like an
      option: it is a field counted from the end.
    - Consequently "-F ." without "--" hands "." to the print
      specification. Use "-F." or "-F . --".
"""

import re
from dataclasses import dataclass, field
from typing import List, Sequence


SEPARATOR = "--"

_NEGATIVE_FIELD = re.compile(r"-\d+")


@dataclass
class ArgumentPartition:
    """
    Command-line arguments split into the two sides of the tool.

    Properties:
        engine_args: Passed through to awk unchanged, in order
        dsl_args: Print-specification arguments, in order
    """

    engine_args: List[str] = field(default_factory=list)
    dsl_args: List[str] = field(default_factory=list)


def looks_like_engine_option(arg: str) -> bool:
    """True for "-x"-style arguments that are not "-<digits>"."""
    return arg.startswith("-") and _NEGATIVE_FIELD.fullmatch(arg) is None


def partition_arguments(argv: Sequence[str]) -> ArgumentPartition:
    """
    Split argv into engine arguments and print-specification arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        ArgumentPartition
    """
    argv = list(argv)

    if SEPARATOR in argv:
        index = argv.index(SEPARATOR)
        return ArgumentPartition(engine_args=argv[:index], dsl_args=argv[index + 1:])

    for index, arg in enumerate(argv):
        if not looks_like_engine_option(arg):
            return ArgumentPartition(engine_args=argv[:index], dsl_args=argv[index:])

    return ArgumentPartition(engine_args=argv, dsl_args=[])


__all__ = ["ArgumentPartition", "SEPARATOR", "looks_like_engine_option", "partition_arguments"]
