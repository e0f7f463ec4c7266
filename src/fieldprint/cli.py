"""
Command-line entry point: ``p [awk-options...] [--] print-spec...``

    echo "a b c" | p 1 3            -> a c
    echo "a b c" | p -1 -2 1        -> c b a
    echo "a.b.c" | p -F . -- 1 3    -> a.c
    echo "a b c" | p %{2:}@{!}      -> b c!
"""

import os
import sys
from typing import Mapping, Optional, Sequence

from rich.console import Console

from fieldprint.backends.awk_generator import build_program_spec, render_program
from fieldprint.config import Config
from fieldprint.errors import EngineLaunchError, FieldSpecSyntaxError
from fieldprint.executor import build_command, render_command_line, run_engine
from fieldprint.partition import partition_arguments
from fieldprint.serialization import dump_groups
from fieldprint.tokenizer import tokenize_all


PROG = "p"

EXIT_USAGE = 2
EXIT_SYNTAX = 2
EXIT_LAUNCH = 127

USAGE = """\
usage: p [awk-options...] [--] print-spec...

Print specification tokens (one argument = one output column):
  N, -N          field N; -N counts from the end (-1 is the last field)
  %N, %{N}       field N, usable inside words (2%1 -> "ba")
  %{A:B}         fields A..B joined by OFS; A or B may be negative or omitted
  @N, @{text}    literal text
  @@, %%         literal @ and %
  anything else  printed as is

OFS is set to FS, so "-F ." keeps dots between columns. An option whose
value is a separate argument needs "--" before the print specification.

Environment: FIELDPRINT_DEBUG=tokens|program|1, FIELDPRINT_DEBUG_FORMAT=yaml|json,
FIELDPRINT_AWK=<binary>, FIELDPRINT_DRY_RUN=1
"""

err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)
out_console = Console(highlight=False, emoji=False, soft_wrap=True)


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Compile the print specification in argv and run awk with it."""
    argv = sys.argv[1:] if argv is None else list(argv)
    config = Config.from_env(os.environ if environ is None else environ)

    if not argv:
        err_console.print(USAGE, markup=False, end="")
        return EXIT_USAGE

    partition = partition_arguments(argv)
    groups = tokenize_all(partition.dsl_args)

    if config.debug_tokens:
        err_console.print(f"{PROG}: tokens", style="bold")
        err_console.print(dump_groups(groups, config.debug_format), markup=False)

    try:
        spec = build_program_spec(groups)
    except FieldSpecSyntaxError as e:
        err_console.print(f"{PROG}: {e}", markup=False)
        return EXIT_SYNTAX

    command = build_command(config.engine, partition.engine_args, render_program(spec))

    if config.debug_program:
        err_console.print(f"{PROG}: program", style="bold")
        err_console.print(command[-1], markup=False, end="")
        err_console.print(f"{PROG}: command", style="bold")
        err_console.print(render_command_line(command), markup=False)

    if config.dry_run:
        out_console.print(render_command_line(command), markup=False)
        return 0

    try:
        return run_engine(command)
    except EngineLaunchError as e:
        err_console.print(f"{PROG}: {e}", markup=False)
        return EXIT_LAUNCH


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
