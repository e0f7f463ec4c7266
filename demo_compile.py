#!/usr/bin/env python3
"""
Demo: Compile print specifications into awk programs.

Shows the token stream and generated program for a few specifications,
then runs them on a sample record when awk is available.
"""

import shutil
import subprocess

from fieldprint.backends import build_program_spec, render_program
from fieldprint.executor import build_command
from fieldprint.partition import partition_arguments
from fieldprint.serialization import groups_to_yaml
from fieldprint.tokenizer import tokenize_all


SAMPLE = "alpha beta gamma delta\n"

SPECS = [
    ["1", "3"],
    ["-1", "-2", "1"],
    ["%{2:}"],
    ["<%{2:3}>", "@{last=}%-1"],
    ["-v", "OFS=|", "--", "1", "%{-2:}"],
]


def main():
    awk = shutil.which("awk")

    print("=" * 80)
    print("FIELDPRINT DEMO")
    print(f"Input: {SAMPLE.strip()!r}")
    print("=" * 80)

    for argv in SPECS:
        print(f"\nSPEC: {' '.join(argv)}")
        print("-" * 80)

        partition = partition_arguments(argv)
        groups = tokenize_all(partition.dsl_args)
        print(groups_to_yaml(groups))

        program = render_program(build_program_spec(groups))
        print(program)

        if awk:
            command = build_command(awk, partition.engine_args, program)
            result = subprocess.run(command, input=SAMPLE, capture_output=True, text=True)
            print(f"Output: {result.stdout.rstrip()!r}")

    print("\n" + "=" * 80)
    print("Try it:")
    print("  echo 'a b c' | p -1 %{1:2}")
    print("  FIELDPRINT_DEBUG=1 p -F: -- 1 -1 < /etc/passwd")
    print("=" * 80)


if __name__ == "__main__":
    main()
