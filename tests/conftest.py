import os
import shutil
import subprocess
from typing import List

import pytest
from hypothesis import HealthCheck, settings

from fieldprint.backends.awk_generator import generate_program
from fieldprint.executor import build_command
from fieldprint.partition import partition_arguments
from fieldprint.tokenizer import tokenize_all

# Strict CI profile: heavier exploration for regression runs
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=200,
    suppress_health_check=[HealthCheck.too_slow],
    print_blob=True,
)

# Quick local profile
settings.register_profile(
    "dev",
    max_examples=25,
    deadline=100,
    suppress_health_check=[HealthCheck.too_slow],
    derandomize=True,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


AWK = shutil.which("awk")

requires_awk = pytest.mark.skipif(AWK is None, reason="awk not found on PATH")


def run_spec(args: List[str], stdin: str) -> subprocess.CompletedProcess:
    """Compile args the way the CLI does and run awk on stdin."""
    partition = partition_arguments(args)
    program = generate_program(tokenize_all(partition.dsl_args))
    command = build_command(AWK, partition.engine_args, program)
    return subprocess.run(command, input=stdin, capture_output=True, text=True)


@pytest.fixture
def p():
    """Run a print specification against some input and return stdout."""
    def _p(stdin: str, *args: str) -> str:
        result = run_spec(list(args), stdin)
        assert result.returncode == 0, result.stderr
        return result.stdout
    return _p


@pytest.fixture
def two_records() -> str:
    return "a b c\nd e f\n"
