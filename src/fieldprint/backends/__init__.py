"""Backends for fieldprint program generation (awk)."""

from .awk_generator import (
    ProgramSpec,
    build_program_spec,
    compile_group,
    compile_token,
    generate_program,
    quote_awk_string,
    render_program,
)

__all__ = [
    "ProgramSpec",
    "build_program_spec",
    "compile_group",
    "compile_token",
    "generate_program",
    "quote_awk_string",
    "render_program",
]
