"""
Runtime configuration for fieldprint.

Read once from the environment by the CLI and passed explicitly to the
parts that need it.

Environment:
    FIELDPRINT_DEBUG         tokens | program | any other truthy value (both)
    FIELDPRINT_DEBUG_FORMAT  yaml (default) | json
    FIELDPRINT_AWK           awk binary to run (default: awk)
    FIELDPRINT_DRY_RUN       print the command line instead of running it
"""

from dataclasses import dataclass
from typing import Mapping


DEFAULT_ENGINE = "awk"
DEBUG_FORMATS = {"yaml", "json"}

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _is_truthy(value: str) -> bool:
    return value.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class Config:
    """
    Properties:
        engine: awk binary name or path
        debug_tokens: Dump the token stream to stderr
        debug_program: Dump the generated program and command to stderr
        debug_format: "yaml" or "json" for the token dump
        dry_run: Print the command line instead of running awk
    """

    engine: str = DEFAULT_ENGINE
    debug_tokens: bool = False
    debug_program: bool = False
    debug_format: str = "yaml"
    dry_run: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "Config":
        debug = environ.get("FIELDPRINT_DEBUG", "").strip().lower()
        debug_tokens = debug_program = False
        if debug == "tokens":
            debug_tokens = True
        elif debug == "program":
            debug_program = True
        elif _is_truthy(debug):
            debug_tokens = debug_program = True

        debug_format = environ.get("FIELDPRINT_DEBUG_FORMAT", "yaml").strip().lower()
        if debug_format not in DEBUG_FORMATS:
            debug_format = "yaml"

        return cls(
            engine=environ.get("FIELDPRINT_AWK", "").strip() or DEFAULT_ENGINE,
            debug_tokens=debug_tokens,
            debug_program=debug_program,
            debug_format=debug_format,
            dry_run=_is_truthy(environ.get("FIELDPRINT_DRY_RUN", "")),
        )


__all__ = ["Config", "DEFAULT_ENGINE"]
