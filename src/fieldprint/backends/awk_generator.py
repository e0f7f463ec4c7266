"""
awk program generator for fieldprint token groups.

Converts TokenGroups into a complete awk program.

Program shape:
    - BEGIN block making OFS follow FS (unless OFS was set with -v)
    - Helper functions for fields counted from the end and for ranges
    - One main action printing every group as one print argument

Within a group fragments are juxtaposed (awk string concatenation), so
``2%1`` prints "ba". Between groups the print argument separator is used,
so awk inserts OFS: ``2 1`` prints "b a".
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from fieldprint.errors import FieldSpecSyntaxError
from fieldprint.tokens import RangeBound, Token, TokenGroup, TokenKind


FIELD_FROM_END_FUNC = "_fp_field_from_end"
RANGE_FUNC = "_fp_range"

BEGIN_BLOCK = "BEGIN { if (OFS == \" \") OFS = FS }"

FIELD_FROM_END_HELPER = f"""\
function {FIELD_FROM_END_FUNC}(n,    i) {{
    i = NF - n + 1
    return (i < 1) ? "" : $i
}}"""

RANGE_HELPER = f"""\
function {RANGE_FUNC}(first, last,    out, i) {{
    if (first < 1) first = 1
    if (last > NF) last = NF
    if (first > last) return ""
    out = $first
    for (i = first + 1; i <= last; i++) out = out OFS $i
    return out
}}"""

PRELUDE = "\n".join([BEGIN_BLOCK, FIELD_FROM_END_HELPER, RANGE_HELPER])

EMPTY_STRING = '""'


def quote_awk_string(text: str) -> str:
    """Quote text as an awk string literal that prints back as text."""
    # Backslashes first so the ones added below are not doubled
    text = text.replace("\\", "\\\\")
    text = text.replace('"', '\\"')
    text = text.replace("\n", "\\n")
    text = text.replace("\r", "\\r")
    return f'"{text}"'


def _bound_expr(bound: Optional[RangeBound], default: str) -> str:
    if bound is None:
        return default
    if bound.from_end:
        return f"NF - {bound.value} + 1"
    return str(bound.value)


def compile_token(token: Token, argument: str = "") -> str:
    """
    Compile one token into an awk expression.

    Args:
        token: Token to compile
        argument: The argument the token came from, for error messages

    Returns:
        awk expression evaluating to the token's text for the current record

    Raises:
        FieldSpecSyntaxError: If the token is a malformed %{...}
    """
    kind = token.kind

    if kind in (
        TokenKind.LITERAL_ESCAPED_CHAR,
        TokenKind.LITERAL_NUMBER,
        TokenKind.LITERAL_BLOCK,
        TokenKind.PLAIN_TEXT,
    ):
        return quote_awk_string(token.text)

    elif kind == TokenKind.FIELD_POSITIVE:
        return f"${token.number}"

    elif kind == TokenKind.FIELD_NEGATIVE:
        # NF is only known per record, so the lookup happens in awk
        return f"{FIELD_FROM_END_FUNC}({token.number})"

    elif kind == TokenKind.RANGE_FIELD:
        first = _bound_expr(token.start, "1")
        last = _bound_expr(token.end, "NF")
        return f"{RANGE_FUNC}({first}, {last})"

    elif kind == TokenKind.INVALID_FIELD:
        raise FieldSpecSyntaxError(token.raw_text, argument)

    raise TypeError(f"Unsupported token kind: {kind}")


def compile_group(group: TokenGroup) -> List[str]:
    """Compile every token of a group, in order."""
    return [compile_token(t, group.argument) for t in group.tokens]


@dataclass
class ProgramSpec:
    """
    A compiled print specification, ready to be rendered.

    Properties:
        prelude_text: BEGIN block and helper functions
        group_fragments: One list of awk expressions per argument
    """

    prelude_text: str = PRELUDE
    group_fragments: List[List[str]] = field(default_factory=list)

    def print_arguments(self) -> List[str]:
        """
        One awk expression per group, ready for a print statement.

        An empty string literal is concatenated to the last argument so
        the statement never degenerates into a bare ``print`` (which
        would print $0).
        """
        args = [" ".join(fragments) if fragments else EMPTY_STRING for fragments in self.group_fragments]
        if not args:
            return [EMPTY_STRING]
        args[-1] = f"{args[-1]} {EMPTY_STRING}"
        return args


def build_program_spec(groups: Sequence[TokenGroup]) -> ProgramSpec:
    """
    Compile token groups into a ProgramSpec.

    Raises:
        FieldSpecSyntaxError: On the first malformed token, before any
            output is produced
    """
    return ProgramSpec(group_fragments=[compile_group(g) for g in groups])


def render_program(spec: ProgramSpec) -> str:
    """Render a ProgramSpec as awk source text."""
    lines = [spec.prelude_text]
    lines.append("{ print " + ", ".join(spec.print_arguments()) + " }")
    return "\n".join(lines) + "\n"


def generate_program(groups: Sequence[TokenGroup]) -> str:
    """Compile and render token groups in one step."""
    return render_program(build_program_spec(groups))


__all__ = [
    "PRELUDE",
    "RANGE_HELPER",
    "FIELD_FROM_END_HELPER",
    "ProgramSpec",
    "build_program_spec",
    "compile_group",
    "compile_token",
    "generate_program",
    "quote_awk_string",
    "render_program",
]
