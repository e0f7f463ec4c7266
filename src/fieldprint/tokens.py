"""
Token Model

Defines the typed tokens produced by the tokenizer and consumed by the
backends.

These are pure data classes representing:
    - Field references (positive or counted from the end)
    - Literal text (numbers, braced blocks, escaped sigils, plain words)
    - Field ranges

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about awk or any other target language
        - Are immutable
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


AT_SIGIL = "@"
PCT_SIGIL = "%"


class TokenKind(Enum):
    """
    Kinds of token a print-specification argument is split into.

    Every kind here must map to exactly one compiled fragment shape.
    """

    FIELD_POSITIVE = "field_positive"
    FIELD_NEGATIVE = "field_negative"
    LITERAL_NUMBER = "literal_number"
    LITERAL_BLOCK = "literal_block"
    LITERAL_ESCAPED_CHAR = "literal_escaped_char"
    RANGE_FIELD = "range_field"
    PLAIN_TEXT = "plain_text"

    # A %{...} whose interior is neither a number nor a range.
    # Kept as a token so the error is raised when it is compiled.
    INVALID_FIELD = "invalid_field"


@dataclass(frozen=True)
class RangeBound:
    """
    One end of a field range.

    Properties:
        value: Absolute number as written (always >= 0)
        from_end: True when written with a leading minus, meaning
            "the value-th field counted from the last one"

    Examples:
        "3"  -> RangeBound(3, from_end=False)
        "-1" -> RangeBound(1, from_end=True)   (the last field)
    """

    value: int
    from_end: bool = False

    @classmethod
    def parse(cls, text: str) -> "RangeBound":
        if text.startswith("-"):
            return cls(int(text[1:]), from_end=True)
        return cls(int(text))


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of a print specification.

    Properties:
        kind: TokenKind
        raw_text: Exact source text the token was scanned from
        text: Literal payload for literal kinds (the sigil character,
            the number text, the block interior, or the plain text)
        number: Field number for FIELD_* kinds. For FIELD_NEGATIVE this
            is the distance from the end, so -1 is stored as 1.
        start / end: Bounds for RANGE_FIELD; None means "from the first
            field" and "to the last field" respectively.

    IMPORTANT:
        Concatenating raw_text over a token group reproduces the argument.
    """

    kind: TokenKind
    raw_text: str
    text: Optional[str] = None
    number: Optional[int] = None
    start: Optional[RangeBound] = None
    end: Optional[RangeBound] = None


@dataclass
class TokenGroup:
    """
    Tokens scanned from one print-specification argument.

    One argument becomes one group, and one group becomes one print
    argument in the generated program.
    """

    argument: str
    tokens: List[Token] = field(default_factory=list)

    def source_text(self) -> str:
        return "".join(t.raw_text for t in self.tokens)
