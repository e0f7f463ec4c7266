"""
Tokenizer for print specifications (Layer 1: raw argument -> tokens).

Token grammar, highest priority first. At every position the first
matcher that matches wins; characters no matcher accepts are gathered
into a single PLAIN_TEXT token.

    @@             literal "@"
    %%             literal "%"
    @-?N           literal number text        (@3, @-1)
    @{...}         literal block, verbatim    (@{ any text })
    %{...}         braced field or range      (%{2}, %{-1}, %{2:-1}, %{:3})
    %-?N           explicit field             (%2, %-1)
    -?N            implicit field             (2, -1)

The interior of %{...} is classified here but only rejected when the
token is compiled, so a bad brace never stops scanning.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Sequence

from fieldprint.tokens import (
    AT_SIGIL,
    PCT_SIGIL,
    RangeBound,
    Token,
    TokenGroup,
    TokenKind,
)


_NUMBER = re.compile(r"-?\d+")
_RANGE = re.compile(r"(-?\d+)?:(-?\d+)?")


@dataclass(frozen=True)
class _Matcher:
    """A token pattern paired with the function that builds its Token."""

    name: str
    pattern: re.Pattern
    build: Callable[[re.Match], Token]


def _field_token(raw: str, number_text: str) -> Token:
    if number_text.startswith("-"):
        return Token(TokenKind.FIELD_NEGATIVE, raw, number=int(number_text[1:]))
    return Token(TokenKind.FIELD_POSITIVE, raw, number=int(number_text))


def _braced_field_token(m: re.Match) -> Token:
    raw, interior = m.group(0), m.group(1)

    if _NUMBER.fullmatch(interior):
        return _field_token(raw, interior)

    range_match = _RANGE.fullmatch(interior)
    if range_match:
        start_text, end_text = range_match.groups()
        return Token(
            TokenKind.RANGE_FIELD,
            raw,
            start=RangeBound.parse(start_text) if start_text is not None else None,
            end=RangeBound.parse(end_text) if end_text is not None else None,
        )

    return Token(TokenKind.INVALID_FIELD, raw, text=interior)


MATCHERS: List[_Matcher] = [
    _Matcher(
        "escaped_at",
        re.compile(re.escape(AT_SIGIL * 2)),
        lambda m: Token(TokenKind.LITERAL_ESCAPED_CHAR, m.group(0), text=AT_SIGIL),
    ),
    _Matcher(
        "escaped_pct",
        re.compile(re.escape(PCT_SIGIL * 2)),
        lambda m: Token(TokenKind.LITERAL_ESCAPED_CHAR, m.group(0), text=PCT_SIGIL),
    ),
    _Matcher(
        "literal_number",
        re.compile(r"@(-?\d+)"),
        lambda m: Token(TokenKind.LITERAL_NUMBER, m.group(0), text=m.group(1)),
    ),
    _Matcher(
        "literal_block",
        re.compile(r"@\{([^}]*)\}"),
        lambda m: Token(TokenKind.LITERAL_BLOCK, m.group(0), text=m.group(1)),
    ),
    _Matcher(
        "braced_field",
        re.compile(r"%\{([^}]*)\}"),
        _braced_field_token,
    ),
    _Matcher(
        "explicit_field",
        re.compile(r"%(-?\d+)"),
        lambda m: _field_token(m.group(0), m.group(1)),
    ),
    _Matcher(
        "implicit_field",
        re.compile(r"-?\d+"),
        lambda m: _field_token(m.group(0), m.group(0)),
    ),
]


def _plain(text: str) -> Token:
    return Token(TokenKind.PLAIN_TEXT, text, text=text)


def tokenize(argument: str) -> TokenGroup:
    """
    Split one print-specification argument into tokens.

    Args:
        argument: A single command-line argument

    Returns:
        TokenGroup whose tokens, concatenated, reproduce the argument
    """
    tokens: List[Token] = []
    plain_start = pos = 0

    while pos < len(argument):
        for matcher in MATCHERS:
            m = matcher.pattern.match(argument, pos)
            if m:
                break
        else:
            pos += 1
            continue

        if plain_start < pos:
            tokens.append(_plain(argument[plain_start:pos]))
        tokens.append(matcher.build(m))
        pos = plain_start = m.end()

    if plain_start < len(argument):
        tokens.append(_plain(argument[plain_start:]))

    return TokenGroup(argument=argument, tokens=tokens)


def tokenize_all(arguments: Sequence[str]) -> List[TokenGroup]:
    """Tokenize every print-specification argument, preserving order."""
    return [tokenize(arg) for arg in arguments]


__all__ = ["MATCHERS", "tokenize", "tokenize_all"]
