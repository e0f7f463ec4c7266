"""
Serialization helpers for fieldprint tokens and compiled programs.

Provides dict, JSON and YAML views of token groups for debug output, and
the inverse for tokens so dumps can be loaded back in tests and tools.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

import yaml

from fieldprint.backends.awk_generator import ProgramSpec
from fieldprint.tokens import RangeBound, Token, TokenGroup, TokenKind


def bound_to_dict(b: RangeBound | None) -> Dict[str, Any] | None:
    if b is None:
        return None
    return {"value": b.value, "from_end": b.from_end}


def bound_from_dict(d: Dict[str, Any] | None) -> RangeBound | None:
    if d is None:
        return None
    return RangeBound(value=d["value"], from_end=d.get("from_end", False))


def token_to_dict(t: Token) -> Dict[str, Any]:
    d: Dict[str, Any] = {"kind": t.kind.value, "raw": t.raw_text}
    if t.text is not None:
        d["text"] = t.text
    if t.number is not None:
        d["number"] = t.number
    if t.kind == TokenKind.RANGE_FIELD:
        d["start"] = bound_to_dict(t.start)
        d["end"] = bound_to_dict(t.end)
    return d


def token_from_dict(d: Dict[str, Any]) -> Token:
    return Token(
        kind=TokenKind(d["kind"]),
        raw_text=d["raw"],
        text=d.get("text"),
        number=d.get("number"),
        start=bound_from_dict(d.get("start")),
        end=bound_from_dict(d.get("end")),
    )


def group_to_dict(g: TokenGroup) -> Dict[str, Any]:
    return {"argument": g.argument, "tokens": [token_to_dict(t) for t in g.tokens]}


def group_from_dict(d: Dict[str, Any]) -> TokenGroup:
    return TokenGroup(argument=d["argument"], tokens=[token_from_dict(t) for t in d.get("tokens", [])])


def groups_to_dict(groups: Sequence[TokenGroup]) -> List[Dict[str, Any]]:
    return [group_to_dict(g) for g in groups]


def groups_to_json(groups: Sequence[TokenGroup]) -> str:
    return json.dumps(groups_to_dict(groups), indent=2)


def groups_from_json(s: str) -> List[TokenGroup]:
    return [group_from_dict(d) for d in json.loads(s)]


def groups_to_yaml(groups: Sequence[TokenGroup]) -> str:
    return yaml.safe_dump(groups_to_dict(groups), sort_keys=False, allow_unicode=True)


def groups_from_yaml(s: str) -> List[TokenGroup]:
    return [group_from_dict(d) for d in (yaml.safe_load(s) or [])]


def dump_groups(groups: Sequence[TokenGroup], fmt: str = "yaml") -> str:
    if fmt == "json":
        return groups_to_json(groups)
    return groups_to_yaml(groups)


def program_spec_to_dict(spec: ProgramSpec) -> Dict[str, Any]:
    return {
        "prelude": spec.prelude_text,
        "groups": [list(fragments) for fragments in spec.group_fragments],
        "print_arguments": spec.print_arguments(),
    }
