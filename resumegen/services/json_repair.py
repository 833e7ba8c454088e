"""Best-effort clean-up of near-JSON model output.

This is a brace/quote balancer, not a parser. Callers must still run
``json.loads`` on the result; ``parse_repaired`` does that and turns a parse
failure into ``MalformedOutputError`` so the request falls back to local
synthesis instead of losing data silently.
"""

from __future__ import annotations

import json
import re
from typing import Any

from resumegen.resilience.errors import MalformedOutputError

_LEADING_FENCE_RE = re.compile(r"^```(?:json|JSON)?\s*")
_TRAILING_FENCE_RE = re.compile(r"\s*```$")
_TRAILING_COMMA_RE = re.compile(r",\s*([}\]])")
_MISSING_COMMA_RE = re.compile(r"([\"}\]])(\s*)([\"{])")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")


def _strip_fences(text: str) -> str:
    text = text.strip()
    while True:
        stripped = _TRAILING_FENCE_RE.sub("", _LEADING_FENCE_RE.sub("", text)).strip()
        if stripped == text:
            return text
        text = stripped


def _insert_comma(match: re.Match) -> str:
    opener, gap, closer = match.groups()
    if opener == '"' and closer == '"' and not gap:
        # An empty string literal, not two adjacent values.
        return match.group(0)
    return f"{opener},{gap}{closer}"


def _repair_pass(text: str) -> str:
    text = _strip_fences(text)

    # Only unescape when nothing is double-escaped; otherwise leave it alone.
    if '\\"' in text and '\\\\"' not in text:
        text = text.replace('\\"', '"')

    text = _TRAILING_COMMA_RE.sub(r"\1", text)
    text = _MISSING_COMMA_RE.sub(_insert_comma, text)
    text = _CONTROL_CHARS_RE.sub("", text)

    open_braces = text.count("{")
    close_braces = text.count("}")
    open_brackets = text.count("[")
    close_brackets = text.count("]")
    if open_braces > close_braces:
        text += "}" * (open_braces - close_braces)
    if open_brackets > close_brackets:
        text += "]" * (open_brackets - close_brackets)

    if text.count('"') % 2:
        text += '"'
    return text


def repair(raw_text: str | None) -> str:
    """Return candidate JSON text for ``raw_text``; never raises.

    The pass is repeated until the text stops changing so that
    ``repair(repair(x)) == repair(x)``. Later passes only delete characters,
    insert commas between adjacent values or close what an earlier pass left
    open, so the loop settles after a few rounds.
    """
    text = raw_text or ""
    for _ in range(2 * len(text) + 4):
        repaired = _repair_pass(text)
        if repaired == text:
            break
        text = repaired
    return text


def parse_repaired(raw_text: str | None) -> Any:
    candidate = repair(raw_text)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise MalformedOutputError(f"Invalid JSON from AI after repair: {exc.msg}") from exc
