"""Textual repairs for almost-JSON model replies.

Every repair is idempotent and leaves the contents of string literals
alone, so running a chain over text that already parses does not change
what it parses to.
"""

import json
import re
from collections.abc import Callable
from functools import partial
from typing import Any

from docinsight.analysis.exceptions import MalformedAIResponseError
from docinsight.logging.logger import Log

Repair = Callable[[str], str]

_FENCE_OPEN = re.compile(r"\A\s*```[A-Za-z0-9_-]*[ \t]*\n?")
_FENCE_CLOSE = re.compile(r"\n?[ \t]*```\s*\Z")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_UNQUOTED_KEY = re.compile(r"([{,]\s*)([A-Za-z_$][\w$-]*)(\s*:)")

_DOUBLE = '"'
_ANY_QUOTE = "\"'"


def _split_literals(text: str, quotes: str) -> list[tuple[bool, str]]:
    """Split text into (is_string_literal, chunk) pairs.

    Literals keep their delimiters; an unterminated literal runs to the end.
    """
    chunks: list[tuple[bool, str]] = []
    start = i = 0
    n = len(text)
    while i < n:
        quote = text[i]
        if quote not in quotes:
            i += 1
            continue
        if i > start:
            chunks.append((False, text[start:i]))
        j = i + 1
        while j < n and text[j] != quote:
            j += 2 if text[j] == "\\" else 1
        j = min(j + 1, n)
        chunks.append((True, text[i:j]))
        start = i = j
    if start < n:
        chunks.append((False, text[start:]))
    return chunks


def _outside_strings(text: str, repair: Repair, quotes: str) -> str:
    return "".join(
        chunk if is_literal else repair(chunk)
        for is_literal, chunk in _split_literals(text, quotes)
    )


def strip_code_fence(text: str) -> str:
    """Drop a leading ```json (or bare ```) line and a trailing ``` marker."""
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped
    stripped = _FENCE_OPEN.sub("", stripped, count=1)
    return _FENCE_CLOSE.sub("", stripped, count=1).strip()


def remove_trailing_commas(text: str, quotes: str = _DOUBLE) -> str:
    return _outside_strings(text, lambda chunk: _TRAILING_COMMA.sub(r"\1", chunk), quotes)


def quote_unquoted_keys(text: str, quotes: str = _DOUBLE) -> str:
    """Wrap bare identifier keys in double quotes.

    ``quotes`` lists the delimiters whose literals are left untouched.
    """
    return _outside_strings(
        text, lambda chunk: _UNQUOTED_KEY.sub(r'\1"\2"\3', chunk), quotes
    )


def normalize_single_quotes(text: str) -> str:
    """Rewrite 'single-quoted' literals as JSON strings; double-quoted ones are kept."""
    return "".join(
        _requote(chunk) if is_literal and chunk.startswith("'") else chunk
        for is_literal, chunk in _split_literals(text, _ANY_QUOTE)
    )


def _requote(literal: str) -> str:
    closed = len(literal) > 1 and literal.endswith("'")
    body = literal[1:-1] if closed else literal[1:]
    out: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append("'" if nxt == "'" else char + nxt)
            i += 2
            continue
        out.append('\\"' if char == '"' else char)
        i += 1
    return '"' + "".join(out) + '"'


STRICT_REPAIRS: tuple[Repair, ...] = (
    strip_code_fence,
    remove_trailing_commas,
    quote_unquoted_keys,
)
PERMISSIVE_REPAIRS: tuple[Repair, ...] = (
    strip_code_fence,
    partial(remove_trailing_commas, quotes=_ANY_QUOTE),
    partial(quote_unquoted_keys, quotes=_ANY_QUOTE),
    normalize_single_quotes,
)


def repair_json(text: str, *, permissive: bool = False) -> str:
    """Apply the strict (or permissive) repair chain in its fixed order."""
    for repair in PERMISSIVE_REPAIRS if permissive else STRICT_REPAIRS:
        text = repair(text)
    return text


def parse_json_object(raw_text: str) -> dict[str, Any]:
    """Parse a model reply into a JSON object, repairing it when needed.

    Raises:
        MalformedAIResponseError: if neither the reply nor its repaired forms
            parse, or the reply is not a JSON object.
    """
    try:
        parsed = json.loads(raw_text)
    except ValueError as exc:
        error: ValueError = exc
    else:
        return _require_object(parsed, raw_text)

    for permissive in (False, True):
        repaired = repair_json(raw_text, permissive=permissive)
        try:
            parsed = json.loads(repaired)
        except ValueError as exc:
            error = exc
            continue
        mode = "permissive" if permissive else "strict"
        Log.debug(f"AI response parsed after {mode} repair")
        return _require_object(parsed, raw_text)

    raise MalformedAIResponseError(
        f"AI output could not be parsed as JSON: {error}", raw_text=raw_text
    )


def _require_object(parsed: Any, raw_text: str) -> dict[str, Any]:
    if not isinstance(parsed, dict):
        raise MalformedAIResponseError(
            f"AI output must be a JSON object, got {type(parsed).__name__}", raw_text=raw_text
        )
    return parsed
