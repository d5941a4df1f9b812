"""Turns model completions into lists or prose.

List responses are parsed as a JSON array first. A JSON array of strings
embedded in surrounding prose is also accepted. When the model ignores the
format, the text is split on line breaks (and commas for short terms), bullet
and enumeration markers are stripped. Items from either path outside the
length bounds are dropped.
"""

import json
import re
from typing import Any

from docanalyzer.analysis.exceptions import AnalysisParseError
from docanalyzer.logging.logger import Log

_FENCE_RE = re.compile(r"```[A-Za-z0-9_-]*")
_LEADING_MARKER_RE = re.compile(r"^(?:[-*•·–—>]+\s*|\(?\d+[.):](?:\s+|$))")
_STRIP_CHARS = " \t\"'`*,;"


def strip_code_fences(raw: str) -> str:
    return _FENCE_RE.sub("", raw).strip()


def parse_list_response(
    raw: str,
    *,
    max_items: int,
    min_length: int = 1,
    max_length: int = 200,
    split_on_commas: bool = False,
) -> list[str]:
    """Parse a list-shaped completion.

    Raises:
        AnalysisParseError: if neither strategy yields a single item.
    """
    cleaned = strip_code_fences(raw)
    items = _parse_json_list(cleaned)
    if items is None:
        Log.warning("AI response is not a JSON array, falling back to text parsing")
        items = _split_delimited(cleaned, split_on_commas)
    result = [item for item in items if min_length <= len(item) <= max_length][:max_items]
    if not result:
        raise AnalysisParseError("No list items could be parsed from AI response")
    return result


def parse_prose_response(raw: str) -> str:
    """Return the completion as prose without code fences.

    Raises:
        AnalysisParseError: if nothing but whitespace remains.
    """
    text = strip_code_fences(raw)
    if not text:
        raise AnalysisParseError("AI response contained no summary text")
    return text


def _parse_json_list(text: str) -> list[str] | None:
    parsed = _loads(text)
    if isinstance(parsed, dict):
        parsed = next((v for v in parsed.values() if isinstance(v, list)), None)
    if isinstance(parsed, list):
        items = [_item_text(item) for item in parsed]
        return [item for item in items if item]
    embedded = _embedded_string_array(text)
    if embedded is None:
        return None
    return [item.strip() for item in embedded if item.strip()]


def _embedded_string_array(text: str) -> list[str] | None:
    """Find ``[...]`` inside prose; only a non-empty array of strings counts."""
    start, end = text.find("["), text.rfind("]")
    if not 0 <= start < end:
        return None
    parsed = _loads(text[start : end + 1])
    if not isinstance(parsed, list) or not parsed:
        return None
    if not all(isinstance(item, str) for item in parsed):
        return None
    return parsed


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None


def _item_text(item: Any) -> str:
    if isinstance(item, dict):
        item = next((v for v in item.values() if isinstance(v, str)), "")
    if item is None or isinstance(item, list):
        return ""
    return str(item).strip()


def _split_delimited(text: str, split_on_commas: bool) -> list[str]:
    pattern = r"[\n,]" if split_on_commas else r"\n"
    items = []
    for fragment in re.split(pattern, text):
        fragment = _trim(fragment)
        while fragment and _LEADING_MARKER_RE.match(fragment):
            fragment = _trim(_LEADING_MARKER_RE.sub("", fragment, count=1))
        if not fragment or fragment.endswith(":"):
            continue
        items.append(fragment)
    return items


def _trim(fragment: str) -> str:
    """Strip quotes, emphasis and separators plus unbalanced list brackets."""
    while True:
        trimmed = fragment.strip(_STRIP_CHARS)
        if trimmed.startswith("[") and "]" not in trimmed:
            trimmed = trimmed[1:]
        if trimmed.endswith("]") and "[" not in trimmed:
            trimmed = trimmed[:-1]
        if trimmed == fragment:
            return trimmed
        fragment = trimmed
