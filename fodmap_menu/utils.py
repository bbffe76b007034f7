"""Utility functions."""

import base64
import json
import logging
from typing import Any

from fodmap_menu.errors import MalformedJson, NoJsonFound

logger = logging.getLogger(__name__)

_CLOSERS = {"[": "]", "{": "}"}


def _find_json_candidate(text: str, start: int) -> str:
    """
    Return the bracket-matched substring opening at ``text[start]``.

    Brackets inside string literals are ignored. Raises ValueError when the
    value is unterminated or closed by the wrong delimiter.
    """
    expected = []
    in_string = False
    escaped = False

    for idx in range(start, len(text)):
        ch = text[idx]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
        elif ch in ("]", "}"):
            if ch != expected.pop():
                raise ValueError(f"Unexpected {ch!r} at position {idx}")
            if not expected:
                return text[start:idx + 1]

    raise ValueError("Unterminated JSON value")


def extract_json(text: str) -> Any:
    """
    Find the first JSON array or object in model output and parse it.

    Prose and markdown fences around the payload are skipped.
    Raises NoJsonFound / MalformedJson; both keep the raw text.
    """
    text = text or ""
    positions = [pos for pos in (text.find("["), text.find("{")) if pos != -1]
    if not positions:
        logger.error("No JSON found in AI response. Raw text: %s", text)
        raise NoJsonFound("No JSON found in AI response", raw_text=text)

    start = min(positions)
    try:
        candidate = _find_json_candidate(text, start)
        return json.loads(candidate)
    except (ValueError, RecursionError) as e:
        # json.JSONDecodeError is a ValueError too; RecursionError on very deep nesting
        logger.error("Failed to parse AI response JSON: %s. Raw text: %s", e, text)
        raise MalformedJson(f"Failed to parse AI response JSON: {e}", raw_text=text) from e


def to_data_url(content: bytes, content_type: str) -> str:
    """Encode image bytes as a data: URL the vision model can dereference."""
    b64_img = base64.b64encode(content).decode("utf-8")
    return f"data:{content_type};base64,{b64_img}"
