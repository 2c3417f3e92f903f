"""Pull a JSON object out of a model reply."""

from __future__ import annotations

import json


def extract_json_object(text: str) -> dict:
    """Extract a JSON object from an LLM reply.

    Tries in order:
    1. Direct ``json.loads`` on the full text
    2. Strip fenced code block markers and parse
    3. First ``{`` to last ``}``

    Raises:
        ValueError: If no JSON object can be recovered.
    """
    text = (text or "").strip()

    # 1) Direct parse
    result = _loads_object(text)
    if result is not None:
        return result

    # 2) ```json fences
    stripped = _strip_code_fences(text)
    if stripped != text:
        result = _loads_object(stripped) or _extract_braces(stripped)
        if result is not None:
            return result

    # 3) Outermost braces in the original reply
    result = _extract_braces(text)
    if result is not None:
        return result

    raise ValueError(f"Could not extract a JSON object from text: {text[:200]}...")


def _loads_object(text: str) -> dict | None:
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _extract_braces(text: str) -> dict | None:
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return _loads_object(text[start : end + 1])
    return None
