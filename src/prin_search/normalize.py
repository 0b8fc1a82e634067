"""Reply normalization: every provider's payload down to one plain string.

Each extractor accepts either the SDK's response object or the equivalent
plain dict, and by default degrades a missing field path to ``""``. With
``strict=True`` a missing path raises ``MalformedResponseError`` instead, so
callers can tell "the provider said nothing" apart from "the reply was not
shaped as expected".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from prin_search.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

_MISSING = object()


def _get(obj: Any, name: str) -> Any:
    """Read *name* from a mapping key or an attribute; ``_MISSING`` if absent."""
    if obj is None:
        return _MISSING
    if isinstance(obj, dict):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


def _absent(provider: str, path: str, strict: bool) -> str:
    if strict:
        raise MalformedResponseError(provider, path)
    logger.warning("Reply from %s has no %s; returning empty text", provider, path)
    return ""


def openai_text(response: Any, strict: bool = False, provider: str = "openai") -> str:
    """Extract ``choices[0].message.content`` from a chat-completion reply."""
    path = "choices[0].message.content"

    choices = _get(response, "choices")
    if choices is _MISSING or not choices:
        return _absent(provider, path, strict)

    message = _get(choices[0], "message")
    content = _get(message, "content")
    if content is _MISSING or content is None:
        return _absent(provider, path, strict)
    return content


def gemini_text(response: Any, strict: bool = False) -> str:
    """Extract text via the Gemini SDK's ``text`` accessor."""
    text = _get(response, "text")
    if text is _MISSING or text is None:
        return _absent("gemini", "text", strict)
    return text


def claude_text(blocks: Iterable[Any] | None, strict: bool = False) -> str:
    """Join the ``text`` of every content block, then strip the result.

    Blocks without a ``text`` field (tool use, thinking, ...) count as empty.
    """
    if blocks is None:
        return _absent("claude", "content", strict)

    parts: list[str] = []
    for block in blocks:
        text = _get(block, "text")
        parts.append(text if isinstance(text, str) else "")
    return "".join(parts).strip()
