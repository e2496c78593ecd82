"""The persisted document: an opaque JSON mapping tagged with ``version``."""

from __future__ import annotations

import json
from typing import Any

from rocky_store.exceptions import DocumentEncodeError

Document = dict[str, Any]

DEFAULT_VERSION = 1


def default_document() -> Document:
    """Return a fresh empty document. Each call returns a new object."""
    return {"version": DEFAULT_VERSION, "days": [], "goals": []}


def encode_document(document: Any) -> str:
    """Serialize a document to pretty-printed JSON text."""
    try:
        return json.dumps(document, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise DocumentEncodeError(f"Document is not JSON-serializable: {e}") from e


def decode_document(raw: bytes) -> Any:
    """Parse raw file bytes as JSON.

    Raises ``ValueError`` (``json.JSONDecodeError`` or ``UnicodeDecodeError``)
    on malformed or truncated content, and also for input nested too deeply
    for the parser. The result is returned as-is.
    """
    try:
        return json.loads(raw.decode("utf-8"))
    except RecursionError as e:
        raise ValueError(f"JSON nested too deeply: {e}") from e
