from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from fairdatause.errors import MalformedBodyError


def decode_body(raw: Any) -> Any:
    """Decode a request body that may be bytes, a JSON string or already parsed.

    Bytes must be valid UTF-8 JSON and strings valid JSON, otherwise
    ``MalformedBodyError`` is raised. Any other value is returned unchanged.
    """
    if isinstance(raw, (bytes, bytearray, memoryview)):
        try:
            raw = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedBodyError() from exc

    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedBodyError() from exc

    return raw


async def json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    payload = decode_body(raw)
    # A JSON-encoded string body carries the document one level down.
    if isinstance(payload, str):
        payload = decode_body(payload)
    return payload
