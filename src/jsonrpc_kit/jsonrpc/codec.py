from __future__ import annotations

import json
from typing import Any

from .exceptions import (  # noqa: F401  (re-exported)
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ParseError,
)
from .models import JsonRpcError, Response


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_json(text: str | bytes) -> Any:
    """Decode one JSON-RPC payload; raises ParseError on malformed text.

    NaN and Infinity literals are rejected like any other malformed token.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError) as e:
        raise ParseError() from e


def encode_json(value: Any) -> str:
    """Encode to compact JSON; raises TypeError/ValueError for values JSON cannot carry."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def encode_response(resp: Response | list[Response]) -> str:
    if isinstance(resp, list):
        return encode_json([r.to_dict() for r in resp])
    return encode_json(resp.to_dict())


def encode_error(req_id: Any | None, code: int, message: str, data: Any | None = None) -> str:
    resp = Response(payload=JsonRpcError(code=code, message=message, data=data), id=req_id)
    return encode_response(resp)
