from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from .exceptions import (
    INVALID_RESPONSE_ID,
    INVALID_RESPONSE_PAYLOAD,
    INVALID_RESPONSE_VERSION,
    UNKNOWN_ERROR,
    InvalidRequest,
    JsonRpcAppError,
)


JSONRPC_VERSION = "2.0"

JsonDict = dict[str, Any]
RequestId = Union[str, int, float]


def is_id_value(v: Any) -> bool:
    # bool is an int subclass but never a valid id.
    return isinstance(v, (str, int, float)) and not isinstance(v, bool)


def _is_structured(v: Any) -> bool:
    return isinstance(v, (dict, list))


@dataclass(frozen=True)
class JsonRpcError:
    code: int
    message: str
    data: Any | None = None

    def to_dict(self) -> JsonDict:
        return {"code": self.code, "message": self.message, "data": self.data}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "JsonRpcError":
        """Read a reply's error member; missing code/message fall back to the unknown error."""
        code = raw.get("code")
        message = raw.get("message")
        if code is not None and (not isinstance(code, int) or isinstance(code, bool)):
            raise JsonRpcAppError(INVALID_RESPONSE_PAYLOAD, 'Invalid response: "error.code" must be an integer')
        if message is not None and not isinstance(message, str):
            raise JsonRpcAppError(INVALID_RESPONSE_PAYLOAD, 'Invalid response: "error.message" must be a string')
        return cls(
            code=UNKNOWN_ERROR if code is None else code,
            message="Unknown error" if message is None else message,
            data=raw.get("data"),
        )


@dataclass(frozen=True)
class Request:
    """A call or a notification.

    Both shapes share one type; `has_id` tells them apart so that falsy ids
    (0, "") still mark a call. When `has_id` is omitted it is derived from
    `id is not None`.
    """

    method: str
    params: dict[str, Any] | list[Any] | None = None
    id: RequestId | None = None
    has_id: bool | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or not self.method:
            raise ValueError("method must be non-empty string")
        if self.params is not None and not _is_structured(self.params):
            raise TypeError("params must be a dict, a list or None")
        if self.has_id is None:
            object.__setattr__(self, "has_id", self.id is not None)
        if self.has_id and not is_id_value(self.id):
            raise TypeError("id must be str, int or float")
        if not self.has_id and self.id is not None:
            raise ValueError("notification cannot carry an id")

    @classmethod
    def call(cls, method: str, params: dict[str, Any] | list[Any] | None, id: RequestId) -> "Request":
        return cls(method=method, params=params, id=id, has_id=True)

    @classmethod
    def notification(cls, method: str, params: dict[str, Any] | list[Any] | None = None) -> "Request":
        return cls(method=method, params=params, id=None, has_id=False)

    @property
    def is_notification(self) -> bool:
        return not self.has_id

    @classmethod
    def from_dict(cls, raw: Any) -> "Request":
        """Validate one decoded request object; raises InvalidRequest."""
        if not isinstance(raw, dict):
            raise InvalidRequest("Request must be an object")

        if raw.get("jsonrpc") != JSONRPC_VERSION:
            raise InvalidRequest("Invalid JSON-RPC version")

        method = raw.get("method")
        if not isinstance(method, str) or not method:
            raise InvalidRequest("Method is required and must be a string")

        if "params" in raw and not _is_structured(raw["params"]):
            raise InvalidRequest("Params must be a structured value or omitted")

        if "id" in raw and not is_id_value(raw["id"]):
            raise InvalidRequest("Id must be a string, integer, float, or omitted")

        return cls(method=method, params=raw.get("params"), id=raw.get("id"), has_id="id" in raw)

    def to_dict(self) -> JsonDict:
        d: JsonDict = {"jsonrpc": JSONRPC_VERSION, "method": self.method}
        if self.params:
            d["params"] = self.params
        if self.has_id:
            d["id"] = self.id
        return d


@dataclass(frozen=True)
class Response:
    """A reply to one call: `payload` is either the result or a JsonRpcError."""

    payload: Any
    id: RequestId | None = None

    @property
    def is_error(self) -> bool:
        return isinstance(self.payload, JsonRpcError)

    @property
    def error(self) -> JsonRpcError | None:
        return self.payload if isinstance(self.payload, JsonRpcError) else None

    @property
    def result(self) -> Any:
        return None if self.is_error else self.payload

    @classmethod
    def from_dict(cls, raw: Any) -> "Response":
        """Validate one decoded response object; raises JsonRpcAppError."""
        if not isinstance(raw, dict) or raw.get("jsonrpc") != JSONRPC_VERSION:
            raise JsonRpcAppError(INVALID_RESPONSE_VERSION, 'Invalid response: "jsonrpc" must be "2.0"')

        has_result = "result" in raw
        has_error = "error" in raw
        if has_result == has_error:
            raise JsonRpcAppError(
                INVALID_RESPONSE_PAYLOAD,
                'Invalid response: exactly one of "result" or "error" must be present',
            )
        if has_error and not isinstance(raw["error"], dict):
            raise JsonRpcAppError(INVALID_RESPONSE_PAYLOAD, 'Invalid response: "error" must be an object')

        if "id" not in raw or not (raw["id"] is None or is_id_value(raw["id"])):
            raise JsonRpcAppError(
                INVALID_RESPONSE_ID,
                'Invalid response: "id" must be present and be a string, integer, float, or null',
            )

        payload = JsonRpcError.from_dict(raw["error"]) if has_error else raw["result"]
        return cls(payload=payload, id=raw["id"])

    def to_dict(self) -> JsonDict:
        d: JsonDict = {"jsonrpc": JSONRPC_VERSION}
        if isinstance(self.payload, JsonRpcError):
            d["error"] = self.payload.to_dict()
        else:
            d["result"] = self.payload
        d["id"] = self.id
        return d
