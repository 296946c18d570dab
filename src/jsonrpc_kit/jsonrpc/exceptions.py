from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import JsonRpcError


# JSON-RPC 2.0 reserved error codes.
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# Client-side response validation (implementation-defined range).
UNKNOWN_ERROR = -32500
INVALID_RESPONSE_VERSION = -32501
INVALID_RESPONSE_PAYLOAD = -32502
INVALID_RESPONSE_ID = -32503


class JsonRpcAppError(RuntimeError):
    """A failure that maps 1:1 onto a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}, data={self.data!r})"

    def to_error(self) -> "JsonRpcError":
        """The error object this failure is reported as."""
        from .models import JsonRpcError

        return JsonRpcError(code=self.code, message=self.message, data=self.data)


class _ReservedError(JsonRpcAppError):
    code: int
    default_message: str

    def __init__(self, message: str | None = None, data: Any | None = None) -> None:
        super().__init__(type(self).code, message or type(self).default_message, data)


class ParseError(_ReservedError):
    code = PARSE_ERROR
    default_message = "Invalid json received by the server"


class InvalidRequest(_ReservedError):
    code = INVALID_REQUEST
    default_message = "Invalid request object"


class MethodNotFound(_ReservedError):
    code = METHOD_NOT_FOUND
    default_message = "The requested method does not exist"


class InvalidParams(_ReservedError):
    code = INVALID_PARAMS
    default_message = "Invalid method parameter(s)"


class InternalError(_ReservedError):
    code = INTERNAL_ERROR
    default_message = "An internal error occurred"
