from __future__ import annotations

from .jsonrpc.exceptions import INTERNAL_ERROR, InternalError, JsonRpcAppError
from .jsonrpc.models import JsonRpcError


def _exception_code(exc: BaseException) -> int:
    code = getattr(exc, "code", None)
    if isinstance(code, int) and not isinstance(code, bool):
        return code
    return INTERNAL_ERROR


def map_exception_to_jsonrpc(exc: Exception) -> JsonRpcError:
    """Map any exception to a JSON-RPC error object.

    - JsonRpcAppError (raised intentionally by procedures or the engines) is kept as-is.
    - Anything else keeps its own message and, when it exposes an integer `code`
      attribute, that code; otherwise the internal error code is used.
    """
    if isinstance(exc, JsonRpcAppError):
        return exc.to_error()
    return JsonRpcError(
        code=_exception_code(exc),
        message=str(exc) or InternalError.default_message,
        data=None,
    )


def to_app_error(exc: Exception) -> JsonRpcAppError:
    """Normalize any failure to the single client-facing exception type."""
    if isinstance(exc, JsonRpcAppError):
        return exc
    err = map_exception_to_jsonrpc(exc)
    return JsonRpcAppError(err.code, err.message, err.data)
