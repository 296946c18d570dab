"""JSON-RPC 2.0 wire layer: message model, error kinds and codec.

The engines (`dispatcher`, `client`) and transports are imported from their
own modules, or from the top-level `jsonrpc_kit` package.
"""
from .codec import decode_json, encode_error, encode_json, encode_response
from .exceptions import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InternalError,
    InvalidParams,
    InvalidRequest,
    JsonRpcAppError,
    MethodNotFound,
    ParseError,
)
from .models import JsonRpcError, Request, Response

__all__ = [
    "Request",
    "Response",
    "JsonRpcError",
    "JsonRpcAppError",
    "ParseError",
    "InvalidRequest",
    "MethodNotFound",
    "InvalidParams",
    "InternalError",
    "decode_json",
    "encode_json",
    "encode_response",
    "encode_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
