"""JSON-RPC 2.0 request/response engines for clients and servers."""
from .errors import map_exception_to_jsonrpc, to_app_error
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    InternalError,
    InvalidParams,
    InvalidRequest,
    JsonRpcAppError,
    JsonRpcError,
    MethodNotFound,
    ParseError,
    Request,
    Response,
)
from .jsonrpc.client import JsonRpcClient, Transport
from .jsonrpc.dispatcher import Dispatcher
from .jsonrpc.local_transport import LocalTransport
from .jsonrpc.stdio_transport import StdioTransport
from .procedures import FunctionProcedure, Procedure, ProcedureProvider, ProcedureRegistry

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
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "map_exception_to_jsonrpc",
    "to_app_error",
    "Dispatcher",
    "JsonRpcClient",
    "Transport",
    "LocalTransport",
    "StdioTransport",
    "Procedure",
    "ProcedureProvider",
    "FunctionProcedure",
    "ProcedureRegistry",
]
