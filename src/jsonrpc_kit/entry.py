from __future__ import annotations

from pathlib import Path

from .config import Settings, load_settings
from .errors import map_exception_to_jsonrpc
from .jsonrpc.dispatcher import Dispatcher
from .jsonrpc.stdio_transport import PayloadHandler, StdioTransport
from .observability.obs import api as obs
from .observability.sinks.jsonl import JsonlSink
from .observability.trace.context import TraceContext
from .procedures.base import ProcedureProvider


def build_observability(settings: Settings) -> JsonlSink | None:
    if not settings.observability.enabled:
        obs.set_sink(None)
        return None
    sink = JsonlSink(settings.paths.logs_dir)
    obs.set_sink(sink)
    return sink


def traced(handler: PayloadHandler, trace_type: str = "rpc") -> PayloadHandler:
    """Run each payload in its own trace; the envelope goes to the configured sink."""

    def _handle(payload: str) -> str | None:
        ctx = TraceContext.new(trace_type=trace_type)
        with TraceContext.activate(ctx):
            try:
                return handler(payload)
            finally:
                ctx.finish()

    return _handle


def build_dispatcher(procedures: ProcedureProvider) -> Dispatcher:
    return Dispatcher(procedures=procedures, error_mapper=map_exception_to_jsonrpc)


def serve_stdio(procedures: ProcedureProvider, settings_path: str | Path | None = None) -> None:
    settings = load_settings(settings_path)
    sink = build_observability(settings)

    handler: PayloadHandler = build_dispatcher(procedures).handle
    if sink is not None:
        handler = traced(handler, settings.observability.trace_type)

    StdioTransport().serve(handler)
