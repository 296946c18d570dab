from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
import contextvars
import time
import uuid
from typing import Any, Callable, Iterator

from .envelope import EventRecord, SpanRecord, TraceEnvelope, compute_aggregates


Clock = Callable[[], float]

_ACTIVE: contextvars.ContextVar["TraceContext | None"] = contextvars.ContextVar(
    "jsonrpc_trace", default=None
)


@dataclass
class TraceContext:
    """Trace of one handled payload.

    Spans are kept in the order they were opened; `_open` is the stack of
    spans still running, whose top receives new events.
    """

    trace_id: str
    start_ts: float
    trace_type: str = "rpc"
    clock: Clock = field(default=time.time, repr=False)
    spans: list[SpanRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)
    _open: list[SpanRecord] = field(default_factory=list, repr=False)

    @classmethod
    def new(cls, trace_id: str | None = None, *, trace_type: str = "rpc", clock: Clock = time.time) -> "TraceContext":
        return cls(
            trace_id=trace_id or f"trace_{uuid.uuid4().hex}",
            start_ts=clock(),
            trace_type=trace_type,
            clock=clock,
        )

    @classmethod
    def current(cls) -> "TraceContext | None":
        return _ACTIVE.get()

    @classmethod
    @contextmanager
    def activate(cls, ctx: "TraceContext") -> Iterator["TraceContext"]:
        token = _ACTIVE.set(ctx)
        try:
            yield ctx
        finally:
            _ACTIVE.reset(token)

    @contextmanager
    def start_span(self, name: str, attrs: dict[str, Any] | None = None) -> Iterator[SpanRecord]:
        s = SpanRecord(
            span_id=f"span_{uuid.uuid4().hex}",
            name=name,
            parent_span_id=self._open[-1].span_id if self._open else None,
            start_ts=self.clock(),
            attrs=dict(attrs or {}),
        )
        self.spans.append(s)
        self._open.append(s)
        try:
            yield s
        except Exception as e:
            s.status = "error"
            s.events.append(
                EventRecord(ts=self.clock(), kind="error", attrs={"exc_type": type(e).__name__, "message": str(e)})
            )
            raise
        finally:
            if self._open and self._open[-1] is s:
                self._open.pop()
            s.end_ts = self.clock()

    def add_event(self, kind: str, attrs: dict[str, Any] | None = None) -> EventRecord:
        ev = EventRecord(ts=self.clock(), kind=kind.strip(), attrs=dict(attrs or {}))
        (self._open[-1].events if self._open else self.events).append(ev)
        return ev

    def finish(self) -> TraceEnvelope:
        """Close the trace and hand the envelope to the installed sink, if any."""
        now = self.clock()
        if self._open:
            # Spans left open are closed as failed.
            self.events.append(EventRecord(ts=now, kind="warn.span_leak", attrs={"open_span_count": len(self._open)}))
            for s in self._open:
                s.status = "error"
                s.end_ts = now
            self._open.clear()

        envelope = TraceEnvelope(
            trace_id=self.trace_id,
            trace_type=self.trace_type,
            status="error" if any(s.status == "error" for s in self.spans) else "ok",
            start_ts=self.start_ts,
            end_ts=now,
            spans=list(self.spans),
            events=list(self.events),
        )
        envelope.aggregates = compute_aggregates(envelope)

        from ..obs import api as obs

        sink = obs.get_sink()
        if sink is not None:
            sink.on_trace_end(envelope)
        return envelope
