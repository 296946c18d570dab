from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


JsonDict = dict[str, Any]

TRACE_SCHEMA_VERSION = "trace.v1"

# Event kinds counted as failed calls in trace aggregates.
ERROR_EVENT_KINDS: set[str] = {
    "rpc.parse_error",
    "rpc.invalid_request",
    "rpc.error",
}


@dataclass(frozen=True)
class EventRecord:
    ts: float
    kind: str
    attrs: JsonDict = field(default_factory=dict)

    def to_dict(self) -> JsonDict:
        return {"ts": self.ts, "kind": self.kind, "attrs": self.attrs}


@dataclass
class SpanRecord:
    span_id: str
    name: str
    parent_span_id: str | None
    start_ts: float
    end_ts: float | None = None
    status: str = "ok"  # ok|error
    attrs: JsonDict = field(default_factory=dict)
    events: list[EventRecord] = field(default_factory=list)

    def to_dict(self) -> JsonDict:
        return {
            "span_id": self.span_id,
            "name": self.name,
            "parent_span_id": self.parent_span_id,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "status": self.status,
            "attrs": self.attrs,
            "events": [e.to_dict() for e in self.events],
        }


@dataclass
class TraceEnvelope:
    trace_id: str
    start_ts: float
    end_ts: float
    trace_type: str = "rpc"
    status: str = "ok"  # ok|error
    spans: list[SpanRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)  # trace-level events
    aggregates: JsonDict = field(default_factory=dict)
    schema_version: str = TRACE_SCHEMA_VERSION

    def to_dict(self) -> JsonDict:
        return {
            "schema_version": self.schema_version,
            "trace_id": self.trace_id,
            "trace_type": self.trace_type,
            "status": self.status,
            "start_ts": self.start_ts,
            "end_ts": self.end_ts,
            "spans": [s.to_dict() for s in self.spans],
            "events": [e.to_dict() for e in self.events],
            "aggregates": self.aggregates,
        }


def compute_aggregates(envelope: TraceEnvelope) -> JsonDict:
    events = list(envelope.events)
    for s in envelope.spans:
        events.extend(s.events)
    return {
        "duration_ms": round((envelope.end_ts - envelope.start_ts) * 1000.0, 3),
        "call_count": sum(1 for s in envelope.spans if s.name == "rpc.call"),
        "error_count": sum(1 for e in events if e.kind in ERROR_EVENT_KINDS),
    }
