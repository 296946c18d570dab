from .context import TraceContext
from .envelope import EventRecord, SpanRecord, TraceEnvelope

__all__ = ["TraceContext", "TraceEnvelope", "SpanRecord", "EventRecord"]
