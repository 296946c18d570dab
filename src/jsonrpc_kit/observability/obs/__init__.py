"""User-facing observability API (span/event)."""

from .api import event, get_sink, set_sink, span

__all__ = ["span", "event", "set_sink", "get_sink"]
