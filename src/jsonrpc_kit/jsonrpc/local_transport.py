from __future__ import annotations

from dataclasses import dataclass

from .dispatcher import Dispatcher


@dataclass
class LocalTransport:
    """In-process client transport: hands payloads straight to a Dispatcher."""

    dispatcher: Dispatcher

    def send(self, payload: str) -> str | None:
        return self.dispatcher.handle(payload)
