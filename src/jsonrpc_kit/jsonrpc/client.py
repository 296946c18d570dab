from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol

from ..errors import to_app_error
from .codec import decode_json, encode_json
from .exceptions import JsonRpcAppError
from .models import Request, Response


class Transport(Protocol):
    """One synchronous round trip; None means no reply."""

    def send(self, payload: str) -> str | None:
        ...


@dataclass(frozen=True)
class JsonRpcClient:
    """JSON-RPC 2.0 client engine on top of an opaque transport.

    Every failure (transport, decoding, response validation) is raised as
    JsonRpcAppError.
    """

    transport: Transport

    def send(self, request: Request) -> Response | None:
        try:
            raw = self.transport.send(encode_json(request.to_dict()))
            # A notification has no reply to decode, whatever the transport returned.
            if request.is_notification or not raw:
                return None
            return Response.from_dict(decode_json(raw))
        except JsonRpcAppError:
            raise
        except Exception as e:
            raise to_app_error(e) from e

    def send_batch(self, requests: Iterable[Request]) -> Iterator[Response]:
        """Send requests as one batch and lazily yield the responses.

        Single pass: nothing happens until the first item is requested, and a
        malformed item only fails when iteration reaches it.
        """
        try:
            raw = self.transport.send(encode_json([r.to_dict() for r in requests]))
            if not raw:
                return
            decoded = decode_json(raw)
            if not isinstance(decoded, list):
                return
            for item in decoded:
                yield Response.from_dict(item)
        except JsonRpcAppError:
            raise
        except Exception as e:
            raise to_app_error(e) from e
