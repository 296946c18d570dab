from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..errors import map_exception_to_jsonrpc
from ..observability.obs import api as obs
from ..procedures.base import ProcedureProvider, is_procedure
from .codec import decode_json, encode_json, encode_response
from .exceptions import InternalError, InvalidRequest, JsonRpcAppError, MethodNotFound
from .models import JsonRpcError, Request, Response, is_id_value


ErrorMapper = Callable[[Exception], JsonRpcError]


def _recover_id(item: Any) -> Any | None:
    """Best-effort id of an item that failed request validation."""
    if isinstance(item, dict) and is_id_value(item.get("id")):
        return item["id"]
    return None


@dataclass
class Dispatcher:
    """JSON-RPC 2.0 server engine.

    Decodes a payload, validates each request, resolves the procedure through
    `procedures` (anything with `has(name)` / `get(name)`), runs the
    validate-then-execute contract and assembles zero, one or a batch of
    responses.
    """

    procedures: ProcedureProvider
    error_mapper: ErrorMapper | None = None

    def handle(self, text: str | bytes) -> str | None:
        """Handle one inbound payload; None means nothing must be sent back."""
        with obs.span("rpc.handle"):
            try:
                decoded = decode_json(text)
            except JsonRpcAppError as e:
                obs.event("rpc.parse_error", {"message": str(e.__cause__ or e)})
                return encode_response(self._error_response(e, None))

            out = self.handle_decoded(decoded)
            return encode_response(out) if out is not None else None

    def handle_decoded(self, decoded: Any) -> Response | list[Response] | None:
        if not isinstance(decoded, (dict, list)) or len(decoded) == 0:
            obs.event("rpc.invalid_request", {"reason": "empty or scalar payload"})
            return self._error_response(InvalidRequest("Invalid request"), None)

        if isinstance(decoded, dict):
            return self.execute_procedure(decoded)

        responses: list[Response] = []
        for item in decoded:
            resp = self.execute_procedure(item)
            if resp is not None:
                responses.append(resp)
        return responses or None

    def execute_procedure(self, item: Any) -> Response | None:
        """Run one request item; None for a notification that needs no reply."""
        try:
            req = Request.from_dict(item)
        except JsonRpcAppError as e:
            obs.event("rpc.invalid_request", {"message": e.message})
            return self._error_response(e, _recover_id(item))

        with obs.span("rpc.call", {"method": req.method, "notification": req.is_notification}):
            params = req.params if req.params is not None else {}
            try:
                procedure = self._resolve(req.method)
                procedure.validate(params)
            except Exception as e:
                # Input-level faults are reported even for notifications.
                obs.event("rpc.error", {"phase": "validate", "exc_type": type(e).__name__})
                return self._error_response(e, req.id)

            try:
                result = procedure.execute(params, req.id)
            except Exception as e:
                obs.event("rpc.error", {"phase": "execute", "exc_type": type(e).__name__})
                if req.is_notification:
                    return None
                return self._error_response(e, req.id)

            if req.is_notification:
                return None

            # A result JSON cannot carry fails this call only.
            try:
                encode_json(result)
            except (TypeError, ValueError) as e:
                obs.event("rpc.error", {"phase": "encode", "exc_type": type(e).__name__})
                return self._error_response(InternalError(data={"message": str(e)}), req.id)
            return Response(payload=result, id=req.id)

    def _resolve(self, method: str) -> Any:
        if not self.procedures.has(method):
            obs.event("rpc.method_not_found", {"method": method})
            raise MethodNotFound(f"Invalid method: {method}")
        procedure = self.procedures.get(method)
        if not is_procedure(procedure):
            obs.event("rpc.method_not_found", {"method": method, "reason": "not a procedure"})
            raise MethodNotFound(f"Invalid method: {method}")
        return procedure

    def _error_response(self, exc: Exception, req_id: Any | None) -> Response:
        mapper = self.error_mapper or map_exception_to_jsonrpc
        err = mapper(exc)
        try:
            encode_json(err.to_dict())
        except (TypeError, ValueError):
            # Unencodable error data is dropped; code and message still go out.
            err = JsonRpcError(code=err.code, message=str(err.message), data=None)
        return Response(payload=err, id=req_id)
