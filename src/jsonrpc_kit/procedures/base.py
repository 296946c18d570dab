from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from ..jsonrpc.exceptions import InvalidParams
from ..jsonrpc.models import RequestId
from .schema import SchemaValidationError, validate_params


Params = dict[str, Any] | list[Any]
ProcedureFn = Callable[[Params, RequestId | None], Any]


@runtime_checkable
class Procedure(Protocol):
    """Two-phase server-side operation: validate(params), then execute(params, id)."""

    def validate(self, params: Params) -> None:
        ...

    def execute(self, params: Params, id: RequestId | None) -> Any:
        ...


@runtime_checkable
class ProcedureProvider(Protocol):
    """The only view the dispatcher has on a registry."""

    def has(self, name: str) -> bool:
        ...

    def get(self, name: str) -> Any:
        ...


@dataclass
class FunctionProcedure:
    fn: ProcedureFn
    params_schema: dict[str, Any] | None = None

    def validate(self, params: Params) -> None:
        if self.params_schema is None:
            return
        try:
            validate_params(self.params_schema, params)
        except SchemaValidationError as e:
            raise InvalidParams(data={"message": str(e)}) from e

    def execute(self, params: Params, id: RequestId | None) -> Any:
        return self.fn(params, id)


def is_procedure(obj: Any) -> bool:
    return callable(getattr(obj, "validate", None)) and callable(getattr(obj, "execute", None))
