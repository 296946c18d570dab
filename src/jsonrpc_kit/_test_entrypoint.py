from __future__ import annotations

from typing import Any

from .entry import serve_stdio
from .jsonrpc.exceptions import InvalidParams
from .procedures import FunctionProcedure, ProcedureRegistry


def _subtract(params: Any, id: Any) -> Any:
    if isinstance(params, dict):
        return params["minuend"] - params["subtrahend"]
    return params[0] - params[1]


def _ping(params: Any, id: Any) -> Any:
    return {"ok": True, "params": params}


def _notify(params: Any, id: Any) -> Any:
    raise InvalidParams("notifications never reply")


def main() -> None:
    reg = ProcedureRegistry()
    reg.register("ping", FunctionProcedure(_ping))
    reg.register(
        "subtract",
        FunctionProcedure(_subtract, {"type": "array", "minItems": 2, "maxItems": 2, "items": {"type": "number"}}),
    )
    reg.register("notify", FunctionProcedure(_notify))
    serve_stdio(reg)


if __name__ == "__main__":  # pragma: no cover
    main()
