from __future__ import annotations

import io
import json
from pathlib import Path

from jsonrpc_kit.entry import build_dispatcher, build_observability, traced
from jsonrpc_kit.config import Settings
from jsonrpc_kit.jsonrpc.client import JsonRpcClient
from jsonrpc_kit.jsonrpc.local_transport import LocalTransport
from jsonrpc_kit.jsonrpc.models import Request, Response
from jsonrpc_kit.jsonrpc.stdio_transport import StdioTransport
from jsonrpc_kit.observability.obs import api as obs
from jsonrpc_kit.procedures import FunctionProcedure, ProcedureRegistry


def _registry() -> ProcedureRegistry:
    reg = ProcedureRegistry()
    reg.register("subtract", FunctionProcedure(lambda params, id: params[0] - params[1]))
    reg.register("noop", FunctionProcedure(lambda params, id: None))
    return reg


def test_stdio_transport_writes_replies_only_for_calls() -> None:
    stdin = io.StringIO(
        '{"jsonrpc":"2.0","method":"subtract","params":[42,23],"id":1}\n'
        "\n"
        '{"jsonrpc":"2.0","method":"noop"}\n'
        "[]\n"
    )
    stdout = io.StringIO()
    StdioTransport(stdin=stdin, stdout=stdout).serve(build_dispatcher(_registry()).handle)

    lines = stdout.getvalue().splitlines()
    assert lines == [
        '{"jsonrpc":"2.0","result":19,"id":1}',
        '{"jsonrpc":"2.0","error":{"code":-32600,"message":"Invalid request","data":null},"id":null}',
    ]


def test_local_transport_client_server_roundtrip() -> None:
    client = JsonRpcClient(LocalTransport(build_dispatcher(_registry())))

    assert client.send(Request.call("subtract", [42, 23], 1)) == Response(19, 1)
    assert client.send(Request.notification("noop")) is None

    batch = list(
        client.send_batch(
            [
                Request.call("subtract", [10, 3], "a"),
                Request.notification("noop"),
                Request.call("missing", None, "b"),
            ]
        )
    )
    assert [r.id for r in batch] == ["a", "b"]
    assert batch[0].result == 7
    assert batch[1].error is not None and batch[1].error.code == -32601


def test_traced_handler_writes_one_trace_per_payload(tmp_path: Path) -> None:
    settings = Settings.from_dict({"observability": {"enabled": True}})
    settings.paths.logs_dir = tmp_path / "logs"
    sink = build_observability(settings)
    assert sink is not None and obs.get_sink() is sink

    handle = traced(build_dispatcher(_registry()).handle)
    assert handle('{"jsonrpc":"2.0","method":"subtract","params":[2,1],"id":1}') == '{"jsonrpc":"2.0","result":1,"id":1}'
    handle("{broken")

    records = [json.loads(line) for line in sink.path.read_text(encoding="utf-8").splitlines()]
    assert len(records) == 2
    assert records[0]["aggregates"]["call_count"] == 1
    assert records[0]["aggregates"]["error_count"] == 0
    assert records[1]["aggregates"]["error_count"] == 1


def test_observability_disabled_clears_sink() -> None:
    assert build_observability(Settings()) is None
    assert obs.get_sink() is None
