from __future__ import annotations

import pytest

from jsonrpc_kit.jsonrpc.exceptions import INVALID_REQUEST, InvalidRequest, JsonRpcAppError
from jsonrpc_kit.jsonrpc.models import JsonRpcError, Request, Response


def test_request_from_dict_call() -> None:
    req = Request.from_dict({"jsonrpc": "2.0", "method": "subtract", "params": [42, 23], "id": 1})
    assert req.method == "subtract"
    assert req.params == [42, 23]
    assert req.id == 1
    assert req.is_notification is False


def test_request_from_dict_without_id_is_notification() -> None:
    req = Request.from_dict({"jsonrpc": "2.0", "method": "update", "params": {"a": 1}})
    assert req.id is None
    assert req.is_notification is True


@pytest.mark.parametrize("falsy_id", [0, "", 0.0])
def test_request_falsy_id_is_still_a_call(falsy_id) -> None:
    req = Request.from_dict({"jsonrpc": "2.0", "method": "m", "id": falsy_id})
    assert req.is_notification is False
    assert req.to_dict() == {"jsonrpc": "2.0", "method": "m", "id": falsy_id}


@pytest.mark.parametrize(
    "raw",
    [
        {"method": "m", "id": 1},
        {"jsonrpc": "1.0", "method": "m", "id": 1},
        {"jsonrpc": "2.0", "id": 1},
        {"jsonrpc": "2.0", "method": 1, "id": 1},
        {"jsonrpc": "2.0", "method": "", "id": 1},
        {"jsonrpc": "2.0", "method": "m", "params": "bar"},
        {"jsonrpc": "2.0", "method": "m", "params": None},
        {"jsonrpc": "2.0", "method": "m", "params": True},
        {"jsonrpc": "2.0", "method": "m", "id": True},
        {"jsonrpc": "2.0", "method": "m", "id": None},
        {"jsonrpc": "2.0", "method": "m", "id": [1]},
        {"jsonrpc": "2.0", "method": "m", "id": {"a": 1}},
        ["not", "an", "object"],
    ],
)
def test_request_from_dict_rejects_invalid_shapes(raw) -> None:
    with pytest.raises(InvalidRequest) as e:
        Request.from_dict(raw)
    assert e.value.code == INVALID_REQUEST


def test_request_to_dict_omits_empty_params_and_absent_id() -> None:
    assert Request.notification("ping", []).to_dict() == {"jsonrpc": "2.0", "method": "ping"}
    assert Request.call("ping", {}, "a").to_dict() == {"jsonrpc": "2.0", "method": "ping", "id": "a"}
    assert Request.call("sum", [1, 2], 7).to_dict() == {
        "jsonrpc": "2.0",
        "method": "sum",
        "params": [1, 2],
        "id": 7,
    }


def test_request_reserialization_is_stable() -> None:
    raw = {"jsonrpc": "2.0", "method": "sum", "params": {"a": 1}, "id": "x"}
    once = Request.from_dict(raw).to_dict()
    assert once == raw
    assert Request.from_dict(once).to_dict() == once


def test_request_constructor_invariants() -> None:
    assert Request("m", id=5).has_id is True
    assert Request("m").has_id is False
    with pytest.raises(ValueError):
        Request("")
    with pytest.raises(TypeError):
        Request("m", params="x")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Request.call("m", None, True)  # type: ignore[arg-type]


def test_response_to_dict_result_and_error() -> None:
    assert Response(19, 1).to_dict() == {"jsonrpc": "2.0", "result": 19, "id": 1}
    assert Response(None, 1).to_dict() == {"jsonrpc": "2.0", "result": None, "id": 1}

    err = Response(JsonRpcError(-32601, "Invalid method: foo"), "1").to_dict()
    assert err == {
        "jsonrpc": "2.0",
        "error": {"code": -32601, "message": "Invalid method: foo", "data": None},
        "id": "1",
    }
    assert list(err) == ["jsonrpc", "error", "id"]


def test_response_from_dict_result() -> None:
    resp = Response.from_dict({"jsonrpc": "2.0", "result": "success", "id": 1})
    assert resp.result == "success"
    assert resp.error is None
    assert resp.id == 1


def test_response_from_dict_error_defaults() -> None:
    resp = Response.from_dict({"jsonrpc": "2.0", "error": {}, "id": None})
    assert resp.is_error
    assert resp.error == JsonRpcError(code=-32500, message="Unknown error", data=None)
    assert resp.result is None


def test_response_from_dict_error_fields() -> None:
    resp = Response.from_dict(
        {"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found", "data": [1]}, "id": 1}
    )
    assert resp.error is not None
    assert (resp.error.code, resp.error.message, resp.error.data) == (-32601, "Method not found", [1])


@pytest.mark.parametrize(
    "raw, code",
    [
        ({"result": 1, "id": 1}, -32501),
        ({"jsonrpc": "2.1", "result": 1, "id": 1}, -32501),
        ("not an object", -32501),
        ({"jsonrpc": "2.0", "id": 1}, -32502),
        ({"jsonrpc": "2.0", "result": 1, "error": {"code": 1, "message": "x"}, "id": 1}, -32502),
        ({"jsonrpc": "2.0", "error": "boom", "id": 1}, -32502),
        ({"jsonrpc": "2.0", "error": {"code": "abc", "message": "x"}, "id": 1}, -32502),
        ({"jsonrpc": "2.0", "error": {"code": True, "message": "x"}, "id": 1}, -32502),
        ({"jsonrpc": "2.0", "error": {"code": -32000, "message": 7}, "id": 1}, -32502),
        ({"jsonrpc": "2.0", "result": 1}, -32503),
        ({"jsonrpc": "2.0", "result": 1, "id": [1]}, -32503),
        ({"jsonrpc": "2.0", "result": 1, "id": False}, -32503),
    ],
)
def test_response_from_dict_rejects_invalid_shapes(raw, code: int) -> None:
    with pytest.raises(JsonRpcAppError) as e:
        Response.from_dict(raw)
    assert e.value.code == code


def test_decoded_error_serializes_back_unchanged() -> None:
    raw = {"jsonrpc": "2.0", "error": {"code": -32000, "message": "Server busy", "data": {"retry": 5}}, "id": "a"}
    assert Response.from_dict(raw).to_dict() == raw
