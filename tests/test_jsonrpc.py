import json
import pytest

from near_rpc.errors import NearErrorCode, ResultDecodeError
from near_rpc.jsonrpc import (
    decode_request,
    decode_result,
    encode_request,
    error_data_from,
    parse_response,
    to_rpc_error,
)
from near_rpc.models import (
    AccountView,
    BlockParams,
    CallFunctionRequest,
    ErrorEnvelope,
    Finality,
    ViewAccessKeyRequest,
    ViewStateRequest,
)
from near_rpc.naming import IDENTITY
from test_utils import PUBLIC_KEY, rpc_err, rpc_ok


def test_encode_request_writes_snake_case_envelope():
    params = ViewAccessKeyRequest(account_id="alice.near", public_key=PUBLIC_KEY)

    body = json.loads(encode_request("query", params, request_id="abc"))

    assert body == {
        "jsonrpc": "2.0",
        "id": "abc",
        "method": "query",
        "params": {
            "request_type": "view_access_key",
            "finality": "final",
            "account_id": "alice.near",
            "public_key": PUBLIC_KEY,
        },
    }


def test_encode_request_generates_fresh_ids():
    first = json.loads(encode_request("status", []))
    second = json.loads(encode_request("status", []))

    assert first["id"] != second["id"]
    assert first["params"] == []


def test_encode_request_drops_unset_optionals():
    body = json.loads(encode_request("block", BlockParams(block_id=10)))

    assert body["params"] == {"block_id": 10}


@pytest.mark.parametrize(
    "method, params",
    [
        ("query", ViewAccessKeyRequest(account_id="a.near", public_key=PUBLIC_KEY, finality=Finality.OPTIMISTIC)),
        ("query", ViewStateRequest(account_id="a.near", prefix_base64="U1RBVEU=")),
        ("query", CallFunctionRequest(account_id="wrap.near", method_name="ft_metadata", args_base64="e30=")),
        ("block", BlockParams(finality=Finality.FINAL)),
    ],
)
def test_request_round_trip(method, params):
    decoded = decode_request(encode_request(method, params), params_type=type(params))

    assert decoded.method == method
    assert decoded.params == params


def test_identity_naming_sends_memory_names():
    params = ViewStateRequest(account_id="a.near")

    body = json.loads(encode_request("query", params, naming=IDENTITY))

    assert body["params"]["requestType"] == "view_state"
    assert body["params"]["prefixBase64"] == ""


def test_parse_response_accepts_result_and_error_envelopes():
    ok = parse_response(json.dumps(rpc_ok({"gas_price": "1"})).encode())
    failed = parse_response(json.dumps(rpc_err(-32601, "Method not found")).encode())

    assert ok.result == {"gas_price": "1"}
    assert ok.error is None
    assert failed.error.code == -32601
    assert failed.result is None


@pytest.mark.parametrize("body", [b"", b"<html>502</html>", b"[1, 2]", b'{"result": 1}', b"\xff\xfe"])
def test_parse_response_rejects_non_envelopes(body):
    with pytest.raises(ValueError):
        parse_response(body)


def test_decode_result_wraps_schema_mismatch():
    with pytest.raises(ResultDecodeError) as exc_info:
        decode_result({"amount": "1"}, AccountView)

    assert exc_info.value.result_type is AccountView
    assert "AccountView" in str(exc_info.value)


# ───────────────── structured error data ─────────────────
def test_error_data_from_data_object():
    error = ErrorEnvelope(
        code=-32000,
        message="Server error",
        data={
            "name": "UNKNOWN_ACCOUNT",
            "cause": {"name": "AccountDoesNotExist", "info": "Account x.near does not exist"},
        },
    )

    data = error_data_from(error)

    assert data.name == "UNKNOWN_ACCOUNT"
    assert data.cause.name == "AccountDoesNotExist"
    assert data.cause.info == "Account x.near does not exist"


def test_error_data_falls_back_to_error_level_descriptor():
    """Current nodes put name/cause on the error and a plain string in data."""
    error = ErrorEnvelope(
        code=-32000,
        message="Server error",
        data="account nobody.near does not exist while viewing",
        name="HANDLER_ERROR",
        cause={"name": "UNKNOWN_ACCOUNT", "info": {"requested_account_id": "nobody.near", "block_height": 1}},
    )

    data = error_data_from(error)

    assert data.name == "HANDLER_ERROR"
    assert data.cause.name == "UNKNOWN_ACCOUNT"
    assert data.cause.info["requested_account_id"] == "nobody.near"


@pytest.mark.parametrize("data", [None, "just a string", 17, ["x"], {"unrelated": True}, {"cause": "flat"}])
def test_malformed_error_data_degrades_to_none(data):
    error = ErrorEnvelope(code=-32602, message="Invalid params", data=data)

    assert error_data_from(error) is None


def test_to_rpc_error_classifies_code():
    error = to_rpc_error(ErrorEnvelope(code=-32601, message="Method not found", data="foo"))

    assert error.code == -32601
    assert error.message == "Method not found"
    assert error.error_code is NearErrorCode.METHOD_NOT_FOUND
    assert error.data is None
    assert str(error) == "Method not found (code: -32601)"


def test_to_rpc_error_unknown_code_and_details():
    error = to_rpc_error(
        ErrorEnvelope(
            code=-31999,
            message="Server error",
            data={"name": "HANDLER_ERROR", "cause": {"name": "UNKNOWN_BLOCK", "info": "height 9"}},
        )
    )

    assert error.error_code is NearErrorCode.UNKNOWN
    assert "Details: HANDLER_ERROR - Cause: UNKNOWN_BLOCK (height 9)" in str(error)
