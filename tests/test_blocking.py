from near_rpc.blocking import BlockingNearClient
from near_rpc.models import AccountView, Finality, GasPrice
from test_utils import account_payload, json_response, request_json, rpc_ok


def test_blocking_client_runs_calls_to_completion(make_client):
    def handler(request):
        body = request_json(request)
        if body["method"] == "gas_price":
            return json_response(rpc_ok({"gas_price": "5"}))
        return json_response(rpc_ok(account_payload()))

    client = BlockingNearClient(client=make_client(handler))

    assert client.gas_price() == GasPrice(gas_price="5")
    account = client.view_account("alice.testnet", Finality.OPTIMISTIC)

    assert isinstance(account, AccountView)
    assert request_json(make_client.requests[-1])["params"]["finality"] == "optimistic"
    assert client.url == "https://rpc.testnet.near.org"


def test_blocking_client_forwards_arguments(mock_transport):
    near, transport = mock_transport
    transport.call.return_value = "ok"
    client = BlockingNearClient(client=near)

    assert client.call_view_function("wrap.near", "ft_metadata", {}) == "ok"
    client.close()

    method, params, _ = transport.call.await_args.args
    assert method == "query"
    assert params.args_base64 == "e30="
    transport.aclose.assert_awaited_once()
