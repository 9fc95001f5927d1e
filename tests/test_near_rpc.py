import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from room_deploy import near_rpc


class FakeResponse:
    def __init__(self, body):
        self.body = body

    def raise_for_status(self):
        pass

    def json(self):
        return self.body


def fake_post(body, seen):
    def post(url, json=None, headers=None, timeout=None):
        seen.append({"url": url, "json": json, "timeout": timeout})
        return FakeResponse(body)
    return post


def test_view_account_sends_query(monkeypatch):
    seen = []
    body = {"jsonrpc": "2.0", "id": "dontcare", "result": {"code_hash": "E8jZ1giWcVrps8PcV75ATauu6gFRkcwjNtKp7NKmipZG"}}
    monkeypatch.setattr(near_rpc.requests, "post", fake_post(body, seen))

    res = near_rpc.view_account("room2.ostolex.testnet")

    assert res["code_hash"].startswith("E8jZ")
    sent = seen[0]["json"]
    assert sent["method"] == "query"
    assert sent["params"]["request_type"] == "view_account"
    assert sent["params"]["account_id"] == "room2.ostolex.testnet"
    assert seen[0]["url"] == near_rpc.NEAR_RPC_URL


def test_has_contract(monkeypatch):
    body = {"result": {"code_hash": "E8jZ1giWcVrps8PcV75ATauu6gFRkcwjNtKp7NKmipZG"}}
    monkeypatch.setattr(near_rpc.requests, "post", fake_post(body, []))
    assert near_rpc.has_contract("room2.ostolex.testnet") is True


def test_empty_account_has_no_contract(monkeypatch):
    body = {"result": {"code_hash": near_rpc.EMPTY_CODE_HASH}}
    monkeypatch.setattr(near_rpc.requests, "post", fake_post(body, []))
    assert near_rpc.has_contract("room2.ostolex.testnet") is False


def test_rpc_error_raises(monkeypatch):
    body = {"error": {"name": "HANDLER_ERROR", "cause": {"name": "UNKNOWN_ACCOUNT"}, "message": "Server error"}}
    monkeypatch.setattr(near_rpc.requests, "post", fake_post(body, []))
    with pytest.raises(RuntimeError, match="UNKNOWN_ACCOUNT"):
        near_rpc.view_account("nobody.testnet")


def test_rpc_error_not_an_object(monkeypatch):
    monkeypatch.setattr(near_rpc.requests, "post", fake_post({"error": "Server error"}, []))
    with pytest.raises(RuntimeError, match="Server error"):
        near_rpc.view_account("nobody.testnet")
