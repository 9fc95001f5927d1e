import os
from typing import Any, Dict

import requests


NEAR_RPC_URL = os.getenv("NEAR_RPC_URL", "https://rpc.testnet.near.org")
# base58 of 32 zero bytes: the account holds no contract code
EMPTY_CODE_HASH = "11111111111111111111111111111111"


def rpc_call(method: str, params: Dict[str, Any]) -> Dict[str, Any]:
    payload = {"jsonrpc": "2.0", "id": "dontcare", "method": method, "params": params}
    headers = {"Content-Type": "application/json"}
    r = requests.post(NEAR_RPC_URL, json=payload, headers=headers, timeout=20)
    r.raise_for_status()
    return r.json()


def view_account(account_id: str) -> Dict[str, Any]:
    res = rpc_call("query", {
        "request_type": "view_account",
        "finality": "final",
        "account_id": account_id,
    })
    if "error" in res:
        err = res.get("error")
        if isinstance(err, dict):
            cause = err.get("cause")
            cause = (cause.get("name") if isinstance(cause, dict) else None) or err.get("message") or "unknown error"
        else:
            cause = str(err)
        raise RuntimeError(f"view_account {account_id} failed: {cause}")
    return res.get("result", {})


def has_contract(account_id: str) -> bool:
    """True when `account_id` has non-empty contract code deployed."""
    code_hash = view_account(account_id).get("code_hash", EMPTY_CODE_HASH)
    return code_hash != EMPTY_CODE_HASH
