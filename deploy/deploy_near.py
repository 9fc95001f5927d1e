"""NEAR deployment helper for the room contract.

With no flags this builds the contract and deploys it to the testnet
account. `--simulate` prints what would run without spawning anything, and
`--verify` checks over RPC that the account holds contract code afterwards.
"""
import os
import sys
from pathlib import Path

import requests

# ensure project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from room_deploy import near_rpc, orchestrator
from room_deploy.records import read_last_deploy, write_last_deploy


def print_instructions():
    print("Usage: python deploy/deploy_near.py [--simulate | --verify]")
    print("Run from the contract directory (where build.sh lives).")
    print("Recommended steps to deploy to NEAR testnet:")
    print("  1. Install NEAR CLI: `npm install -g near-cli`")
    print(f"  2. Log in as the contract account: `near login` ({orchestrator.ACCOUNT_ID})")
    print("  3. Deploy: `python deploy/deploy_near.py`")
    print("")


def run_deploy_simulation():
    print("Running a simulated deploy (no network changes).")
    build = Path(orchestrator.BUILD_COMMAND[-1])
    wasm = Path(orchestrator.WASM_FILE)
    print(f"Build:  {' '.join(orchestrator.BUILD_COMMAND)} ({'found' if build.exists() else 'missing'})")
    print(f"Deploy: {' '.join(orchestrator.deploy_command())}")
    print(f"Artifact: {wasm} ({'found' if wasm.exists() else 'not built yet'})")
    if not orchestrator.has_near_cli():
        print("NEAR CLI not found on PATH. Install it with `npm install -g near-cli`.")

    last = read_last_deploy()
    if last:
        print(f"Last deploy: {last.get('account_id', '?')} at {last.get('updated_at', '?')}")


def verify_deployment() -> int:
    try:
        deployed = near_rpc.has_contract(orchestrator.ACCOUNT_ID)
    except (requests.RequestException, RuntimeError) as e:
        print(f"Could not verify deployment: {e}", file=sys.stderr)
        return 1
    if not deployed:
        print(f"Account {orchestrator.ACCOUNT_ID} has no contract code after deploy", file=sys.stderr)
        return 1
    print(f"Verified contract code on {orchestrator.ACCOUNT_ID}")
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if "--help" in argv or "-h" in argv:
        print_instructions()
        return 0
    if "--simulate" in argv:
        run_deploy_simulation()
        return 0

    code = orchestrator.run_deployment()
    if code != 0:
        return code
    try:
        write_last_deploy(orchestrator.ACCOUNT_ID, orchestrator.WASM_FILE)
    except OSError as e:
        print(f"Could not write deploy record: {e}", file=sys.stderr)
    if "--verify" in argv:
        return verify_deployment()
    return 0


if __name__ == '__main__':
    sys.exit(main())
