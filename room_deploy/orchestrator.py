"""Build-then-deploy orchestrator for the room contract.

Runs `./build.sh`, and only when it succeeds hands the compiled wasm to
`near deploy`. The deploy step's exit status becomes our own.
"""
import shutil
import subprocess
import sys
from typing import List


ACCOUNT_ID = "room2.ostolex.testnet"
WASM_FILE = "./target/wasm32-unknown-unknown/release/room.wasm"
# run through sh so a build.sh without a shebang still works
BUILD_COMMAND = ["sh", "./build.sh"]
NEAR_CLI = "near"

BUILD_FAILED_EXIT = 1
CLI_NOT_FOUND_EXIT = 127

BUILD_ERROR_MESSAGE = ">> Error building contract"
DEPLOY_MESSAGE = ">> Deploying contract"


def has_near_cli() -> bool:
    return shutil.which(NEAR_CLI) is not None


def deploy_command(account_id: str = ACCOUNT_ID, wasm_file: str = WASM_FILE) -> List[str]:
    # https://docs.near.org/tools/near-cli#near-deploy
    return [NEAR_CLI, "deploy", "--accountId", account_id, "--wasmFile", wasm_file]


def run_build() -> int:
    try:
        proc = subprocess.run(BUILD_COMMAND, check=False)
    except OSError as e:
        print(f"Could not run {' '.join(BUILD_COMMAND)}: {e}", file=sys.stderr)
        return CLI_NOT_FOUND_EXIT
    return proc.returncode


def run_deploy() -> int:
    if not has_near_cli():
        print("NEAR CLI not found on PATH. Install it with `npm install -g near-cli`.", file=sys.stderr)
        return CLI_NOT_FOUND_EXIT
    try:
        proc = subprocess.run(deploy_command(ACCOUNT_ID, WASM_FILE), check=False)
    except OSError as e:
        print(f"Could not run {NEAR_CLI}: {e}", file=sys.stderr)
        return CLI_NOT_FOUND_EXIT
    return proc.returncode


def run_deployment() -> int:
    if run_build() != 0:
        print(BUILD_ERROR_MESSAGE, file=sys.stderr)
        return BUILD_FAILED_EXIT

    print(DEPLOY_MESSAGE)
    code = run_deploy()
    if code != 0:
        print(f">> Error deploying contract (exit {code})", file=sys.stderr)
    return code


def main():
    sys.exit(run_deployment())


if __name__ == '__main__':
    main()
