"""Record of the last successful deploy, kept next to the deploy CLI."""
import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


def last_deploy_path() -> Path:
    return Path(__file__).parent.parent / "deploy" / "last_deploy.json"


def artifact_sha256(wasm_file: str) -> str:
    p = Path(wasm_file)
    if not p.is_file():
        return ""
    return hashlib.sha256(p.read_bytes()).hexdigest()


def write_last_deploy(account_id: str, wasm_file: str, path: Optional[Path] = None) -> Path:
    p = path or last_deploy_path()
    payload = {
        "account_id": account_id,
        "wasm_file": wasm_file,
        "wasm_sha256": artifact_sha256(wasm_file),
        "updated_at": datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z",
    }
    p.write_text(json.dumps(payload, indent=2))
    print(f"Wrote {p}")
    return p


def read_last_deploy(path: Optional[Path] = None) -> dict:
    p = path or last_deploy_path()
    if not p.exists():
        return {}
    try:
        data = json.loads(p.read_text())
    except (ValueError, OSError):
        return {}
    return data if isinstance(data, dict) else {}
