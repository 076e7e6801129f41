"""
Local persistent state store for the infoblox-nc CLI.

Keeps, per named resource, the address family, the WAPI object reference and
the last applied configuration. Nothing else is persisted.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional


def get_state_dir(configured: Optional[str] = None) -> Path:
    """
    Resolve the directory used for persistent state.

    Priority:
    1) `INFOBLOX_STATE_DIR` env var, if set
    2) `configured` (the `[cli] state_dir` option), if set
    3) `$XDG_STATE_HOME/infoblox-provider` or `~/.local/state/infoblox-provider`
    """
    env = os.environ.get("INFOBLOX_STATE_DIR")
    if env:
        return Path(env)

    if configured:
        return Path(configured)

    xdg_state_home = os.environ.get("XDG_STATE_HOME")
    if xdg_state_home:
        return Path(xdg_state_home) / "infoblox-provider"
    return Path.home() / ".local" / "state" / "infoblox-provider"


def _containers_file(state_dir: Path) -> Path:
    return state_dir / "network_containers.json"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _load_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


def _atomic_write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as file:
            json.dump(data, file, indent=2, ensure_ascii=False, sort_keys=True)
            file.write("\n")
        os.replace(tmp_path, path)
    finally:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass


def list_containers(state_dir: Path) -> List[Dict[str, Any]]:
    return _load_json(_containers_file(state_dir), {"items": []}).get("items", [])


def get_container(state_dir: Path, name: str) -> Optional[Dict[str, Any]]:
    for item in list_containers(state_dir):
        if item.get("name") == name:
            return item
    return None


def upsert_container(state_dir: Path, container: Dict[str, Any]) -> None:
    path = _containers_file(state_dir)
    data = _load_json(path, {"items": []})
    items = [i for i in data.get("items", []) if i.get("name") != container.get("name")]
    if "created_at" not in container:
        container["created_at"] = _utc_now_iso()
    container["updated_at"] = _utc_now_iso()
    items.append(container)
    data["items"] = sorted(items, key=lambda x: x.get("name", ""))
    _atomic_write_json(path, data)


def delete_container(state_dir: Path, name: str) -> bool:
    path = _containers_file(state_dir)
    data = _load_json(path, {"items": []})
    items = data.get("items", [])
    new_items = [i for i in items if i.get("name") != name]
    if len(new_items) == len(items):
        return False
    data["items"] = new_items
    _atomic_write_json(path, data)
    return True
