"""
Audit service: logs admin mutations and reconciliations to a JSONL file.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from services.config import Config


def _log_file(data_dir: Optional[Path] = None) -> Path:
    log_dir = Path(data_dir or Config.DATA_DIR) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "audit.jsonl"


def _serialize(obj: Any) -> Any:
    if obj is None:
        return None
    # Enums
    if hasattr(obj, "value") and not isinstance(obj, (str, bytes)):
        return obj.value
    # Dataclasses
    if hasattr(obj, "__dataclass_fields__"):
        return {k: _serialize(v) for k, v in obj.__dict__.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize(x) for x in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    return obj


def log_event(event: str, payload: Dict[str, Any], data_dir: Optional[Path] = None) -> Dict[str, Any]:
    """Append an audit entry to the JSONL file and return the record."""
    rec: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,  # player_saved | match_added | reconciled | ...
        "payload": _serialize(payload),
    }
    with _log_file(data_dir).open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return rec


def read_events(data_dir: Optional[Path] = None, limit: int = 200) -> list:
    fp = _log_file(data_dir)
    if not fp.exists():
        return []
    rows = []
    with fp.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                rows.append(json.loads(line))
            except ValueError:
                continue
    return list(reversed(rows))[:limit]
