from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..core.constants import COLLECTIONS
from ..records.store import RecordStore


def export_collections(store: RecordStore) -> dict[str, list[dict[str, Any]]]:
    """Snapshot every collection that exists in the store."""
    return {name: store.read(name) for name in COLLECTIONS if store.has(name)}


def write_backup(store: RecordStore, out_file: str | Path) -> Path:
    out_file = Path(out_file)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(json.dumps(export_collections(store), ensure_ascii=False, indent=2), encoding="utf-8")
    return out_file


def restore_backup(store: RecordStore, in_file: str | Path) -> list[str]:
    """Overwrite each collection present in the backup file; returns their names."""
    data = json.loads(Path(in_file).read_text(encoding="utf-8"))
    restored = []
    for name in COLLECTIONS:
        if name in data:
            store.write(name, data[name])
            restored.append(name)
    return restored
