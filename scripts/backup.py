"""Backup every collection of the configured storage into one JSON file.

Usage: python scripts/backup.py            -> backups/school_portal_<ts>.json
       python scripts/backup.py restore F  -> load collections from F
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_portal.school_portal.container import build_storage
from src.school_portal.school_portal.database.backup import restore_backup, write_backup
from src.school_portal.school_portal.records.store import RecordStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = RecordStore(build_storage(settings))

    if len(sys.argv) >= 3 and sys.argv[1] == "restore":
        restored = restore_backup(store, sys.argv[2])
        print(f"OK: restored {', '.join(restored) or 'nothing'}")
        return

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = write_backup(store, REPO_ROOT / "backups" / f"school_portal_{ts}.json")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
