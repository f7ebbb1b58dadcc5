from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_portal.school_portal.container import build_storage
from src.school_portal.school_portal.core.log import configure_logging
from src.school_portal.school_portal.database.seed import initialize_database
from src.school_portal.school_portal.records.store import RecordStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    store = RecordStore(build_storage(settings))
    if initialize_database(store):
        print(f"OK: seeded {settings.STORAGE_BACKEND} storage")
    else:
        print("Skipped: students collection already present")


if __name__ == "__main__":
    main()
