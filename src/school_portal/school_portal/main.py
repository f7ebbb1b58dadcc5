from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .admin.controller import register as register_admin
from .common.errors import register_error_handlers
from .container import build_container, build_storage
from .core.log import configure_logging
from .database.storage import Storage
from .faculty.controller import register as register_faculty
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, storage: Optional[Storage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if storage is None:
        storage = build_storage(settings)
    container = build_container(storage=storage, seed=bool(getattr(settings, "AUTO_SEED_DB", True)))
    app.extensions["school_portal"] = container

    logger.info("settings=%s storage=%s", settings_module, type(storage).__name__)

    register_error_handlers(app)
    register_users(app, container)
    register_admin(app, container)
    register_faculty(app, container)
    register_students(app, container)

    return app
