from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .auth.controller import register as register_auth
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .groups.controller import register as register_groups
from .invitations.inviter import Inviter
from .settings import get_settings_module

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(settings_module: Optional[str] = None, *, inviter: Optional[Inviter] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(settings, inviter=inviter)
    app.extensions["chama_container"] = container

    app.logger.info(
        "[chama-system] settings=%s persistence=%s",
        settings_module,
        getattr(settings, "PERSISTENCE_BACKEND", "memory"),
    )

    if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn, schema_path=SCHEMA_PATH)
        app.logger.info("[chama-system] schema ready (tables=%d)", len(list_tables(container.conn)))

    register_auth(app)
    register_groups(app, container)

    return app
