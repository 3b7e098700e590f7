from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_FETCH_WORKERS
from .rosters.controller import register as register_rosters


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("school_attendance")

    firebase_config = getattr(settings, "FIREBASE_CONFIG")
    if app.config["DEBUG"]:
        logger.info(
            "settings=%s project=%s",
            settings_module,
            firebase_config.get("project_id") or "(default credentials)",
        )

    if container is None:
        container = build_container(
            firebase_config=firebase_config,
            fetch_workers=int(getattr(settings, "FETCH_WORKERS", DEFAULT_FETCH_WORKERS)),
        )

    register_rosters(app, container)

    return app
