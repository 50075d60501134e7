from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .distribution.controller import register as register_distribution


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    logging.getLogger(__name__).debug("[payroll-incentives] settings=%s", settings_module)

    container = build_container(settings=settings)
    app.extensions["container"] = container

    register_distribution(app, container)

    return app
