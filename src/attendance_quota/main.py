from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .quota.controller import register as register_quota

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(settings=settings)
    app.extensions["attendance_quota"] = container
    logger.info(
        "settings=%s required=%.2f%% weeks_per_month=%d months_in_term=%d",
        settings_module,
        container.config.required_percentage,
        container.config.weeks_per_month,
        container.config.months_in_term,
    )

    register_quota(app, container)

    return app
