from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .analytics.controller import register as register_analytics
from .dashboard.controller import register as register_dashboard
from .settings.controller import register as register_settings
from .uploads.controller import register as register_uploads


def create_app(*, container: Optional[Container] = None) -> Flask:
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

    if container is None:
        container = build_container(settings=settings)
    app.extensions["messflow"] = container

    if app.config["DEBUG"]:
        app.logger.info(
            "[messflow] settings=%s channel=%s mapping=%s poll=%ss",
            settings_module,
            getattr(settings, "THINGSPEAK_CHANNEL_ID", "?"),
            container.record_service.mapping.kind,
            container.poller.interval_seconds,
        )

    if bool(getattr(settings, "AUTO_START_POLLER", False)):
        container.poller.start()
        atexit.register(container.poller.stop, 2.0)

    register_dashboard(app, container)
    register_analytics(app, container)
    register_uploads(app, container)
    register_settings(app, container)

    return app
