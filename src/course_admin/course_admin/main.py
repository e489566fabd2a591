from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.http import error_response
from .container import Container, build_container
from .admin.controller import register as register_admin
from .applications.controller import register as register_applications
from .attendance.controller import register as register_attendance
from .categories.controller import register as register_categories
from .courses.controller import register as register_courses
from .help_requests.controller import register as register_help_requests
from .meetings.controller import register as register_meetings
from .notifications.controller import register as register_notifications
from .payments.controller import register as register_payments

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = getattr(settings, "MAX_CONTENT_LENGTH", None)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}, r"/attendance.*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    if container is None:
        firebase_config = getattr(settings, "FIREBASE_CONFIG")
        container = build_container(
            firebase_config=firebase_config,
            max_course_image_mb=getattr(settings, "MAX_COURSE_IMAGE_MB"),
            max_help_image_mb=getattr(settings, "MAX_HELP_IMAGE_MB"),
        )
        logger.info("settings=%s database=%s", settings_module, firebase_config.get("database_url"))

    @app.route("/", endpoint="index")
    def index():
        return "Course admin backend is running successfully!"

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    register_categories(app, container)
    register_meetings(app, container)
    register_courses(app, container)
    register_notifications(app, container)
    register_help_requests(app, container)
    register_applications(app, container)
    register_payments(app, container)
    register_admin(app, container)
    register_attendance(app, container)

    return app
