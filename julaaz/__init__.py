import logging
import os

from flask import Flask

from julaaz.log.middleware.request_log import register_request_logging
from julaaz.services.messaging_service import MessagingStore
from julaaz.utils.parser import env_flag
from julaaz.utils.system.errors import register_error_handlers

logger = logging.getLogger(__name__)

FEATURE_FLAGS = (
    "FEATURE_ARTISAN_MARKETPLACE",
    "FEATURE_PROPERTY_MANAGEMENT",
    "FEATURE_SHORT_LET",
)


def create_app(messaging: MessagingStore | None = None) -> Flask:
    app = Flask(__name__)
    app.config["APP_NAME"] = os.getenv("APP_NAME", "JulaazNG")
    app.config["APP_ENV"] = os.getenv("APP_ENV", "development")
    app.config["FEATURES"] = {flag: env_flag(flag) for flag in FEATURE_FLAGS}
    app.extensions["messaging"] = messaging or MessagingStore()

    register_error_handlers(app)
    register_request_logging(app)

    from julaaz.api import api_bp

    app.register_blueprint(api_bp)

    @app.route("/health")
    def health():
        return {
            "status": "ok",
            "app": app.config["APP_NAME"],
            "env": app.config["APP_ENV"],
            "features": app.config["FEATURES"],
        }

    logger.info(f"[App] {app.config['APP_NAME']} created ({app.config['APP_ENV']})")
    return app
