from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api")

from julaaz.api import access, badges, messaging, realtor, reports, sessions  # noqa: E402,F401
