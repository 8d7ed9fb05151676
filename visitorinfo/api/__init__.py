from flask import Blueprint

# JSON endpoints consumed by the page script
api_bp = Blueprint("api_bp", __name__, url_prefix="/api")

from . import routes  # noqa: E402
