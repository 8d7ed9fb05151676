# visitorinfo/api/routes.py
from flask import current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from visitorinfo.api import api_bp
from visitorinfo.extensions import db
from visitorinfo.services.collector import collect_visitor_info
from visitorinfo.services.presentation import info_categories
from visitorinfo.services.visitors import InvalidRecord, count_visitors, create_visitor
from visitorinfo.utils.net import client_ip


def _ingest(payload):
    """Shared by /user-info and /collect. Returns (record | None, error response | None)."""
    ip = client_ip(
        headers=current_app.config.get("INGEST_IP_HEADERS"),
        fallback=current_app.config.get("FALLBACK_IP_ADDRESS", "127.0.0.1"),
    )
    ua = request.headers.get("User-Agent")
    try:
        rec = create_visitor(payload, ip_address=ip, user_agent=ua)
    except InvalidRecord as e:
        db.session.rollback()
        return None, (jsonify(success=False, error=str(e)), 400)
    except (SQLAlchemyError, OverflowError):
        db.session.rollback()
        current_app.logger.exception("Error saving user info")
        return None, (jsonify(success=False, error="Failed to save user information"), 500)

    current_app.logger.info("stored visitor %s (%s / %s)", rec.id, rec.browser, rec.os_name)
    return rec, None


@api_bp.post("/user-info")
def create_user_info():
    payload = request.get_json(silent=True)
    if payload is None:
        if request.get_data(cache=True):
            return jsonify(success=False, error="Request body must be valid JSON"), 400
        payload = {}
    rec, error = _ingest(payload)
    if error:
        return error
    return jsonify(success=True, id=rec.id), 201


@api_bp.get("/user-info")
def user_info_count():
    try:
        n = count_visitors()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error fetching user count")
        return jsonify(success=False, error="Failed to fetch visitor count"), 500
    return jsonify(success=True, count=n, message=f"Total visitors: {n}")


@api_bp.get("/get-ip-address")
def get_ip_address():
    return jsonify(ipAddress=client_ip(fallback=""))


@api_bp.post("/collect")
def collect():
    signals = request.get_json(silent=True)
    if not isinstance(signals, dict):
        return jsonify(success=False, error="Request body must be a JSON object"), 400

    fields = collect_visitor_info(signals)
    rec, error = _ingest(fields)
    if error:
        return error

    info = rec.to_dict()
    info["categories"] = info_categories(info)
    return jsonify(success=True, id=rec.id, info=info), 201
