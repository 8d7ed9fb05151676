# visitorinfo/services/visitors.py
import logging
from typing import Any, Mapping

from sqlalchemy import func

from visitorinfo.extensions import db
from visitorinfo.models.visitor import VisitorRecord

log = logging.getLogger(__name__)

# Integer columns are 32-bit on Postgres
INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1


class InvalidRecord(ValueError):
    """Submitted body cannot be turned into a VisitorRecord."""


def _check_type(key: str, value: Any, types: tuple) -> None:
    if value is None:
        return
    # bool is an int subclass; only boolean columns accept it
    if isinstance(value, bool) and bool not in types:
        raise InvalidRecord(f"{key} has the wrong type")
    if not isinstance(value, types):
        raise InvalidRecord(f"{key} has the wrong type")
    if isinstance(value, int) and not isinstance(value, bool) and not INT_MIN <= value <= INT_MAX:
        raise InvalidRecord(f"{key} is out of range")


def build_record(payload: Mapping[str, Any], *, ip_address: str | None, user_agent: str | None) -> VisitorRecord:
    """
    Server-observed ipAddress/userAgent first, then the submitted body on
    top of them. id and visitedAt are always assigned here.
    """
    if not isinstance(payload, Mapping):
        raise InvalidRecord("Request body must be a JSON object")

    data: dict[str, Any] = {"ipAddress": ip_address}
    if user_agent:
        data["userAgent"] = user_agent

    dropped = []
    for key, value in payload.items():
        if key in VisitorRecord.SERVER_FIELDS:
            continue
        if key not in VisitorRecord.FIELDS:
            dropped.append(key)
            continue
        data[key] = value
    if dropped:
        log.warning("ignoring unknown visitor fields: %s", ", ".join(sorted(map(str, dropped))))

    columns = {}
    for key, value in data.items():
        attr, types = VisitorRecord.FIELDS[key]
        _check_type(key, value, types)
        columns[attr] = value
    return VisitorRecord(**columns)


def create_visitor(payload: Mapping[str, Any], *, ip_address: str | None, user_agent: str | None) -> VisitorRecord:
    """Insert one row; the caller rolls back on SQLAlchemyError."""
    rec = build_record(payload, ip_address=ip_address, user_agent=user_agent)
    db.session.add(rec)
    db.session.commit()
    return rec


def count_visitors() -> int:
    return db.session.query(func.count(VisitorRecord.id)).scalar() or 0


def latest_visitor() -> VisitorRecord | None:
    return (
        db.session.query(VisitorRecord)
        .order_by(VisitorRecord.visited_at.desc(), VisitorRecord.id.desc())
        .first()
    )
