# visitorinfo/models/visitor.py
import uuid
from datetime import datetime, timezone

from sqlalchemy.sql import func

from visitorinfo.extensions import db


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    # naive UTC with microseconds; CURRENT_TIMESTAMP only has whole seconds
    return datetime.now(timezone.utc).replace(tzinfo=None)


class VisitorRecord(db.Model):
    """One row per page visit. Created once, never updated."""

    __tablename__ = "user_info"

    id                        = db.Column(db.String(32), primary_key=True, default=_new_id)
    visited_at                = db.Column(db.DateTime, default=_utcnow, server_default=func.now(), index=True, nullable=False)

    ip_address                = db.Column(db.String(64))
    user_agent                = db.Column(db.Text)
    language                  = db.Column(db.String(64))
    screen_size               = db.Column(db.String(32))
    timezone                  = db.Column(db.String(64))
    platform                  = db.Column(db.String(64))
    browser                   = db.Column(db.String(64))
    browser_version           = db.Column(db.String(64))
    referrer                  = db.Column(db.Text)
    location                  = db.Column(db.String(255))
    country                   = db.Column(db.String(64))
    city                      = db.Column(db.String(128))
    device                    = db.Column(db.String(32))
    os_name                   = db.Column(db.String(64))
    os_version                = db.Column(db.String(64))
    webgl_renderer            = db.Column(db.String(255))
    cpu_cores                 = db.Column(db.Integer)
    ram                       = db.Column(db.String(32))
    cookies_enabled           = db.Column(db.Boolean)
    local_storage_available   = db.Column(db.Boolean)
    session_storage_available = db.Column(db.Boolean)
    connection_type           = db.Column(db.String(32))
    battery_level             = db.Column(db.Float)
    battery_charging          = db.Column(db.Boolean)
    orientation               = db.Column(db.String(64))
    touch_screen              = db.Column(db.Boolean)
    cookies                   = db.Column(db.JSON)
    additional_data           = db.Column(db.JSON)

    # JSON key -> (column attribute, accepted python types)
    FIELDS = {
        "ipAddress":               ("ip_address", (str,)),
        "userAgent":               ("user_agent", (str,)),
        "language":                ("language", (str,)),
        "screenSize":              ("screen_size", (str,)),
        "timezone":                ("timezone", (str,)),
        "platform":                ("platform", (str,)),
        "browser":                 ("browser", (str,)),
        "browserVersion":          ("browser_version", (str,)),
        "referrer":                ("referrer", (str,)),
        "location":                ("location", (str,)),
        "country":                 ("country", (str,)),
        "city":                    ("city", (str,)),
        "device":                  ("device", (str,)),
        "osName":                  ("os_name", (str,)),
        "osVersion":               ("os_version", (str,)),
        "webGLRenderer":           ("webgl_renderer", (str,)),
        "cpuCores":                ("cpu_cores", (int,)),
        "ram":                     ("ram", (str,)),
        "cookiesEnabled":          ("cookies_enabled", (bool,)),
        "localStorageAvailable":   ("local_storage_available", (bool,)),
        "sessionStorageAvailable": ("session_storage_available", (bool,)),
        "connectionType":          ("connection_type", (str,)),
        "batteryLevel":            ("battery_level", (int, float)),
        "batteryCharging":         ("battery_charging", (bool,)),
        "orientation":             ("orientation", (str,)),
        "touchScreen":             ("touch_screen", (bool,)),
        "cookies":                 ("cookies", (dict,)),
        "additionalData":          ("additional_data", (dict,)),
    }

    # assigned by the server, never taken from a submitted body
    SERVER_FIELDS = ("id", "visitedAt")

    def to_dict(self) -> dict:
        data = {"id": self.id}
        data["visitedAt"] = self.visited_at.isoformat() if self.visited_at else None
        for key, (attr, _types) in self.FIELDS.items():
            data[key] = getattr(self, attr)
        return data

    def __repr__(self):
        return f"<VisitorRecord {self.id} {self.browser}/{self.os_name} @ {self.visited_at}>"
