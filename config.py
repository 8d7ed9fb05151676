# config.py
import os
import re
from pathlib import Path


# ---- base directories -------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent
INSTANCE_DIR = os.environ.get("FLASK_INSTANCE_PATH", str(BASE_DIR / "instance"))


# ---- tiny helpers -----------------------------------------------------------
def _to_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on", "y"}


def _to_list(value: str | None, default: tuple) -> tuple:
    if not value:
        return default
    return tuple(v.strip() for v in value.split(",") if v.strip())


_SENDER_RE = re.compile(r'^\s*(?P<name>.*?)\s*<\s*(?P<addr>[^>]+)\s*>\s*$')


def _parse_sender(val: str | None, fallback_name: str, fallback_addr: str):
    """
    Accepts either:
      - "Display Name <addr@example.com>"
      - "addr@example.com"
      - None -> falls back to (fallback_name, fallback_addr)
    Returns:
      - (name, addr) tuple, or
      - plain email string
    """
    if not val:
        return (fallback_name, fallback_addr)
    m = _SENDER_RE.match(val)
    if m:
        name = m.group("name").strip() or fallback_name
        addr = m.group("addr").strip() or fallback_addr
        return (name, addr)
    if "@" in val and "<" not in val and ">" not in val:
        return val.strip()
    return (fallback_name, fallback_addr)


def _database_url() -> str:
    raw = os.getenv("DATABASE_URL", "").strip()

    # Render/Heroku give postgres://; normalize to postgresql+psycopg2://
    if raw.startswith("postgres://"):
        raw = raw.replace("postgres://", "postgresql+psycopg2://", 1)

    if not raw:
        raw = f"sqlite:///{Path(INSTANCE_DIR) / 'visitor_info.db'}"
    return raw


# ----------------------------------------------------------------------------
class Config:
    """
    Base configuration loaded by the app factory via:
      app.config.from_object("config.Config")
    """

    # ------------ Core / Security ------------
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # ------------ Database ------------
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # ------------ Client IP derivation ------------
    # checked in order; X-Forwarded-For contributes its first entry
    CLIENT_IP_HEADERS = _to_list(
        os.getenv("CLIENT_IP_HEADERS"),
        ("CF-Connecting-IP", "X-Forwarded-For"),
    )
    # record ingestion also honours X-Real-IP before the socket address
    INGEST_IP_HEADERS = _to_list(
        os.getenv("INGEST_IP_HEADERS"),
        ("CF-Connecting-IP", "X-Forwarded-For", "X-Real-IP"),
    )
    FALLBACK_IP_ADDRESS = os.getenv("FALLBACK_IP_ADDRESS", "127.0.0.1")

    # ------------ Mail (visitors report) ------------
    MAIL_SERVER = os.getenv("MAIL_SERVER", "localhost")
    MAIL_PORT = int(os.getenv("MAIL_PORT", "587"))
    MAIL_USE_TLS = _to_bool(os.getenv("MAIL_USE_TLS", "1"))
    MAIL_USE_SSL = _to_bool(os.getenv("MAIL_USE_SSL", "0"))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", "")
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", "")
    MAIL_DEFAULT_SENDER = _parse_sender(
        os.getenv("MAIL_DEFAULT_SENDER"),
        "Visitor Info",
        MAIL_USERNAME or "noreply@localhost",
    )
    MAIL_SUPPRESS_SEND = _to_bool(os.getenv("MAIL_SUPPRESS_SEND", "0"), default=False)
    REPORT_TO_EMAIL = os.getenv("REPORT_TO_EMAIL", MAIL_USERNAME)

    # ------------ Logging ------------
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    REQUEST_TRACE = _to_bool(os.getenv("REQUEST_TRACE", "1"), default=True)

    # ------------ Cookies ------------
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    WTF_CSRF_ENABLED = False
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = ("Visitor Info", "noreply@example.com")
    REPORT_TO_EMAIL = "reports@example.com"
    REQUEST_TRACE = False
