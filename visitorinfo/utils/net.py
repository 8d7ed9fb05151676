# visitorinfo/utils/net.py
from flask import current_app, request

DEFAULT_IP_HEADERS = ("CF-Connecting-IP", "X-Forwarded-For")


def client_ip(req=None, headers=None, fallback: str = "") -> str:
    """
    First non-empty value from the configured header list, then the socket
    address. X-Forwarded-For style lists contribute their first entry.
    """
    req = req or request
    if headers is None:
        headers = current_app.config.get("CLIENT_IP_HEADERS") or DEFAULT_IP_HEADERS

    for name in headers:
        raw = req.headers.get(name)
        if not raw:
            continue
        first = raw.split(",")[0].strip()
        if first:
            return first

    return req.remote_addr or fallback
