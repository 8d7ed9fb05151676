# visitorinfo/utils/cookies.py
from typing import Mapping
from urllib.parse import quote, unquote


def parse_cookies(cookie_string: str | None) -> dict[str, str]:
    """
    "a=1; b=x%20y; c=k=v" -> {"a": "1", "b": "x y", "c": "k=v"}

    Parts without "=" and parts with an empty name are skipped. Values that
    do not percent-decode cleanly are kept as sent.
    """
    cookies: dict[str, str] = {}
    if not cookie_string:
        return cookies

    for part in str(cookie_string).split(";"):
        pieces = part.split("=")
        if len(pieces) < 2:
            continue
        name = pieces[0].strip()
        value = "=".join(pieces[1:]).strip()
        if not name:
            continue
        try:
            cookies[name] = unquote(value, errors="strict")
        except UnicodeDecodeError:
            cookies[name] = value
    return cookies


def encode_cookies(cookies: Mapping[str, str]) -> str:
    return "; ".join(f"{name}={quote(str(value), safe='')}" for name, value in cookies.items())
