# visitorinfo/services/presentation.py
import math
from typing import Any, Mapping

NOT_AVAILABLE = "Not available"


def _text(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _battery(level: Any) -> str | None:
    if level is None or isinstance(level, bool):
        return None
    try:
        return f"{math.floor(float(level) * 100 + 0.5)}%"
    except (TypeError, ValueError):
        return None


def info_categories(record: Mapping[str, Any]) -> dict[str, list[dict[str, str]]]:
    """Group a VisitorRecord dict into the four tabs shown on the page."""
    r = record or {}
    rows = {
        "browser": [
            ("Browser", r.get("browser")),
            ("Browser Version", r.get("browserVersion")),
            ("User Agent", r.get("userAgent")),
            ("Cookies Enabled", r.get("cookiesEnabled")),
            ("localStorage Available", r.get("localStorageAvailable")),
            ("sessionStorage Available", r.get("sessionStorageAvailable")),
            ("Language", r.get("language")),
        ],
        "device": [
            ("Device Type", r.get("device")),
            ("Platform", r.get("platform")),
            ("OS", r.get("osName")),
            ("OS Version", r.get("osVersion")),
            ("Screen Resolution", r.get("screenSize")),
            ("Orientation", r.get("orientation")),
            ("Touch Screen", r.get("touchScreen")),
        ],
        "hardware": [
            ("CPU Cores", r.get("cpuCores")),
            ("RAM", r.get("ram")),
            ("GPU/Renderer", r.get("webGLRenderer")),
            ("Battery Level", _battery(r.get("batteryLevel"))),
            ("Battery Charging", r.get("batteryCharging")),
        ],
        "network": [
            ("Connection Type", r.get("connectionType")),
            ("IP Address", r.get("ipAddress")),
            ("Timezone", r.get("timezone")),
            ("Referrer", r.get("referrer") or "Direct"),
        ],
    }
    return {
        category: [{"label": label, "value": _text(value)} for label, value in items]
        for category, items in rows.items()
    }
