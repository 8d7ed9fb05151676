# visitorinfo/services/collector.py
"""
Turns the raw signal snapshot posted by the page into a partial VisitorRecord.

Each probe reads one or two signals and returns a dict of fields. A probe
that raises, or has nothing to report, contributes nothing; the collection
itself never fails.
"""
import logging
from typing import Any, Callable, Mapping

from visitorinfo.services.user_agent import parse_user_agent
from visitorinfo.utils.cookies import parse_cookies

log = logging.getLogger(__name__)

MAX_CPU_CORES = 4096

Probe = Callable[[Mapping[str, Any]], dict]


def _section(signals: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = signals.get(key)
    return value if isinstance(value, Mapping) else {}


def _present(**fields) -> dict:
    return {k: v for k, v in fields.items() if v is not None}


def _of(value, kind):
    return value if isinstance(value, kind) else None


def probe_basics(signals):
    return _present(
        language=_of(signals.get("language"), str),
        platform=_of(signals.get("platform"), str),
        referrer=_of(signals.get("referrer"), str),
        timezone=_of(signals.get("timezone"), str),
        cookiesEnabled=_of(signals.get("cookieEnabled"), bool),
    )


def probe_user_agent(signals):
    ua = signals.get("userAgent")
    if not ua or not isinstance(ua, str):
        return {}
    info = parse_user_agent(ua)
    return {
        "userAgent": ua,
        "browser": info.browser,
        "browserVersion": info.browser_version,
        "osName": info.os,
        "osVersion": info.os_version,
        "device": info.device,
    }


def probe_screen_size(signals):
    screen = _section(signals, "screen")
    if "width" not in screen or "height" not in screen:
        return {}
    return {"screenSize": f"{int(screen['width'])}x{int(screen['height'])}"}


def probe_orientation(signals):
    orientation = _section(signals, "screen").get("orientation")
    if isinstance(orientation, Mapping):
        orientation = orientation.get("type")
    return {"orientation": str(orientation)} if orientation else {}


def probe_cpu(signals):
    cores = int(signals.get("hardwareConcurrency") or 0)
    return {"cpuCores": cores} if 0 < cores <= MAX_CPU_CORES else {}


def probe_memory(signals):
    memory = signals.get("deviceMemory")
    if not memory or isinstance(memory, bool) or not isinstance(memory, (int, float)):
        return {}
    return {"ram": f"{memory:g} GB" if isinstance(memory, float) else f"{memory} GB"}


def probe_storage(signals):
    storage = _section(signals, "storage")
    return _present(
        localStorageAvailable=_of(storage.get("local"), bool),
        sessionStorageAvailable=_of(storage.get("session"), bool),
    )


def probe_touch(signals):
    if "ontouchstart" not in signals and "maxTouchPoints" not in signals:
        return {}
    touch = bool(signals.get("ontouchstart")) or int(signals.get("maxTouchPoints") or 0) > 0
    return {"touchScreen": touch}


def probe_cookies(signals):
    if "cookie" not in signals:
        return {}
    return {"cookies": parse_cookies(signals["cookie"])}


def probe_webgl(signals):
    renderer = _section(signals, "webgl").get("renderer")
    return {"webGLRenderer": str(renderer)[:255]} if renderer else {}


def probe_connection(signals):
    connection = _section(signals, "connection")
    kind = connection.get("effectiveType") or connection.get("type")
    return {"connectionType": str(kind)} if kind else {}


def probe_battery_level(signals):
    level = _section(signals, "battery").get("level")
    if level is None or isinstance(level, bool):
        return {}
    return {"batteryLevel": float(level)}


def probe_battery_charging(signals):
    charging = _section(signals, "battery").get("charging")
    return {"batteryCharging": bool(charging)} if charging is not None else {}


PROBES: list[Probe] = [
    probe_basics,
    probe_user_agent,
    probe_screen_size,
    probe_orientation,
    probe_cpu,
    probe_memory,
    probe_storage,
    probe_touch,
    probe_cookies,
    probe_webgl,
    probe_connection,
    probe_battery_level,
    probe_battery_charging,
]


def collect_visitor_info(signals, probes=None) -> dict:
    """Best-effort VisitorRecord fields from a signal snapshot."""
    if not isinstance(signals, Mapping):
        return {}

    record: dict = {}
    for probe in probes or PROBES:
        try:
            record.update(probe(signals))
        except Exception as e:
            log.debug("probe %s skipped: %s", getattr(probe, "__name__", probe), e)
    return record
