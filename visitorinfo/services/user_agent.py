# visitorinfo/services/user_agent.py
"""
Coarse user-agent classification.

parse_user_agent() is pure and total: whatever it is given it returns a
UserAgentInfo, falling back to "Unknown" / "" / "Desktop". Every list below
is checked in order and the first hit wins, so a more specific pattern
further down never overrides an earlier one.
"""
import re
from dataclasses import dataclass

UNKNOWN = "Unknown"
DESKTOP = "Desktop"

# device: mobile keywords first, then tablet, else Desktop
DEVICE_PATTERNS = [
    ("Mobile", re.compile(r"Mobile|Android|iPhone|iPad|iPod", re.I)),
    ("Tablet", re.compile(r"Tablet|iPad", re.I)),
]

WINDOWS_VERSIONS = {
    "10.0": "10",
    "6.3": "8.1",
    "6.2": "8",
    "6.1": "7",
    "6.0": "Vista",
    "5.2": "XP 64-bit",
    "5.1": "XP",
}


def _windows_version(ua: str) -> str:
    m = re.search(r"Windows NT (\d+\.\d+)", ua)
    if not m:
        return ""
    return WINDOWS_VERSIONS.get(m.group(1), m.group(1))


def _dotted_version(pattern: str):
    rx = re.compile(pattern)

    def extract(ua: str) -> str:
        m = rx.search(ua)
        return m.group(1).replace("_", ".") if m else ""
    return extract


def _no_version(ua: str) -> str:
    return ""


# (name, detection pattern, version extractor)
OS_PATTERNS = [
    ("Windows", re.compile(r"Windows", re.I), _windows_version),
    ("macOS", re.compile(r"Macintosh|Mac OS X", re.I), _dotted_version(r"Mac OS X (\d+[._]\d+[._]?\d*)")),
    ("Android", re.compile(r"Android", re.I), _dotted_version(r"Android (\d+(?:\.\d+)*)")),
    ("iOS", re.compile(r"iOS|iPhone|iPad|iPod", re.I), _dotted_version(r"OS (\d+[._]\d+[._]?\d*)")),
    ("Linux", re.compile(r"Linux", re.I), _no_version),
]

# Chrome and Safari tokens appear in most Chromium-based UAs; the lookaheads
# reject a UA up front when an impostor token is anywhere in it.
BROWSER_PATTERNS = [
    (
        "Chrome",
        re.compile(r"^(?!.*(?:Chromium|Edge|Edg|OPR|Opera)).*Chrome", re.I | re.S),
        re.compile(r"Chrome/(\d+(?:\.\d+)*)"),
    ),
    (
        "Firefox",
        re.compile(r"Firefox", re.I),
        re.compile(r"Firefox/(\d+(?:\.\d+)*)"),
    ),
    (
        "Safari",
        re.compile(r"^(?!.*(?:Chrome|Chromium|Edge|Edg|OPR|Opera)).*Safari", re.I | re.S),
        re.compile(r"Version/(\d+(?:\.\d+)*)"),
    ),
    (
        "Edge",
        re.compile(r"Edge|Edg", re.I),
        re.compile(r"(?:Edge|Edg)/(\d+(?:\.\d+)*)"),
    ),
    (
        "Opera",
        re.compile(r"Opera|OPR", re.I),
        re.compile(r"(?:Opera|OPR)/(\d+(?:\.\d+)*)"),
    ),
]


@dataclass(frozen=True)
class UserAgentInfo:
    browser: str = UNKNOWN
    browser_version: str = ""
    os: str = UNKNOWN
    os_version: str = ""
    device: str = DESKTOP

    def as_dict(self) -> dict:
        return {
            "browser": self.browser,
            "browserVersion": self.browser_version,
            "os": self.os,
            "osVersion": self.os_version,
            "device": self.device,
        }


def detect_device(ua: str) -> str:
    for name, rx in DEVICE_PATTERNS:
        if rx.search(ua):
            return name
    return DESKTOP


def detect_os(ua: str) -> tuple[str, str]:
    for name, rx, version in OS_PATTERNS:
        if rx.search(ua):
            return name, version(ua)
    return UNKNOWN, ""


def detect_browser(ua: str) -> tuple[str, str]:
    for name, rx, version_rx in BROWSER_PATTERNS:
        if rx.search(ua):
            m = version_rx.search(ua)
            return name, (m.group(1) if m else "")
    return UNKNOWN, ""


def parse_user_agent(ua) -> UserAgentInfo:
    """Classify a user-agent string into browser / OS / device labels."""
    if ua is None:
        ua = ""
    elif not isinstance(ua, str):
        ua = str(ua)

    browser, browser_version = detect_browser(ua)
    os_name, os_version = detect_os(ua)
    return UserAgentInfo(
        browser=browser,
        browser_version=browser_version,
        os=os_name,
        os_version=os_version,
        device=detect_device(ua),
    )
