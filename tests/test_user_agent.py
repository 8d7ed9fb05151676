"""Tests for the user-agent classifier."""

import pytest

from visitorinfo.services.user_agent import UserAgentInfo, parse_user_agent

from conftest import CHROME_WIN10, EDGE_WIN10


class TestBrowser:
    def test_chrome_on_windows_10(self):
        info = parse_user_agent(CHROME_WIN10)

        assert info.browser == "Chrome"
        assert info.browser_version == "120.0.6099.109"
        assert info.os == "Windows"
        assert info.os_version == "10"
        assert info.device == "Desktop"

    def test_edg_token_wins_over_chrome(self):
        info = parse_user_agent(EDGE_WIN10)

        assert info.browser == "Edge"
        assert info.browser_version == "120.0.2210.91"

    def test_legacy_edge(self):
        ua = (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/70.0.3538.102 Safari/537.36 Edge/18.19582"
        )
        assert parse_user_agent(ua).browser == "Edge"
        assert parse_user_agent(ua).browser_version == "18.19582"

    def test_opera_is_not_chrome(self):
        ua = (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 OPR/106.0.0.0"
        )
        info = parse_user_agent(ua)

        assert info.browser == "Opera"
        assert info.browser_version == "106.0.0.0"

    def test_chromium_is_not_chrome(self):
        ua = (
            "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chromium/119.0 Chrome/119.0 Safari/537.36"
        )
        assert parse_user_agent(ua).browser == "Unknown"

    def test_firefox_on_linux(self):
        ua = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"
        info = parse_user_agent(ua)

        assert (info.browser, info.browser_version) == ("Firefox", "121.0")
        assert (info.os, info.os_version) == ("Linux", "")

    def test_safari_on_macos(self):
        ua = (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
            "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
        )
        info = parse_user_agent(ua)

        assert (info.browser, info.browser_version) == ("Safari", "17.1")
        assert (info.os, info.os_version) == ("macOS", "10.15.7")

    def test_keyword_match_is_case_insensitive(self):
        assert parse_user_agent("my chrome thing").browser == "Chrome"
        # version extraction needs the canonical "Chrome/" token
        assert parse_user_agent("my chrome thing").browser_version == ""


class TestOperatingSystem:
    @pytest.mark.parametrize("nt, expected", [
        ("10.0", "10"),
        ("6.3", "8.1"),
        ("6.2", "8"),
        ("6.1", "7"),
        ("6.0", "Vista"),
        ("5.2", "XP 64-bit"),
        ("5.1", "XP"),
        ("11.0", "11.0"),
    ])
    def test_windows_version_table(self, nt, expected):
        info = parse_user_agent(f"Mozilla/5.0 (Windows NT {nt}; Win64; x64)")
        assert info.os == "Windows"
        assert info.os_version == expected

    def test_android_before_linux(self):
        ua = (
            "Mozilla/5.0 (Linux; Android 13; Pixel 7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
        )
        info = parse_user_agent(ua)

        assert (info.os, info.os_version) == ("Android", "13")
        assert info.browser == "Chrome"
        assert info.device == "Mobile"

    def test_priority_list_order_not_specificity(self):
        # iPhone UAs carry "like Mac OS X"; macOS is checked before iOS
        ua = (
            "Mozilla/5.0 (iPhone; CPU iPhone OS 17_1 like Mac OS X) AppleWebKit/605.1.15 "
            "(KHTML, like Gecko) Version/17.1 Mobile/15E148 Safari/604.1"
        )
        info = parse_user_agent(ua)

        assert info.os == "macOS"
        assert info.os_version == ""
        assert info.browser == "Safari"
        assert info.device == "Mobile"

    def test_ios_without_mac_token(self):
        info = parse_user_agent("SomeApp/2.0 (iPod touch; iOS 12_4_1)")

        assert info.os == "iOS"
        assert info.os_version == "12.4.1"


class TestDevice:
    def test_tablet_keyword(self):
        assert parse_user_agent("Reader/1.0 (Tablet; rv:1.0)").device == "Tablet"

    def test_ipad_counts_as_mobile(self):
        assert parse_user_agent("Mozilla/5.0 (iPad; CPU OS 16_0 like Mac OS X)").device == "Mobile"

    def test_desktop_default(self):
        assert parse_user_agent(CHROME_WIN10).device == "Desktop"


class TestTotality:
    @pytest.mark.parametrize("ua", [None, "", "   ", 12345, b"bytes", "\x00\xff", "Chrome/" * 5000])
    def test_always_returns_result(self, ua):
        info = parse_user_agent(ua)

        assert isinstance(info, UserAgentInfo)
        assert set(info.as_dict()) == {"browser", "browserVersion", "os", "osVersion", "device"}

    def test_defaults_when_nothing_matches(self):
        assert parse_user_agent("curl/8.4.0").as_dict() == {
            "browser": "Unknown",
            "browserVersion": "",
            "os": "Unknown",
            "osVersion": "",
            "device": "Desktop",
        }

    def test_deterministic(self):
        assert parse_user_agent(EDGE_WIN10) == parse_user_agent(EDGE_WIN10)
