"""Unit tests for caller fingerprinting."""

from datetime import datetime

from starlette.datastructures import Headers

from vibeforum.domain.service import resolve_guest_handle
from vibeforum.interface.api.fingerprint import caller_fingerprint

NOON = datetime(2025, 1, 15, 12, 0, 0)


class TestCallerFingerprint:
    """Tests for caller_fingerprint."""

    def test_forwarded_for_first_entry(self):
        """The client is the first hop reported by the proxy."""
        headers = {"x-forwarded-for": " 203.0.113.7 , 10.0.0.1, 10.0.0.2"}

        assert caller_fingerprint(headers, NOON) == "203.0.113.7"

    def test_forwarded_for_wins_over_real_ip(self):
        headers = {"x-forwarded-for": "203.0.113.7", "x-real-ip": "10.0.0.1"}

        assert caller_fingerprint(headers, NOON) == "203.0.113.7"

    def test_real_ip_when_no_forwarded_for(self):
        headers = {"x-real-ip": "198.51.100.23", "user-agent": "curl/8.4.0"}

        assert caller_fingerprint(headers, NOON) == "198.51.100.23"

    def test_header_names_are_case_insensitive(self):
        assert caller_fingerprint({"X-Forwarded-For": "203.0.113.7"}, NOON) == "203.0.113.7"
        assert caller_fingerprint({"X-REAL-IP": "10.0.0.1"}, NOON) == "10.0.0.1"

    def test_user_agent_and_hour_fallback(self):
        """Without addresses, the first 20 user agent characters plus the hour."""
        headers = {"User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"}
        at_three = datetime(2025, 1, 15, 3, 59, 59)

        assert caller_fingerprint(headers, at_three) == "Mozilla/5.0 (Windows-3"

    def test_unknown_user_agent(self):
        midnight = datetime(2025, 1, 15, 0, 10)

        assert caller_fingerprint({}, midnight) == "unknown-0"

    def test_empty_forwarded_for_falls_through(self):
        headers = {"x-forwarded-for": "", "user-agent": "curl/8.4.0"}

        assert caller_fingerprint(headers, datetime(2025, 1, 15, 9)) == "curl/8.4.0-9"

    def test_fallback_changes_at_hour_boundary(self):
        """The same caller gets a new fingerprint, and handle, each hour."""
        headers = {"user-agent": "Mozilla/5.0 (Windows NT 10.0)"}
        before = caller_fingerprint(headers, datetime(2025, 1, 15, 3, 59, 59))
        after = caller_fingerprint(headers, datetime(2025, 1, 15, 4, 0, 0))

        assert before == "Mozilla/5.0 (Windows-3"
        assert after == "Mozilla/5.0 (Windows-4"
        assert resolve_guest_handle(before) == "Guest1879"
        assert resolve_guest_handle(after) != resolve_guest_handle(before)

    def test_fallback_is_stable_within_an_hour(self):
        headers = {"user-agent": "curl/8.4.0"}

        assert caller_fingerprint(headers, datetime(2025, 1, 15, 9, 0)) == caller_fingerprint(
            headers, datetime(2025, 1, 15, 9, 59)
        )

    def test_defaults_to_current_time(self):
        fingerprint = caller_fingerprint({"user-agent": "curl/8.4.0"})

        assert fingerprint.startswith("curl/8.4.0-")
        assert 0 <= int(fingerprint.rsplit("-", 1)[1]) <= 23

    def test_repeated_forwarded_for_headers_use_first_address(self):
        """Several X-Forwarded-For headers read as one comma-joined list."""
        headers = Headers(
            raw=[
                (b"x-forwarded-for", b"1.1.1.1"),
                (b"x-forwarded-for", b"2.2.2.2"),
            ]
        )

        assert caller_fingerprint(headers, NOON) == "1.1.1.1"

    def test_starlette_headers_fall_back_to_user_agent(self):
        headers = Headers(raw=[(b"user-agent", b"curl/8.4.0")])

        assert caller_fingerprint(headers, datetime(2025, 1, 15, 9)) == "curl/8.4.0-9"

    def test_user_agent_is_cut_on_utf16_code_units(self):
        """Characters outside the BMP count as two units each."""
        headers = {"user-agent": "\U0001f642" * 12}

        assert caller_fingerprint(headers, datetime(2025, 1, 15, 5)) == "\U0001f642" * 10 + "-5"

    def test_cut_inside_surrogate_pair_keeps_high_surrogate(self):
        headers = {"user-agent": "a" + "\U0001f642" * 12}

        fingerprint = caller_fingerprint(headers, datetime(2025, 1, 15, 5))

        assert fingerprint == "a" + "\U0001f642" * 9 + "\ud83d" + "-5"
        assert resolve_guest_handle(fingerprint).startswith("Guest")
