"""Caller fingerprinting for guest authorship."""

from collections.abc import Mapping
from datetime import datetime

USER_AGENT_PREFIX_UNITS = 20


def _header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup; repeated headers are joined with ", "."""
    values = [value for key, value in headers.items() if key.lower() == name]
    return ", ".join(values) if values else None


def _utf16_prefix(text: str, units: int) -> str:
    """First ``units`` UTF-16 code units of ``text``.

    A cut inside a surrogate pair keeps the lone high surrogate.
    """
    data = text.encode("utf-16-le", "surrogatepass")[: units * 2]
    return data.decode("utf-16-le", "surrogatepass")


def caller_fingerprint(headers: Mapping[str, str], now: datetime | None = None) -> str:
    """Derive a stable-ish fingerprint for an anonymous caller.

    Prefers the client address reported by the proxy. Without one, falls back
    to the first 20 UTF-16 code units of the user agent combined with the
    current local hour, so the fingerprint changes at every hour boundary.

    Args:
        headers: Request headers (any key casing, repeated keys allowed)
        now: Moment of the request, defaults to the current local time

    Returns:
        Fingerprint string used to derive a guest handle
    """
    forwarded_for = _header(headers, "x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = _header(headers, "x-real-ip")
    if real_ip:
        return real_ip

    user_agent = _header(headers, "user-agent") or "unknown"
    hour = (now or datetime.now()).hour
    return f"{_utf16_prefix(user_agent, USER_AGENT_PREFIX_UNITS)}-{hour}"
