"""Guest identities for unauthenticated participants.

Guests have no account. Instead, a ``Guest####`` handle is derived from a
per-request caller fingerprint so the same visitor keeps the same label, and
a synthetic ``guest####@guest.local`` address stands in for their email.

Only 10000 handles exist, so two visitors can share one. Handles are a
display convenience, not a uniqueness guarantee.
"""

import re
import secrets

from vibeforum.domain.value import AuthorIdentity

GUEST_DOMAIN = "guest.local"
GUEST_ADDRESS_SUFFIX = f"@{GUEST_DOMAIN}"
GUEST_HANDLE_PREFIX = "Guest"
GUEST_HANDLE_SPACE = 10000

_GUEST_ADDRESS_RE = re.compile(r"^(guest\d{4})@guest\.local$", re.IGNORECASE)


def _fingerprint_hash(fingerprint: str) -> int:
    """31-multiplier rolling hash over UTF-16 code units, as a signed 32-bit int."""
    data = fingerprint.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def resolve_guest_handle(fingerprint: str | None = None) -> str:
    """Derive a guest handle such as ``Guest0042`` from a caller fingerprint.

    The same fingerprint always yields the same handle, across processes.
    Without a fingerprint a random handle is returned instead.

    Args:
        fingerprint: Caller fingerprint (see ``caller_fingerprint``)

    Returns:
        ``Guest`` followed by four digits
    """
    if not fingerprint:
        number = secrets.randbelow(GUEST_HANDLE_SPACE)
    else:
        number = abs(_fingerprint_hash(fingerprint)) % GUEST_HANDLE_SPACE
    return f"{GUEST_HANDLE_PREFIX}{number:04d}"


def guest_address_for(handle: str) -> str:
    """Return the synthetic contact address for a guest handle."""
    return f"{handle.lower()}{GUEST_ADDRESS_SUFFIX}"


def is_guest_address(address: str) -> bool:
    """Check whether ``address`` is a guest address.

    The check is case-sensitive. Addresses produced by ``guest_address_for``
    are always lowercase; callers comparing user-supplied input should
    lowercase it first.
    """
    return address.endswith(GUEST_ADDRESS_SUFFIX)


def same_guest(address_a: str, address_b: str) -> bool:
    """Check whether two addresses denote the same guest.

    Registered addresses are never the same guest, even when identical.
    """
    if not is_guest_address(address_a) or not is_guest_address(address_b):
        return False
    return address_a.lower() == address_b.lower()


def guest_handle_from_address(address: str) -> str | None:
    """Extract ``guest####`` from a canonical guest address, if it is one."""
    if not is_guest_address(address):
        return None
    match = _GUEST_ADDRESS_RE.match(address)
    return match.group(1) if match else None


def resolve_author(
    author_name: str | None,
    author_email: str | None,
    fingerprint: str | None,
) -> AuthorIdentity:
    """Decide who a new post or comment is attributed to.

    When either the name or the email is left blank, both are replaced by
    the caller's guest handle and guest address.

    Args:
        author_name: Name typed into the form, if any
        author_email: Email typed into the form, if any
        fingerprint: Caller fingerprint used for the guest fallback

    Returns:
        The identity to store on the new content
    """
    name = (author_name or "").strip()
    email = (author_email or "").strip()

    if name and email:
        return AuthorIdentity(name=name, email=email, is_guest=is_guest_address(email))

    handle = resolve_guest_handle(fingerprint)
    return AuthorIdentity(name=handle, email=guest_address_for(handle), is_guest=True)
