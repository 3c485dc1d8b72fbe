"""Edit permission checks for posts and comments.

Content is owned by the address recorded at write time. A caller may edit
only when they present that same address, and guest content stays editable
by guests only (registered content by registered users only).
"""

from vibeforum.domain.service.guest_identity import is_guest_address


def same_classification(address_a: str, address_b: str) -> bool:
    """Check that both addresses are guest addresses, or neither is."""
    return is_guest_address(address_a) == is_guest_address(address_b)


def can_edit(submitted_address: str | None, stored_author_address: str | None) -> bool:
    """Decide whether the presenter of ``submitted_address`` may edit content.

    Args:
        submitted_address: Address supplied with the edit request
        stored_author_address: Address recorded on the content

    Returns:
        True only when the addresses match case-insensitively and agree on
        guest versus registered classification
    """
    if not submitted_address or not stored_author_address:
        return False

    submitted = submitted_address.strip().lower()
    stored = stored_author_address.lower()
    if submitted != stored:
        return False

    # Guest content is never editable with a registered address, nor the reverse
    if not same_classification(submitted, stored):
        return False

    return True
