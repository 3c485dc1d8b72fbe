"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from vibeforum.domain.value.common import ValueObject


class PostStatus(str, Enum):
    """Lifecycle status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    HIDDEN = "hidden"
    DELETED = "deleted"


class CommentStatus(str, Enum):
    """Lifecycle status of a comment.

    Only published comments are rendered; the others are filtered out
    before a comment tree is built.
    """

    PUBLISHED = "published"
    HIDDEN = "hidden"
    DELETED = "deleted"


class AuthorIdentity(ValueObject):
    """Display name and contact address recorded on a post or comment.

    Guests get a synthetic ``Guest####`` name and ``guest####@guest.local``
    address; everyone else keeps what they typed into the form.
    """

    name: str
    email: str
    is_guest: bool = False
