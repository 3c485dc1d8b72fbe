"""Strongly typed identifiers for forum entities.

Identifiers are opaque strings (UUIDs rendered as text by the database).
NewType keeps post and comment IDs from being mixed up.
"""

from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
