"""Base service class for domain services."""

from typing import Any, ClassVar

import logfire


class Service:
    """Base class for all domain services.

    Subclasses set ``span_prefix`` so their spans group under one name,
    e.g. ``comment_service.create_comment``.
    """

    span_prefix: ClassVar[str] = "service"

    def span(self, operation: str, **attributes: Any) -> logfire.LogfireSpan:
        """Open a Logfire span for one service operation."""
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
