"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a caller attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"You can only edit your own {resource}s. Please use the same email "
            f"address you used when creating the {resource}."
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to edit content that is no longer published."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
