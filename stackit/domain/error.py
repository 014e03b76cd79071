"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (empty title or body, too many tags, ...)."""

    pass


class ConflictError(DomainError):
    """Raised when a unique value is already taken."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials do not match a user."""

    pass


class StoreUnavailableError(DomainError):
    """Raised when the record store cannot be reached."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
