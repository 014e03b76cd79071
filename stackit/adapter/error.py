"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class PublishError(AdapterError):
    """Real-time change could not be published."""

    pass
