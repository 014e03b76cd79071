"""Authenticated session value object."""

from stackit.domain.value.common import ValueObject
from stackit.domain.value.identifiers import UserId
from stackit.domain.value.types import Username


class Session(ValueObject):
    """The user on whose behalf an operation runs.

    Decoded from the auth token by the interface layer and passed
    explicitly into every use case that acts for a user.
    """

    user_id: UserId
    username: Username
