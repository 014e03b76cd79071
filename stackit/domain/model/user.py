"""User aggregate root.

Users sign up with a username and password and are never deleted.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    The username is unique and immutable; only the credential may change.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=datetime.now)
