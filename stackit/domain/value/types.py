"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum, IntEnum
from typing import Optional

from pydantic import field_validator

from stackit.domain.value.common import RootValueObject

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{3,30}$")


class Polarity(IntEnum):
    """Direction of a vote on an answer."""

    UP = 1
    DOWN = -1


class VoteState(str, Enum):
    """A voter's standing on a single answer."""

    NONE = "none"
    UPVOTED = "upvoted"
    DOWNVOTED = "downvoted"

    @classmethod
    def from_polarity(cls, polarity: Optional[Polarity]) -> "VoteState":
        """Map an existing vote polarity (or no vote) to a state."""
        if polarity is None:
            return cls.NONE
        return cls.UPVOTED if polarity == Polarity.UP else cls.DOWNVOTED

    @property
    def polarity(self) -> Optional[Polarity]:
        """Polarity of the vote row backing this state, if any."""
        if self is VoteState.UPVOTED:
            return Polarity.UP
        if self is VoteState.DOWNVOTED:
            return Polarity.DOWN
        return None


class NotificationKind(str, Enum):
    """Event that produced a notification."""

    ANSWER = "answer"
    MENTION = "mention"
    VOTE = "vote"


class Username(RootValueObject[str]):
    """Unique, mentionable user name.

    3-30 characters from [A-Za-z0-9_], so every username can be
    referenced with an @mention.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-30 characters: letters, digits or underscores"
            )
        return v


class TagName(RootValueObject[str]):
    """Free-form question tag, e.g. 'python' or 'react hooks'."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is trimmed and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 30:
            raise ValueError("Tag name must be 1-30 characters")
        return v
