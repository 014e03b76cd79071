"""@mention extraction."""

import re

# ASCII word characters only, matching how usernames are validated
MENTION_PATTERN = re.compile(r"@(\w+)", re.ASCII)


def extract_mentions(text: str) -> list[str]:
    """Extract mentioned usernames from free text.

    Names are returned in order of first occurrence with duplicates
    removed. Whether a name belongs to a real user is the caller's concern.

    Example:
        >>> extract_mentions("hi @bob and @alice, @bob again")
        ['bob', 'alice']
    """
    return list(dict.fromkeys(MENTION_PATTERN.findall(text)))
