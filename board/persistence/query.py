"""Filters for topic listing queries.

User-supplied text is embedded in ``$regex`` patterns only after escaping, so
titles match literally and cannot alter the pattern.
"""

import re
from typing import Any

from board.domain.value import TopicId, TopicType

# - / \ ^ $ * + ? . ( ) | [ ] { }
_PATTERN_SPECIALS = re.compile(r"[-/\\^$*+?.()|\[\]{}]")

# Forks are only reachable through their parent
LISTED_TYPES = [TopicType.NORMAL.value, TopicType.ONE.value]


def escape_pattern(text: str) -> str:
    """Escape regex metacharacters so ``text`` matches literally.

    Args:
        text: Free text from the caller

    Returns:
        Pattern matching ``text`` as a substring
    """
    return _PATTERN_SPECIALS.sub(lambda m: "\\" + m.group(0), text)


def topic_search_filter(title: str, tags: list[str], active_only: bool) -> dict[str, Any]:
    """Build the filter for the general topic listing.

    Args:
        title: Substring the title must contain (case-sensitive)
        tags: Tags that must all be present; empty means no tag constraint
        active_only: Whether to require ``active = true``

    Returns:
        MongoDB filter document
    """
    query: dict[str, Any] = {"title": {"$regex": escape_pattern(title)}}

    if tags:
        query["tags"] = {"$all": list(tags)}

    query["type"] = {"$in": LISTED_TYPES}

    if active_only:
        query["active"] = True

    return query


def topic_fork_filter(parent_id: TopicId, active_only: bool) -> dict[str, Any]:
    """Build the filter listing forks of one parent topic.

    Args:
        parent_id: Identifier of the parent normal topic
        active_only: Whether to require ``active = true``

    Returns:
        MongoDB filter document
    """
    query: dict[str, Any] = {
        "parent": parent_id,
        "type": TopicType.FORK.value,
    }

    if active_only:
        query["active"] = True

    return query
