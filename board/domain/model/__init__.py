"""Domain model entities for the board."""

from board.domain.model.profile import Profile, ProfileView
from board.domain.model.topic import Topic, TopicBase, TopicFork, TopicNormal, TopicOne

__all__ = [
    "Topic",
    "TopicBase",
    "TopicNormal",
    "TopicOne",
    "TopicFork",
    "Profile",
    "ProfileView",
]
