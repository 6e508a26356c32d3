"""Strongly typed identifiers for board domain entities.

Entities are keyed by MongoDB ObjectIds. NewType keeps topic, profile and
user identifiers from being mixed up at call sites.
"""

from typing import NewType

from bson import ObjectId

TopicId = NewType("TopicId", ObjectId)
ProfileId = NewType("ProfileId", ObjectId)
UserId = NewType("UserId", ObjectId)
TokenId = NewType("TokenId", ObjectId)
