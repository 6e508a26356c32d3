"""Domain services."""

from board.domain.service.base import Service
from board.domain.service.profile_service import ProfileService

__all__ = [
    "Service",
    "ProfileService",
]
