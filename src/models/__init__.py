"""Database model type definitions."""

from src.models.profile import Profile, ProfileWrite, PublicProfile
from src.models.topic import Topic

__all__ = [
    "Profile",
    "ProfileWrite",
    "PublicProfile",
    "Topic",
]
