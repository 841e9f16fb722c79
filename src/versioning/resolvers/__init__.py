"""Version resolvers backed by remote repositories."""

from .maven import MavenMetadataResolver, pick_latest, verify_plan

__all__ = [
    "MavenMetadataResolver",
    "pick_latest",
    "verify_plan",
]
