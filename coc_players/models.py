"""
Pydantic models for the pieces of the player document that get projected.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UnitEntry(BaseModel):
    """Model for one element of the troops, spells or heroes array."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    level: int
    max_level: int = Field(alias="maxLevel")
    village: str


class BadgeUrls(BaseModel):
    """Model for clan badge URLs by size."""
    small: str
    medium: str
    large: str


class ClanInfo(BaseModel):
    """Model for the clan sub-object of a player."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    tag: str
    name: str
    clan_level: int = Field(alias="clanLevel")
    badge_urls: BadgeUrls = Field(alias="badgeUrls")


class APIErrorBody(BaseModel):
    """Model for the body the API sends with a non-success status."""
    model_config = ConfigDict(extra="allow")

    reason: Optional[str] = None
    message: Optional[str] = None
