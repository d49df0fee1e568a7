"""
coc_players - Python client for Clash of Clans player statistics.
"""

from .client import HTTPClient
from .config import Config, NameCatalog
from .exceptions import (
    COCError,
    COCServerConnectionError,
    DocumentShapeError,
    HTTPStatusError,
    IllegalNameError,
    ItemNotUnlockedError,
)
from .players import COCPlayers
from .views.player import PlayerView

__version__ = "1.0.0"
__all__ = [
    "COCPlayers",
    "HTTPClient",
    "PlayerView",
    "Config",
    "NameCatalog",
    "COCError",
    "COCServerConnectionError",
    "HTTPStatusError",
    "ItemNotUnlockedError",
    "IllegalNameError",
    "DocumentShapeError",
]
