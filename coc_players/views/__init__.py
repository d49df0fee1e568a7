"""Read-only views over Clash of Clans API documents."""

from .base import BaseView
from .player import PlayerView

__all__ = ["BaseView", "PlayerView"]
