"""
Exception hierarchy for the Clash of Clans player client.
"""

from typing import Any, Optional


class COCError(Exception):
    """Base class for every error raised by this library."""


class COCServerConnectionError(COCError):
    """Request to the Clash of Clans server failed."""

    def __init__(self, message: str, url: Optional[str] = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.url = url
        self.cause = cause


class HTTPStatusError(COCServerConnectionError):
    """Server answered with a status outside 200-399."""

    def __init__(
        self,
        status_code: int,
        reason: Optional[str],
        message: Optional[str],
        url: Optional[str] = None
    ):
        super().__init__(
            f"Server returned {status_code} ({reason}): {message}",
            url=url
        )
        self.status_code = status_code
        self.reason = reason
        self.message = message


class MalformedURLError(COCServerConnectionError):
    """Request URL could not be built or understood by the transport."""


class TransportError(COCServerConnectionError):
    """Network level failure (DNS, refused connection, timeout, ...)."""


class ResponseDecodeError(COCServerConnectionError):
    """Response body is not the JSON object the API promises."""


class ItemNotUnlockedError(COCError):
    """A known troop, spell or hero the player has not unlocked yet."""

    kind = "Item"

    def __init__(self, item_name: str, player_name: str, category: Optional[str] = None):
        super().__init__(
            f"{self.kind} {item_name} is not yet unlocked by the player {player_name}"
        )
        self.item_name = item_name
        self.player_name = player_name
        self.category = category


class TroopNotUnlockedError(ItemNotUnlockedError):
    kind = "Troop"


class SpellNotUnlockedError(ItemNotUnlockedError):
    kind = "Spell"


class HeroNotUnlockedError(ItemNotUnlockedError):
    kind = "Hero"


class IllegalNameError(COCError):
    """Name does not exist in the catalog of its category."""

    kind = "item"

    def __init__(self, name: str, category: Optional[str] = None):
        super().__init__(f"'{name}' is not a valid {self.kind} name")
        self.name = name
        self.category = category


class IllegalTroopNameError(IllegalNameError):
    kind = "troop"


class IllegalSpellNameError(IllegalNameError):
    kind = "spell"


class IllegalHeroNameError(IllegalNameError):
    kind = "hero"


class DocumentShapeError(COCError):
    """Player document lacks a field or holds it with an unexpected type."""

    def __init__(self, field: str, detail: str, value: Any = None):
        super().__init__(f"Player document field '{field}': {detail}")
        self.field = field
        self.detail = detail
        self.value = value


NOT_UNLOCKED_ERRORS = {
    "troops": TroopNotUnlockedError,
    "spells": SpellNotUnlockedError,
    "heroes": HeroNotUnlockedError,
}

ILLEGAL_NAME_ERRORS = {
    "troops": IllegalTroopNameError,
    "spells": IllegalSpellNameError,
    "heroes": IllegalHeroNameError,
}
