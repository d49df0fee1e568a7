"""
Player client: fetches one player's document and exposes it through PlayerView.
"""

import logging
import threading
from typing import Any, Dict, Optional, Tuple

from .client import HTTPClient
from .config import NameCatalog
from .utils.document import check_unique_units, get_field
from .utils.tags import normalize_tag
from .views.player import HEROES, SPELLS, TROOPS, PlayerView

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (('name', str), ('tag', str), ('expLevel', int))
UNIT_CATEGORIES = (TROOPS, SPELLS, HEROES)


class COCPlayers(PlayerView):
    """
    Clash of Clans player bound to one API token.

    Constructing an instance fetches the player immediately. Changing the
    player tag fetches again; the stored document is only replaced once the
    new one has been received and checked, so a failed fetch leaves the
    previous player fully readable. The tag and its document are stored as one
    snapshot, so readers never see the tag of one player with the document of
    another.

    Example:
        with COCPlayers(token, "#ABC123") as player:
            print(player.get_player_name(), player.get_player_troop_level("Barbarian"))
    """

    def __init__(
        self,
        token: str,
        player_tag: str,
        catalog: Optional[NameCatalog] = None,
        client: Optional[HTTPClient] = None,
        **client_kwargs: Any
    ):
        super().__init__(document=None, catalog=catalog)
        self._client = client if client is not None else HTTPClient(token, **client_kwargs)
        self._lock = threading.Lock()
        self._snapshot: Tuple[Optional[str], Optional[Dict[str, Any]]] = (None, None)

        try:
            self.set_player_tag(player_tag)
        except Exception:
            if client is None:
                self._client.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._client.close()

    @property
    def client(self) -> HTTPClient:
        return self._client

    @property
    def snapshot(self) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Current (tag, document) pair, swapped as a whole on every fetch."""
        return self._snapshot

    @property
    def document(self) -> Optional[Dict[str, Any]]:
        return self._snapshot[1]

    @property
    def player_tag(self) -> Optional[str]:
        return self._snapshot[0]

    def fetch(self, tag: str) -> Dict[str, Any]:
        """
        Fetch a player document without storing it.

        Args:
            tag: Player tag, with or without the leading '#'

        Returns:
            Decoded player document

        Raises:
            DocumentShapeError: A required field is missing or mistyped, or a
                unit array lists the same unit twice for one village
        """
        document = self._client.get_player(tag)

        for field, expected_type in REQUIRED_FIELDS:
            get_field(document, field, expected_type)
        check_unique_units(document, UNIT_CATEGORIES)

        return document

    def set_player_tag(self, tag: str) -> None:
        """Switch to another player and fetch its document."""
        normalized = normalize_tag(tag)

        with self._lock:
            document = self.fetch(normalized)
            self._snapshot = (normalized, document)

        logger.info(f"Loaded player {normalized} ({document['name']})")

    def refresh(self) -> None:
        """Fetch the current player again."""
        self.set_player_tag(self.player_tag)

    @classmethod
    def from_env(cls, player_tag: str, **kwargs: Any) -> "COCPlayers":
        """Create a player client with the token from environment variables."""
        client = kwargs.pop("client", None)
        if client is not None:
            return cls(client.token, player_tag, client=client, **kwargs)

        client = HTTPClient.from_env()
        try:
            return cls(client.token, player_tag, client=client, **kwargs)
        except Exception:
            client.close()
            raise
