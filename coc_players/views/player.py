"""
Typed, read-only projection over a player document.
"""

from typing import Any, Dict, List, Optional

from .base import BaseView
from ..config import NameCatalog
from ..exceptions import (
    ILLEGAL_NAME_ERRORS,
    NOT_UNLOCKED_ERRORS,
    IllegalNameError,
    ItemNotUnlockedError,
)
from ..models import ClanInfo, UnitEntry
from ..utils.document import (
    LookupStatus,
    UnitLookup,
    find_unit_index,
    get_field,
    get_unit_array,
)

TROOPS = "troops"
SPELLS = "spells"
HEROES = "heroes"


class PlayerView(BaseView):
    """
    Accessors for one player document as returned by /players/{tag}.

    Every accessor reads the document reference once, so a document swapped
    in by a concurrent re-fetch is never observed half way through a call.
    """

    def __init__(self, document: Optional[Dict[str, Any]] = None, catalog: Optional[NameCatalog] = None):
        super().__init__(catalog)
        self._document = document

    @property
    def document(self) -> Optional[Dict[str, Any]]:
        return self._document

    # Player

    def get_player_name(self) -> str:
        """Player name."""
        return self._get('name', str)

    def get_player_tag(self) -> str:
        """Player tag, including the leading '#'."""
        return self._get('tag', str)

    def get_player_experience_level(self) -> int:
        """Experience level."""
        return self._get('expLevel', int)

    def get_player_best_trophies(self) -> int:
        """Best trophies ever reached in the home village."""
        return self._get('bestTrophies', int)

    def get_player_current_trophies(self) -> int:
        """Current trophies in the home village."""
        return self._get('trophies', int)

    def get_player_best_versus_trophies(self) -> int:
        """Best trophies ever reached in the builder base."""
        return self._get_first(['bestVersusTrophies', 'bestBuilderBaseTrophies'], int)

    def get_player_current_versus_trophies(self) -> int:
        """Current trophies in the builder base."""
        return self._get_first(['versusTrophies', 'builderBaseTrophies'], int)

    def get_player_versus_battle_wins(self) -> int:
        """Number of battles won in the builder base."""
        return self._get('versusBattleWinCount', int)

    def get_player_defense_wins(self) -> int:
        """Defenses won this season."""
        return self._get('defenseWins', int)

    def get_player_attack_wins(self) -> int:
        """Attacks won this season."""
        return self._get('attackWins', int)

    def get_player_town_hall_level(self) -> int:
        """Town hall level."""
        return self._get('townHallLevel', int)

    def get_player_builder_hall_level(self) -> int:
        """Builder hall level."""
        return self._get('builderHallLevel', int)

    def get_player_role(self) -> str:
        """Role in the clan (e.g., 'leader', 'coLeader', 'admin', 'member')."""
        return self._get('role', str)

    def get_player_troops_donation_count(self) -> int:
        """Troops donated this season."""
        return self._get('donations', int)

    def get_player_troops_received_count(self) -> int:
        """Troops received this season."""
        return self._get('donationsReceived', int)

    # Clan

    def is_in_clan(self) -> bool:
        """Whether the player belongs to a clan."""
        document = self.document
        return isinstance(document, dict) and isinstance(document.get('clan'), dict)

    def get_player_clan_information(self) -> ClanInfo:
        """Clan summary as a ClanInfo."""
        return self._to_model(ClanInfo, 'clan', self._get('clan', dict))

    def get_player_clan_name(self) -> str:
        """Clan name."""
        return self._get('clan.name', str)

    def get_player_clan_tag(self) -> str:
        """Clan tag."""
        return self._get('clan.tag', str)

    def get_player_clan_level(self) -> int:
        """Clan level."""
        return self._get('clan.clanLevel', int)

    def get_player_clan_small_badge_url(self) -> str:
        """URL of the small clan badge."""
        return self._get('clan.badgeUrls.small', str)

    def get_player_clan_medium_badge_url(self) -> str:
        """URL of the medium clan badge."""
        return self._get('clan.badgeUrls.medium', str)

    def get_player_clan_large_badge_url(self) -> str:
        """URL of the large clan badge."""
        return self._get('clan.badgeUrls.large', str)

    # Units

    def find_unit_index(self, category: str, unit_name: str, village: Optional[str] = None) -> UnitLookup:
        """Locate a unit by name in the troops, spells or heroes array."""
        return find_unit_index(self.document, category, unit_name, self.catalog, village)

    def get_single_unit_info(self, category: str, unit_name: str, village: Optional[str] = None) -> UnitEntry:
        """
        Get the complete entry of one unlocked unit.

        Args:
            category: 'troops', 'spells' or 'heroes'
            unit_name: Unit name as used by the API (e.g., 'Barbarian')
            village: Pick the entry of one village when a name exists in both
                (e.g., 'Baby Dragon'); without it the first entry wins

        Returns:
            UnitEntry of the unit

        Raises:
            ItemNotUnlockedError: Name is valid but the player has not unlocked it
            IllegalNameError: Name is not in the catalog for the category
        """
        document = self.document
        lookup = find_unit_index(document, category, unit_name, self.catalog, village)

        if lookup.status is LookupStatus.NOT_UNLOCKED:
            error_class = NOT_UNLOCKED_ERRORS.get(category, ItemNotUnlockedError)
            raise error_class(unit_name, get_field(document, 'name', str), category)

        if lookup.status is LookupStatus.UNRECOGNIZED:
            error_class = ILLEGAL_NAME_ERRORS.get(category, IllegalNameError)
            raise error_class(unit_name, category)

        units = get_unit_array(document, category)
        return self._to_model(UnitEntry, f"{category}[{lookup.index}]", units[lookup.index])

    def get_units_information(self, category: str) -> List[UnitEntry]:
        """Get every unlocked unit of a category."""
        # Unknown categories raise ValueError
        self.catalog.get_villages(category)
        return self._to_models(UnitEntry, category, get_unit_array(self.document, category))

    # Troops

    def get_player_troops_information(self) -> List[UnitEntry]:
        """Get every unlocked troop, both villages included."""
        return self.get_units_information(TROOPS)

    def get_player_single_troop_info(self, troop_name: str, village: Optional[str] = None) -> UnitEntry:
        """Get the complete entry of one troop (see get_single_unit_info)."""
        return self.get_single_unit_info(TROOPS, troop_name, village)

    def get_player_troop_level(self, troop_name: str, village: Optional[str] = None) -> int:
        """Current level of a troop."""
        return self.get_player_single_troop_info(troop_name, village).level

    def get_player_troop_max_level(self, troop_name: str, village: Optional[str] = None) -> int:
        """Maximum level of a troop at the player's town or builder hall."""
        return self.get_player_single_troop_info(troop_name, village).max_level

    def get_player_troop_village(self, troop_name: str, village: Optional[str] = None) -> str:
        """Village a troop belongs to ('home' or 'builderBase')."""
        return self.get_player_single_troop_info(troop_name, village).village

    def get_player_troop_name(self, troop_name: str, village: Optional[str] = None) -> str:
        """Troop name as stored by the API."""
        return self.get_player_single_troop_info(troop_name, village).name

    # Spells

    def get_player_spells_information(self) -> List[UnitEntry]:
        """Get every unlocked spell."""
        return self.get_units_information(SPELLS)

    def get_player_single_spell_info(self, spell_name: str, village: Optional[str] = None) -> UnitEntry:
        """Get the complete entry of one spell (see get_single_unit_info)."""
        return self.get_single_unit_info(SPELLS, spell_name, village)

    def get_player_spell_level(self, spell_name: str, village: Optional[str] = None) -> int:
        """Current level of a spell."""
        return self.get_player_single_spell_info(spell_name, village).level

    def get_player_spell_max_level(self, spell_name: str, village: Optional[str] = None) -> int:
        """Maximum level of a spell at the player's town hall."""
        return self.get_player_single_spell_info(spell_name, village).max_level

    def get_player_spell_village(self, spell_name: str, village: Optional[str] = None) -> str:
        """Village a spell belongs to."""
        return self.get_player_single_spell_info(spell_name, village).village

    def get_player_spell_name(self, spell_name: str, village: Optional[str] = None) -> str:
        """Spell name as stored by the API."""
        return self.get_player_single_spell_info(spell_name, village).name

    # Heroes

    def get_player_heroes_information(self) -> List[UnitEntry]:
        """Get every unlocked hero, both villages included."""
        return self.get_units_information(HEROES)

    def get_player_single_hero_info(self, hero_name: str, village: Optional[str] = None) -> UnitEntry:
        """Get the complete entry of one hero (see get_single_unit_info)."""
        return self.get_single_unit_info(HEROES, hero_name, village)

    def get_player_hero_level(self, hero_name: str, village: Optional[str] = None) -> int:
        """Current level of a hero."""
        return self.get_player_single_hero_info(hero_name, village).level

    def get_player_hero_max_level(self, hero_name: str, village: Optional[str] = None) -> int:
        """Maximum level of a hero at the player's town or builder hall."""
        return self.get_player_single_hero_info(hero_name, village).max_level

    def get_player_hero_village(self, hero_name: str, village: Optional[str] = None) -> str:
        """Village a hero belongs to ('home' or 'builderBase')."""
        return self.get_player_single_hero_info(hero_name, village).village

    def get_player_hero_name(self, hero_name: str, village: Optional[str] = None) -> str:
        """Hero name as stored by the API."""
        return self.get_player_single_hero_info(hero_name, village).name
