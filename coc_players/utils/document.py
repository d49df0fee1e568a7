"""
Typed access to decoded player documents.
"""

from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Sequence
import logging

from ..config import NameCatalog
from ..exceptions import DocumentShapeError

logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    """Outcome of searching a unit array by name."""
    FOUND = "found"
    NOT_UNLOCKED = "not_unlocked"
    UNRECOGNIZED = "unrecognized"


class UnitLookup(NamedTuple):
    """Result of find_unit_index; index is only set when the unit was found."""
    status: LookupStatus
    index: Optional[int] = None


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def _matches_type(value: Any, expected_type: Any) -> bool:
    # JSON booleans decode to bool, which is an int subclass
    if isinstance(value, bool) and expected_type is not bool:
        return False
    return isinstance(value, expected_type)


def get_field(document: Optional[Dict[str, Any]], path: str, expected_type: Any = object) -> Any:
    """
    Read a field from a player document and check its type.

    Args:
        document: Decoded player document
        path: Field name, dot separated for nested objects (e.g., 'clan.badgeUrls.small')
        expected_type: Type (or tuple of types) the value must have

    Returns:
        The stored value, unchanged
    """
    if not isinstance(document, dict):
        raise DocumentShapeError(path, "no player document is loaded")

    current: Any = document
    walked = []
    for part in path.split('.'):
        walked.append(part)
        if not isinstance(current, dict):
            raise DocumentShapeError('.'.join(walked[:-1]), "expected an object", current)
        if part not in current:
            raise DocumentShapeError('.'.join(walked), "missing from player document")
        current = current[part]

    if not _matches_type(current, expected_type):
        raise DocumentShapeError(
            path,
            f"expected {_type_name(expected_type)}, got {type(current).__name__}",
            current
        )

    return current


def get_first_field(document: Optional[Dict[str, Any]], paths: Sequence[str], expected_type: Any = object) -> Any:
    """Read the first of several alternative field names present in the document."""
    for path in paths[:-1]:
        if isinstance(document, dict) and path in document:
            return get_field(document, path, expected_type)
    return get_field(document, paths[-1], expected_type)


def get_unit_array(document: Optional[Dict[str, Any]], category: str) -> List[Any]:
    """Get a unit array; a player without any unlocked unit may omit it."""
    if isinstance(document, dict) and category not in document:
        return []
    return get_field(document, category, list)


def check_unique_units(document: Optional[Dict[str, Any]], categories: Sequence[str]) -> None:
    """
    Check that no unit array holds the same name twice for one village.

    The same name may appear once per village (e.g., 'Baby Dragon' for both
    'home' and 'builderBase').
    """
    for category in categories:
        seen = set()
        for index, unit in enumerate(get_unit_array(document, category)):
            if not isinstance(unit, dict):
                raise DocumentShapeError(f"{category}[{index}]", "expected an object", unit)
            key = (unit.get('name'), unit.get('village'))
            if key in seen:
                raise DocumentShapeError(
                    f"{category}[{index}]",
                    f"duplicate unit '{key[0]}' for village '{key[1]}'",
                    unit
                )
            seen.add(key)


def find_unit_index(
    document: Optional[Dict[str, Any]],
    category: str,
    unit_name: str,
    catalog: NameCatalog,
    village: Optional[str] = None
) -> UnitLookup:
    """
    Find a unit by name in one of the document's unit arrays.

    Args:
        document: Decoded player document
        category: Array field to scan ('troops', 'spells' or 'heroes')
        unit_name: Exact unit name as used by the API
        catalog: Catalog used to tell locked units from invalid names
        village: Only match entries of this village ('home' or 'builderBase');
            without it the first entry with the name wins

    Returns:
        UnitLookup with the position of the unit, or the reason it is absent
    """
    known_names = catalog.name_set(category)
    units = get_unit_array(document, category)

    for index, unit in enumerate(units):
        if not isinstance(unit, dict):
            raise DocumentShapeError(f"{category}[{index}]", "expected an object", unit)
        if unit.get('name') != unit_name:
            continue
        if village is None or unit.get('village') == village:
            return UnitLookup(LookupStatus.FOUND, index)

    if unit_name in known_names:
        logger.debug(f"'{unit_name}' is a known {category} name but not unlocked")
        return UnitLookup(LookupStatus.NOT_UNLOCKED)

    logger.debug(f"'{unit_name}' is not in the {category} catalog")
    return UnitLookup(LookupStatus.UNRECOGNIZED)
