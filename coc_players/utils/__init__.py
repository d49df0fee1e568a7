"""Utility modules for the coc_players library."""

from .document import LookupStatus, UnitLookup, check_unique_units, find_unit_index, get_field
from .tags import encode_tag, normalize_tag

__all__ = [
    "LookupStatus",
    "UnitLookup",
    "check_unique_units",
    "find_unit_index",
    "get_field",
    "encode_tag",
    "normalize_tag",
]
