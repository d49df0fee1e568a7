"""
Player tag normalisation and URL encoding.
"""

from urllib.parse import quote


def normalize_tag(tag: str) -> str:
    """
    Bring a player tag into the form the API stores it in.

    Args:
        tag: Tag as typed by a user, with or without the leading '#'

    Returns:
        Upper-case tag with a single leading '#'
    """
    if tag is None:
        raise ValueError("Player tag must not be empty")

    cleaned = tag.strip().upper().lstrip('#')
    if not cleaned:
        raise ValueError("Player tag must not be empty")

    return f"#{cleaned}"


def encode_tag(tag: str) -> str:
    """Normalise a tag and percent-encode it for use as a URL path segment."""
    return quote(normalize_tag(tag), safe='')
