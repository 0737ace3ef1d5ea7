"""Tag helpers for the BrawlAPI client."""

from __future__ import annotations

import string

# Digits plus the letters Supercell uses when generating player and club tags.
SUPERCELL_TAG_CHARACTERS = frozenset(string.digits + "PYLQGRJCUV")
TAG_CHARACTERS = frozenset(string.digits + string.ascii_uppercase)


def clean_tag(tag: str) -> str:
    """Return ``tag`` without its leading ``#``, uppercased, with ``O`` read as ``0``."""
    if tag.startswith("#"):
        tag = tag[1:]
    return tag.upper().replace("O", "0")


def validate_tag(tag: object, *, strict: bool = False) -> bool:
    """Check whether ``tag`` can be sent to the API.

    Parameters
    ----------
    tag
        Player or club tag, with or without the leading ``#``. Letters are
        matched case-insensitively and ``O`` is read as ``0``.
    strict
        Only accept the characters Supercell uses for tags instead of any
        digit or ASCII letter.

    Returns
    -------
    bool
        ``False`` for non-strings, empty or non-ASCII tags, and tags with characters
        outside the accepted alphabet.
    """
    if not isinstance(tag, str) or not tag or not tag.isascii():
        return False
    cleaned = clean_tag(tag)
    if not cleaned:
        return False
    allowed = SUPERCELL_TAG_CHARACTERS if strict else TAG_CHARACTERS
    return all(char in allowed for char in cleaned)
