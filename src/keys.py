"""
Diatonic key table lookups.

The table itself lives in src/constants.py; this module only answers
"which seven chords belong to key X" and what quality a table entry implies.
"""
from typing import Optional

from .constants import KEY_ALIASES, SCALES

QUALITY_MAJOR = ""
QUALITY_MINOR = "m"
QUALITY_DIMINISHED = "dim"


def lookup_scale(key_name: str) -> Optional[tuple[str, ...]]:
    """
    Return the diatonic chords (degree 1 first) for a key, or None.

    An exact table entry wins; otherwise the registered enharmonic twin
    (C#/Db, F#/Gb) is tried. Any other miss means the key is unsupported.
    """
    scale = SCALES.get(key_name)
    if scale is not None:
        return scale
    alias = KEY_ALIASES.get(key_name)
    if alias is not None:
        return SCALES.get(alias)
    return None


def is_supported_key(key_name: str) -> bool:
    return lookup_scale(key_name) is not None


def diatonic_quality(chord_name: str) -> str:
    """Derive the triad quality ("", "m" or "dim") of a key-table chord."""
    if QUALITY_DIMINISHED in chord_name:
        return QUALITY_DIMINISHED
    if QUALITY_MINOR in chord_name:
        return QUALITY_MINOR
    return QUALITY_MAJOR
