from typing import Optional

from .constants import FLAT_KEY_SIGNATURES, MAJOR_SCALE_INTERVALS, NOTES_FLAT, NOTES_SHARP

FLAT = "b"
SHARP = "#"


def use_flats_for_key(key_name: str) -> bool:
    """True when notes in this key should be spelled with flats."""
    if FLAT in key_name:
        return True
    if SHARP in key_name:
        return False
    return key_name in FLAT_KEY_SIGNATURES


def spelling_for(key_name: str, accidental: str = "") -> tuple[str, ...]:
    """
    Pick the note-name array for one lookup.

    An altered degree is spelled the way it is written (b7 -> flats,
    #4 -> sharps); an unaltered degree follows the key signature.
    """
    if accidental == FLAT:
        return NOTES_FLAT
    if accidental == SHARP:
        return NOTES_SHARP
    return NOTES_FLAT if use_flats_for_key(key_name) else NOTES_SHARP


def _root_index(key_name: str) -> Optional[int]:
    # Try the key's own spelling first, then the other one ("Db" in sharps).
    if use_flats_for_key(key_name):
        arrays = (NOTES_FLAT, NOTES_SHARP)
    else:
        arrays = (NOTES_SHARP, NOTES_FLAT)
    for names in arrays:
        if key_name in names:
            return names.index(key_name)
    return None


def degree_pitch_class(key_name: str, degree: int, accidental: str = "") -> Optional[int]:
    """
    Pitch class (0-11) of a scale degree in a major key.

    Args:
        key_name (str): Tonic, e.g. "G" or "Eb".
        degree (int): Scale degree 1-7.
        accidental (str): "", "b" (lower a semitone) or "#" (raise a semitone).

    Returns:
        int or None: None for a degree outside 1-7 or an unknown tonic.
    """
    if degree < 1 or degree > 7:
        return None

    root = _root_index(key_name)
    if root is None:
        return None

    interval = MAJOR_SCALE_INTERVALS[degree - 1]
    if accidental == FLAT:
        interval -= 1
    elif accidental == SHARP:
        interval += 1
    return (root + interval) % 12


def resolve_note(key_name: str, degree: int, accidental: str = "") -> Optional[str]:
    """
    Name the note for a scale degree in a major key.

    resolve_note("C", 7, "b")  -> "Bb"
    resolve_note("C", 4, "#")  -> "F#"
    resolve_note("Eb", 3)      -> "G"
    """
    pc = degree_pitch_class(key_name, degree, accidental)
    if pc is None:
        return None
    return spelling_for(key_name, accidental)[pc]
