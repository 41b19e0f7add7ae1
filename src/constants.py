# ── Pitch-class lookup tables ─────────────────────────────────────────────────

NOTES_SHARP: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
)
NOTES_FLAT: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
)
# Natural-letter and flat keys whose signature is written with flats.
FLAT_KEY_SIGNATURES: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})

# Semitones above the tonic for scale degrees 1..7
MAJOR_SCALE_INTERVALS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# ── Diatonic chords per major key ─────────────────────────────────────────────
# Order: 1, 2m, 3m, 4, 5, 6m, 7dim

SCALES: dict[str, tuple[str, ...]] = {
    "C":  ("C",  "Dm",  "Em",  "F",  "G",  "Am",  "Bdim"),
    "Db": ("Db", "Ebm", "Fm",  "Gb", "Ab", "Bbm", "Cdim"),
    "D":  ("D",  "Em",  "F#m", "G",  "A",  "Bm",  "C#dim"),
    "Eb": ("Eb", "Fm",  "Gm",  "Ab", "Bb", "Cm",  "Ddim"),
    "E":  ("E",  "F#m", "G#m", "A",  "B",  "C#m", "D#dim"),
    "F":  ("F",  "Gm",  "Am",  "Bb", "C",  "Dm",  "Edim"),
    "Gb": ("Gb", "Abm", "Bbm", "Cb", "Db", "Ebm", "Fdim"),
    "G":  ("G",  "Am",  "Bm",  "C",  "D",  "Em",  "F#dim"),
    "Ab": ("Ab", "Bbm", "Cm",  "Db", "Eb", "Fm",  "Gdim"),
    "A":  ("A",  "Bm",  "C#m", "D",  "E",  "F#m", "G#dim"),
    "Bb": ("Bb", "Cm",  "Dm",  "Eb", "F",  "Gm",  "Adim"),
    "B":  ("B",  "C#m", "D#m", "E",  "F#", "G#m", "A#dim"),
    # Sharp-spelled twins (E#m = Fm, B#dim = Cdim, E#dim = Fdim)
    "C#": ("C#", "D#m", "E#m", "F#", "G#", "A#m", "B#dim"),
    "F#": ("F#", "G#m", "A#m", "B",  "C#", "D#m", "E#dim"),
}

# Enharmonic twins tried when an exact key lookup misses.
# G#/Ab, A#/Bb and D#/Eb are deliberately absent.
KEY_ALIASES: dict[str, str] = {
    "C#": "Db", "Db": "C#",
    "F#": "Gb", "Gb": "F#",
}

# Keys offered to the user, in picker order.
SUPPORTED_KEYS: tuple[str, ...] = (
    "C", "C#", "Db", "D", "Eb", "E", "F", "F#", "Gb", "G", "Ab", "A", "Bb", "B",
)
DEFAULT_KEY = "C"

# ── Chart text ────────────────────────────────────────────────────────────────

# Words that put a section number right after them ("Verse 1", "Tag 2").
SECTION_LABELS: tuple[str, ...] = (
    "Verse", "Chorus", "Bridge", "Instrumental", "Intro", "Outro", "Tag",
)

CHORD_CSS_CLASS = "chord"
SELECTED_CSS_CLASS = "selected"
