"""
Resolve Nashville numbers to chord names in a target key.

    convert("| 1 | 4 | 5/7 | 6m7 |", "G")
      -> '| <span class="chord">G</span> | <span class="chord">C</span> | ...'

Each scanned token resolves on its own: a token that cannot be resolved is
copied through verbatim and the rest of the chart still converts. An
unsupported key is the only whole-call failure, and it returns the input
unchanged.
"""
import html
import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .constants import CHORD_CSS_CLASS, SECTION_LABELS
from .keys import (
    QUALITY_DIMINISHED,
    QUALITY_MAJOR,
    QUALITY_MINOR,
    diatonic_quality,
    lookup_scale,
)
from .notes import resolve_note
from .scanner import NNSToken, scan

logger = logging.getLogger(__name__)

Renderer = Callable[[str], str]

# Quality markers, stripped in this order so "dim" goes before its "m".
_DIM_MARKERS = re.compile(r"dim|°|ø")
_MAJOR_MARKERS = re.compile(r"maj|Δ")
_MINOR_MARKERS = re.compile(r"min|m")


@dataclass(frozen=True)
class ResolvedChord:
    root: str
    quality: str = QUALITY_MAJOR
    extensions: str = ""
    bass: Optional[str] = None

    @property
    def name(self) -> str:
        chord = f"{self.root}{self.quality}{self.extensions}"
        if self.bass:
            chord += f"/{self.bass}"
        return chord


@dataclass(frozen=True)
class TokenResult:
    """Outcome for one token: a chord, or the original text passed through."""
    token: NNSToken
    text: str
    chord: Optional[ResolvedChord] = None

    @property
    def resolved(self) -> bool:
        return self.chord is not None


def render_chord_span(chord_name: str) -> str:
    return f'<span class="{CHORD_CSS_CLASS}">{html.escape(chord_name)}</span>'


def render_plain(chord_name: str) -> str:
    return chord_name


def determine_quality(modifiers: str, accidental: str, diatonic_chord: str) -> str:
    """
    Pick the triad quality for a token.

    First match wins:
      1. dim / ° / ø in the modifiers        -> diminished
      2. m or min (not the m of maj)         -> minor
      3. maj / Δ                             -> major
      4. altered degree (b7, #4)             -> major
      5. the quality of the diatonic chord   -> from the key table
    """
    if _DIM_MARKERS.search(modifiers):
        return QUALITY_DIMINISHED
    if QUALITY_MINOR in _MAJOR_MARKERS.sub("", modifiers):
        return QUALITY_MINOR
    if _MAJOR_MARKERS.search(modifiers):
        return QUALITY_MAJOR
    if accidental:
        return QUALITY_MAJOR
    return diatonic_quality(diatonic_chord)


def strip_quality_markers(modifiers: str) -> str:
    """Remove quality markers, keeping extensions (7, sus4, add9, ...) in order."""
    residual = _DIM_MARKERS.sub("", modifiers)
    residual = _MAJOR_MARKERS.sub("", residual)
    return _MINOR_MARKERS.sub("", residual)


def _passthrough(token: NNSToken) -> TokenResult:
    return TokenResult(token=token, text=token.raw)


def resolve_token(
    token: NNSToken,
    target_key: str,
    scale: tuple[str, ...],
    render: Renderer = render_chord_span,
) -> TokenResult:
    """
    Resolve one token against a key whose scale is already known.

    Never raises: anything that goes wrong leaves the token as written.
    """
    try:
        root = resolve_note(target_key, token.degree, token.accidental)
        if root is None:
            logger.debug("No note for %r in key %s", token.raw, target_key)
            return _passthrough(token)

        quality = determine_quality(
            token.modifiers, token.accidental, scale[token.degree - 1]
        )
        bass = None
        if token.has_slash:
            bass = resolve_note(target_key, token.slash_degree, token.slash_accidental)
            if bass is None:
                logger.debug("Dropping slash bass of %r in key %s", token.raw, target_key)

        chord = ResolvedChord(
            root=root,
            quality=quality,
            extensions=strip_quality_markers(token.modifiers),
            bass=bass,
        )
        return TokenResult(token=token, text=render(chord.name), chord=chord)
    except Exception:
        logger.warning(
            "Could not convert NNS chord %r in key %s", token.raw, target_key, exc_info=True
        )
        return _passthrough(token)


def resolve_all(
    text: str,
    target_key: str,
    render: Renderer = render_chord_span,
    section_labels: Iterable[str] = SECTION_LABELS,
) -> Optional[list[TokenResult]]:
    """Per-token results for a whole chart, or None if the key is unsupported."""
    scale = lookup_scale(target_key)
    if scale is None:
        logger.error("Scale not found for key: %s", target_key)
        return None
    return [
        resolve_token(token, target_key, scale, render)
        for token in scan(text, section_labels)
    ]


def convert(
    text: str,
    target_key: str,
    render: Renderer = render_chord_span,
    section_labels: Iterable[str] = SECTION_LABELS,
) -> str:
    """
    Replace every NNS token in text with its chord in target_key.

    Text between tokens is copied unchanged. Returns text itself when the
    key has no scale table.
    """
    results = resolve_all(text, target_key, render, section_labels)
    if results is None:
        return text

    pieces = []
    cursor = 0
    for result in results:
        pieces.append(text[cursor:result.token.start])
        pieces.append(result.text)
        cursor = result.token.end
    pieces.append(text[cursor:])
    return "".join(pieces)
