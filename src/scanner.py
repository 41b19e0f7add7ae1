"""
Find Nashville Number System tokens inside free chart text.

A token looks like  [b|#] DEGREE [MODIFIERS] [/ [b|#] DEGREE]

    1   4m   b7   #4dim   2maj7   5sus4   6m7/3   5/7

Digits straight after a section label ("Verse 1", "Tag 2") are section
numbers, not chords, and are skipped. The label list is data so callers can
add their own ("Pre-Chorus", "Solo", ...).
"""
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from .constants import SECTION_LABELS

# One modifier run; the token takes zero or more of these, shortest first,
# so "1-4-5" stays three tokens instead of "1" with modifiers "-4-5".
_MODIFIER = (
    r"(?i:maj|min|m|dim|sus|aug|add)"
    r"|[-+Δ°ø]?\d+"
    r"|[+Δ°ø]"
)
# "°" and "+" are not word characters, so guard both token ends explicitly.
_TOKEN_BODY = (
    r"(?<![\w#°+])"
    r"(?P<accidental>[b#]?)(?P<degree>[1-7])"
    r"(?P<modifiers>(?:" + _MODIFIER + r")*?)"
    r"(?:/(?P<slash_accidental>[b#]?)(?P<slash_degree>[1-7]))?"
    r"(?![\w°+])"
)


@dataclass(frozen=True)
class NNSToken:
    """One scanned chord number and where it sits in the source text."""
    raw: str
    start: int
    end: int
    accidental: str
    degree: int
    modifiers: str = ""
    slash_accidental: str = ""
    slash_degree: Optional[int] = None

    @property
    def has_slash(self) -> bool:
        return self.slash_degree is not None


@lru_cache(maxsize=32)
def _compile(section_labels: tuple[str, ...]) -> "re.Pattern[str]":
    # Python lookbehind needs a fixed width, so one assertion per label.
    exclusions = "".join(
        r"(?<!" + re.escape(label) + r"\s)" for label in section_labels
    )
    if exclusions:
        exclusions = "(?i:" + exclusions + ")"
    return re.compile(exclusions + _TOKEN_BODY)


def build_pattern(section_labels: Iterable[str] = SECTION_LABELS) -> "re.Pattern[str]":
    """Return the compiled token regex for a set of section labels."""
    return _compile(tuple(section_labels))


def _token_from_match(match: "re.Match[str]") -> NNSToken:
    slash_degree = match.group("slash_degree")
    return NNSToken(
        raw=match.group(0),
        start=match.start(),
        end=match.end(),
        accidental=match.group("accidental"),
        degree=int(match.group("degree")),
        modifiers=match.group("modifiers") or "",
        slash_accidental=match.group("slash_accidental") or "",
        slash_degree=int(slash_degree) if slash_degree else None,
    )


def scan(text: str, section_labels: Iterable[str] = SECTION_LABELS) -> Iterator[NNSToken]:
    """Yield every NNS token in text, left to right."""
    pattern = build_pattern(section_labels)
    for match in pattern.finditer(text):
        yield _token_from_match(match)
