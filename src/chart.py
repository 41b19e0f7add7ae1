"""
Presentation-side glue for a single chord chart.

ChartSession keeps the source text and the selected key; every key change
re-runs the stateless converter on the original text.
"""
import html
import re
from typing import Iterable, Optional

from .constants import DEFAULT_KEY, SECTION_LABELS, SELECTED_CSS_CLASS, SUPPORTED_KEYS
from .keys import is_supported_key
from .resolver import Renderer, convert, render_chord_span

# "Original Key: Bb" on the first non-blank line of a chart
_ORIGINAL_KEY_RE = re.compile(r"^\s*original\s+key\s*:\s*([A-G][b#]?)(?![\w#])", re.IGNORECASE)


class UnsupportedKeyError(ValueError):
    pass


def detect_original_key(text: str, supported_keys: Iterable[str] = SUPPORTED_KEYS) -> Optional[str]:
    """Return the key named in an "Original Key:" header, if it is supported."""
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    m = _ORIGINAL_KEY_RE.match(first_line)
    if not m:
        return None
    key = m.group(1)
    key = key[0].upper() + key[1:]
    return key if key in tuple(supported_keys) else None


def choose_initial_key(
    text: str,
    default: str = DEFAULT_KEY,
    supported_keys: Iterable[str] = SUPPORTED_KEYS,
) -> str:
    """Header key if valid, else the default (C), else the first supported key."""
    supported_keys = tuple(supported_keys)
    detected = detect_original_key(text, supported_keys)
    if detected:
        return detected
    if default in supported_keys:
        return default
    return supported_keys[0]


class ChartSession:
    """
    Holds one chart and the key it is currently shown in.

    Args:
        text (str): The chart as written, in Nashville numbers.
        key (str): Starting key; picked from the header or default when None.
        render: Formatting hook applied to every resolved chord name.
    """

    def __init__(
        self,
        text: str,
        key: Optional[str] = None,
        render: Renderer = render_chord_span,
        supported_keys: Iterable[str] = SUPPORTED_KEYS,
        section_labels: Iterable[str] = SECTION_LABELS,
    ):
        self.text = text
        self.render = render
        self.supported_keys = tuple(supported_keys)
        self.section_labels = tuple(section_labels)
        self.current_key = None
        self.display = text
        self.select_key(key if key is not None else choose_initial_key(text, supported_keys=self.supported_keys))

    def select_key(self, key: str) -> str:
        """Switch to key and return the converted chart."""
        if key not in self.supported_keys or not is_supported_key(key):
            raise UnsupportedKeyError(f"Unsupported key: {key}")
        self.current_key = key
        self.display = convert(self.text, key, self.render, self.section_labels)
        return self.display

    def key_picker(self) -> list[tuple[str, bool]]:
        return [(key, key == self.current_key) for key in self.supported_keys]

    def render_key_picker(self) -> str:
        links = []
        for key, selected in self.key_picker():
            cls = f' class="{SELECTED_CSS_CLASS}"' if selected else ""
            links.append(f'<a href="#"{cls}>{html.escape(key)}</a>')
        return "\n".join(links)
