import re
from typing import Iterable, Optional

from .config import STAFF_NAMES
from .models import Entities

# Self-identification phrasings, tried in order. Phrase words are
# case-insensitive; the captured name must be capitalised.
NAME_PATTERNS = [
    re.compile(r"(?i:\bmy name is)\s+([A-Z][a-z]+)"),
    re.compile(r"(?i:\bthis is)\s+([A-Z][a-z]+)(?:\s+[A-Z][a-z]+)?,?\s+(?i:calling|from|with)\b"),
    re.compile(r"(?i:\bit's)\s+([A-Z][a-z]+)\s+(?i:from|with)\b"),
    # "Dustin here" only at the start of a sentence or after a greeting
    re.compile(r"(?:^|[.!?]\s+|(?i:\bhi|\bhey|\bhello),?\s+)([A-Z][a-z]+)\s+here\b"),
]

NAME_STOPWORDS = {
    "This", "That", "Hello", "Hi", "Hey", "Good", "Yes", "Yeah", "Yep", "Okay", "Ok",
    "Just", "Calling", "Thank", "Thanks", "Sorry", "Well", "So", "And", "Nobody",
    "Someone", "Somebody", "Everyone", "Mister", "Miss", "Sir", "Ma", "Am", "Here",
    "Over", "Right", "Come", "Out", "Up", "Back", "Still", "Not", "Nothing", "Anyone",
}

# canonical suffix -> spoken/abbreviated synonyms
STREET_SUFFIXES = {
    "Street": ("street", "st"),
    "Avenue": ("avenue", "ave", "av"),
    "Road": ("road", "rd"),
    "Drive": ("drive", "dr"),
    "Way": ("way",),
    "Court": ("court", "ct"),
    "Lane": ("lane", "ln"),
    "Boulevard": ("boulevard", "blvd"),
    "Circle": ("circle", "cir"),
    "Place": ("place", "pl"),
    "Terrace": ("terrace", "ter"),
    "Parkway": ("parkway", "pkwy"),
    "Highway": ("highway", "hwy"),
}

_SUFFIX_LOOKUP = {syn: canon for canon, syns in STREET_SUFFIXES.items() for syn in syns}
_SUFFIX_ALT = "|".join(sorted(_SUFFIX_LOOKUP, key=len, reverse=True))

ADDRESS_RE = re.compile(
    r"\b(\d{1,6})\s+((?:[A-Z][a-z]+\s+){1,3}?)(?i:(" + _SUFFIX_ALT + r"))\b\.?"
)

AMOUNT_RE = re.compile(r"\$(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d{2})?(?!\d|,\d)")

def _text(value) -> str:
    return value if isinstance(value, str) else ""

def extract_name(text: str, exclude: Iterable[str] = ()) -> Optional[str]:
    text = _text(text)
    stop = NAME_STOPWORDS | set(STAFF_NAMES) | set(exclude)
    for pattern in NAME_PATTERNS:
        for m in pattern.finditer(text):
            token = m.group(1)
            if token not in stop:
                return token
    return None

def extract_address(text: str) -> Optional[str]:
    m = ADDRESS_RE.search(_text(text))
    if not m:
        return None
    number, words, suffix = m.groups()
    return f"{number} {words.strip()} {_SUFFIX_LOOKUP[suffix.lower()]}"

def extract_amount(text: str) -> Optional[str]:
    m = AMOUNT_RE.search(_text(text))
    return m.group(0) if m else None

def extract_entities(text: str) -> Entities:
    return Entities(name=extract_name(text), address=extract_address(text), amount=extract_amount(text))
