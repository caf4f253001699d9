from typing import Optional, Tuple

from .theory import note_to_pc
from .types import HarmonicaKey

FLAT_KEYS = frozenset({'F', 'Bb', 'Eb', 'Ab', 'Db', 'Gb'})

# Display order: sharp keys around the circle of fifths, then the flat keys.
KEY_ORDER = ('C', 'G', 'D', 'A', 'E', 'B', 'F#', 'C#', 'F', 'Bb', 'Eb', 'Ab', 'Db', 'Gb')

HARMONICA_KEYS: Tuple[HarmonicaKey, ...] = tuple(
    HarmonicaKey(label=label, pc=note_to_pc(label), prefer_flats=label in FLAT_KEYS)
    for label in KEY_ORDER
)


def find_harmonica_key(label: str) -> Optional[HarmonicaKey]:
    for key in HARMONICA_KEYS:
        if key.label == label:
            return key
    return None
