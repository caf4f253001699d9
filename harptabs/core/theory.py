SHARP_NOTES = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')
FLAT_NOTES = ('C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B')

NOTE_TO_PC = {
    'C': 0,
    'C#': 1, 'Db': 1,
    'D': 2,
    'D#': 3, 'Eb': 3,
    'E': 4,
    'F': 5,
    'F#': 6, 'Gb': 6,
    'G': 7,
    'G#': 8, 'Ab': 8,
    'A': 9,
    'A#': 10, 'Bb': 10,
    'B': 11,
}


def normalize_pc(n: int) -> int:
    """Folds any integer, negative ones included, into the pitch-class range 0-11."""
    return ((n % 12) + 12) % 12


def is_note_name(name: str) -> bool:
    return name in NOTE_TO_PC


def note_to_pc(name: str) -> int:
    """
    Converts a note name (e.g., "C", "F#", "Bb") to its pitch class.
    Sharp and flat spellings of the same pitch resolve to the same value.
    """
    return NOTE_TO_PC[name]


def pc_to_note(pc: int, prefer_flats: bool = False) -> str:
    """
    Converts a pitch class to a note name, spelled with flats or sharps.
    """
    index = normalize_pc(pc)
    return FLAT_NOTES[index] if prefer_flats else SHARP_NOTES[index]


def pitch_to_note_name(pitch: int, prefer_flats: bool = False) -> str:
    """
    Converts an absolute (MIDI) pitch number to a note name with octave (e.g., 60 -> C4).
    """
    octave = (pitch // 12) - 1
    return f"{pc_to_note(pitch, prefer_flats)}{octave}"
