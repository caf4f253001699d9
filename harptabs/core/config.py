from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TabConfig:
    """Holds every tunable of a tab run, as populated by the command line."""
    # Instrument and scale
    harmonica_key: str = "C"
    scale_root: str = "C"
    scale_id: str = "major"

    # Rendering
    notation: str = "apostrophe"
    prefer_flats: Optional[bool] = None  # None follows the harmonica key
    show_alternates: bool = False
    mark_roots: bool = False

    # Chord sections to derive: any of "triads", "sevenths", "blues"
    arpeggios: List[str] = field(default_factory=list)

    # MIDI export
    tempo: float = 120.0
    note_duration: float = 1.0
    descend: bool = False
