from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .theory import normalize_pc


class Technique(Enum):
    BLOW = "blow"
    DRAW = "draw"
    BLOW_BEND = "blow-bend"
    DRAW_BEND = "draw-bend"
    OVERBLOW = "overblow"
    OVERDRAW = "overdraw"

    @property
    def is_draw(self) -> bool:
        return self in (Technique.DRAW, Technique.DRAW_BEND, Technique.OVERDRAW)

    @property
    def is_bend(self) -> bool:
        return self in (Technique.BLOW_BEND, Technique.DRAW_BEND)

    @property
    def is_overbend(self) -> bool:
        return self in (Technique.OVERBLOW, Technique.OVERDRAW)


class OverbendNotation(Enum):
    APOSTROPHE = "apostrophe"
    DEGREE = "degree"


class ArpeggioKind(Enum):
    TRIADS = "triads"
    SEVENTHS = "sevenths"
    BLUES = "blues"


@dataclass(frozen=True, order=True)
class Pitch:
    """A sounding note: its pitch class (0-11) and its absolute MIDI pitch."""
    pc: int
    midi: int

    @classmethod
    def from_midi(cls, midi: int) -> "Pitch":
        return cls(normalize_pc(midi), midi)

    def transpose(self, semitones: int) -> "Pitch":
        return Pitch(normalize_pc(self.pc + semitones), self.midi + semitones)


@dataclass(frozen=True)
class HoleMapping:
    """Every pitch one hole of a diatonic harmonica can produce."""
    hole: int
    blow: Pitch
    draw: Pitch
    blow_bends: Tuple[Pitch, ...] = ()
    draw_bends: Tuple[Pitch, ...] = ()
    overblow: Optional[Pitch] = None
    overdraw: Optional[Pitch] = None


@dataclass(frozen=True)
class ScaleDefinition:
    id: str
    name: str
    intervals: Tuple[int, ...]


@dataclass(frozen=True)
class ScaleSelection:
    root_pc: int
    scale_id: str


@dataclass(frozen=True)
class HarmonicaKey:
    label: str
    pc: int
    prefer_flats: bool


@dataclass(frozen=True)
class TabCandidate:
    hole: int
    technique: Technique
    pc: int
    midi: int
    bend_semitones: Optional[int] = None


@dataclass(frozen=True)
class TabToken:
    tab: str
    pc: int
    midi: int
    is_root: bool
    hole: int
    technique: Technique


@dataclass(frozen=True)
class TabGroup:
    """All fingerings that sound one absolute pitch. The first option is the default."""
    pc: int
    midi: int
    is_root: bool
    options: Tuple[TabToken, ...]

    @property
    def default(self) -> TabToken:
        return self.options[0]

    @property
    def has_alternates(self) -> bool:
        return len(self.options) > 1


@dataclass(frozen=True)
class ArpeggioSpec:
    id: str
    label: str
    root_pc: int
    pcs: FrozenSet[int]
    ordered_pcs: Tuple[int, ...]
    kind: ArpeggioKind


@dataclass(frozen=True)
class ArpeggioSection:
    id: ArpeggioKind
    title: str
    items: Tuple[ArpeggioSpec, ...] = field(default_factory=tuple)
    note: Optional[str] = None
    empty_note: Optional[str] = None
