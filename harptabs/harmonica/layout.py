from typing import Optional, Sequence, Tuple

from ..core.types import HoleMapping, Pitch

Layout = Tuple[HoleMapping, ...]

OVERBLOW_HOLES = range(1, 7)
OVERDRAW_HOLES = range(7, 11)
# Overbends on these holes are not offered even when the table defines one.
EXCLUDED_OVERBEND_HOLES = frozenset({2, 3, 8})


def _hole(hole: int, blow: int, draw: int,
          blow_bends: Sequence[int] = (), draw_bends: Sequence[int] = (),
          overblow: Optional[int] = None, overdraw: Optional[int] = None) -> HoleMapping:
    """Builds a hole from MIDI pitches; pitch classes are derived from them."""
    return HoleMapping(
        hole=hole,
        blow=Pitch.from_midi(blow),
        draw=Pitch.from_midi(draw),
        blow_bends=tuple(Pitch.from_midi(p) for p in blow_bends),
        draw_bends=tuple(Pitch.from_midi(p) for p in draw_bends),
        overblow=Pitch.from_midi(overblow) if overblow is not None else None,
        overdraw=Pitch.from_midi(overdraw) if overdraw is not None else None,
    )


# Standard 10-hole Richter layout for a harmonica in C. Bends are listed shallowest first.
RICHTER_C_LAYOUT: Layout = (
    _hole(1, blow=60, draw=62, draw_bends=(61,), overblow=63),
    _hole(2, blow=64, draw=67, draw_bends=(66, 65), overblow=68),
    _hole(3, blow=67, draw=71, draw_bends=(70, 69, 68), overblow=72),
    _hole(4, blow=72, draw=74, draw_bends=(73,), overblow=75),
    _hole(5, blow=76, draw=77, draw_bends=(76,), overblow=78),
    _hole(6, blow=79, draw=81, draw_bends=(80,), overblow=82),
    _hole(7, blow=84, draw=83, blow_bends=(83,), overdraw=85),
    _hole(8, blow=88, draw=86, blow_bends=(87, 86), overdraw=89),
    _hole(9, blow=91, draw=89, blow_bends=(90, 89), overdraw=92),
    _hole(10, blow=96, draw=93, blow_bends=(95, 94, 93), overdraw=97),
)


def _shift(pitch: Optional[Pitch], semitones: int) -> Optional[Pitch]:
    return pitch.transpose(semitones) if pitch is not None else None


def transpose_layout(layout: Sequence[HoleMapping], semitones: int) -> Layout:
    """
    Returns a copy of the layout moved by a number of semitones. Pitch classes
    wrap mod 12; absolute pitches keep their register.
    """
    return tuple(
        HoleMapping(
            hole=hole.hole,
            blow=hole.blow.transpose(semitones),
            draw=hole.draw.transpose(semitones),
            blow_bends=tuple(p.transpose(semitones) for p in hole.blow_bends),
            draw_bends=tuple(p.transpose(semitones) for p in hole.draw_bends),
            overblow=_shift(hole.overblow, semitones),
            overdraw=_shift(hole.overdraw, semitones),
        )
        for hole in layout
    )


def layout_for_key(key_pc: int) -> Layout:
    return transpose_layout(RICHTER_C_LAYOUT, key_pc)


def can_overblow(hole: int) -> bool:
    return hole in OVERBLOW_HOLES and hole not in EXCLUDED_OVERBEND_HOLES


def can_overdraw(hole: int) -> bool:
    return hole in OVERDRAW_HOLES and hole not in EXCLUDED_OVERBEND_HOLES


def is_distinct_bend(hole: HoleMapping, bent: Pitch) -> bool:
    """A bend landing exactly on the hole's unbent blow or draw pitch adds nothing playable."""
    return bent.midi != hole.blow.midi and bent.midi != hole.draw.midi
