from typing import Iterable, List, Sequence, Tuple, Union
import logging

from .scales import get_scale
from .theory import normalize_pc
from .types import ArpeggioKind, ArpeggioSection, ArpeggioSpec

logger = logging.getLogger(__name__)

ROMAN_NUMERALS = ('I', 'II', 'III', 'IV', 'V', 'VI', 'VII')

# Quality keyed by the chord's intervals above its root.
TRIAD_QUALITIES = {
    (4, 7): 'maj',
    (3, 7): 'min',
    (3, 6): 'dim',
    (4, 8): 'aug',
}

SEVENTH_QUALITIES = {
    (4, 7, 10): '7',
    (4, 7, 11): 'maj7',
    (3, 7, 10): 'min7',
    (3, 6, 10): 'm7b5',
    (3, 6, 9): 'dim7',
}

# (label, offset of the chord root above the scale root)
BLUES_ROOTS = (('I7', 0), ('IV7', 5), ('V7', 7))
DOMINANT_SEVENTH = (0, 4, 7, 10)

SECTION_ORDER = (ArpeggioKind.TRIADS, ArpeggioKind.SEVENTHS, ArpeggioKind.BLUES)


def roman_numeral(degree: int) -> str:
    """1-based degree to a Roman numeral; degrees past VII fall back to the number."""
    if 1 <= degree <= len(ROMAN_NUMERALS):
        return ROMAN_NUMERALS[degree - 1]
    return str(degree)


def intervals_to_pcs(root_pc: int, intervals: Iterable[int]) -> Tuple[int, ...]:
    return tuple(normalize_pc(root_pc + interval) for interval in intervals)


def _relative_intervals(ordered_pcs: Sequence[int]) -> Tuple[int, ...]:
    root = ordered_pcs[0]
    return tuple(normalize_pc(pc - root) for pc in ordered_pcs[1:])


def triad_quality(ordered_pcs: Sequence[int]) -> str:
    return TRIAD_QUALITIES.get(_relative_intervals(ordered_pcs), 'other')


def seventh_quality(ordered_pcs: Sequence[int]) -> str:
    return SEVENTH_QUALITIES.get(_relative_intervals(ordered_pcs), 'other7')


def _stack_thirds(root_pc: int, intervals: Sequence[int], index: int, size: int) -> Tuple[int, ...]:
    # Every other scale degree, wrapping around short scales.
    count = len(intervals)
    return intervals_to_pcs(root_pc, (intervals[(index + 2 * n) % count] for n in range(size)))


def build_diatonic_triads(root_pc: int, intervals: Sequence[int]) -> List[ArpeggioSpec]:
    triads = []
    for index in range(len(intervals)):
        ordered_pcs = _stack_thirds(root_pc, intervals, index, 3)
        triads.append(ArpeggioSpec(
            id=f"triad:{index}",
            label=f"{roman_numeral(index + 1)} {triad_quality(ordered_pcs)}",
            root_pc=ordered_pcs[0],
            pcs=frozenset(ordered_pcs),
            ordered_pcs=ordered_pcs,
            kind=ArpeggioKind.TRIADS,
        ))
    return triads


def build_diatonic_sevenths(root_pc: int, intervals: Sequence[int]) -> List[ArpeggioSpec]:
    """Seventh chords on each degree; scales with fewer than seven notes have none."""
    if len(intervals) < 7:
        return []
    sevenths = []
    for index in range(len(intervals)):
        ordered_pcs = _stack_thirds(root_pc, intervals, index, 4)
        sevenths.append(ArpeggioSpec(
            id=f"seventh:{index}",
            label=f"{roman_numeral(index + 1)} {seventh_quality(ordered_pcs)}",
            root_pc=ordered_pcs[0],
            pcs=frozenset(ordered_pcs),
            ordered_pcs=ordered_pcs,
            kind=ArpeggioKind.SEVENTHS,
        ))
    return sevenths


def build_common_blues_chords(root_pc: int) -> List[ArpeggioSpec]:
    chords = []
    for label, offset in BLUES_ROOTS:
        chord_root = normalize_pc(root_pc + offset)
        ordered_pcs = intervals_to_pcs(chord_root, DOMINANT_SEVENTH)
        chords.append(ArpeggioSpec(
            id=f"blues:{label}",
            label=label,
            root_pc=chord_root,
            pcs=frozenset(ordered_pcs),
            ordered_pcs=ordered_pcs,
            kind=ArpeggioKind.BLUES,
        ))
    return chords


def build_arpeggio_sections(root_pc: int, scale_id: str,
                            requested_kinds: Iterable[Union[ArpeggioKind, str]]) -> List[ArpeggioSection]:
    """
    Derives the chord sections requested for a scale.

    Sections always come back in the order triads, sevenths, blues, whatever
    the order of the request. An unknown scale id yields no sections.
    """
    scale = get_scale(scale_id)
    if scale is None:
        return []

    requested = {ArpeggioKind(kind) for kind in requested_kinds}
    sections = []
    for kind in SECTION_ORDER:
        if kind not in requested:
            continue
        if kind is ArpeggioKind.TRIADS:
            sections.append(ArpeggioSection(
                id=kind,
                title='Triads',
                items=tuple(build_diatonic_triads(root_pc, scale.intervals)),
            ))
        elif kind is ArpeggioKind.SEVENTHS:
            short_scale = len(scale.intervals) < 7
            if short_scale:
                logger.debug(f"Scale '{scale_id}' has {len(scale.intervals)} notes; no seventh chords.")
            sections.append(ArpeggioSection(
                id=kind,
                title='7th Chords',
                items=tuple(build_diatonic_sevenths(root_pc, scale.intervals)),
                empty_note='Needs a 7-note scale.' if short_scale else 'None',
            ))
        else:
            sections.append(ArpeggioSection(
                id=kind,
                title='Common Blues Chords',
                items=tuple(build_common_blues_chords(root_pc)),
                note='May include notes outside the selected scale.',
            ))
    return sections
