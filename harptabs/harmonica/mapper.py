from typing import Dict, FrozenSet, Iterable, List, Union
import logging

from ..core.scales import get_scale, get_scale_pcs
from ..core.theory import normalize_pc
from ..core.types import (HoleMapping, OverbendNotation, ScaleSelection, TabCandidate, TabGroup,
                          TabToken, Technique)
from .layout import Layout, can_overblow, can_overdraw, is_distinct_bend, layout_for_key

logger = logging.getLogger(__name__)

Notation = Union[OverbendNotation, str]

# Lower ranks are preferred as the default fingering of a group.
TECHNIQUE_RANK = {
    Technique.DRAW: 0,
    Technique.BLOW: 1,
    Technique.DRAW_BEND: 2,
    Technique.BLOW_BEND: 3,
    Technique.OVERDRAW: 4,
    Technique.OVERBLOW: 5,
}

BEND_MARK = "'"
DEGREE_MARK = "°"


def technique_rank(technique: Technique) -> int:
    return TECHNIQUE_RANK.get(technique, 9)


def format_tab(candidate: TabCandidate, notation: Notation = OverbendNotation.APOSTROPHE) -> str:
    """
    Renders a candidate as a tab string: '-' marks a draw, one apostrophe per
    semitone of bend, and a single mark for an overblow or overdraw.
    """
    prefix = '-' if candidate.technique.is_draw else ''
    if candidate.technique.is_overbend:
        mark = DEGREE_MARK if OverbendNotation(notation) is OverbendNotation.DEGREE else BEND_MARK
        return f"{prefix}{candidate.hole}{mark}"
    if candidate.technique.is_bend:
        return f"{prefix}{candidate.hole}{BEND_MARK * (candidate.bend_semitones or 1)}"
    return f"{prefix}{candidate.hole}"


class HarmonicaMapper:
    """Maps pitch-class sets onto the holes of a Richter-tuned harmonica in one key."""

    def __init__(self, key_pc: int, notation: Notation = OverbendNotation.APOSTROPHE):
        self.key_pc = normalize_pc(key_pc)
        self.notation = OverbendNotation(notation)
        self.layout: Layout = layout_for_key(self.key_pc)

    def _hole_candidates(self, hole: HoleMapping, target: FrozenSet[int]) -> List[TabCandidate]:
        """Lists the techniques on one hole that sound a target pitch class, in fixed order."""
        candidates = []

        for bent in hole.blow_bends:
            if bent.pc not in target:
                continue
            if not is_distinct_bend(hole, bent):
                logger.debug(f"Hole {hole.hole}: blow bend to {bent.midi} duplicates a plain note, skipped.")
                continue
            candidates.append(TabCandidate(hole.hole, Technique.BLOW_BEND, bent.pc, bent.midi,
                                           bend_semitones=normalize_pc(hole.blow.pc - bent.pc)))

        if hole.blow.pc in target:
            candidates.append(TabCandidate(hole.hole, Technique.BLOW, hole.blow.pc, hole.blow.midi))

        for bent in hole.draw_bends:
            if bent.pc not in target:
                continue
            if not is_distinct_bend(hole, bent):
                logger.debug(f"Hole {hole.hole}: draw bend to {bent.midi} duplicates a plain note, skipped.")
                continue
            candidates.append(TabCandidate(hole.hole, Technique.DRAW_BEND, bent.pc, bent.midi,
                                           bend_semitones=normalize_pc(hole.draw.pc - bent.pc)))

        if hole.draw.pc in target:
            candidates.append(TabCandidate(hole.hole, Technique.DRAW, hole.draw.pc, hole.draw.midi))

        if hole.overblow is not None and hole.overblow.pc in target and can_overblow(hole.hole):
            candidates.append(TabCandidate(hole.hole, Technique.OVERBLOW, hole.overblow.pc, hole.overblow.midi))

        if hole.overdraw is not None and hole.overdraw.pc in target and can_overdraw(hole.hole):
            candidates.append(TabCandidate(hole.hole, Technique.OVERDRAW, hole.overdraw.pc, hole.overdraw.midi))

        return candidates

    def map_pitch_classes(self, pcs: Iterable[int], root_pc: int) -> List[TabGroup]:
        """
        Finds every way to play the given pitch classes and groups the results by
        sounding pitch, lowest first. Options inside a group are ranked so the
        first one is the default fingering.
        """
        target = frozenset(normalize_pc(pc) for pc in pcs)
        root = normalize_pc(root_pc)
        if not target:
            return []

        grouped: Dict[int, List[TabToken]] = {}
        for hole in self.layout:
            for candidate in self._hole_candidates(hole, target):
                token = TabToken(
                    tab=format_tab(candidate, self.notation),
                    pc=candidate.pc,
                    midi=candidate.midi,
                    is_root=candidate.pc == root,
                    hole=candidate.hole,
                    technique=candidate.technique,
                )
                grouped.setdefault(token.midi, []).append(token)

        groups = []
        for midi in sorted(grouped):
            options = sorted(grouped[midi], key=lambda t: (technique_rank(t.technique), t.hole, t.tab))
            groups.append(TabGroup(pc=options[0].pc, midi=midi, is_root=options[0].pc == root,
                                   options=tuple(options)))

        logger.debug(f"Mapped {len(target)} pitch classes to {len(groups)} tab groups "
                     f"on a harmonica with key pc {self.key_pc}.")
        return groups


def build_tabs_for_pc_set(pcs: Iterable[int], root_pc: int, harmonica_key_pc: int,
                          notation: Notation = OverbendNotation.APOSTROPHE) -> List[TabGroup]:
    return HarmonicaMapper(harmonica_key_pc, notation).map_pitch_classes(pcs, root_pc)


def build_tabs_for_scale(selection: ScaleSelection, harmonica_key_pc: int,
                         notation: Notation = OverbendNotation.APOSTROPHE) -> List[TabGroup]:
    """Tabs every note of a scale; an unknown scale id yields no groups."""
    if get_scale(selection.scale_id) is None:
        return []
    pcs = get_scale_pcs(selection.root_pc, selection.scale_id)
    return build_tabs_for_pc_set(pcs, selection.root_pc, harmonica_key_pc, notation)
