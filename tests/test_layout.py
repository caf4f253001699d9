import pytest

from harptabs.core.types import Pitch
from harptabs.harmonica.layout import (RICHTER_C_LAYOUT, can_overblow, can_overdraw, is_distinct_bend,
                                       layout_for_key, transpose_layout)


def _pcs(hole):
    """Every pitch-class field of a hole, in a fixed order."""
    fields = [hole.blow.pc, hole.draw.pc]
    fields += [p.pc for p in hole.blow_bends]
    fields += [p.pc for p in hole.draw_bends]
    fields.append(hole.overblow.pc if hole.overblow else None)
    fields.append(hole.overdraw.pc if hole.overdraw else None)
    return fields


def test_reference_layout_shape():
    assert [hole.hole for hole in RICHTER_C_LAYOUT] == list(range(1, 11))
    assert RICHTER_C_LAYOUT[0].blow == Pitch(0, 60)
    assert RICHTER_C_LAYOUT[0].draw == Pitch(2, 62)
    assert RICHTER_C_LAYOUT[9].blow == Pitch(0, 96)


def test_overblows_on_low_holes_and_overdraws_on_high_holes():
    for hole in RICHTER_C_LAYOUT:
        if hole.hole <= 6:
            assert hole.overblow is not None and hole.overdraw is None
        else:
            assert hole.overdraw is not None and hole.overblow is None


def test_pitch_classes_match_absolute_pitches():
    for hole in RICHTER_C_LAYOUT:
        pitches = [hole.blow, hole.draw, *hole.blow_bends, *hole.draw_bends]
        pitches += [p for p in (hole.overblow, hole.overdraw) if p is not None]
        for pitch in pitches:
            assert pitch.pc == pitch.midi % 12


def test_transpose_keeps_register():
    g_layout = transpose_layout(RICHTER_C_LAYOUT, 7)
    assert g_layout[0].blow == Pitch(7, 67)
    assert g_layout[9].blow_bends[0] == Pitch(6, 102)

    down = transpose_layout(RICHTER_C_LAYOUT, -5)
    assert down[0].blow == Pitch(7, 55)


def test_transpose_does_not_mutate_reference():
    before = RICHTER_C_LAYOUT[2]
    transpose_layout(RICHTER_C_LAYOUT, 3)
    assert RICHTER_C_LAYOUT[2] is before
    assert before.blow == Pitch(7, 67)


@pytest.mark.parametrize("a, b", [(0, 0), (3, 4), (7, -2), (-13, 25), (11, 11), (100, -37)])
def test_transposition_composes(a, b):
    twice = transpose_layout(transpose_layout(RICHTER_C_LAYOUT, a), b)
    once = transpose_layout(RICHTER_C_LAYOUT, a + b)
    assert [_pcs(h) for h in twice] == [_pcs(h) for h in once]
    assert twice == once


def test_layout_for_key_is_transposed_reference():
    assert layout_for_key(0) == RICHTER_C_LAYOUT
    assert layout_for_key(2) == transpose_layout(RICHTER_C_LAYOUT, 2)


def test_overbend_eligibility():
    assert [h for h in range(1, 11) if can_overblow(h)] == [1, 4, 5, 6]
    assert [h for h in range(1, 11) if can_overdraw(h)] == [7, 9, 10]


def test_bend_matching_a_plain_note_is_not_distinct():
    hole5 = RICHTER_C_LAYOUT[4]
    assert not is_distinct_bend(hole5, hole5.draw_bends[0])
    hole2 = RICHTER_C_LAYOUT[1]
    assert all(is_distinct_bend(hole2, bent) for bent in hole2.draw_bends)
