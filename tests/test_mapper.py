import pytest

from harptabs.core.keys import HARMONICA_KEYS
from harptabs.core.scales import SCALE_IDS, get_scale_pcs
from harptabs.core.theory import normalize_pc
from harptabs.core.types import OverbendNotation, ScaleSelection, TabCandidate, Technique
from harptabs.harmonica.mapper import (HarmonicaMapper, build_tabs_for_pc_set, build_tabs_for_scale, format_tab,
                                       technique_rank)

C_MAJOR_EXPECTED = "1 -1 2 -2'' -2 -3'' -3 4 -4 5 -5 6 -6 -7 7 -8 8 -9 9 -10 10' 10"

C_MAJOR = ScaleSelection(root_pc=0, scale_id='major')


def _default_line(groups):
    return " ".join(group.options[0].tab for group in groups)


def test_c_major_on_c_harmonica():
    groups = build_tabs_for_scale(C_MAJOR, 0, 'apostrophe')
    assert _default_line(groups) == C_MAJOR_EXPECTED


def test_only_g_has_an_alternate_in_c_major():
    groups = build_tabs_for_scale(C_MAJOR, 0, OverbendNotation.APOSTROPHE)
    with_alt = [group for group in groups if len(group.options) > 1]
    assert len(with_alt) == 1
    assert sorted(option.tab for option in with_alt[0].options) == ['-2', '3']
    assert with_alt[0].options[0].tab == '-2'
    assert with_alt[0].midi == 67
    assert with_alt[0].has_alternates
    assert with_alt[0].default.technique is Technique.DRAW


def test_root_tokens_are_tagged():
    groups = build_tabs_for_scale(C_MAJOR, 0, 'apostrophe')
    roots = [group.options[0].tab for group in groups if group.is_root]
    assert roots == ['1', '4', '7', '10']
    for group in groups:
        for option in group.options:
            assert option.is_root == (option.pc == 0)


def test_unknown_scale_yields_no_groups():
    assert build_tabs_for_scale(ScaleSelection(0, 'lydian_dominant'), 0, 'apostrophe') == []


def test_empty_pitch_class_set_yields_no_groups():
    assert build_tabs_for_pc_set([], 0, 0, 'apostrophe') == []


@pytest.mark.parametrize("scale_id", SCALE_IDS)
@pytest.mark.parametrize("key", HARMONICA_KEYS, ids=lambda k: k.label)
def test_scale_output_properties(scale_id, key):
    for root_pc in (0, 5, 9):
        selection = ScaleSelection(root_pc, scale_id)
        groups = build_tabs_for_scale(selection, key.pc, 'apostrophe')
        scale_pcs = get_scale_pcs(root_pc, scale_id)

        midis = [group.midi for group in groups]
        assert midis == sorted(set(midis))
        for group in groups:
            assert group.options
            for option in group.options:
                assert normalize_pc(option.pc) in scale_pcs
                assert option.midi == group.midi

        assert build_tabs_for_scale(selection, key.pc, 'apostrophe') == groups


def test_negative_and_wrapped_inputs_are_normalized():
    assert build_tabs_for_pc_set([12, 14, -8], 12, 12, 'apostrophe') == \
        build_tabs_for_pc_set([0, 2, 4], 0, 0, 'apostrophe')


def test_bend_depth_marks():
    # A draw-bends a whole step on hole 3 of a C harmonica.
    groups = build_tabs_for_pc_set([9], 9, 0, 'apostrophe')
    assert [g.options[0].tab for g in groups] == ['-3\'\'', '-6', '-10']
    flat_third = build_tabs_for_pc_set([8], 8, 0, 'apostrophe')
    assert "-3'''" in [g.options[0].tab for g in flat_third]


def test_overblow_and_overdraw_use_single_mark():
    # Eb is an overblow on holes 1 and 4.
    groups = build_tabs_for_pc_set([3], 3, 0, 'apostrophe')
    tabs = [option.tab for group in groups for option in group.options]
    assert "1'" in tabs and "4'" in tabs

    degree = build_tabs_for_pc_set([3], 3, 0, 'degree')
    tabs = [option.tab for group in degree for option in group.options]
    assert "1°" in tabs and "4°" in tabs
    # Hole 8 reaches it with a half-step blow bend.
    assert [g.default.tab for g in groups] == ["1'", "4'", "8'"]


def test_overdraw_rendering():
    # C# sounds as an overdraw on hole 7 and hole 10.
    groups = build_tabs_for_pc_set([1], 1, 0, 'degree')
    tabs = [option.tab for group in groups for option in group.options]
    assert "-7°" in tabs
    assert "-10°" in tabs


def test_ineligible_holes_never_overbend():
    mapper = HarmonicaMapper(0, 'apostrophe')
    groups = mapper.map_pitch_classes(range(12), 0)
    for group in groups:
        for option in group.options:
            if option.technique is Technique.OVERBLOW:
                assert option.hole in (1, 4, 5, 6)
            if option.technique is Technique.OVERDRAW:
                assert option.hole in (7, 9, 10)


def test_bends_equal_to_plain_notes_are_suppressed():
    groups = build_tabs_for_pc_set(range(12), 0, 0, 'apostrophe')
    tabs = {option.tab for group in groups for option in group.options}
    # Hole 5 draw bend and hole 7 blow bend land on the plain notes of their holes.
    assert "-5'" not in tabs
    assert "7'" not in tabs
    assert "10'''" not in tabs


def test_format_tab():
    assert format_tab(TabCandidate(4, Technique.BLOW, 0, 72)) == '4'
    assert format_tab(TabCandidate(4, Technique.DRAW, 2, 74)) == '-4'
    assert format_tab(TabCandidate(3, Technique.DRAW_BEND, 8, 68, bend_semitones=3)) == "-3'''"
    assert format_tab(TabCandidate(10, Technique.BLOW_BEND, 11, 95, bend_semitones=1)) == "10'"
    assert format_tab(TabCandidate(6, Technique.OVERBLOW, 10, 82), OverbendNotation.DEGREE) == '6°'
    assert format_tab(TabCandidate(9, Technique.OVERDRAW, 8, 92), 'apostrophe') == "-9'"


def test_technique_rank_order():
    ranked = sorted(Technique, key=technique_rank)
    assert ranked == [Technique.DRAW, Technique.BLOW, Technique.DRAW_BEND, Technique.BLOW_BEND,
                      Technique.OVERDRAW, Technique.OVERBLOW]


def test_transposed_harmonica_shifts_every_group():
    c_groups = build_tabs_for_scale(C_MAJOR, 0, 'apostrophe')
    g_groups = build_tabs_for_scale(ScaleSelection(7, 'major'), 7, 'apostrophe')
    assert _default_line(g_groups) == C_MAJOR_EXPECTED
    assert [g.midi for g in g_groups] == [g.midi + 7 for g in c_groups]
