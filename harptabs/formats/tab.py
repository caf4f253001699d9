from typing import List, Sequence
import logging

from ..core.config import TabConfig
from ..core.scales import format_scale_label
from ..core.theory import note_to_pc, pc_to_note
from ..core.types import ArpeggioSection, HarmonicaKey, OverbendNotation, TabGroup, TabToken
from ..harmonica.mapper import build_tabs_for_pc_set

logger = logging.getLogger(__name__)

NO_TABS = "No tabs available."


class TabTextFormatter:
    """Renders tab groups and chord sections as plain text."""

    @staticmethod
    def format_token(token: TabToken, mark_roots: bool = False) -> str:
        return f"[{token.tab}]" if mark_roots and token.is_root else token.tab

    @staticmethod
    def format_group(group: TabGroup, show_alternates: bool = False, mark_roots: bool = False) -> str:
        """The default fingering, or every option joined by '/' (e.g. '-2/3')."""
        options = group.options if show_alternates else group.options[:1]
        return "/".join(TabTextFormatter.format_token(token, mark_roots) for token in options)

    @staticmethod
    def format_groups(groups: Sequence[TabGroup], show_alternates: bool = False, mark_roots: bool = False) -> str:
        if not groups:
            return NO_TABS
        return " ".join(TabTextFormatter.format_group(g, show_alternates, mark_roots) for g in groups)

    @staticmethod
    def format_notes(ordered_pcs: Sequence[int], prefer_flats: bool = False) -> str:
        """Chord members, root first, e.g. 'C – E – G'."""
        return " – ".join(pc_to_note(pc, prefer_flats) for pc in ordered_pcs)

    @staticmethod
    def format_section(section: ArpeggioSection, harmonica_key_pc: int, notation: OverbendNotation,
                       prefer_flats: bool = False, show_alternates: bool = False,
                       mark_roots: bool = False) -> str:
        lines = [section.title]
        if section.note:
            lines.append(f"  ({section.note})")
        if not section.items:
            lines.append(f"  {section.empty_note or 'None'}")
            return "\n".join(lines)

        for item in section.items:
            groups = build_tabs_for_pc_set(item.pcs, item.root_pc, harmonica_key_pc, notation)
            notes = TabTextFormatter.format_notes(item.ordered_pcs, prefer_flats)
            tabs = TabTextFormatter.format_groups(groups, show_alternates, mark_roots)
            lines.append(f"  {item.label} · {notes}: {tabs}")
        return "\n".join(lines)

    @staticmethod
    def generate(config: TabConfig, key: HarmonicaKey, groups: Sequence[TabGroup],
                 sections: Sequence[ArpeggioSection]) -> str:
        """Builds the full text report for a scale on one harmonica."""
        prefer_flats = key.prefer_flats if config.prefer_flats is None else config.prefer_flats
        notation = OverbendNotation(config.notation)

        root_pc = note_to_pc(config.scale_root)
        lines: List[str] = [
            f"{format_scale_label(root_pc, config.scale_id, prefer_flats)} "
            f"on a {pc_to_note(key.pc, prefer_flats)} harmonica",
            TabTextFormatter.format_groups(groups, config.show_alternates, config.mark_roots),
        ]
        for section in sections:
            lines.append("")
            lines.append(TabTextFormatter.format_section(section, key.pc, notation, prefer_flats,
                                                         config.show_alternates, config.mark_roots))
        logger.debug(f"Formatted {len(groups)} tab groups and {len(sections)} chord sections.")
        return "\n".join(lines) + "\n"
