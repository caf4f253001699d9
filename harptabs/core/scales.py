from typing import FrozenSet, Optional, Tuple
import logging

from .theory import normalize_pc, pc_to_note
from .types import ScaleDefinition

logger = logging.getLogger(__name__)

# Intervals are semitone offsets above the root, ascending, always starting at 0.
SCALE_DEFINITIONS: Tuple[ScaleDefinition, ...] = (
    ScaleDefinition('major', 'Major', (0, 2, 4, 5, 7, 9, 11)),
    ScaleDefinition('natural_minor', 'Natural Minor', (0, 2, 3, 5, 7, 8, 10)),
    ScaleDefinition('harmonic_minor', 'Harmonic Minor', (0, 2, 3, 5, 7, 8, 11)),
    ScaleDefinition('dorian', 'Dorian', (0, 2, 3, 5, 7, 9, 10)),
    ScaleDefinition('mixolydian', 'Mixolydian', (0, 2, 4, 5, 7, 9, 10)),
    ScaleDefinition('blues_minor', 'Blues Minor', (0, 3, 5, 6, 7, 10)),
)

SCALE_IDS = tuple(scale.id for scale in SCALE_DEFINITIONS)


def get_scale(scale_id: str) -> Optional[ScaleDefinition]:
    for scale in SCALE_DEFINITIONS:
        if scale.id == scale_id:
            return scale
    logger.debug(f"No scale with id '{scale_id}'.")
    return None


def get_scale_pcs(root_pc: int, scale_id: str) -> FrozenSet[int]:
    """Returns the pitch classes of a scale built on root_pc, or an empty set for an unknown id."""
    scale = get_scale(scale_id)
    if scale is None:
        return frozenset()
    return frozenset(normalize_pc(root_pc + interval) for interval in scale.intervals)


def format_scale_label(root_pc: int, scale_id: str, prefer_flats: bool = False) -> str:
    """Returns a display label such as 'Bb Mixolydian'."""
    scale = get_scale(scale_id)
    name = scale.name if scale else 'Scale'
    return f"{pc_to_note(root_pc, prefer_flats)} {name}"


def scale_root_options(prefer_flats: bool = False) -> Tuple[str, ...]:
    return tuple(pc_to_note(pc, prefer_flats) for pc in range(12))
