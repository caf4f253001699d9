from .core.theory import note_to_pc, pc_to_note, normalize_pc, pitch_to_note_name
from .core.types import (Technique, OverbendNotation, ArpeggioKind, Pitch, HoleMapping, ScaleDefinition,
                         ScaleSelection, HarmonicaKey, TabToken, TabGroup, ArpeggioSpec, ArpeggioSection)
from .core.scales import SCALE_DEFINITIONS, get_scale, get_scale_pcs
from .core.keys import HARMONICA_KEYS, find_harmonica_key
from .core.config import TabConfig
from .core.arpeggios import build_arpeggio_sections
from .harmonica.layout import RICHTER_C_LAYOUT, transpose_layout
from .harmonica.mapper import HarmonicaMapper, build_tabs_for_scale, build_tabs_for_pc_set
from .formats.tab import TabTextFormatter
from .formats.mid import MidiGenerator

__all__ = [
    'note_to_pc', 'pc_to_note', 'normalize_pc', 'pitch_to_note_name',
    'Technique', 'OverbendNotation', 'ArpeggioKind', 'Pitch', 'HoleMapping', 'ScaleDefinition',
    'ScaleSelection', 'HarmonicaKey', 'TabToken', 'TabGroup', 'ArpeggioSpec', 'ArpeggioSection',
    'SCALE_DEFINITIONS', 'get_scale', 'get_scale_pcs', 'HARMONICA_KEYS', 'find_harmonica_key',
    'TabConfig', 'build_arpeggio_sections', 'RICHTER_C_LAYOUT', 'transpose_layout',
    'HarmonicaMapper', 'build_tabs_for_scale', 'build_tabs_for_pc_set',
    'TabTextFormatter', 'MidiGenerator',
]
