from pathlib import Path
from typing import List, Optional
import logging
import sys

from .arguments import setup_parser
from .core.arpeggios import build_arpeggio_sections
from .core.config import TabConfig
from .core.keys import HARMONICA_KEYS, find_harmonica_key
from .core.scales import SCALE_DEFINITIONS
from .core.theory import is_note_name, note_to_pc
from .core.types import ScaleSelection
from .formats.mid import MidiGenerator
from .formats.tab import TabTextFormatter
from .harmonica.mapper import build_tabs_for_scale
from .utils.io import OutputExistsError, save_midi_file, save_text_file
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)


def config_from_args(args) -> TabConfig:
    return TabConfig(
        harmonica_key=args.key,
        scale_root=args.root or args.key,
        scale_id=args.scale,
        notation=args.notation,
        prefer_flats=args.prefer_flats,
        show_alternates=args.alternates,
        mark_roots=args.mark_roots,
        arpeggios=list(args.arpeggios),
        tempo=args.tempo,
        note_duration=args.note_duration,
        descend=args.descend,
    )


def list_scales() -> str:
    return "\n".join(
        f"{scale.id:<16} {scale.name:<16} {' '.join(str(i) for i in scale.intervals)}"
        for scale in SCALE_DEFINITIONS
    )


def list_keys() -> str:
    return "\n".join(
        f"{key.label:<3} (pitch class {key.pc}, {'flats' if key.prefer_flats else 'sharps'})"
        for key in HARMONICA_KEYS
    )


def run(config: TabConfig, output: Optional[str] = None, overwrite: bool = False) -> str:
    """Tabs the configured scale (and any requested chords) and optionally saves the result."""
    key = find_harmonica_key(config.harmonica_key)
    if key is None:
        raise ValueError(f"Unknown harmonica key '{config.harmonica_key}'.")
    selection = ScaleSelection(root_pc=note_to_pc(config.scale_root), scale_id=config.scale_id)

    logger.info(f"--- Tabbing {config.scale_root} {config.scale_id} on a "
                f"{key.label} harmonica ({config.notation} notation) ---")
    groups = build_tabs_for_scale(selection, key.pc, config.notation)
    sections = build_arpeggio_sections(selection.root_pc, selection.scale_id, config.arpeggios)
    text = TabTextFormatter.generate(config, key, groups, sections)

    if output:
        output_path = Path(output)
        if output_path.suffix.lower() == '.mid':
            midi_file = MidiGenerator.generate(groups, config.tempo, config.note_duration, config.descend)
            save_midi_file(midi_file, output_path, overwrite=overwrite)
        else:
            save_text_file(text, output_path, overwrite=overwrite)
    return text


def main(argv: Optional[List[str]] = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logger('DEBUG' if args.debug else 'INFO')

    if args.list_scales:
        print(list_scales())
        return 0
    if args.list_keys:
        print(list_keys())
        return 0

    if args.root is not None and not is_note_name(args.root):
        parser.error(f"Unknown root note '{args.root}'. Use a name such as C, F#, or Bb.")

    config = config_from_args(args)
    try:
        print(run(config, output=args.output, overwrite=args.yes), end='')
    except OutputExistsError as e:
        logger.error(f"Error: {e}")
        logger.error("Use the -y or --yes flag to allow overwriting.")
        return 1
    except OSError as e:
        logger.error(f"An error occurred while saving: {e}", exc_info=args.debug)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
