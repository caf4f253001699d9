from argparse import ArgumentParser

from .core.keys import KEY_ORDER
from .core.scales import SCALE_IDS, scale_root_options
from .core.types import ArpeggioKind, OverbendNotation


def setup_parser() -> ArgumentParser:
    """Configures and returns the argument parser for the command-line interface."""
    parser = ArgumentParser(
        prog='harptabs',
        description="Show how to play a scale, and the chords it implies, on a 10-hole diatonic harmonica."
    )

    instrument_group = parser.add_argument_group("Instrument Options")
    instrument_group.add_argument(
        '-k', '--key',
        type=str,
        default='C',
        choices=KEY_ORDER,
        metavar='KEY',
        help="Key of the harmonica (e.g. C, G, Bb). Use --list-keys to see them all. (default: C)"
    )

    scale_group = parser.add_argument_group("Scale Options")
    scale_group.add_argument(
        '-r', '--root',
        type=str,
        default=None,
        help=f"Root note of the scale: {' '.join(scale_root_options())} "
             f"or {' '.join(scale_root_options(prefer_flats=True))}. Defaults to the harmonica key."
    )
    scale_group.add_argument(
        '-s', '--scale',
        type=str,
        default='major',
        choices=SCALE_IDS,
        help="Scale to tab (default: major)."
    )
    scale_group.add_argument(
        '-a', '--arpeggios',
        nargs='+',
        default=[],
        choices=[kind.value for kind in ArpeggioKind],
        help="Also derive and tab the chords of the scale: triads, sevenths and/or blues."
    )

    display_group = parser.add_argument_group("Display Options")
    display_group.add_argument(
        '--notation',
        type=str,
        default=OverbendNotation.APOSTROPHE.value,
        choices=[notation.value for notation in OverbendNotation],
        help="Mark used for overblows and overdraws (default: apostrophe)."
    )
    spelling = display_group.add_mutually_exclusive_group()
    spelling.add_argument(
        '--flats',
        dest='prefer_flats',
        action='store_true',
        default=None,
        help="Spell note names with flats. Defaults to the convention of the harmonica key."
    )
    spelling.add_argument(
        '--sharps',
        dest='prefer_flats',
        action='store_false',
        help="Spell note names with sharps."
    )
    parser.set_defaults(prefer_flats=None)
    display_group.add_argument(
        '--alternates',
        action='store_true',
        help="Show every fingering of a note (e.g. -2/3), default fingering first."
    )
    display_group.add_argument(
        '--mark-roots',
        action='store_true',
        help="Wrap the tabs of root notes in brackets."
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        '-o', '--output',
        help="Also save the result. A .mid extension writes the scale run as MIDI; anything else writes text."
    )
    output_group.add_argument(
        '-y', '--yes',
        action='store_true',
        help="Automatically overwrite the output file if it already exists."
    )
    output_group.add_argument(
        '--tempo',
        type=float,
        default=120.0,
        help="Tempo of the MIDI run in BPM (default: 120)."
    )
    output_group.add_argument(
        '--note-duration',
        type=float,
        default=1.0,
        help="Length of each note of the MIDI run, in beats (default: 1.0)."
    )
    output_group.add_argument(
        '--descend',
        action='store_true',
        help="Play the MIDI run back down after going up."
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="Enable detailed debug logging messages."
    )

    info_group = parser.add_argument_group('Information')
    info_group.add_argument(
        '--list-scales',
        action='store_true',
        help='List all available scales and exit.'
    )
    info_group.add_argument(
        '--list-keys',
        action='store_true',
        help='List all available harmonica keys and exit.'
    )

    return parser
