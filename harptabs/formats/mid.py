from typing import List, Sequence
import logging

from midiutil import MIDIFile

from ..core.theory import pitch_to_note_name
from ..core.types import TabGroup

logger = logging.getLogger(__name__)

# General MIDI program 22: Harmonica
HARMONICA_PROGRAM = 22


class MidiGenerator:
    """
    Generates a MIDIFile object that plays a tab run, one note per group.
    """
    @staticmethod
    def pitches(groups: Sequence[TabGroup], descend: bool = False) -> List[int]:
        """Absolute pitches of the run; a descent does not repeat the top note."""
        ascending = [group.midi for group in groups]
        if descend and len(ascending) > 1:
            return ascending + ascending[-2::-1]
        return ascending

    @staticmethod
    def generate(groups: Sequence[TabGroup], tempo: float = 120.0, note_duration: float = 1.0,
                 descend: bool = False, velocity: int = 100) -> MIDIFile:
        midi_file = MIDIFile(1, removeDuplicates=False, deinterleave=False)
        track = 0
        channel = 0
        midi_file.addTrackName(track, 0, "Harmonica")
        midi_file.addTempo(track, 0, tempo)
        midi_file.addProgramChange(track, channel, 0, HARMONICA_PROGRAM)

        pitches = MidiGenerator.pitches(groups, descend)
        for i, pitch in enumerate(pitches):
            midi_file.addNote(
                track=track,
                channel=channel,
                pitch=pitch,
                time=i * note_duration,   # Start time in beats
                duration=note_duration,
                volume=velocity
            )
        if pitches:
            logger.debug(f"Added {len(pitches)} notes to the MIDI run, "
                         f"{pitch_to_note_name(min(pitches))} to {pitch_to_note_name(max(pitches))}.")
        else:
            logger.debug("No notes to add; the MIDI file holds only its track setup.")
        return midi_file
