from pathlib import Path
from typing import Union
import logging

from midiutil import MIDIFile

logger = logging.getLogger(__name__)


class OutputExistsError(FileExistsError):
    """Raised when an output file exists and overwriting was not allowed."""


def _prepare_path(output_path: Union[str, Path], overwrite: bool) -> Path:
    path = Path(output_path)
    if path.exists() and not overwrite:
        raise OutputExistsError(f"Output file '{path}' already exists.")
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def save_text_file(content: str, output_path: Union[str, Path], overwrite: bool = False) -> Path:
    """
    Saves rendered tab text to a file.

    Raises:
        OutputExistsError: If the file exists and overwrite is False.
        OSError: If the file cannot be written.
    """
    path = _prepare_path(output_path, overwrite)
    try:
        path.write_text(content, encoding='utf-8')
    except OSError:
        logger.error(f"Error: Could not write to file at {path}")
        raise
    logger.info(f"Successfully saved to {path}")
    return path


def save_midi_file(midi_object: MIDIFile, output_path: Union[str, Path], overwrite: bool = False) -> Path:
    """
    Saves a MIDIFile object to a binary .mid file.

    Raises:
        OutputExistsError: If the file exists and overwrite is False.
        OSError: If the file cannot be written.
    """
    path = _prepare_path(output_path, overwrite)
    try:
        with open(path, 'wb') as output_file:
            midi_object.writeFile(output_file)
    except OSError:
        logger.error(f"Error: Could not write MIDI file at {path}")
        raise
    logger.info(f"Successfully saved MIDI file to {path}")
    return path
