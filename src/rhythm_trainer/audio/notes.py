"""Note-name to frequency conversion."""

from __future__ import annotations

import re

NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
DEFAULT_FREQUENCY = 440.0

_NOTE_PATTERN = re.compile(r"^([A-G]#?)(\d)$")


class InvalidNoteName(ValueError):
    """Raised when a note name is not a letter, optional sharp and octave digit."""


def parse_note_name(note: str) -> int:
    """Return the MIDI number of ``note`` (``"A4"`` -> 69)."""
    match = _NOTE_PATTERN.match(note.strip()) if isinstance(note, str) else None
    if match is None:
        raise InvalidNoteName(f"invalid note name {note!r}")
    name, octave = match.groups()
    if name not in NOTE_NAMES:
        raise InvalidNoteName(f"invalid note name {note!r}")
    return NOTE_NAMES.index(name) + 12 * (int(octave) + 1)


def midi_to_frequency(midi: int) -> float:
    return 440.0 * (2 ** ((midi - 69) / 12.0))


def note_to_frequency(note: str) -> float:
    try:
        return midi_to_frequency(parse_note_name(note))
    except InvalidNoteName:
        return DEFAULT_FREQUENCY


def is_valid_note_name(note: str) -> bool:
    try:
        parse_note_name(note)
    except InvalidNoteName:
        return False
    return True


def pitch_choices(low_octave: int = 2, high_octave: int = 5) -> tuple[str, ...]:
    return tuple(f"{name}{octave}" for octave in range(low_octave, high_octave + 1) for name in NOTE_NAMES)
