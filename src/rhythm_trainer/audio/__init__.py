"""Audio voices, note lookup and the output contract."""

from rhythm_trainer.audio.notes import InvalidNoteName, note_to_frequency, parse_note_name, pitch_choices
from rhythm_trainer.audio.output import AudioOutput, AudioUnavailable, SilentAudioOutput
from rhythm_trainer.audio.voices import SAMPLE_RATE, render_pitch, render_tick, render_tone, write_wav_int16_mono

__all__ = [
    "AudioOutput",
    "AudioUnavailable",
    "InvalidNoteName",
    "SAMPLE_RATE",
    "SilentAudioOutput",
    "note_to_frequency",
    "parse_note_name",
    "pitch_choices",
    "render_pitch",
    "render_tick",
    "render_tone",
    "write_wav_int16_mono",
]
