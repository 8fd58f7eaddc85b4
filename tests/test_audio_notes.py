import pytest

from rhythm_trainer.audio.notes import InvalidNoteName, note_to_frequency, parse_note_name, pitch_choices


def test_note_to_frequency_reference_pitches() -> None:
    assert note_to_frequency("A4") == pytest.approx(440.0)
    assert note_to_frequency("A2") == pytest.approx(110.0)
    assert note_to_frequency("C4") == pytest.approx(261.6256, rel=1e-4)
    assert note_to_frequency("F#3") == pytest.approx(184.9972, rel=1e-4)


def test_invalid_note_names_fall_back_to_a440() -> None:
    for name in ("Z9", "", "A", "Bb4", "a4", "C10", "E#4"):
        assert note_to_frequency(name) == 440.0


def test_parse_note_name_is_strict() -> None:
    assert parse_note_name("A4") == 69
    assert parse_note_name("C0") == 12
    with pytest.raises(InvalidNoteName):
        parse_note_name("H2")
    with pytest.raises(InvalidNoteName):
        parse_note_name("E#4")


def test_pitch_choices_cover_requested_octaves() -> None:
    choices = pitch_choices(2, 3)
    assert len(choices) == 24
    assert choices[0] == "C2"
    assert "A2" in choices
    assert choices[-1] == "B3"
