import dataclasses

import pytest

from sansfight.console import ToneFlag
from sansfight.score import (
    DEFAULT_DURATION,
    DEFAULT_VOLUME,
    DEFAULT_WAIT,
    MELODY,
    REST,
    Note,
    note_to_freq,
)


@pytest.mark.parametrize("note_id", [-1, -5, -100])
def test_rests_have_no_frequency(note_id):
    assert note_to_freq(note_id) == 0


def test_reference_pitch_is_440():
    # id 58 maps to midi 69, the tuning reference
    assert note_to_freq(58) == 440


def test_octave_below_reference():
    assert note_to_freq(58 - 12) == 220


@pytest.mark.parametrize("note_id", range(0, 90))
def test_frequency_is_non_decreasing(note_id):
    assert note_to_freq(note_id + 1) >= note_to_freq(note_id)


@pytest.mark.parametrize("note_id", range(20, 80))
def test_octave_roughly_doubles(note_id):
    low = note_to_freq(note_id)
    high = note_to_freq(note_id + 12)
    assert abs(high - 2 * low) <= 1


def test_note_defaults_match_track_settings():
    note = Note(51)
    assert (note.duration, note.volume, note.wait) == (
        DEFAULT_DURATION,
        DEFAULT_VOLUME,
        DEFAULT_WAIT,
    )
    assert note.duration == 10
    assert note.volume == 50
    assert note.wait == 7


def test_note_is_immutable():
    note = Note(51)
    with pytest.raises(dataclasses.FrozenInstanceError):
        note.note_id = 52
    assert note.note_id == 51


def test_melody_length_and_final_rest():
    frequencies = [note_to_freq(note.note_id) for note in MELODY]
    assert len(frequencies) == 193
    assert frequencies[-1] == 0


def test_melody_starts_with_riff_and_ends_with_rest():
    assert [n.note_id for n in MELODY[:4]] == [51, 51, 63, REST]
    assert MELODY[-1].note_id == REST
    assert [note_to_freq(n.note_id) for n in MELODY[:4]] == [294, 294, 587, 0]


def test_melody_notes_all_audible_or_rest():
    for note in MELODY:
        assert note.flags == ToneFlag.PULSE2
        if note.note_id == REST:
            assert note_to_freq(note.note_id) == 0
        else:
            assert note_to_freq(note.note_id) > 0


def test_melody_highest_note():
    assert max(n.note_id for n in MELODY) == 75
    assert max(note_to_freq(n.note_id) for n in MELODY) == 1175