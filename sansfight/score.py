"""Notes, pitch conversion and the lead melody of the battle theme."""

from __future__ import annotations

import math
from dataclasses import dataclass

from sansfight.console import ToneFlag

REST = -1
DEFAULT_DURATION = 10
DEFAULT_VOLUME = 50
DEFAULT_WAIT = 7

_NOTE_OFFSET = 11
_A4_MIDI = 69
_A4_FREQ = 440.0


@dataclass(frozen=True)
class Note:
    """One step of a track; a negative id is a rest that only waits."""

    note_id: int
    duration: int = DEFAULT_DURATION
    volume: int = DEFAULT_VOLUME
    flags: int = ToneFlag.PULSE2
    wait: int = DEFAULT_WAIT


def note_to_freq(note_id: int) -> int:
    """Frequency in hertz of a note id, or 0 for a rest."""
    if note_id < 0:
        return 0
    midi = note_id + _NOTE_OFFSET
    freq = _A4_FREQ * 2.0 ** ((midi - _A4_MIDI) / 12.0)
    return math.floor(freq + 0.5)


_R = REST

_RIFF_TAIL = (63, _R, 58, _R, _R, 57, _R, 56, _R, 54, _R, 51, 54, 56)

_MELODY_IDS = (
    (51, 51) + _RIFF_TAIL
    + (49, 49) + _RIFF_TAIL
    + (48, 48) + _RIFF_TAIL
    + (47, 47) + _RIFF_TAIL
    + (54, _R, 54, 54, _R, 54, _R, 54, _R, 51, _R, 51, _R, _R, _R, _R)
    + (54, _R, 54, 54, _R, 56, _R, 57, _R, 56, 54, 51, 54, 56, _R, _R)
    + (54, _R, 54, 54, _R, 56, _R, 57, _R, 58, _R, 61, _R, 58, _R, _R)
    + (63, _R, 63, _R, 63, 58, 63, 61, _R, _R, _R, _R, 75, _R, _R, _R)
    + (70, _R, 70, 70, _R, 70, _R, 70, _R, 68, _R, 68, _R, _R, _R, _R)
    + (70, _R, 70, _R, 70, 70, _R, 68, _R, 70, _R, 75, _R, 70, 68, _R)
    + (75, _R, 70, _R, 68, _R, 66, _R, 73, _R, 68, _R, 66, _R, 65, _R)
    + (59, _R, 63, 65, _R, 66, _R, 75, _R, _R, _R, _R, _R, _R, _R, _R)
    + (_R,)
)

MELODY: tuple[Note, ...] = tuple(
    Note(note_id, flags=ToneFlag.PULSE2) for note_id in _MELODY_IDS
)