"""Two-channel sequencer that plays the battle theme one frame at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from sansfight.console import Console
from sansfight.harmony import harmony_track
from sansfight.score import MELODY, Note, note_to_freq


@dataclass
class _Channel:
    """Playback position within one track."""

    track: Sequence[Note]
    index: int = 0
    timer: int = 0

    @property
    def finished(self) -> bool:
        return self.index >= len(self.track)

    def step(self, console: Console) -> None:
        """Advance one frame, starting the next note when the wait has run out."""
        if self.finished:
            return
        if self.timer:
            self.timer -= 1
            return
        note = self.track[self.index]
        if note.note_id >= 0:
            console.tone(note_to_freq(note.note_id), note.duration, note.volume, note.flags)
        self.timer = note.wait
        self.index += 1

    def rewind(self) -> None:
        self.index = 0
        self.timer = 0


@dataclass
class MusicPlayer:
    """Plays a melody and a harmony side by side and loops once both have ended."""

    melody: Sequence[Note] = MELODY
    harmony: Sequence[Note] = field(default_factory=harmony_track)

    def __post_init__(self) -> None:
        self._channels = (_Channel(self.melody), _Channel(self.harmony))

    def update(self, console: Console) -> None:
        """Advance both channels by one frame, sending any new tones to `console`."""
        for channel in self._channels:
            channel.step(console)
        if all(channel.finished for channel in self._channels):
            self.reset()

    def reset(self) -> None:
        """Return both channels to the start of their tracks."""
        for channel in self._channels:
            channel.rewind()