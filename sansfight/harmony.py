"""The bass line of the battle theme, played on the first pulse channel."""

from __future__ import annotations

from sansfight.console import ToneFlag
from sansfight.score import REST, Note

_R = REST


def _pulse_bar(root: int, last: int | None = None) -> tuple[int, ...]:
    """A driving one-bar pattern on `root`; the second half may move to `last`."""
    turn = root if last is None else last
    return (root, root, _R, _R, root, root, _R, turn,
            _R, turn, _R, turn, _R, turn, turn, turn)


_RIFF_TAIL = (51, _R, 46, _R, _R, 45, _R, 44, _R, 42, _R, 39, 42, 44)

_GROOVE = _pulse_bar(39) + _pulse_bar(37) + _pulse_bar(36) + _pulse_bar(35, 37)

_RIFF = (
    (39, 39) + _RIFF_TAIL
    + (37, 37) + _RIFF_TAIL
    + (36, 36) + _RIFF_TAIL
    + (35, 35) + _RIFF_TAIL
)

_HARMONY_IDS = _GROOVE + _GROOVE + _RIFF + (_R,)

HARMONY: tuple[Note, ...] = tuple(
    Note(note_id, flags=ToneFlag.PULSE1) for note_id in _HARMONY_IDS
)


def harmony_track() -> tuple[Note, ...]:
    """The notes of the harmony channel, in playing order."""
    return HARMONY