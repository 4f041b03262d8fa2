"""Typing animation for the profile's role list.

:class:`TypingAnimation` is a pure state machine: every call to
:meth:`TypingAnimation.tick` yields the text to display and how long to wait
before the next tick. :class:`TypingLoop` feeds it from a ``call_later``
style scheduler (the running asyncio loop by default) and never stops.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)

__all__ = [
    "DELETE_DELAY_MS",
    "NEXT_WORD_DELAY_MS",
    "PAUSE_DELAY_MS",
    "TYPE_DELAY_MS",
    "TypingAnimation",
    "TypingFrame",
    "TypingLoop",
    "TypingPhase",
]

TYPE_DELAY_MS = 100
DELETE_DELAY_MS = 50
PAUSE_DELAY_MS = 2000
NEXT_WORD_DELAY_MS = 500

Scheduler = Callable[[float, Callable[[], None]], object]


class TypingPhase(StrEnum):
    TYPING = "typing"
    PAUSING = "pausing"
    DELETING = "deleting"


@dataclass(frozen=True, slots=True)
class TypingFrame:
    """Result of one tick.

    Attributes:
        text: Text to display after this tick.
        delay_ms: Milliseconds to wait before the next tick.
        phase: Phase the animation is in after this tick.
        word_index: Index of the word the next tick works on.
    """

    text: str
    delay_ms: int
    phase: TypingPhase
    word_index: int


class TypingAnimation:
    """Types each word forward, pauses, deletes it, then moves to the next word."""

    def __init__(self, words: Sequence[str]) -> None:
        if not words:
            raise ValueError("TypingAnimation needs at least one word")
        self.words: tuple[str, ...] = tuple(words)
        self.word_index = 0
        self.char_index = 0
        self.phase = TypingPhase.TYPING

    @property
    def current_word(self) -> str:
        return self.words[self.word_index]

    @property
    def text(self) -> str:
        return self.current_word[: self.char_index]

    def tick(self) -> TypingFrame:
        """Advance one step and return the resulting frame."""
        word = self.current_word

        if self.phase is TypingPhase.TYPING:
            self.char_index = min(self.char_index + 1, len(word))
            delay = TYPE_DELAY_MS
        else:
            self.phase = TypingPhase.DELETING
            self.char_index = max(self.char_index - 1, 0)
            delay = DELETE_DELAY_MS

        text = word[: self.char_index]

        if self.phase is TypingPhase.TYPING and self.char_index >= len(word):
            self.phase = TypingPhase.PAUSING
            delay = PAUSE_DELAY_MS
        elif self.phase is TypingPhase.DELETING and self.char_index == 0:
            self.phase = TypingPhase.TYPING
            self.word_index = (self.word_index + 1) % len(self.words)
            delay = NEXT_WORD_DELAY_MS

        return TypingFrame(text=text, delay_ms=delay, phase=self.phase, word_index=self.word_index)


class TypingLoop:
    """Drives a :class:`TypingAnimation` forever from a scheduler.

    Args:
        animation: The state machine to advance.
        on_frame: Called with the frame text after every tick.
        call_later: ``call_later(seconds, callback)``; defaults to the running
            asyncio loop's ``call_later``.
    """

    def __init__(
        self,
        animation: TypingAnimation,
        on_frame: Callable[[str], None],
        call_later: Scheduler | None = None,
    ) -> None:
        self.animation = animation
        self.on_frame = on_frame
        self._call_later = call_later
        self.ticks = 0

    def start(self) -> None:
        if self._call_later is None:
            self._call_later = asyncio.get_running_loop().call_later
        self._schedule: Scheduler = self._call_later
        logger.debug("Starting typing animation over %d words", len(self.animation.words))
        self._step()

    def _step(self) -> None:
        frame = self.animation.tick()
        self.ticks += 1
        self.on_frame(frame.text)
        self._schedule(frame.delay_ms / 1000, self._step)
