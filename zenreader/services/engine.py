"""
RSVP playback engine.

The engine owns the token sequence, the current position, the play state,
the speed and at most one pending advance. Every transport operation is a
synchronous state transition: it mutates state, cancels the stale pending
advance and, when the new state is playing and in bounds, schedules a
fresh one computed from the current token and speed.

Timing is delegated to a scheduler object with an asyncio-style
``call_later(delay_seconds, callback, *args)`` returning a cancellable
handle. The running event loop is the production scheduler; tests drive a
manual clock.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol, Tuple

from zenreader.services.tokenizer import (
    DEFAULT_WPM,
    MAX_WPM,
    MIN_WPM,
    ORPCalculator,
    TimingCalculator,
    WordSplit,
    calculate_base_duration_ms,
    tokenize,
)

logger = logging.getLogger(__name__)


class PendingAdvance(Protocol):
    """Handle to a scheduled advance (asyncio.TimerHandle satisfies this)."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in seconds."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> PendingAdvance: ...


@dataclass(frozen=True)
class PlaybackState:
    """Immutable snapshot of the engine's observable state."""

    position: int
    total_words: int
    is_playing: bool
    speed: int

    @property
    def is_finished(self) -> bool:
        return self.position >= self.total_words

    @property
    def progress(self) -> float:
        if self.total_words == 0:
            return 0.0
        return self.position / self.total_words * 100


Listener = Callable[[PlaybackState], None]


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


class PlaybackEngine:
    """
    Drive a token sequence forward one word at a time.

    Invariants:
    - 0 <= position <= len(tokens); position == len(tokens) means finished.
    - is_playing is never true while finished.
    - min_wpm <= speed <= max_wpm.
    - At most one advance is pending, and only while playing and in bounds.

    Example:
        >>> engine = PlaybackEngine(asyncio.get_running_loop(), default_wpm=300)
        >>> engine.load("Hello world.")
        >>> engine.toggle_play()
    """

    def __init__(
        self,
        scheduler: Scheduler,
        default_wpm: int = DEFAULT_WPM,
        min_wpm: int = MIN_WPM,
        max_wpm: int = MAX_WPM,
        timing: Optional[TimingCalculator] = None,
        orp: Optional[ORPCalculator] = None,
    ) -> None:
        """
        Initialize the engine with an empty sequence.

        Args:
            scheduler: Timer source, usually the running asyncio loop.
            default_wpm: Starting speed, clamped into [min_wpm, max_wpm].
            min_wpm: Lower speed bound.
            max_wpm: Upper speed bound.
            timing: Delay calculator (default punctuation table if omitted).
            orp: ORP calculator used for ``current_split``.

        Raises:
            ValueError: If the speed bounds are not positive and ordered.
        """
        if min_wpm <= 0 or min_wpm > max_wpm:
            raise ValueError(
                f"Invalid speed bounds: min_wpm={min_wpm} max_wpm={max_wpm}"
            )

        self._scheduler = scheduler
        self._min_wpm = min_wpm
        self._max_wpm = max_wpm
        self._timing = timing or TimingCalculator()
        self._orp = orp or ORPCalculator()

        self._tokens: Tuple[str, ...] = ()
        # Multiplier totals per position so remaining_ms is O(1) on every tick
        self._remaining_delays: List[float] = [0.0]
        self._position = 0
        self._is_playing = False
        self._speed = _clamp(default_wpm, min_wpm, max_wpm)

        self._pending: Optional[PendingAdvance] = None
        self._generation = 0
        self._listeners: List[Listener] = []
        self._closed = False

    @classmethod
    def for_running_loop(cls, **kwargs: Any) -> "PlaybackEngine":
        """Create an engine scheduled on the currently running event loop."""
        return cls(asyncio.get_running_loop(), **kwargs)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    @property
    def total_words(self) -> int:
        return len(self._tokens)

    @property
    def current_index(self) -> int:
        return self._position

    @property
    def current_token(self) -> str:
        if self._position >= len(self._tokens):
            return ""
        return self._tokens[self._position]

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def min_wpm(self) -> int:
        return self._min_wpm

    @property
    def max_wpm(self) -> int:
        return self._max_wpm

    @property
    def is_finished(self) -> bool:
        return self._position >= len(self._tokens)

    @property
    def progress(self) -> float:
        """Percentage of the sequence already shown, in [0, 100]."""
        return self.state().progress

    @property
    def has_pending_advance(self) -> bool:
        return self._pending is not None

    @property
    def current_delay_ms(self) -> float:
        """How long the current token stays up before the next advance."""
        return self._timing.calculate_duration_ms(self.current_token, self._speed)

    @property
    def current_split(self) -> WordSplit:
        return self._orp.split_for_display(self.current_token)

    @property
    def remaining_ms(self) -> float:
        """Time left to the end of the text at the current speed."""
        return calculate_base_duration_ms(self._speed) * self._remaining_delays[self._position]

    def state(self) -> PlaybackState:
        return PlaybackState(
            position=self._position,
            total_words=len(self._tokens),
            is_playing=self._is_playing,
            speed=self._speed,
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener) -> None:
        """Call ``listener`` with a fresh snapshot after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _notify(self) -> None:
        if not self._listeners:
            return

        snapshot = self.state()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Playback listener %r failed", listener)

    # ------------------------------------------------------------------
    # Transport controls
    # ------------------------------------------------------------------

    def load(self, text: str) -> None:
        """Replace the token sequence and rewind to the first word, paused."""
        self._tokens = tokenize(text)
        self._remaining_delays = self._timing.remaining_delays(self._tokens)
        self._position = 0
        self._is_playing = False
        self._reschedule()
        logger.info(
            "Loaded text with %d tokens",
            len(self._tokens),
            extra={"total_words": len(self._tokens)},
        )
        self._notify()

    def toggle_play(self) -> None:
        """
        Flip between playing and paused.

        Playing from the end is accepted but immediately re-paused by the
        scheduling step; callers restart first to read again.
        """
        self._is_playing = not self._is_playing
        self._reschedule()
        self._notify()

    def seek(self, delta: int) -> None:
        """Move by ``delta`` words, clamped to the last token."""
        if self._tokens:
            position = _clamp(self._position + delta, 0, len(self._tokens) - 1)
        else:
            position = 0

        if position == self._position:
            return

        self._position = position
        self._reschedule()
        self._notify()

    def change_speed(self, delta: int) -> None:
        """Adjust the speed by ``delta`` WPM, clamped to the speed bounds."""
        speed = _clamp(self._speed + delta, self._min_wpm, self._max_wpm)
        if speed == self._speed:
            return

        self._speed = speed
        self._reschedule()
        self._notify()

    def restart(self) -> None:
        """Rewind to the first word and pause."""
        changed = self._position != 0 or self._is_playing
        self._position = 0
        self._is_playing = False
        self._cancel_pending()
        if changed:
            self._notify()

    def stop(self) -> None:
        """Pause without moving."""
        if not self._is_playing:
            return

        self._is_playing = False
        self._cancel_pending()
        self._notify()

    def close(self) -> None:
        """Dispose of the engine: cancel timing and drop listeners."""
        self._closed = True
        self._is_playing = False
        self._cancel_pending()
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _cancel_pending(self) -> None:
        # Bumping the generation invalidates any callback already queued
        self._generation += 1
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _reschedule(self) -> None:
        self._cancel_pending()

        if not self._is_playing:
            return

        if self._closed or self._position >= len(self._tokens):
            self._is_playing = False
            if not self._closed:
                logger.info("Reached end of text at word %d", self._position)
            return

        delay_ms = self.current_delay_ms
        logger.debug(
            "Scheduling advance from word %d (%r) in %.1f ms",
            self._position,
            self.current_token,
            delay_ms,
        )
        self._pending = self._scheduler.call_later(
            delay_ms / 1000.0, self._advance, self._generation
        )

    def _advance(self, generation: int) -> None:
        if generation != self._generation or self._pending is None:
            logger.debug("Ignoring stale advance (generation %d)", generation)
            return

        self._pending = None
        self._position += 1
        self._reschedule()
        self._notify()
