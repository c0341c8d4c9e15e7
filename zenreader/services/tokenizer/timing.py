"""
Timing and delay multiplier calculations for RSVP reading.

This module provides the TimingCalculator class for computing how long a
token stays on screen relative to the base word duration (derived from
the WPM setting). The only factor is the token's last character: sentence
enders, clause breaks and dashes extend the exposure.
"""

from typing import Iterable, List, Mapping, Optional, Sequence

from .constants import (
    DEFAULT_DELAY_MULTIPLIER,
    MS_PER_MINUTE,
    PUNCTUATION_DELAYS,
)


class TimingCalculator:
    """
    Calculate delay multipliers for RSVP word display timing.

    The delay multiplier controls how long each word is displayed relative
    to the base reading speed. A multiplier of 1.0 means normal duration,
    while higher values (e.g., 2.2) mean longer display times.

    Example usage:
        >>> calc = TimingCalculator()
        >>> calc.calculate_delay("hello")
        1.0
        >>> calc.calculate_delay("sentence.")
        2.2
        >>> calc.calculate_delay("word,")
        1.5
    """

    def __init__(self, delays: Optional[Mapping[str, float]] = None) -> None:
        """
        Initialize the timing calculator.

        Args:
            delays: Mapping of trailing character to multiplier.
                    Defaults to PUNCTUATION_DELAYS.
        """
        self._delays = dict(PUNCTUATION_DELAYS if delays is None else delays)

    def calculate_delay(self, word: str) -> float:
        """
        Calculate the delay multiplier for a word.

        Args:
            word: The word to calculate delay for.

        Returns:
            Delay multiplier (1.0 = normal, >1.0 = longer display time).
        """
        if not word:
            return DEFAULT_DELAY_MULTIPLIER

        return self._delays.get(word[-1], DEFAULT_DELAY_MULTIPLIER)

    def calculate_duration_ms(self, word: str, wpm: int) -> float:
        """
        Calculate how long a word stays on screen at the given speed.

        Args:
            word: The word being displayed.
            wpm: Reading speed in words per minute.

        Returns:
            Display duration in milliseconds.
        """
        return calculate_word_duration_ms(
            calculate_base_duration_ms(wpm),
            self.calculate_delay(word),
        )

    def remaining_delays(self, tokens: Sequence[str]) -> List[float]:
        """
        Sum the delay multipliers from each position to the end.

        Entry ``i`` is the total multiplier of ``tokens[i:]``; the extra
        last entry is 0.0 for the finished position.

        Example:
            >>> TimingCalculator().remaining_delays(("a", "b."))
            [3.2, 2.2, 0.0]
        """
        totals = [0.0] * (len(tokens) + 1)
        for index in range(len(tokens) - 1, -1, -1):
            totals[index] = totals[index + 1] + self.calculate_delay(tokens[index])
        return totals


def calculate_base_duration_ms(wpm: int) -> float:
    """
    Calculate the base word display duration from WPM (words per minute).

    Args:
        wpm: Target reading speed in words per minute.

    Returns:
        Base duration in milliseconds for one word.

    Raises:
        ValueError: If wpm is not positive.

    Examples:
        >>> calculate_base_duration_ms(300)
        200.0
        >>> calculate_base_duration_ms(60)
        1000.0
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")

    return MS_PER_MINUTE / wpm


def calculate_word_duration_ms(
    base_duration_ms: float,
    delay_multiplier: float,
) -> float:
    """
    Calculate the actual display duration for a word.

    Examples:
        >>> calculate_word_duration_ms(1000.0, 2.2)
        2200.0
    """
    return base_duration_ms * delay_multiplier


def estimate_reading_time_ms(
    tokens: Iterable[str],
    wpm: int,
    calculator: Optional[TimingCalculator] = None,
) -> float:
    """
    Estimate total reading time for a token sequence.

    Unlike a flat words/WPM estimate this sums the real per-token
    durations, punctuation pauses included.

    Args:
        tokens: Tokens still to be displayed.
        wpm: Reading speed in words per minute.
        calculator: Timing calculator to use (default table if omitted).

    Returns:
        Estimated reading time in milliseconds.
    """
    calculator = calculator or TimingCalculator()
    base_duration = calculate_base_duration_ms(wpm)
    return sum(
        calculate_word_duration_ms(base_duration, calculator.calculate_delay(token))
        for token in tokens
    )


def format_duration(total_ms: float) -> str:
    """
    Format a duration as a short human readable string.

    Returns:
        Formatted string like "< 1 min", "5 min" or "1 hr 23 min".

    Examples:
        >>> format_duration(30_000)
        '< 1 min'
        >>> format_duration(4_140_000)
        '1 hr 9 min'
    """
    total_minutes = int(total_ms / 1000 / 60)

    if total_minutes < 1:
        return "< 1 min" if total_ms > 0 else "0 min"

    if total_minutes < 60:
        return f"{total_minutes} min"

    hours = total_minutes // 60
    minutes = total_minutes % 60

    if minutes == 0:
        return f"{hours} hr"

    return f"{hours} hr {minutes} min"
