"""
Tokenizer package for RSVP text processing.

This package contains modules for preparing text for speed reading,
including:
- tokenizer: Whitespace tokenization (the unit of playback)
- orp: Optimal Recognition Point calculation and display split
- timing: Punctuation delay multipliers and reading-time estimates
- constants: Speed bounds, delay table and ORP scale
- types: WordSplit

Primary usage:
    >>> from zenreader.services.tokenizer import tokenize, split_word
    >>> tokens = tokenize("Hello world.")
    >>> split_word(tokens[0])
    WordSplit(left='H', pivot='e', right='llo')
"""

from .types import EMPTY_SPLIT, WordSplit

from .tokenizer import count_words, tokenize

from .orp import ORPCalculator, split_word

from .timing import (
    TimingCalculator,
    calculate_base_duration_ms,
    calculate_word_duration_ms,
    estimate_reading_time_ms,
    format_duration,
)

from .constants import (
    # Speed
    DEFAULT_WPM,
    MIN_WPM,
    MAX_WPM,
    WPM_STEP,
    # Seeking
    SEEK_STEP,
    # Timing
    PUNCTUATION_DELAYS,
    DEFAULT_DELAY_MULTIPLIER,
    # ORP
    ORP_SCALE,
    # Sample content
    SAMPLE_TEXT,
)

__all__ = [
    # Types
    "WordSplit",
    "EMPTY_SPLIT",
    # Tokenizer
    "tokenize",
    "count_words",
    # ORP
    "ORPCalculator",
    "split_word",
    # Timing
    "TimingCalculator",
    "calculate_base_duration_ms",
    "calculate_word_duration_ms",
    "estimate_reading_time_ms",
    "format_duration",
    # Constants
    "DEFAULT_WPM",
    "MIN_WPM",
    "MAX_WPM",
    "WPM_STEP",
    "SEEK_STEP",
    "PUNCTUATION_DELAYS",
    "DEFAULT_DELAY_MULTIPLIER",
    "ORP_SCALE",
    "SAMPLE_TEXT",
]
