"""
Reader constants for tokenization, timing and ORP display.

This module contains the speed bounds, the punctuation delay table and
the ORP scale factor shared by the tokenizer, the timing calculator and
the playback engine.
"""

# -----------------------------------------------------------------------------
# Speed (words per minute)
# -----------------------------------------------------------------------------

DEFAULT_WPM = 350
MIN_WPM = 100
MAX_WPM = 1000

# Step used by the speed buttons and the up/down arrow keys
WPM_STEP = 25

# -----------------------------------------------------------------------------
# Seeking
# -----------------------------------------------------------------------------

# Arrow keys and the small rewind/forward buttons
SEEK_STEP = 10

# -----------------------------------------------------------------------------
# Timing
# -----------------------------------------------------------------------------

MS_PER_MINUTE = 60_000.0

# Delay multipliers keyed by the last character of a token.
# Characters not listed here display for exactly one base duration.
PUNCTUATION_DELAYS = {
    '.': 2.2,
    '!': 2.2,
    '?': 2.2,
    ',': 1.5,
    ';': 1.5,
    ':': 1.5,
    '-': 1.2,
}

DEFAULT_DELAY_MULTIPLIER = 1.0

# -----------------------------------------------------------------------------
# ORP (Optimal Recognition Point)
# -----------------------------------------------------------------------------

ORP_SCALE = 0.35

# Words up to this length fixate on the second character
SHORT_WORD_MAX_LENGTH = 5

# -----------------------------------------------------------------------------
# Sample text loaded when the reader starts
# -----------------------------------------------------------------------------

SAMPLE_TEXT = """Welcome to ZenReader.
This is an RSVP (Rapid Serial Visual Presentation) reader designed to help you read faster.
The red letter in the middle is your Optimal Recognition Point.
Keep your eyes focused on it, and let the words flow.
You can adjust the speed, pause anytime, or paste your own text and upload files.
Enjoy your reading experience!"""
