"""Business logic services for ZenReader."""

from zenreader.services.tokenizer import (
    ORPCalculator,
    TimingCalculator,
    WordSplit,
    split_word,
    tokenize,
)
from zenreader.services.engine import PlaybackEngine, PlaybackState
from zenreader.services.controls import KeyBindings, TransportCommand, apply_command
from zenreader.services.text_source import (
    UnsupportedFileError,
    decode_text_bytes,
    read_text_upload,
)

__all__ = [
    # Tokenization and display
    "tokenize",
    "split_word",
    "WordSplit",
    "ORPCalculator",
    "TimingCalculator",
    # Playback
    "PlaybackEngine",
    "PlaybackState",
    # Controls
    "KeyBindings",
    "TransportCommand",
    "apply_command",
    # Text source
    "UnsupportedFileError",
    "decode_text_bytes",
    "read_text_upload",
]
