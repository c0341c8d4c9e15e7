"""Tokenizer service for splitting text into reading tokens."""

from typing import Tuple


def tokenize(text: str) -> Tuple[str, ...]:
    """
    Split text into tokens (words) for RSVP display.

    Leading and trailing whitespace is trimmed, then the text is split on
    runs of whitespace. Spaces, tabs and newlines are treated the same way.
    Punctuation stays attached to the word it borders, so ``"reading."``
    and ``"(parenthetical)"`` are single tokens.

    Args:
        text: The input text to tokenize.

    Returns:
        Tuple of word tokens. Empty for empty or whitespace-only input.

    Example:
        >>> tokenize("  hello   world  ")
        ('hello', 'world')
    """
    if not text:
        return ()

    # str.split() with no separator trims and drops empty fragments
    return tuple(text.split())


def count_words(text: str) -> int:
    """
    Count the number of words in text.

    Args:
        text: Input text.

    Returns:
        Word count.
    """
    return len(tokenize(text))
