"""ORP (Optimal Recognition Point) calculator for RSVP reading."""

import math

from .constants import ORP_SCALE, SHORT_WORD_MAX_LENGTH
from .types import EMPTY_SPLIT, WordSplit


class ORPCalculator:
    """
    Calculate the Optimal Recognition Point for words.

    The ORP is the character position in a word where the eye naturally
    focuses for fastest recognition. Single characters fixate on
    themselves, words of two to five characters on their second
    character, and longer words about 35% of the way in.

    The rule is applied to the raw token; punctuation counts toward the
    length like any other character.
    """

    def __init__(self, scale: float = ORP_SCALE) -> None:
        self.scale = scale

    def calculate(self, word: str) -> int:
        """
        Calculate the ORP index for a word.

        Args:
            word: The word to calculate ORP for.

        Returns:
            The 0-indexed position of the ORP character (0 for an empty word).
        """
        length = len(word)

        if length <= 1:
            return 0

        if length <= SHORT_WORD_MAX_LENGTH:
            index = 1
        else:
            index = math.ceil((length - 1) * self.scale)

        return min(index, length - 1)

    def split_for_display(self, word: str) -> WordSplit:
        """
        Split a word into three parts for ORP display.

        The renderer highlights the pivot and aligns it on the center line,
        with ``left`` right-aligned before it and ``right`` after it.

        Args:
            word: The word to split.

        Returns:
            WordSplit of (left, pivot, right).

        Example:
            >>> ORPCalculator().split_for_display("reading")
            WordSplit(left='rea', pivot='d', right='ing')
        """
        if not word:
            return EMPTY_SPLIT

        orp_index = self.calculate(word)

        return WordSplit(
            left=word[:orp_index],
            pivot=word[orp_index],
            right=word[orp_index + 1:],
        )


_default_calculator = ORPCalculator()


def split_word(token: str) -> WordSplit:
    """Split a token around its ORP using the default scale."""
    return _default_calculator.split_for_display(token)
