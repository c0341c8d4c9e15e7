"""
Type definitions for the tokenizer package.
"""

from typing import NamedTuple


class WordSplit(NamedTuple):
    """A token split around its ORP character for centered display.

    ``left + pivot + right`` always reproduces the original token.
    All three parts are empty for an empty token.
    """

    left: str
    pivot: str
    right: str


EMPTY_SPLIT = WordSplit("", "", "")

__all__ = ["WordSplit", "EMPTY_SPLIT"]
