"""Splitting text into tokens on any of a set of delimiter characters."""

from itertools import groupby


def tokenize(text: str, delimiters: str) -> list[str]:
    """Return the maximal runs of ``text`` that contain no delimiter character.

    Consecutive delimiters are treated as one, and leading or trailing
    delimiters produce no empty tokens.
    """
    delimiter_set = frozenset(delimiters)
    return [
        "".join(run)
        for is_delimiter, run in groupby(text, key=lambda ch: ch in delimiter_set)
        if not is_delimiter
    ]