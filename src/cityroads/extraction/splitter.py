#!/usr/bin/env python3
"""
CITYROADS SPLITTER
------------------
Splits a string on every occurrence of a single delimiter character.
Empty fields are kept and a trailing field is always emitted, so
joining the result with the delimiter reproduces the input exactly.

Author: CityRoads Team
Date: 2026-10-19
"""

from typing import List

def split_fields(text: str, delimiter: str) -> List[str]:
    """
    Returns the ordered fields of `text` between `delimiter` occurrences.

    Example: split_fields("a>b>c", ">") -> ["a", "b", "c"]
             split_fields("a>", ">")    -> ["a", ""]
             split_fields("", ">")      -> [""]
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    return text.split(delimiter)
