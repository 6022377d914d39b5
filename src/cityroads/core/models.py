#!/usr/bin/env python3
"""
CITYROADS CORE MODELS
---------------------
Defines the transient records produced while scanning a city listing.
Nothing here outlives a single extraction run.

Author: CityRoads Team
Date: 2026-10-19
"""

from dataclasses import dataclass

@dataclass
class RoadMatch:
    """
    A single road name recovered from a marker line.

    The candidate is kept alongside the name so that offset drift in the
    source markup can be diagnosed from the report.
    """
    line_no: int            # 1-based line number in the input file
    name: str               # Field 1 of the candidate split on '>'
    candidate: str = ""     # The line after the fixed prefix/suffix drops
    raw_line: str = ""      # The cleaned line the match came from

@dataclass
class SkippedLine:
    """A marker line whose candidate did not yield a name field."""
    line_no: int
    raw_line: str
    reason: str
