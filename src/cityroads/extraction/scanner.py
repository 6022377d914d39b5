#!/usr/bin/env python3
"""
CITYROADS SCANNER - Line Marker Extraction
------------------------------------------
Walks the lines of a city listing snapshot and recovers road names from
anchor lines. This is a fixed-offset slice, not an HTML parse: the
offsets below are the format contract for the snapshot markup.

Author: CityRoads Team
Date: 2026-10-19
"""

import logging
from typing import Iterable, Iterator, List

from cityroads.core.errors import MalformedInputError
from cityroads.core.models import RoadMatch, SkippedLine
from cityroads.extraction.splitter import split_fields

logger = logging.getLogger("cityroads.scanner")

class RoadScanner:
    """
    Filters marker lines and slices the road name out of each one.
    Carries no state between lines other than the skipped-line record.
    """

    MARKER = 'href="#roads-'

    # Assumed line shape: <li><a href="#roads-<id>">Name</a>
    # '<li><a href=' is 12 characters and the closing '</a>' is 4.
    PREFIX_DROP = 12
    SUFFIX_DROP = 4
    DELIMITER = ">"
    NAME_FIELD = 1

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.skipped: List[SkippedLine] = []

    def _clean_line(self, line: str, first: bool = False) -> str:
        """Drops the line terminator and a leading BOM on the first line."""
        if first:
            line = line.lstrip('\ufeff')
        # One LF and one CR form the terminator; any further CR is content
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        return line

    def is_road_line(self, line: str) -> bool:
        return self.MARKER in line

    def extract_candidate(self, line: str) -> str:
        """
        Applies the suffix drop, then the prefix drop to what remains.
        Lines shorter than the offsets collapse to an empty candidate.
        """
        return line[:-self.SUFFIX_DROP][self.PREFIX_DROP:]

    def extract_name(self, line_no: int, line: str) -> RoadMatch:
        candidate = self.extract_candidate(line)
        fields = split_fields(candidate, self.DELIMITER)
        if len(fields) <= self.NAME_FIELD:
            raise MalformedInputError(
                line_no, line,
                f"candidate {candidate!r} has no '{self.DELIMITER}' separated name field"
            )
        return RoadMatch(
            line_no=line_no,
            name=fields[self.NAME_FIELD],
            candidate=candidate,
            raw_line=line
        )

    def scan(self, lines: Iterable[str]) -> Iterator[RoadMatch]:
        """
        Lazily yields one RoadMatch per well-formed marker line.
        Malformed marker lines are skipped and recorded unless strict.
        """
        # Reset so a reused scanner doesn't report a previous run's skips
        self.skipped = []

        for i, raw in enumerate(lines, 1):
            line = self._clean_line(raw, first=(i == 1))
            if not self.is_road_line(line):
                continue

            try:
                yield self.extract_name(i, line)
            except MalformedInputError as e:
                if self.strict:
                    raise
                logger.warning(f"Skipping malformed road line {e.line_no}: {e.reason}")
                self.skipped.append(SkippedLine(line_no=e.line_no, raw_line=line, reason=e.reason))
