#!/usr/bin/env python3
"""
CITYROADS ENGINE - Extraction Orchestrator
------------------------------------------
Opens the fixed city snapshot, drives the RoadScanner over its lines and
writes every recovered name to the output stream as soon as it is found.

Output format per match: "<name>", (no newline, no list terminator).
The result is meant to be pasted into a list literal by hand.

Author: CityRoads Team
Date: 2026-10-19
"""

import sys
import time
import logging
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, TextIO

from cityroads.core.errors import InputNotFoundError
from cityroads.extraction.scanner import RoadScanner

logger = logging.getLogger("cityroads.engine")

DEFAULT_INPUT = "city.txt"
ENTRY_TEMPLATE = '"{name}", '

class ExtractionEngine:
    """
    Coordinates the fallible open, the scan and the emit step.
    Holds no state between runs, so repeated runs on the same file
    produce identical output.
    """

    def __init__(self, input_path: str = DEFAULT_INPUT, strict: bool = False):
        self.input_path = Path(input_path)
        self.strict = strict
        self.scanner = RoadScanner(strict=strict)
        self.lines_read = 0
        self.input_found = False

    def iter_lines(self) -> Iterator[str]:
        """
        Yields raw lines from the input file. The handle is scoped to the
        generator and released on exhaustion, error or close.

        A missing or unreadable file becomes an empty sequence unless strict.
        """
        self.lines_read = 0
        self.input_found = False
        try:
            handle = open(self.input_path, 'r', encoding='utf-8', errors='replace', newline='\n')
        except OSError as e:
            if self.strict:
                raise InputNotFoundError(str(self.input_path), e.strerror or str(e))
            logger.warning(f"Input file {self.input_path} could not be opened; treating it as empty")
            return

        self.input_found = True
        with handle:
            for line in handle:
                self.lines_read += 1
                yield line

    def run(self, stream: Optional[TextIO] = None) -> Dict[str, Any]:
        """
        Performs a full extraction, emitting each entry immediately.
        Returns the run report used by the CLI summary.
        """
        out = stream if stream is not None else sys.stdout
        matches = []

        # closing() releases the handle even when a strict scan raises mid-file
        with closing(self.iter_lines()) as lines:
            for match in self.scanner.scan(lines):
                out.write(ENTRY_TEMPLATE.format(name=match.name))
                out.flush()
                matches.append(match)

        logger.info(f"Extracted {len(matches)} road names from {self.input_path}")
        return self._build_report(matches)

    def extract_names(self) -> List[str]:
        """Same scan as run(), without writing anything."""
        with closing(self.iter_lines()) as lines:
            return [m.name for m in self.scanner.scan(lines)]

    def _build_report(self, matches: List[Any]) -> Dict[str, Any]:
        return {
            "input_path": str(self.input_path),
            "input_found": self.input_found,
            "matches": matches,
            "skipped": list(self.scanner.skipped),
            "lines_read": self.lines_read,
            "status": self._derive_status(self.input_found, len(matches)),
            "timestamp": time.time()
        }

    def generate_summary(self, report: Dict[str, Any]) -> Dict[str, Any]:
        """Condenses a run report into counts."""
        return {
            "total_matches": len(report.get("matches", [])),
            "skipped_lines": len(report.get("skipped", [])),
            "lines_read": report.get("lines_read", 0),
            "input_found": report.get("input_found", False),
            "status": report.get("status", "NO_MATCHES"),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }

    def _derive_status(self, found, match_count) -> str:
        if not found: return "INPUT_MISSING"
        return "EXTRACTED" if match_count else "NO_MATCHES"
