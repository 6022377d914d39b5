#!/usr/bin/env python3
"""
CITYROADS ERRORS
----------------
Exception hierarchy raised by the engine and scanner in strict mode.

Author: CityRoads Team
Date: 2026-10-19
"""

class CityRoadsError(Exception):
    """Base class for all extraction failures."""


class InputNotFoundError(CityRoadsError):
    """The fixed input file is absent or cannot be opened."""

    def __init__(self, path: str, detail: str = ""):
        self.path = path
        message = f"Input file not readable: {path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class MalformedInputError(CityRoadsError):
    """A marker line whose candidate substring has no name field."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_no}: {reason}")
