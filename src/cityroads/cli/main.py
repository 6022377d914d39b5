#!/usr/bin/env python3
"""
CITYROADS CLI
-------------
Entry point for the `cityroads` command. With no arguments it scans
./city.txt and prints the road list to stdout. Flags only add
diagnostics or strictness; the input path and delimiter are fixed.

Author: CityRoads Team
Date: 2026-10-19
"""

import sys
import logging
import argparse

from cityroads.core.engine import ExtractionEngine, DEFAULT_INPUT
from cityroads.core.errors import CityRoadsError
from cityroads.cli.formatter import RoadFormatter, console

VERSION = "1.0.0"

class CityRoadsCLI:
    """Translates flags into a single ExtractionEngine run."""

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="cityroads",
            description=f"CityRoads - extract road names from ./{DEFAULT_INPUT} as a quoted list",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="Names are written to stdout; diagnostics go to stderr."
        )
        self.formatter = RoadFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-v", "--version", action="version", version=f"cityroads v{VERSION}")
        self.parser.add_argument("--strict", action="store_true",
                                 help="Fail on a missing input file or a malformed road line")
        self.parser.add_argument("--summary", action="store_true",
                                 help="Render an extraction report on stderr after the list")
        self.parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr
        )
        # basicConfig is a no-op once the root logger has handlers
        logging.getLogger("cityroads").setLevel(logging.DEBUG if verbose else logging.WARNING)

    def run(self, argv=None) -> int:
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        engine = ExtractionEngine(DEFAULT_INPUT, strict=args.strict)
        try:
            report = engine.run()
        except CityRoadsError as e:
            self.formatter.print_error(str(e))
            return 1

        if args.summary:
            # Keep the report off the same terminal line as the list
            console.print()
            self.formatter.print_header("Road Extraction", VERSION)
            self.formatter.print_report(report, engine.generate_summary(report))
        return 0

def main():
    """Application entry point with interrupt handling."""
    try:
        code = CityRoadsCLI().run()
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)
    if code:
        sys.exit(code)

if __name__ == "__main__":
    main()
