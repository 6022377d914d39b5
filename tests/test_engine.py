#!/usr/bin/env python3
"""
CITYROADS ENGINE TESTS
----------------------
End-to-end runs against a city.txt in a temporary working directory.
"""

import io
import logging
import pytest
from cityroads.core.engine import ExtractionEngine, DEFAULT_INPUT
from cityroads.core.errors import InputNotFoundError, MalformedInputError

SNAPSHOT = (
    "<html>\n"
    "<ul>\n"
    '<li><a href="#roads-main">Main Street</a>\n'
    '<li><a href="#parks-central">Central Park</a>\n'
    '<li><a href="#roads-ring">Ring Road</a>\n'
    "</ul>\n"
    "</html>\n"
)

@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path

def test_single_road_line(workdir, capsys):
    (workdir / DEFAULT_INPUT).write_text('<li><a href="#roads-main">Main Street</a>\n')

    report = ExtractionEngine().run()

    assert capsys.readouterr().out == '"Main Street", '
    assert report["status"] == "EXTRACTED"
    assert report["lines_read"] == 1

def test_snapshot_emits_in_file_order(workdir):
    (workdir / DEFAULT_INPUT).write_text(SNAPSHOT)
    stream = io.StringIO()

    report = ExtractionEngine().run(stream)

    assert stream.getvalue() == '"Main Street", "Ring Road", '
    assert [m.line_no for m in report["matches"]] == [3, 5]

def test_no_marker_lines_gives_empty_output(workdir, capsys):
    (workdir / DEFAULT_INPUT).write_text("<html>\n<p>nothing here</p>\n</html>\n")

    report = ExtractionEngine().run()

    assert capsys.readouterr().out == ""
    assert report["status"] == "NO_MATCHES"

def test_missing_input_is_treated_as_empty(workdir, capsys, caplog):
    with caplog.at_level(logging.WARNING, logger="cityroads.engine"):
        report = ExtractionEngine().run()

    assert capsys.readouterr().out == ""
    assert report["input_found"] is False
    assert report["status"] == "INPUT_MISSING"
    assert "could not be opened" in caplog.text

def test_missing_input_raises_in_strict_mode(workdir):
    with pytest.raises(InputNotFoundError) as exc:
        ExtractionEngine(strict=True).run(io.StringIO())
    assert exc.value.path == DEFAULT_INPUT

def test_repeated_runs_are_identical(workdir):
    (workdir / DEFAULT_INPUT).write_text(SNAPSHOT)
    engine = ExtractionEngine()

    first, second = io.StringIO(), io.StringIO()
    engine.run(first)
    engine.run(second)

    assert first.getvalue() == second.getvalue()
    assert ExtractionEngine().extract_names() == ["Main Street", "Ring Road"]

def test_undecodable_bytes_do_not_abort(workdir):
    (workdir / DEFAULT_INPUT).write_bytes(
        b"\xff\xfe garbage\n" + b'<li><a href="#roads-main">Main Street</a>\n'
    )
    assert ExtractionEngine().extract_names() == ["Main Street"]

def test_summary_counts(workdir):
    (workdir / DEFAULT_INPUT).write_text(SNAPSHOT + '<p>href="#roads-x"</p>\n')
    engine = ExtractionEngine()

    summary = engine.generate_summary(engine.run(io.StringIO()))

    assert summary["total_matches"] == 2
    assert summary["skipped_lines"] == 1
    assert summary["lines_read"] == 8
    assert summary["input_found"] is True

def test_stray_carriage_return_stays_inside_line(workdir):
    (workdir / DEFAULT_INPUT).write_bytes(b'<li><a href="#roads-main">Main\rStreet</a>\n')
    stream = io.StringIO()

    report = ExtractionEngine().run(stream)

    assert stream.getvalue() == '"Main\rStreet", '
    assert report["lines_read"] == 1

def test_line_source_closed_when_strict_scan_raises(workdir):
    closed = []

    def tracked_lines():
        try:
            yield '<li><a href="#roads-main">Main Street</a>\n'
            yield 'href="#roads-\n'
            yield '<li><a href="#roads-ring">Ring Road</a>\n'
        finally:
            closed.append(True)

    engine = ExtractionEngine(strict=True)
    engine.iter_lines = tracked_lines

    with pytest.raises(MalformedInputError) as exc:
        engine.run(io.StringIO())

    # The traceback still references the scan frame, so only an explicit close counts
    assert exc.value.line_no == 2
    assert closed == [True]
