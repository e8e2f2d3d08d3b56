"""Tests for diagnostics and sinks."""

import logging

import pytest

from mathguard.diagnostics import Diagnostic, DiagnosticCollector, emit, log_diagnostic


class TestDiagnostic:
    def test_message_includes_lines(self) -> None:
        diag = Diagnostic(lineno=7, open_lineno=5, line="y^2")
        assert diag.message.startswith("7: y^2\n")
        assert "line 5" in diag.message
        assert str(diag) == diag.message

    def test_location_with_source_file(self) -> None:
        diag = Diagnostic(lineno=7, open_lineno=5, line="y^2", source_file="notes.md")
        assert diag.location == "notes.md:7"
        assert diag.message.startswith("notes.md:7: y^2")

    def test_frozen(self) -> None:
        diag = Diagnostic(lineno=1, open_lineno=1, line="")
        with pytest.raises(AttributeError):
            diag.lineno = 2  # type: ignore[misc]


class TestDiagnosticCollector:
    def test_collects_in_order(self) -> None:
        collector = DiagnosticCollector()
        first = Diagnostic(lineno=2, open_lineno=1, line="a")
        second = Diagnostic(lineno=3, open_lineno=1, line="b")
        collector(first)
        collector(second)

        assert list(collector) == [first, second]
        assert len(collector) == 2
        assert collector

    def test_empty_is_falsy(self) -> None:
        assert not DiagnosticCollector()


class TestEmit:
    def test_defaults_to_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="mathguard"):
            emit(None, Diagnostic(lineno=4, open_lineno=2, line="x"))
        assert any("4: x" in r.getMessage() for r in caplog.records)

    def test_log_diagnostic(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="mathguard"):
            log_diagnostic(Diagnostic(lineno=1, open_lineno=1, line="z"))
        assert caplog.records[-1].levelno == logging.WARNING

    def test_sink_errors_are_contained(self) -> None:
        calls: list[Diagnostic] = []

        def sink(diagnostic: Diagnostic) -> None:
            calls.append(diagnostic)
            raise RuntimeError("sink failure")

        emit(sink, Diagnostic(lineno=1, open_lineno=1, line="z"))
        assert len(calls) == 1
