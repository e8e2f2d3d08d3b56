"""Tests for ScanState transitions and MathSpan rendering."""

from mathguard.scanner import MathSpan, ScanMode, ScanState


class TestMathSpan:
    def test_render_escapes_body_only(self) -> None:
        assert MathSpan("$", "a_b").render() == r"$a\_b$"

    def test_render_display(self) -> None:
        assert MathSpan("$$", "x^2").render() == r"$$x\^2$$"

    def test_defaults_to_closed(self) -> None:
        assert MathSpan("$", "x").closed is True


class TestScanState:
    """Mode and buffer stay in lockstep."""

    def test_fresh_state(self) -> None:
        state = ScanState()
        assert state.mode is ScanMode.NORMAL
        assert state.buffer == []
        assert state.lineno == 0
        assert not state.in_math_block

    def test_next_line_counts_from_one(self) -> None:
        state = ScanState()
        assert state.next_line() == 1
        assert state.next_line() == 2

    def test_open_block(self) -> None:
        state = ScanState()
        state.next_line()
        state.next_line()
        state.open_block("x \\\\")

        assert state.mode is ScanMode.MULTILINE_MATH
        assert state.buffer == ["x \\\\"]
        assert state.open_lineno == 2

    def test_close_block_joins_and_resets(self) -> None:
        state = ScanState()
        state.open_block("a")
        state.extend_block("b")
        span = state.close_block("c")

        assert span == MathSpan("$$", "a b c")
        assert state.mode is ScanMode.NORMAL
        assert state.buffer == []
        assert state.open_lineno == 0

    def test_close_block_custom_joiner(self) -> None:
        state = ScanState()
        state.open_block("a")
        assert state.close_block("b", joiner="\n").raw_body == "a\nb"

    def test_close_with_empty_tail(self) -> None:
        state = ScanState()
        state.open_block("a")
        assert state.close_block("").raw_body == "a "

    def test_flush_open_block(self) -> None:
        state = ScanState()
        state.open_block(r"\begin{x} a_1 \\")
        state.extend_block("b_2")

        assert state.flush() == ["$$\\begin{x} a_1 \\\\\n", "b_2\n"]
        assert state.mode is ScanMode.NORMAL
        assert state.buffer == []

    def test_flush_without_open_block(self) -> None:
        assert ScanState().flush() == []

    def test_lineno_survives_reset(self) -> None:
        state = ScanState()
        state.next_line()
        state.open_block("a")
        state.next_line()
        state.close_block("b")
        assert state.lineno == 2
