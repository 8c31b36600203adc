"""Tests for spamguard.cli_ui module."""

from io import StringIO
from unittest.mock import patch

import pytest

from spamguard.cli_ui import (
    EXIT_CANCELLED,
    _width,
    banner,
    config_panel,
    console,
    decision_text,
    dim,
    error,
    is_interactive,
    make_table,
    prompt_text,
    success,
    warning,
)


def _capture_output(fn, *args, **kwargs):
    """Capture Rich console output by temporarily redirecting."""
    buf = StringIO()
    original_file = console.file
    console.file = buf
    try:
        fn(*args, **kwargs)
    finally:
        console.file = original_file
    return buf.getvalue()


class TestOutputHelpers:
    def test_banner_contains_version(self):
        output = _capture_output(banner, "1.2.3")
        assert "SpamGuard" in output
        assert "1.2.3" in output

    def test_success_message(self):
        output = _capture_output(success, "All good")
        assert "✓" in output
        assert "All good" in output

    def test_error_with_hint(self):
        output = _capture_output(error, "Broken", hint="Try again")
        assert "✗" in output
        assert "Broken" in output
        assert "Try again" in output

    def test_error_keeps_brackets_literal(self):
        output = _capture_output(error, "bad value [type=literal_error]")
        assert "[type=literal_error]" in output

    def test_warning_message(self):
        output = _capture_output(warning, "Careful")
        assert "!" in output
        assert "Careful" in output

    def test_dim_message(self):
        output = _capture_output(dim, "secondary")
        assert "secondary" in output

    def test_config_panel(self):
        output = _capture_output(config_panel, "Title", {"Checkers": "ai"})
        assert "Title" in output
        assert "Checkers:" in output
        assert "ai" in output

    def test_make_table_accepts_text_cells(self):
        output = _capture_output(
            make_table, "Results", ["Checker", "Decision"], [["ai", decision_text("block")]]
        )
        assert "Results" in output
        assert "BLOCK" in output

    def test_width_capped(self):
        assert _width() <= 80


class TestDecisionText:
    def test_style_follows_decision(self):
        label = decision_text("pass")
        assert label.plain == "PASS"
        assert str(label.style) == "decision.pass"

    def test_unknown_decision_still_renders(self):
        output = _capture_output(console.print, decision_text("other"))
        assert "OTHER" in output


class TestInputHelpers:
    def test_is_interactive_false_without_tty(self):
        with patch("sys.stdin") as stdin:
            stdin.isatty.return_value = False
            assert is_interactive() is False

    def test_prompt_returns_answer(self):
        with patch("questionary.text") as prompt:
            prompt.return_value.ask.return_value = "hello"
            assert prompt_text("Comment content:") == "hello"

    def test_cancelled_prompt_exits_nonzero(self):
        with patch("questionary.text") as prompt:
            prompt.return_value.ask.return_value = None
            with pytest.raises(SystemExit) as exc_info:
                prompt_text("Comment content:")

        assert exc_info.value.code == EXIT_CANCELLED
        assert exc_info.value.code != 0
