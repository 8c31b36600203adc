"""
Tests for AI verdict parsing.
"""

import logging

import pytest

from spamguard.checkers.ai.parser import parse_verdict


class TestParseVerdict:

    @pytest.mark.parametrize(
        "response",
        ["PASS", "pass", "  Pass\n", "PASS.", "I would PASS this comment"],
    )
    def test_pass(self, response):
        assert parse_verdict(response) is True

    @pytest.mark.parametrize(
        "response",
        ["BLOCK", "block", "\tBlock ", "I think this should be BLOCKED"],
    )
    def test_block(self, response):
        assert parse_verdict(response) is False

    def test_pass_wins_when_both_present(self):
        assert parse_verdict("BLOCK? no, PASS") is True

    def test_passive_contains_pass(self):
        """Substring matching is intentionally loose."""
        assert parse_verdict("passive voice") is True

    @pytest.mark.parametrize("response", ["maybe?", "", "   ", "Approve"])
    def test_unclear_fails_open(self, response):
        assert parse_verdict(response) is True

    def test_unclear_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spamguard.checkers.ai.parser"):
            parse_verdict("maybe?")

        assert "Unclear response, defaulting to pass: MAYBE?" in caplog.text

    def test_clear_answer_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spamguard.checkers.ai.parser"):
            parse_verdict("BLOCK")

        assert caplog.records == []
