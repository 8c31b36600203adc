"""
Tests for KeywordsChecker.
"""

import pytest

from spamguard.checkers import CheckerRegistry
from spamguard.checkers.keywords import KeywordsChecker, load_keyword_file
from spamguard.core.checker import CheckerConfigError, CheckerParams


def _comment(content: str) -> CheckerParams:
    return CheckerParams(user_name="bob", user_email="bob@example.com", content=content)


class TestKeywordMatching:

    async def test_clean_comment_passes(self):
        checker = KeywordsChecker(keywords=["casino", "cheap pills"])

        assert await checker.check(_comment("Lovely write-up")) is True

    async def test_keyword_blocks(self):
        checker = KeywordsChecker(keywords=["casino"])

        assert await checker.check(_comment("Visit my casino today")) is False

    async def test_case_insensitive_by_default(self):
        checker = KeywordsChecker(keywords=["Cheap Pills"])

        assert await checker.check(_comment("BUY CHEAP PILLS NOW")) is False

    async def test_case_sensitive(self):
        checker = KeywordsChecker(keywords=["Casino"], case_sensitive=True)

        assert await checker.check(_comment("casino")) is True
        assert await checker.check(_comment("Casino")) is False

    async def test_no_keywords_passes_everything(self):
        assert await KeywordsChecker().check(_comment("casino")) is True

    def test_blank_keywords_dropped(self):
        checker = KeywordsChecker(keywords=["", "  ", "spam"])

        assert checker.keywords == ["spam"]

    def test_deduplicated(self):
        checker = KeywordsChecker(keywords=["Spam", "spam", "SPAM"])

        assert checker.keywords == ["spam"]

    def test_find_match(self):
        checker = KeywordsChecker(keywords=["viagra", "casino"])

        assert checker.find_match("best casino in town") == "casino"
        assert checker.find_match("nothing here") is None

    def test_name_and_registration(self):
        assert KeywordsChecker().name == "keywords"
        assert CheckerRegistry.get("keywords") is KeywordsChecker


class TestKeywordFiles:

    def test_load_skips_comments_and_blanks(self, tmp_path):
        path = tmp_path / "blocklist.txt"
        path.write_text("# spam words\ncasino\n\n  viagra  \n# end\n")

        assert load_keyword_file(path) == ["casino", "viagra"]

    async def test_files_merged_with_inline(self, tmp_path):
        path = tmp_path / "blocklist.txt"
        path.write_text("viagra\n")
        checker = KeywordsChecker(keywords=["casino"], files=[str(path)])

        assert checker.keywords == ["casino", "viagra"]
        assert await checker.check(_comment("cheap VIAGRA")) is False

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(CheckerConfigError, match="Failed to read keyword file"):
            KeywordsChecker(files=[tmp_path / "missing.txt"])
