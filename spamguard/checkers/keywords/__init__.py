"""Keyword list checker package."""

# Import checker to trigger @register_checker("keywords")
from spamguard.checkers.keywords.checker import KeywordsChecker, load_keyword_file

__all__ = ["KeywordsChecker", "load_keyword_file"]
