"""
Keyword list checker.

Blocks comments whose content contains any configured keyword. Keywords
come from an inline list and/or plain-text files with one keyword per
line (blank lines and ``#`` comments are skipped).
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from spamguard.checkers.registry import register_checker
from spamguard.core.checker import Checker, CheckerConfigError, CheckerParams

logger = logging.getLogger(__name__)


def load_keyword_file(path: Union[str, Path]) -> List[str]:
    """Read keywords from a file, one per line."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise CheckerConfigError(f"Failed to read keyword file {path}: {e}") from e

    keywords = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        keywords.append(line)
    return keywords


@register_checker("keywords")
class KeywordsChecker(Checker):
    """Substring match of the comment content against a keyword list."""

    def __init__(
        self,
        keywords: Optional[Iterable[str]] = None,
        files: Optional[Iterable[Union[str, Path]]] = None,
        case_sensitive: bool = False,
    ):
        collected = [k.strip() for k in (keywords or []) if k and k.strip()]
        for path in files or []:
            collected.extend(load_keyword_file(path))

        self._case_sensitive = case_sensitive
        # Deduplicate, preserving order
        seen = set()
        self._keywords: List[str] = []
        for k in collected:
            key = k if case_sensitive else k.lower()
            if key not in seen:
                seen.add(key)
                self._keywords.append(key)

        logger.debug(f"Keywords checker loaded {len(self._keywords)} keywords")

    @property
    def name(self) -> str:
        return "keywords"

    @property
    def keywords(self) -> List[str]:
        return list(self._keywords)

    def find_match(self, content: str) -> Optional[str]:
        """Return the first keyword found in ``content``, if any."""
        haystack = content if self._case_sensitive else content.lower()
        for keyword in self._keywords:
            if keyword in haystack:
                return keyword
        return None

    async def check(self, params: CheckerParams) -> bool:
        match = self.find_match(params.content)
        if match is not None:
            logger.info(f"Comment by '{params.user_name}' matched keyword '{match}'")
            return False
        return True
