"""
Moderation pipeline.

Runs a sequence of checkers over one comment and combines their
verdicts: any block blocks, and a checker that raises ``CheckerError``
abstains rather than blocking.
"""

import logging
from typing import TYPE_CHECKING, List

from .checker import (
    CheckDecision,
    Checker,
    CheckerError,
    CheckerParams,
    CheckResult,
    ModerationResult,
)

if TYPE_CHECKING:
    from spamguard.config.settings import SpamGuardSettings

logger = logging.getLogger(__name__)


class ModerationPipeline:
    """
    Runs checkers in order until one blocks.

    Abstentions never block on their own. With ``fail_open=False`` a
    comment that no checker blocked is still rejected if any checker
    abstained.
    """

    def __init__(self, checkers: List[Checker], fail_open: bool = True):
        """
        Args:
            checkers: Checkers to run, in order
            fail_open: Whether abstentions let the comment through

        Raises:
            ValueError: If two checkers share a name
        """
        names = [c.name for c in checkers]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate checker names: {', '.join(duplicates)}")

        self._checkers = list(checkers)
        self.fail_open = fail_open

        logger.info(
            f"Pipeline initialized with {len(self._checkers)} checkers "
            f"({', '.join(names) or 'none'}), fail_open={fail_open}"
        )

    @classmethod
    def from_settings(cls, settings: "SpamGuardSettings") -> "ModerationPipeline":
        """Build a pipeline from the checkers enabled in settings."""
        from spamguard.checkers import CheckerRegistry

        checkers: List[Checker] = []
        for name in settings.enabled_checkers():
            config = settings.get_checker_config(name)
            if name == "ai" and not config.get("api_key"):
                logger.warning(
                    "AI checker enabled without an API key; "
                    "requests will be rejected by the endpoint"
                )
            checkers.append(CheckerRegistry.create(name, **config))

        return cls(checkers, fail_open=settings.fail_open)

    @property
    def checkers(self) -> List[Checker]:
        return list(self._checkers)

    async def check(self, params: CheckerParams) -> ModerationResult:
        """
        Run every checker over one comment.

        Args:
            params: The comment under review

        Returns:
            ModerationResult with the combined verdict and per-checker results
        """
        results: List[CheckResult] = []

        for checker in self._checkers:
            try:
                passed = await checker.check(params)
            except CheckerError as e:
                logger.warning(f"Checker '{checker.name}' abstained: {e}")
                results.append(
                    CheckResult(
                        decision=CheckDecision.ABSTAIN,
                        checker_name=checker.name,
                        message=str(e),
                    )
                )
                continue

            if not passed:
                logger.info(f"Comment blocked by checker '{checker.name}'")
                results.append(
                    CheckResult(decision=CheckDecision.BLOCK, checker_name=checker.name)
                )
                return ModerationResult(
                    allowed=False, results=results, blocked_by=checker.name
                )

            results.append(
                CheckResult(decision=CheckDecision.PASS, checker_name=checker.name)
            )

        abstained = any(r.decision == CheckDecision.ABSTAIN for r in results)
        if abstained and not self.fail_open:
            logger.info("Comment rejected: a checker abstained and fail_open is off")
            return ModerationResult(allowed=False, results=results)

        return ModerationResult(allowed=True, results=results)
