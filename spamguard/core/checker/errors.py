"""
Exception hierarchy for checkers.

A checker that raises ``CheckerError`` has abstained: it could not reach a
decision. This is deliberately distinct from returning ``False``, which is
an explicit block.
"""


class SpamGuardError(Exception):
    """Base class for all SpamGuard errors."""
    pass


class CheckerError(SpamGuardError):
    """A checker could not reach a decision for a comment."""
    pass


class RequestBuildError(CheckerError):
    """The outbound request could not be serialized or constructed."""
    pass


class TransportError(CheckerError):
    """Network-level failure: connection, TLS, timeout or body read."""
    pass


class ResponseDecodeError(CheckerError):
    """The upstream response body could not be decoded."""
    pass


class UpstreamError(CheckerError):
    """The upstream service reported an explicit error payload."""

    def __init__(self, upstream_message: str):
        self.upstream_message = upstream_message
        super().__init__(f"AI API error: {upstream_message}")


class EmptyResponseError(CheckerError):
    """The upstream service returned no completion choices."""
    pass


class CheckerConfigError(SpamGuardError):
    """A checker was configured with unusable settings."""
    pass
