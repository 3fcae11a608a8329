"""Custom exception hierarchy for termip."""


class TermIpError(Exception):
    """Base exception for all termip errors."""


class LookupFailed(TermIpError):
    """The geolocation lookup did not produce a result."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Lookup failed for '{target}': {reason}")


class LookupRejected(LookupFailed):
    """The upstream service answered, but refused the query."""

    def __init__(self, target: str, message: str):
        self.message = message
        super().__init__(target, f"rejected by upstream ({message})")


class ChannelClosed(TermIpError):
    """A one-shot channel was closed or already used."""
