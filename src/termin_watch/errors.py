"""Exception hierarchy for the checker."""


class TerminWatchError(Exception):
    """Base class for checker errors."""


class MissingCredentialsError(TerminWatchError):
    """Pushover user key or application token is not configured."""


class PushoverError(TerminWatchError):
    """Pushover answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Pushover failed: {status_code} {body}")
