# =============================================================================
# naver_search/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure the core can produce is one of these.  The Dispatcher is the
# single place that catches them and turns them into a failed
# ResultEnvelope; nothing below it swallows errors.
#
#   OperationNotFoundError   unknown tool name
#   ArgumentValidationError  caller input does not match the schema
#   NotInitializedError      client used before credentials were set
#   UpstreamError            non-2xx response or network failure
#   MissingCredentialsError  startup only; fatal, never seen per call
# =============================================================================

from typing import Optional, Sequence


class NaverSearchError(Exception):
    """Base class for all errors raised by naver_search."""


class OperationNotFoundError(NaverSearchError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown operation: {name}")


class ArgumentValidationError(NaverSearchError):
    """Caller arguments were rejected by the operation's input schema.

    `details` holds one "<field>: <problem>" line per offending field.
    """

    def __init__(self, operation: str, details: Sequence[str]):
        self.operation = operation
        self.details = list(details)
        super().__init__(f"Invalid arguments for {operation}: {'; '.join(self.details)}")


class NotInitializedError(NaverSearchError):
    def __init__(self):
        super().__init__(
            "NaverSearchClient is not initialized. Please call initialize() first."
        )


class UpstreamError(NaverSearchError):
    """The Naver API answered with an error, or could not be reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message)


class MissingCredentialsError(NaverSearchError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(
            f"{' and '.join(self.missing)} environment variable(s) are required"
        )
