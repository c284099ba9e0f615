"""Error kinds raised by the YQL driver.

Network and HTTP failures, token requests included, are not wrapped: they
surface as the transport's own exceptions (``httpx.HTTPError``).
"""


class YQLError(Exception):
    """Base class for all driver errors."""


class TransactionsUnsupported(YQLError):
    """Raised on any attempt to begin a transaction."""

    def __init__(self) -> None:
        super().__init__("transactions are not supported by the YQL driver")


class WritesUnsupported(YQLError):
    """Raised on any attempt to execute a write statement."""

    def __init__(self) -> None:
        super().__init__("write statements are not supported by the YQL driver")


class ConnectionClosed(YQLError):
    """Raised when a statement executes through a closed connection."""

    def __init__(self) -> None:
        super().__init__("connection is closed")


class InvalidResponseBody(YQLError):
    """The response body could not be decoded as JSON."""


class UnsupportedResultShape(YQLError):
    """The decoded response is not shaped like a YQL result envelope."""


class EndOfRows(Exception):  # noqa: N818
    """Signals that a result cursor has no more rows.

    Not a ``YQLError``: reaching the end of a row set is normal loop
    termination.
    """


class OAuthTokenError(YQLError):
    """A token endpoint answered without an OAuth token."""
