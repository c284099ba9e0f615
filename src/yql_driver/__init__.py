"""YQL web service exposed through a prepare/execute/fetch client interface."""

from yql_driver.db import YQLDriver, open_connection
from yql_driver.errors import (
    ConnectionClosed,
    EndOfRows,
    InvalidResponseBody,
    OAuthTokenError,
    TransactionsUnsupported,
    UnsupportedResultShape,
    WritesUnsupported,
    YQLError,
)

__all__ = [
    "ConnectionClosed",
    "EndOfRows",
    "InvalidResponseBody",
    "OAuthTokenError",
    "TransactionsUnsupported",
    "UnsupportedResultShape",
    "WritesUnsupported",
    "YQLDriver",
    "YQLError",
    "open_connection",
]
