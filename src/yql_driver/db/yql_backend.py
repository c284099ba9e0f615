"""YQL implementation of the relational-client protocols.

Queries are sent as HTTP GET requests to the YQL web service and the JSON
envelope is flattened into single-column rows. Read-only: transactions and
write statements are rejected.
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import TYPE_CHECKING, Any

from yql_driver.auth.oauth import OAuthSession
from yql_driver.auth.pin import ConsolePinPrompt
from yql_driver.config import get_endpoint
from yql_driver.db.envelope import unwrap_results
from yql_driver.errors import (
    ConnectionClosed,
    EndOfRows,
    InvalidResponseBody,
    TransactionsUnsupported,
    WritesUnsupported,
)
from yql_driver.models.value import ResultValue

if TYPE_CHECKING:
    import httpx

    from yql_driver.auth.pin import PinPrompt
    from yql_driver.db.backend import Row
    from yql_driver.db.descriptor import ConnectionDescriptor

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"
RESULT_COLUMN = "results"


def _render(value: Any) -> str:
    """Text form of a bound argument, before quoting."""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, datetime.date | datetime.time):
        return value.isoformat()
    return str(value)


def quote_literal(value: Any) -> str:
    """Render ``value`` as a double-quoted YQL string literal."""
    return json.dumps(_render(value), ensure_ascii=False)


class YQLRow:
    """A single-column result row satisfying the Row protocol."""

    __slots__ = ("_raw",)

    def __init__(self, raw: Any) -> None:
        """Initialize with a decoded JSON value."""
        self._raw = raw

    def __getitem__(self, key: str | int) -> Any:
        """Get the value by column name ``"results"`` or position 0."""
        if key == RESULT_COLUMN or key == 0:
            return self._raw
        if isinstance(key, int):
            raise IndexError(key)
        raise KeyError(key)

    def __len__(self) -> int:
        return 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, YQLRow):
            return self._raw == other._raw
        return NotImplemented

    def __repr__(self) -> str:
        return f"YQLRow({self._raw!r})"

    def keys(self) -> list[str]:
        """Return column names."""
        return [RESULT_COLUMN]

    @property
    def value(self) -> ResultValue:
        """The row value tagged with its JSON kind."""
        return ResultValue.from_json(self._raw)


class YQLRows:
    """Forward-only cursor over an extracted row set.

    Exposes one column, ``results``. Once exhausted, every further read
    reports the end again.
    """

    def __init__(self, rows: list[Any]) -> None:
        """Initialize with the row set; the cursor starts at position 0."""
        self._rows = rows
        self._index = 0

    @property
    def rowcount(self) -> int:
        """Number of rows in the result set."""
        return len(self._rows)

    @property
    def exhausted(self) -> bool:
        """True once every row has been read."""
        return self._index >= len(self._rows)

    def columns(self) -> list[str]:
        """Return the column names of the result set."""
        return [RESULT_COLUMN]

    def close(self) -> None:
        """No-op; the row set is held in memory."""

    def next(self, dest: list[Any]) -> None:
        """Write the next value into ``dest[0]``; raise EndOfRows when exhausted."""
        if self.exhausted:
            raise EndOfRows
        dest[0] = self._rows[self._index]
        self._index += 1

    def fetchone(self) -> Row | None:
        """Fetch the next row, or None if exhausted."""
        dest: list[Any] = [None]
        try:
            self.next(dest)
        except EndOfRows:
            return None
        return YQLRow(dest[0])

    def fetchall(self) -> list[Row]:
        """Fetch all remaining rows."""
        remaining: list[Row] = [YQLRow(v) for v in self._rows[self._index :]]
        self._index = len(self._rows)
        return remaining

    def __iter__(self) -> YQLRows:
        return self

    def __next__(self) -> Row:
        row = self.fetchone()
        if row is None:
            raise StopIteration
        return row

    def __enter__(self) -> YQLRows:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class YQLStatement:
    """A prepared YQL query.

    Binding substitutes arguments into ``query`` in place: ``?`` placeholders
    are replaced left to right by quoted literals. A statement is meant to
    be executed once; binding again continues from the already-substituted
    text.
    """

    def __init__(self, conn: YQLConnection, query: str) -> None:
        """Initialize with the owning connection and the query template."""
        self._conn = conn
        self.query = query

    def parameter_count(self) -> int:
        """Number of ``?`` characters in the query text.

        Plain occurrence count: a ``?`` inside a string literal counts too.
        """
        return self.query.count(PLACEHOLDER)

    def close(self) -> None:
        """No-op."""

    def bind(self, args: tuple[Any, ...] | list[Any]) -> None:
        """Substitute ``args`` into the query text, first placeholder first.

        Scanning resumes after each inserted literal, so a ``?`` inside an
        argument is never mistaken for a placeholder. Arguments left over
        when the placeholders run out are ignored.
        """
        text = self.query
        pos = 0
        for arg in args:
            pos = text.find(PLACEHOLDER, pos)
            if pos < 0:
                break
            literal = quote_literal(arg)
            text = text[:pos] + literal + text[pos + 1 :]
            pos += len(literal)
        self.query = text

    def execute_write(self, args: tuple[Any, ...] | list[Any] = ()) -> Any:
        """Always fails: YQL statements are executed as reads only."""
        raise WritesUnsupported

    def execute_read(self, args: tuple[Any, ...] | list[Any] = ()) -> YQLRows:
        """Bind ``args``, run the query and return a cursor over its results."""
        self.bind(args)
        logger.debug("YQL query: %s", self.query)

        resp = self._conn._send(self.query)
        resp.raise_for_status()

        try:
            document = json.loads(resp.content)
        except ValueError as e:
            raise InvalidResponseBody(f"Invalid JSON: {e}") from e

        rows = YQLRows(unwrap_results(document))
        logger.info("YQL query returned %d rows", rows.rowcount)
        return rows

    def __enter__(self) -> YQLStatement:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class YQLConnection:
    """Connection to the YQL web service.

    Holds the transport handle and the parsed descriptor. With credentials
    every query runs the OAuth PIN exchange (secure mode); without, queries
    are plain GET requests (public mode).
    """

    def __init__(
        self,
        http_client: httpx.Client,
        descriptor: ConnectionDescriptor,
        *,
        pin_prompt: PinPrompt | None = None,
    ) -> None:
        """Initialize with a transport handle and descriptor."""
        self._http: httpx.Client | None = http_client
        self.descriptor = descriptor
        self._pin_prompt = pin_prompt

    @property
    def closed(self) -> bool:
        """True after close()."""
        return self._http is None

    def close(self) -> None:
        """Release the transport reference. Idempotent.

        The HTTP client itself belongs to whoever created it and stays open.
        """
        self._http = None

    def begin(self) -> Any:
        """Always fails: the YQL service has no transactions."""
        raise TransactionsUnsupported

    def prepare(self, query: str) -> YQLStatement:
        """Prepare ``query``. No validation happens here."""
        return YQLStatement(self, query)

    def _send(self, query: str) -> httpx.Response:
        """Send a bound query using the configured transport mode."""
        if self._http is None:
            raise ConnectionClosed
        if self.descriptor.is_secure:
            return self._send_secure(self._http, query)
        return self._send_public(self._http, query)

    def _send_public(self, client: httpx.Client, query: str) -> httpx.Response:
        params = {"q": query, "format": "json"}
        if self.descriptor.env:
            params["env"] = self.descriptor.env
        logger.info("Sending public YQL request")
        return client.get(get_endpoint(), params=params)

    def _send_secure(self, client: httpx.Client, query: str) -> httpx.Response:
        session = OAuthSession(
            self.descriptor.key,
            self.descriptor.secret,
            self._pin_prompt or ConsolePinPrompt(),
            client,
        )
        logger.info("Sending OAuth-signed YQL request")
        return session.get(get_endpoint(), {"format": "json", "q": query})

    def __enter__(self) -> YQLConnection:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
