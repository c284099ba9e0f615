"""Relational-client protocols — the prepare/execute/fetch contract.

Host code programs against these protocols: a driver opens connections,
connections prepare statements, statements execute into row cursors. The
YQL backend is one implementation; anything else speaking the same
contract can be swapped in.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Row(Protocol):
    """A result row supporting both named and positional access."""

    def __getitem__(self, key: str | int) -> Any:
        """Get a column value by name or position."""
        ...

    def keys(self) -> Any:
        """Return column names."""
        ...


@runtime_checkable
class Rows(Protocol):
    """Forward-only cursor returned by Statement.execute_read()."""

    @property
    def rowcount(self) -> int:
        """Number of rows in the result set."""
        ...

    def columns(self) -> list[str]:
        """Return the column names of the result set."""
        ...

    def next(self, dest: list[Any]) -> None:
        """Write the next row into ``dest``; raise EndOfRows when exhausted."""
        ...

    def fetchone(self) -> Row | None:
        """Fetch the next row, or None if exhausted."""
        ...

    def fetchall(self) -> list[Row]:
        """Fetch all remaining rows."""
        ...

    def close(self) -> None:
        """Release the cursor."""
        ...


@runtime_checkable
class Statement(Protocol):
    """A prepared statement with ``?`` positional placeholders."""

    def parameter_count(self) -> int:
        """Number of placeholders in the query text."""
        ...

    def execute_read(self, args: tuple[Any, ...] | list[Any] = ()) -> Rows:
        """Bind ``args`` and run the query, returning a cursor."""
        ...

    def execute_write(self, args: tuple[Any, ...] | list[Any] = ()) -> Any:
        """Bind ``args`` and run a statement that returns no rows."""
        ...

    def close(self) -> None:
        """Release the statement."""
        ...


@runtime_checkable
class Connection(Protocol):
    """An open connection producing prepared statements."""

    def prepare(self, query: str) -> Statement:
        """Prepare a statement for ``query``."""
        ...

    def begin(self) -> Any:
        """Begin a transaction."""
        ...

    def close(self) -> None:
        """Close the connection."""
        ...


@runtime_checkable
class Driver(Protocol):
    """Opens connections from a descriptor string."""

    def open(self, dsn: str) -> Connection:
        """Open a connection configured by ``dsn``."""
        ...
