"""Relational-client protocols and the YQL backend."""

from yql_driver.db.backend import Connection, Driver, Row, Rows, Statement
from yql_driver.db.connection import YQLDriver, open_connection
from yql_driver.db.descriptor import ConnectionDescriptor, parse_descriptor
from yql_driver.db.yql_backend import YQLConnection, YQLRow, YQLRows, YQLStatement

__all__ = [
    "Connection",
    "ConnectionDescriptor",
    "Driver",
    "Row",
    "Rows",
    "Statement",
    "YQLConnection",
    "YQLDriver",
    "YQLRow",
    "YQLRows",
    "YQLStatement",
    "open_connection",
    "parse_descriptor",
]
