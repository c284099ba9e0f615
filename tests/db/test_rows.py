"""Tests for the YQLRows cursor and YQLRow."""

import pytest

from yql_driver.db.backend import Row
from yql_driver.db.yql_backend import YQLRow, YQLRows
from yql_driver.errors import EndOfRows, UnsupportedResultShape, YQLError
from yql_driver.models.value import ValueKind


class TestNext:
    def test_single_fixed_column(self):
        assert YQLRows([1, 2]).columns() == ["results"]

    def test_values_in_order_then_end(self):
        rows = YQLRows(["a", 1, True, None, {"k": "v"}])
        dest = [None]
        seen = []
        while True:
            try:
                rows.next(dest)
            except EndOfRows:
                break
            seen.append(dest[0])
        assert seen == ["a", 1, True, None, {"k": "v"}]

    def test_values_keep_decoded_type(self):
        rows = YQLRows(["1.5", 1.5])
        dest = [None]
        rows.next(dest)
        assert isinstance(dest[0], str)
        rows.next(dest)
        assert isinstance(dest[0], float)

    def test_exhausted_is_terminal(self):
        rows = YQLRows([1])
        dest = [None]
        rows.next(dest)
        for _ in range(3):
            with pytest.raises(EndOfRows):
                rows.next(dest)
        assert dest[0] == 1
        assert rows.exhausted

    def test_empty_row_set(self):
        rows = YQLRows([])
        assert rows.exhausted
        with pytest.raises(EndOfRows):
            rows.next([None])

    def test_end_of_rows_is_not_a_driver_error(self):
        assert not issubclass(EndOfRows, YQLError)
        assert not issubclass(EndOfRows, UnsupportedResultShape)

    def test_close_is_noop(self):
        rows = YQLRows([1])
        rows.close()
        rows.close()
        assert rows.fetchone()[0] == 1


class TestFetch:
    def test_fetchone_then_none(self):
        rows = YQLRows(["a"])
        assert rows.fetchone() == YQLRow("a")
        assert rows.fetchone() is None
        assert rows.fetchone() is None

    def test_fetchall_returns_remaining(self):
        rows = YQLRows([1, 2, 3])
        rows.next([None])
        assert [r["results"] for r in rows.fetchall()] == [2, 3]
        assert rows.fetchall() == []

    def test_iteration(self):
        assert [r[0] for r in YQLRows(["x", "y"])] == ["x", "y"]

    def test_rowcount_is_total(self):
        rows = YQLRows([1, 2])
        rows.fetchall()
        assert rows.rowcount == 2


class TestYQLRow:
    def test_named_and_positional_access(self):
        row = YQLRow({"symbol": "YHOO"})
        assert row["results"] == {"symbol": "YHOO"}
        assert row[0] == {"symbol": "YHOO"}

    def test_unknown_column(self):
        row = YQLRow(1)
        with pytest.raises(KeyError):
            _ = row["other"]
        with pytest.raises(IndexError):
            _ = row[1]

    def test_keys(self):
        assert YQLRow(1).keys() == ["results"]

    def test_conforms_to_row_protocol(self):
        assert isinstance(YQLRow(1), Row)

    def test_typed_value(self):
        assert YQLRow("s").value.kind is ValueKind.STRING
        assert YQLRow(None).value.is_null
