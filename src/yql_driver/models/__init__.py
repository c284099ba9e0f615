"""Value models."""

from yql_driver.models.value import ResultValue, ValueKind

__all__ = ["ResultValue", "ValueKind"]
