"""Unwrapping of the YQL response envelope.

YQL answers ``{"query": {"results": {<tag>: <value>}}}`` where ``<tag>``
depends on the query (``quote``, ``row``, ``item``, ...) and ``<value>`` is
usually an array, but a single match comes back as a bare object or scalar.
"""

from __future__ import annotations

import logging
from typing import Any

from yql_driver.errors import UnsupportedResultShape

logger = logging.getLogger(__name__)


def _require_mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise UnsupportedResultShape(f"Unsupported result: {where} is not an object")
    return value


def unwrap_results(document: Any) -> list[Any]:
    """Return the row set carried by a decoded YQL response.

    The first array-valued entry of ``query.results`` wins. Without one,
    the last entry's value becomes a single-row result, unless it is null:
    an empty mapping or a null last value is an unsupported result.
    """
    top = _require_mapping(document, "response")
    query = _require_mapping(top.get("query"), "query")
    results = _require_mapping(query.get("results"), "query.results")

    last: Any = None
    last_tag = ""
    for tag, value in results.items():
        if isinstance(value, list):
            logger.debug("Using array result %r (%d rows)", tag, len(value))
            return value
        last_tag, last = tag, value

    if last is None:
        raise UnsupportedResultShape("Unsupported result: query.results has no value")

    logger.debug("No array in query.results — using %r as a single row", last_tag)
    return [last]
