"""
Normalization of the aggregated reviews column.

Depending on the driver and dialect the JSON aggregate arrives as a
serialized string, as an already-decoded list, or as a "no reviews"
sentinel. A movie without reviews also yields one placeholder object whose
values are all null, produced by the LEFT JOIN.
"""
import json
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# Textual values the store uses to mean "no reviews"
NO_REVIEWS_SENTINELS = frozenset({"", "null", "[object Object]"})


def parse_reviews(raw: Any) -> List[Dict[str, Any]]:
    """
    Turn a raw aggregated reviews value into a list of review objects.

    Args:
        raw: Value of the reviews column for one movie

    Returns:
        The parsed reviews, or an empty list for missing, sentinel
        or malformed values
    """
    if raw is None:
        return []

    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")

    if isinstance(raw, str):
        if raw.strip() in NO_REVIEWS_SENTINELS:
            return []
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning(f"Discarding malformed reviews aggregate: {raw[:100]!r}")
            return []

    if not isinstance(raw, list):
        return []

    # Skip the all-null placeholder of a movie with no reviews
    return [
        review for review in raw
        if isinstance(review, dict) and review.get("id") is not None
    ]
