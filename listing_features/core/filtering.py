import math
from collections.abc import Mapping
from typing import Any

from listing_features.models import RawListing


def _is_truthy(value: Any) -> bool:
    # "0" is a real asking price upstream; NaN is not.
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def is_listing(node: Any) -> bool:
    """Listings carry an "Ask"; map cluster markers don't."""
    return isinstance(node, Mapping) and _is_truthy(node.get("Ask"))


def filter_listings(payload: Any) -> list[RawListing]:
    if not payload:
        return []
    nodes = payload[0]
    if not nodes:
        return []
    return [node for node in nodes if is_listing(node)]
