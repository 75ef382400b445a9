import logging
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any

from listing_features.models import RawListing

log = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Leading number of a string: "450", "1.5br", " -2e3 ", "Infinity" ...
_FLOAT_RE = re.compile(r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity))")
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_float(value: Any) -> float:
    """Leading-number parse; nan when there is no number to read."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    m = _FLOAT_RE.match(str(value))
    if not m:
        return math.nan
    return float(m.group(1))


def parse_int(value: Any) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    m = _INT_RE.match(str(value))
    return int(m.group(1)) if m else None


def iso_timestamp(epoch_seconds: Any) -> str | None:
    # "1000" -> "1970-01-01T00:16:40.000Z"; None when unreadable
    seconds = parse_int(epoch_seconds)
    if seconds is None:
        return None
    try:
        dt = EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None
    # strftime("%Y") doesn't zero-pad years before 1000 on every platform
    return f"{dt.year:04d}-" + dt.strftime("%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def price_per_bedroom(price: float, bedrooms: float) -> float | None:
    if not (math.isfinite(price) and math.isfinite(bedrooms)) or bedrooms == 0:
        return None
    ppbr = price / bedrooms
    if ppbr == 0 or not math.isfinite(ppbr):
        return None
    return ppbr


def format_feature(raw: RawListing, feature_id: int, id_field: str) -> dict[str, Any]:
    price = parse_float(raw.get("Ask"))
    bedrooms = parse_float(raw.get("Bedrooms"))
    post_date = iso_timestamp(raw.get("PostedDate"))

    if math.isnan(price):
        log.debug("Feature %s: unreadable Ask %r", feature_id, raw.get("Ask"))
    if math.isnan(bedrooms):
        log.debug("Feature %s: unreadable Bedrooms %r", feature_id, raw.get("Bedrooms"))
    if post_date is None:
        log.debug("Feature %s: unreadable PostedDate %r", feature_id, raw.get("PostedDate"))

    properties: dict[str, Any] = {
        "title": raw.get("PostingTitle"),
        "price": price,
        "bedrooms": bedrooms,
        "postDate": post_date,
        "posting": raw.get("PostingURL"),
        "thumbnail": raw.get("ImageThumb"),
        id_field: feature_id,
    }

    ppbr = price_per_bedroom(price, bedrooms)
    if ppbr is not None:
        properties["pricePerBedroom"] = ppbr

    return {
        "type": "Feature",
        "geometry": {
            "type": "Point",
            "coordinates": [raw.get("Longitude"), raw.get("Latitude")],
        },
        "properties": properties,
    }
