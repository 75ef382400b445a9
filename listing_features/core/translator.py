import json
import logging
import random
from itertools import islice
from typing import Any

from listing_features.core.errors import ParseError
from listing_features.core.filtering import filter_listings
from listing_features.core.ids import plan_ids
from listing_features.models import FeatureCollection
from listing_features.utils.formatting import format_feature

log = logging.getLogger(__name__)


def load_payload(payload: Any) -> list:
    """Decode (if needed) and check the top-level shape of a map search response.

    The response is a list whose first element holds the listing and
    cluster nodes; anything else can't be walked safely.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except ValueError as e:
            raise ParseError(f"response is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise ParseError(f"expected a JSON array, got {type(payload).__name__}")
    if payload and payload[0] and not isinstance(payload[0], list):
        raise ParseError(
            f"expected an array of nodes first, got {type(payload[0]).__name__}"
        )
    return payload


def translate(
    payload: Any,
    id_field: str,
    rng: random.Random | None = None,
) -> FeatureCollection:
    """Turn a raw map search response into a FeatureCollection.

    ttl and metadata are left for the caller to fill in.
    """
    data = load_payload(payload)
    listings = filter_listings(data)
    log.debug("Found %d listings in payload", len(listings))

    batch = plan_ids(len(listings), rng)
    features = [
        format_feature(raw, feature_id, id_field)
        for raw, feature_id in zip(islice(listings, batch.size), batch)
    ]
    return FeatureCollection(features=features)
