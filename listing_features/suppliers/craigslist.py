import logging
import random
from collections.abc import Mapping

import requests

from listing_features.core.errors import ParseError, UnknownCategoryError
from listing_features.core.translator import translate
from listing_features.models import Metadata, Result
from listing_features.suppliers.base import Supplier
from listing_features.suppliers.types import TYPES

log = logging.getLogger(__name__)

SEARCH_URL = "https://{city}.craigslist.org/jsonsearch/{path}/?map=1"

HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/19.0 Safari/605.1.15",
}

DEFAULT_ID_FIELD = "featureId"
DEFAULT_TTL = 60 * 60


class CraigslistSupplier(Supplier):
    def __init__(
        self,
        ttl: int = DEFAULT_TTL,
        id_field: str = DEFAULT_ID_FIELD,
        session: requests.Session | None = None,
        types: Mapping[str, str] = TYPES,
        rng: random.Random | None = None,
        timeout: float = 30,
    ):
        self.ttl = ttl
        self._id_field = id_field
        # Reuse a session for keep-alive + connection pooling
        self._session = session or requests.Session()
        self._types = types
        self._rng = rng
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "craigslist"

    @property
    def id_field(self) -> str:
        return self._id_field

    def url_for(self, city: str, category: str) -> str:
        path = self._types.get(category)
        if path is None:
            raise UnknownCategoryError(category)
        return SEARCH_URL.format(city=city, path=path)

    def fetch(self, city: str, category: str) -> str:
        resp = self._session.get(
            self.url_for(city, category), headers=HEADERS, timeout=self._timeout
        )
        resp.raise_for_status()
        return resp.text

    def get_data(self, city: str, category: str) -> Result:
        try:
            body = self.fetch(city, category)
            collection = translate(body, self.id_field, self._rng)
        except UnknownCategoryError as e:
            log.info("[Supplier %s] %s", self.name, e)
            return Result(error=e)
        except requests.RequestException as e:
            log.warning("[Supplier %s] fetch error for %s/%s: %s", self.name, city, category, e)
            return Result(error=e)
        except ParseError as e:
            log.warning("[Supplier %s] bad payload for %s/%s: %s", self.name, city, category, e)
            return Result(error=e)

        collection.ttl = self.ttl
        collection.metadata = Metadata(
            name=f"{city} {category}",
            description=f"Craigslist {category} listings for {city}",
            id_field=self.id_field,
        )
        log.info("[Supplier %s] %s/%s: %d features", self.name, city, category, len(collection.features))
        return Result(collection=collection)
