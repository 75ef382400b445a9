from abc import ABC, abstractmethod

from listing_features.models import Result


class Supplier(ABC):
    @property
    @abstractmethod
    def name(self) -> str:
        """Short unique supplier name, e.g. 'craigslist'."""

    @property
    @abstractmethod
    def id_field(self) -> str:
        """Feature property that holds the object id."""

    @abstractmethod
    def get_data(self, city: str, category: str) -> Result:
        """Return the listings of one city/category as a feature collection."""
