import math
from dataclasses import dataclass, field
from typing import Any

# One node of the upstream map search payload, untouched.
RawListing = dict[str, Any]


def _json_safe(value: Any) -> Any:
    # JSON has no NaN/Infinity; unreadable numbers go out as null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


@dataclass(frozen=True)
class Metadata:
    name: str                  # e.g. "sfbay apartments"
    description: str
    id_field: str              # property key holding the object id
    has_static_data: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "hasStaticData": self.has_static_data,
            "idField": self.id_field,
        }


@dataclass
class FeatureCollection:
    features: list[dict[str, Any]] = field(default_factory=list)
    ttl: int | None = None          # seconds, set by the caller
    metadata: Metadata | None = None

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": "FeatureCollection",
            "features": [_json_safe(f) for f in self.features],
        }
        if self.ttl is not None:
            out["ttl"] = self.ttl
        if self.metadata is not None:
            out["metadata"] = self.metadata.as_dict()
        return out


@dataclass(frozen=True)
class Result:
    """Either a finished collection or the error that prevented it."""

    collection: FeatureCollection | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.collection is not None
