from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from cmore_search.models.asset import Asset
from cmore_search.models.series import Series

SERIES_TYPE = "series"


def hit_variant(value: Any) -> str:
    """Selects the hit shape from the ``type`` field.

    Only ``"series"`` picks :class:`Series`, any other value falls back to
    :class:`Asset`.
    """
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return "series" if kind == SERIES_TYPE else "asset"


Hit = Annotated[
    Annotated[Asset, Tag("asset")] | Annotated[Series, Tag("series")],
    Discriminator(hit_variant),
]


class ResponseMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, list[str]] = Field(default_factory=dict)
    request_url: str


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_hits: int = 0
    hits: list[Hit] = Field(default_factory=list)
    meta: ResponseMeta

    @property
    def assets(self) -> list[Asset]:
        return [h for h in self.hits if isinstance(h, Asset)]

    @property
    def series(self) -> list[Series]:
        return [h for h in self.hits if isinstance(h, Series)]
