from typing import Any

from pydantic import ConfigDict

from cmore_search.models.common import CatalogModel


class APIErrorBody(CatalogModel):
    """Error object returned by the search service for non-200 responses."""

    model_config = ConfigDict(extra="allow")

    message: str = ""
    code: str | int | None = None

    @property
    def raw(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
