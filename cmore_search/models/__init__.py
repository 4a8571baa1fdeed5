from cmore_search.models.asset import Asset, Brand, Season, Team
from cmore_search.models.common import Credit, Event, ExternalReference, Genre, Image, LocalizedImage
from cmore_search.models.error import APIErrorBody
from cmore_search.models.search import Hit, ResponseMeta, SearchResult
from cmore_search.models.series import Series

__all__ = [
    "APIErrorBody",
    "Asset",
    "Brand",
    "Credit",
    "Event",
    "ExternalReference",
    "Genre",
    "Hit",
    "Image",
    "LocalizedImage",
    "ResponseMeta",
    "SearchResult",
    "Season",
    "Series",
    "Team",
]
