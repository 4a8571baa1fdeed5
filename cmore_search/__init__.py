from cmore_search.client import Client, set_request_id
from cmore_search.errors import APIError, ErrorKind, SearchError
from cmore_search.models import Asset, Hit, ResponseMeta, SearchResult, Series

__all__ = [
    "APIError",
    "Asset",
    "Client",
    "ErrorKind",
    "Hit",
    "ResponseMeta",
    "SearchError",
    "SearchResult",
    "Series",
    "set_request_id",
]
