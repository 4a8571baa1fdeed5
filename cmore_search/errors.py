from enum import StrEnum
from typing import Any

from cmore_search.models import APIErrorBody, SearchResult


class ErrorKind(StrEnum):
    TYPE_MISSING = "type missing"
    CONTENT_TYPE_NOT_JSON = "Content-Type not JSON"
    INVALID_BASE_URL = "invalid base URL"
    HTTP_STATUS = "unexpected HTTP status"
    API_ERROR = "API error"
    MALFORMED_ERROR_BODY = "malformed error body"
    DECODE = "malformed response body"


class SearchError(Exception):
    """Raised for every failure that is not a transport error.

    ``result`` holds whatever was assembled before the failure: the response
    meta once a response was received, plus any hits decoded so far.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None, result: SearchResult | None = None):
        super().__init__(message or str(kind))
        self.kind = kind
        self.result = result

    @property
    def status_code(self) -> int | None:
        return self.result and self.result.meta.status_code

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name,
            "message": str(self),
            "status_code": self.status_code,
            "hits_decoded": len(self.result.hits) if self.result else 0,
        }


class APIError(SearchError):
    """A structured error reported by the search service."""

    def __init__(self, body: APIErrorBody, result: SearchResult | None = None):
        super().__init__(ErrorKind.API_ERROR, body.message or str(ErrorKind.API_ERROR), result=result)
        self.body = body

    @property
    def message(self) -> str:
        return self.body.message

    @property
    def code(self) -> str | int | None:
        return self.body.code

    def to_dict(self) -> dict[str, Any]:
        return super().to_dict() | {"code": self.code, "raw": self.body.raw}
