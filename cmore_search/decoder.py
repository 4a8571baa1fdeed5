import logging
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from cmore_search.classifier import status_line
from cmore_search.errors import APIError, ErrorKind, SearchError
from cmore_search.models import APIErrorBody, Hit, ResponseMeta, SearchResult
from cmore_search.models.common import CatalogModel

logger = logging.getLogger(__name__)

HitAdapter = TypeAdapter(Hit)


class HitEnvelope(BaseModel):
    """Only the discriminator of a raw hit, every other field is ignored."""

    type: str | None = None


class SearchPage(CatalogModel):
    total_hits: int = 0
    assets: list[Any] | None = None


def decode_hits(raw_hits: list[Any], total_hits: int, meta: ResponseMeta) -> SearchResult:
    """Decodes raw hits in order, stopping at the first bad one.

    The raised :class:`SearchError` carries the hits decoded before the
    failing element.
    """
    hits: list[Hit] = []

    def partial() -> SearchResult:
        return SearchResult(total_hits=total_hits, hits=hits, meta=meta)

    for index, raw in enumerate(raw_hits):
        try:
            # A null hit has no type, like an object without one
            envelope = HitEnvelope.model_validate({} if raw is None else raw)
        except ValidationError as e:
            logger.warning(f"Hit {index} has no readable type, aborting decode")
            raise SearchError(ErrorKind.DECODE, f"hit {index}: {e}", result=partial()) from e

        if not envelope.type:
            logger.warning(f"Hit {index} has no type, aborting decode after {len(hits)} hits")
            raise SearchError(ErrorKind.TYPE_MISSING, result=partial())

        try:
            hits.append(HitAdapter.validate_python(raw))
        except ValidationError as e:
            logger.warning(f"Failed to decode hit {index} of type {envelope.type!r}")
            raise SearchError(ErrorKind.DECODE, f"hit {index}: {e}", result=partial()) from e

    return partial()


def decode_search_result(body: bytes, meta: ResponseMeta) -> SearchResult:
    try:
        page = SearchPage.model_validate_json(body)
    except ValidationError as e:
        raise SearchError(ErrorKind.DECODE, str(e), result=SearchResult(meta=meta)) from e
    return decode_hits(page.assets or [], page.total_hits, meta)


def decode_api_error(body: bytes, meta: ResponseMeta) -> SearchError:
    """Turns a JSON error body into an :class:`APIError`.

    A body that cannot be decoded yields a ``MALFORMED_ERROR_BODY`` error
    which still names the original status.
    """
    result = SearchResult(meta=meta)
    try:
        error_body = APIErrorBody.model_validate_json(body)
    except ValidationError as e:
        error = SearchError(
            ErrorKind.MALFORMED_ERROR_BODY,
            f"{status_line(meta.status_code)}; JSON response body malformed ({e})",
            result=result,
        )
        error.__cause__ = e
        return error
    return APIError(error_body, result=result)
