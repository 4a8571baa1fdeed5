import logging
import posixpath
from collections.abc import Callable, Mapping

import httpx

from cmore_search.classifier import Classification, classify, status_line
from cmore_search.decoder import decode_api_error, decode_search_result
from cmore_search.errors import ErrorKind, SearchError
from cmore_search.models import ResponseMeta, SearchResult
from cmore_search.query import build_query
from cmore_search.settings import get_settings

logger = logging.getLogger(__name__)

type RequestOption = Callable[[httpx.Request], None]

SEARCH_PATH = "/search"
# Max unread bytes drained before a streamed response is closed
DRAIN_LIMIT = 64


def set_request_id(request_id: str) -> RequestOption:
    """Request option setting the ``X-Request-Id`` header."""

    def option(request: httpx.Request):
        request.headers["X-Request-Id"] = request_id

    return option


def parse_base_url(base_url: str | None) -> httpx.URL:
    if not base_url:
        raise SearchError(ErrorKind.INVALID_BASE_URL)
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise SearchError(ErrorKind.INVALID_BASE_URL, f"invalid base URL {base_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise SearchError(ErrorKind.INVALID_BASE_URL, f"invalid base URL {base_url!r}")
    return url


def canonical_header_key(key: str) -> str:
    """Canonical header name, e.g. ``content-type`` becomes ``Content-Type``."""
    return "-".join(part.capitalize() for part in key.split("-"))


def make_meta(response: httpx.Response) -> ResponseMeta:
    headers: dict[str, list[str]] = {}
    for key, value in response.headers.multi_items():
        headers.setdefault(canonical_header_key(key), []).append(value)
    return ResponseMeta(status_code=response.status_code, headers=headers, request_url=str(response.request.url))


def content_length(response: httpx.Response) -> int | None:
    try:
        return int(response.headers["content-length"])
    except (KeyError, ValueError):
        return None


def discard(response: httpx.Response, limit: int = DRAIN_LIMIT):
    """Closes a streamed response, draining the unread body first only when
    its declared length is at most ``limit`` bytes.
    """
    length = content_length(response)
    if not response.is_stream_consumed and length is not None and length <= limit:
        for _ in response.iter_raw():
            pass
    response.close()


class Client:
    def __init__(
        self,
        base_url: str | None = None,
        app_name: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = get_settings()
        self.base_url = parse_base_url(settings.base_url if base_url is None else base_url)
        self.app_name = app_name or settings.app_name
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if self._owns_http_client:
            self.http_client.close()

    def make_url(self) -> httpx.URL:
        return self.base_url.copy_with(path=posixpath.join(self.base_url.path, SEARCH_PATH.lstrip("/")))

    def build_request(self, query: Mapping[str, str] | None, *options: RequestOption) -> httpx.Request:
        params = build_query(query, self.app_name)
        request = self.http_client.build_request("GET", self.make_url(), params=params)
        for option in options:
            option(request)
        return request

    def search(self, query: Mapping[str, str] | None = None, *options: RequestOption) -> SearchResult:
        """Runs a search and decodes the returned page of hits.

        Transport errors from httpx propagate unchanged. Every other failure
        raises :class:`SearchError`, with the response meta and any hits
        decoded so far available on ``error.result``.
        """
        request = self.build_request(query, *options)
        logger.info(f"Making request to {request.url}")
        response = self.http_client.send(request, stream=True)
        try:
            logger.info(f"Response {response.status_code} for {request.method} {request.url}")
            return self.handle_response(response)
        finally:
            discard(response)

    def handle_response(self, response: httpx.Response) -> SearchResult:
        meta = make_meta(response)
        match classify(response.status_code, response.headers.get_list("content-type")):
            case Classification.OPAQUE_ERROR:
                raise SearchError(
                    ErrorKind.HTTP_STATUS, status_line(response.status_code), result=SearchResult(meta=meta)
                )
            case Classification.STRUCTURED_ERROR:
                raise decode_api_error(response.read(), meta)
            case Classification.CONTENT_TYPE_ERROR:
                raise SearchError(ErrorKind.CONTENT_TYPE_NOT_JSON, result=SearchResult(meta=meta))
            case Classification.SUCCESS:
                return decode_search_result(response.read(), meta)
