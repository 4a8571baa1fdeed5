import argparse
import logging
import sys

import devtools

from cmore_search.client import Client, set_request_id
from cmore_search.errors import SearchError
from cmore_search.models import Asset, Hit, SearchResult, Series
from cmore_search.settings import get_settings

logger = logging.getLogger(__name__)


def format_hit(hit: Hit, locale: str = "sv") -> str:
    match hit:
        case Series():
            return f"series {hit.id}: {hit.title(locale)}"
        case Asset():
            return f"{hit.type} {hit.video_id}: {hit.title(locale)}"


def print_result(result: SearchResult, locale: str = "sv", verbose: bool = False):
    print(f"{len(result.hits)} of {result.total_hits} hits")
    for hit in result.hits:
        print(devtools.pformat(hit) if verbose else format_hit(hit, locale))


def parse_params(values: list[str]) -> dict[str, str]:
    params = {}
    for value in values:
        key, sep, val = value.partition("=")
        if not sep:
            raise ValueError(f"Invalid query parameter {value!r}, expected key=value")
        params[key] = val
    return params


def main(
    query: str,
    fields: str | None = None,
    params: dict[str, str] | None = None,
    request_id: str | None = None,
    base_url: str | None = None,
    locale: str = "sv",
    verbose: bool = False,
) -> int:
    logging.basicConfig(level=get_settings().log_level)
    search_params = {"q": query} | (params or {})
    if fields:
        search_params["fields"] = fields
    options = [set_request_id(request_id)] if request_id else []
    try:
        with Client(base_url=base_url) as client:
            result = client.search(search_params, *options)
    except SearchError as e:
        logger.error(f"Search failed: {e}")
        if e.result and e.result.hits:
            print_result(e.result, locale=locale, verbose=verbose)
        return 1
    print_result(result, locale=locale, verbose=verbose)
    return 0


def main_script():
    parser = argparse.ArgumentParser()
    parser.add_argument("query")
    parser.add_argument("--fields", default=None)
    parser.add_argument("--param", action="append", default=[], help="Extra query parameter as key=value")
    parser.add_argument("--request-id", default=None)
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--locale", choices=["da", "fi", "nb", "sv"], default="sv")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    sys.exit(
        main(
            query=args.query,
            fields=args.fields,
            params=parse_params(args.param),
            request_id=args.request_id,
            base_url=args.base_url,
            locale=args.locale,
            verbose=args.verbose,
        )
    )


if __name__ == "__main__":
    main_script()
