import httpx
import pytest

from cmore_search import __main__ as cli
from cmore_search.client import Client
from tests.helpers import json_response


@pytest.fixture
def search_service(monkeypatch):
    sent = []
    responses = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return responses.pop(0)

    def make_client(**kwargs):
        kwargs["base_url"] = kwargs.get("base_url") or "http://search.test/"
        return Client(http_client=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs)

    monkeypatch.setattr(cli, "Client", make_client)
    return sent, responses


def test_main_prints_hits(search_service, capsys):
    sent, responses = search_service
    responses.append(
        json_response(
            200,
            {
                "total_hits": 7,
                "assets": [
                    {"type": "series", "id": "s1", "title_sv": "Idol"},
                    {"type": "movie", "video_id": "a1", "title_sv": "Film", "title_fi": "Elokuva"},
                ],
            },
        )
    )

    assert cli.main("idol", fields="title_sv", request_id="abc", params={"limit": "2"}) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["2 of 7 hits", "series s1: Idol", "movie a1: Film"]
    assert sent[0].url.params["q"] == "idol"
    assert sent[0].url.params["limit"] == "2"
    assert sent[0].url.params["fields"] == "title_sv,type"
    assert sent[0].headers["X-Request-Id"] == "abc"


def test_main_locale(search_service, capsys):
    _, responses = search_service
    body = {"total_hits": 1, "assets": [{"type": "movie", "video_id": "a1", "title_fi": "Elokuva"}]}
    responses.append(json_response(200, body))

    assert cli.main("idol", locale="fi") == 0
    assert capsys.readouterr().out.splitlines()[1] == "movie a1: Elokuva"


def test_main_reports_partial_results(search_service, capsys):
    _, responses = search_service
    responses.append(json_response(200, {"total_hits": 2, "assets": [{"type": "movie", "video_id": "a1"}, {}]}))

    assert cli.main("idol") == 1
    assert capsys.readouterr().out.splitlines() == ["1 of 2 hits", "movie a1: None"]


def test_main_error(search_service, capsys):
    _, responses = search_service
    responses.append(httpx.Response(500, content=b"boom", headers={"Content-Type": "text/plain"}))

    assert cli.main("idol") == 1
    assert capsys.readouterr().out == ""


def test_parse_params():
    assert cli.parse_params(["limit=10", "sort=title=asc"]) == {"limit": "10", "sort": "title=asc"}
    with pytest.raises(ValueError):
        cli.parse_params(["limit"])
