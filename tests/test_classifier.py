import pytest
from hypothesis import given
from hypothesis import strategies as st

from cmore_search.classifier import Classification, classify, is_json_content_type, status_line


@pytest.mark.parametrize(
    "content_type, is_json",
    [
        ("application/json; charset=utf-8", True),
        ("application/json; charset=iso-8859-1", True),
        ("application/json", True),
        ("text/plain", False),
        ("randomnoiseapplication/jsonrandomnoise", False),
        ("Application/JSON", False),
        ("", False),
        (None, False),
    ],
)
def test_is_json_content_type(content_type, is_json):
    assert is_json_content_type(content_type) is is_json


@given(
    st.text(alphabet=" \t", max_size=3),
    st.text(alphabet=" \t", max_size=3),
    st.sampled_from(["", "; charset=utf-8", ";charset=iso-8859-1", "; charset=UTF-8; foo=bar"]),
)
def test_json_detection_ignores_whitespace_and_parameters(leading, trailing, parameters):
    assert is_json_content_type(f"{leading}application/json{trailing}{parameters}")


@pytest.mark.parametrize(
    "status_code, content_types, expected",
    [
        (200, ["application/json"], Classification.SUCCESS),
        (200, ["text/html"], Classification.CONTENT_TYPE_ERROR),
        (200, [], Classification.CONTENT_TYPE_ERROR),
        (404, ["application/json; charset=utf-8"], Classification.STRUCTURED_ERROR),
        (500, ["text/plain"], Classification.OPAQUE_ERROR),
        (500, [], Classification.OPAQUE_ERROR),
        (201, ["application/json"], Classification.STRUCTURED_ERROR),
        (200, ["application/json", "text/plain"], Classification.SUCCESS),
        (200, ["text/plain", "application/json"], Classification.CONTENT_TYPE_ERROR),
    ],
)
def test_classify(status_code, content_types, expected):
    assert classify(status_code, content_types) is expected


def test_status_line():
    assert status_line(500) == "500 Internal Server Error"
    assert status_line(404) == "404 Not Found"
