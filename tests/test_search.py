import pytest
import requests
import responses

from censys_search.core import CensysApiAccessObject, CensysTransportException
from censys_search.search import CensysSearch, get_cursor, make_path_with_cursor

BASE_URL = CensysApiAccessObject.BASE_URL
SEARCH_URL = BASE_URL + "/hosts/search"
PATH = "/hosts/search?q=services.port%3A%20443"


def test_get_cursor():
    assert get_cursor({"result": {"links": {"next": "abc"}}}) == "abc"


@pytest.mark.parametrize(
    "response",
    [
        {},
        {"result": {}},
        {"result": {"links": {}}},
        {"result": {"links": {"next": None}}},
        {"result": {"links": {"next": ""}}},
        {"result": {"links": {"next": 42}}},
        {"result": {"links": {"next": ["abc"]}}},
        {"result": {"links": "abc"}},
        {"result": None},
        [],
        "abc",
        None,
    ],
)
def test_get_cursor_without_next_page(response):
    assert get_cursor(response) is None


def test_make_path_with_cursor():
    assert make_path_with_cursor(PATH, "abc") == PATH + "&cursor=abc"
    # cursors are never re-encoded
    assert make_path_with_cursor(PATH, "eyJh=/+") == PATH + "&cursor=eyJh=/+"


def test_follows_cursor(access, sink, make_page):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("abc", hits=[{"ip": "1.1.1.1"}]))
        rsps.add(responses.GET, SEARCH_URL, json=make_page(hits=[{"ip": "2.2.2.2"}]))
        count = CensysSearch(access).run(PATH, sink)
        calls = list(rsps.calls)

    assert count == 2
    assert [call.request.url for call in calls] == [BASE_URL + PATH, BASE_URL + PATH + "&cursor=abc"]
    assert [p["result"]["hits"][0]["ip"] for p in sink.pages] == ["1.1.1.1", "2.2.2.2"]


def test_cursor_is_appended_to_the_first_path(access, sink, make_page):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("one"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page("two"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page())
        CensysSearch(access).run(PATH, sink)
        calls = list(rsps.calls)

    assert [call.request.url for call in calls] == [
        BASE_URL + PATH,
        BASE_URL + PATH + "&cursor=one",
        BASE_URL + PATH + "&cursor=two",
    ]
    assert len(sink.pages) == 3


@pytest.mark.parametrize("body", [{"result": {"links": {}}}, {"result": {"links": {"next": None}}}, {"code": 200}])
def test_stops_without_cursor(access, sink, body):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=body)
        assert CensysSearch(access).run(PATH, sink) == 1
        calls = list(rsps.calls)

    assert len(calls) == 1
    assert sink.pages == [body]


def test_paging_disabled(access, sink, make_page):
    search = CensysSearch(access, paging=False)
    assert not search.paging
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("abc"))
        assert search.run(PATH, sink) == 1
        calls = list(rsps.calls)

    assert len(calls) == 1


def test_repeated_cursor_is_followed(access, sink, make_page, caplog):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("same"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page("same"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page("same"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page())
        CensysSearch(access).run(PATH, sink)
        calls = list(rsps.calls)

    assert len(calls) == 4
    assert calls[1].request.url == calls[2].request.url == calls[3].request.url
    assert "same cursor twice" in caplog.text


def test_pages_are_requested_one_at_a_time(access, make_page):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("abc"))
        rsps.add(responses.GET, SEARCH_URL, json=make_page())
        pages = CensysSearch(access).pages(PATH)
        next(pages)
        assert len(rsps.calls) == 1
        next(pages)
        assert len(rsps.calls) == 2
        assert list(pages) == []


def test_failure_keeps_emitted_pages(access, sink, make_page):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=make_page("abc"))
        rsps.add(responses.GET, SEARCH_URL, body=requests.ConnectionError("connection reset"))
        with pytest.raises(CensysTransportException):
            CensysSearch(access).run(PATH, sink)

    assert sink.pages == [make_page("abc")]


def test_error_response_ends_paging(access, sink):
    body = {"code": 422, "status": "Unprocessable Entity", "error": "Invalid cursor"}
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, SEARCH_URL, json=body, status=422)
        assert CensysSearch(access).run(PATH, sink) == 1

    assert sink.pages == [body]
