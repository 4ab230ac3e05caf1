import pytest

from censys_search.core import CensysApiAccessObject, Credentials


@pytest.fixture
def credentials():
    return Credentials("my-id", "my-secret")


@pytest.fixture
def access(credentials):
    with CensysApiAccessObject(credentials) as api:
        yield api


@pytest.fixture(autouse=True)
def no_credential_environment(monkeypatch):
    monkeypatch.delenv("CENSYS_API_ID", raising=False)
    monkeypatch.delenv("CENSYS_SECRET", raising=False)


class RecordingSink(object):
    """Keeps every written page in memory."""

    def __init__(self):
        self.pages = []

    def write(self, value):
        self.pages.append(value)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_page():
    def page(cursor=None, hits=None):
        """Build a host search page the way the API returns it."""
        return {
            "code": 200,
            "status": "OK",
            "result": {
                "hits": hits or [],
                "links": {"prev": "", "next": cursor if cursor is not None else ""},
            },
        }

    return page
