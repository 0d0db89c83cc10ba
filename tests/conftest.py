import json
import urllib.parse

import pytest

from naver_search.client import NaverSearchClient
from naver_search.dispatcher import Dispatcher
from naver_search.models import Credentials


class FakeResponse:
    def __init__(self, body: bytes):
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


class FakeUrlopen:
    """Stands in for urllib.request.urlopen and records every request."""

    def __init__(self, payload=None, error=None, body=None):
        self.payload = {} if payload is None else payload
        self.error = error
        self.body = body
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return FakeResponse(self.body)
        return FakeResponse(json.dumps(self.payload).encode("utf-8"))

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last(self):
        return self.requests[-1]

    def last_query(self) -> dict:
        query = urllib.parse.urlsplit(self.last.full_url).query
        return dict(urllib.parse.parse_qsl(query))

    def last_path(self) -> str:
        return urllib.parse.urlsplit(self.last.full_url).path

    def last_body(self) -> dict:
        return json.loads(self.last.data.decode("utf-8"))


@pytest.fixture
def credentials():
    return Credentials(client_id="test-id", client_secret="test-secret")


@pytest.fixture
def fake_urlopen():
    return FakeUrlopen()


@pytest.fixture
def client(credentials, fake_urlopen):
    return NaverSearchClient(credentials, urlopen=fake_urlopen)


@pytest.fixture
def dispatcher(client):
    return Dispatcher(client)
