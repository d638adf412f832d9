"""Pytest configuration and fixtures."""

import pytest
from pubsub import pub

from gopher_browser.interfaces import GopherTransport, FetchResult, ConnectError
from gopher_browser.core import STATUS_TOPIC, NOTICE_TOPIC, PAGE_TOPIC

HOST = "gopher.example"

ROOT_MENU = (
    b"iWelcome to the example server\t\terror.host\t1\r\n"
    b"1Documents\t/docs\tgopher.example\t70\r\n"
    b"0About this server\t/about.txt\tgopher.example\t70\r\n"
    b"7Search\t/search\tgopher.example\t70\r\n"
    b"9Binary file\t/file.zip\tgopher.example\t70\r\n"
    b".\r\n"
)

DOCS_MENU = (
    b"iDocuments\t\terror.host\t1\r\n"
    b"1Back to root\t/\tgopher.example\t70\r\n"
    b".\r\n"
)

ABOUT_TEXT = b"About\r\n\r\nThis is a test server.\r\n.\r\n"

SEARCH_RESULTS = b"0Result for needle\t/result.txt\tgopher.example\t70\r\n.\r\n"


class FakeTransport(GopherTransport):
    """Transport serving canned responses.

    Responses map (host, selector, port) to bytes, a FetchResult, or an
    exception to raise. Unknown targets raise ConnectError.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.requests = []

    def fetch(self, host: str, selector: str, port: int = 70) -> FetchResult:
        self.requests.append((host, selector, port))
        response = self.responses.get((host, selector, port))

        if response is None:
            raise ConnectError(f"Could not connect to {host}:{port}")
        if isinstance(response, Exception):
            raise response
        if isinstance(response, FetchResult):
            return response
        return FetchResult(data=response)


class EventRecorder:
    """Collects controller events published via pubsub."""

    def __init__(self):
        self.statuses = []
        self.notices = []
        self.pages = []

    def on_status(self, message):
        self.statuses.append(message)

    def on_notice(self, message):
        self.notices.append(message)

    def on_page(self, page, selection):
        self.pages.append((page, selection))


@pytest.fixture
def transport():
    """Fake transport serving a small example site."""
    return FakeTransport({
        (HOST, "/", 70): ROOT_MENU,
        (HOST, "/docs", 70): DOCS_MENU,
        (HOST, "/about.txt", 70): ABOUT_TEXT,
        (HOST, "/search\tneedle", 70): SEARCH_RESULTS,
    })


@pytest.fixture
def events():
    """Record status, notice and page events for the duration of a test."""
    recorder = EventRecorder()
    pub.subscribe(recorder.on_status, STATUS_TOPIC)
    pub.subscribe(recorder.on_notice, NOTICE_TOPIC)
    pub.subscribe(recorder.on_page, PAGE_TOPIC)

    yield recorder

    pub.unsubscribe(recorder.on_status, STATUS_TOPIC)
    pub.unsubscribe(recorder.on_notice, NOTICE_TOPIC)
    pub.unsubscribe(recorder.on_page, PAGE_TOPIC)
