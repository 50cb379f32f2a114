"""Unit tests for VespaTransport using a mocked requests session."""

import logging
from unittest.mock import MagicMock

import pytest
import requests
from tenacity import wait_none

from hybridsearch.config import VespaConfig
from hybridsearch.errors import BackendError
from hybridsearch.schema.document import Document
from hybridsearch.search import QueryRequest, SearchMode, build_query
from hybridsearch.transport.client import TransportResponse, VespaTransport


def make_response(status_code=200, text='{"root": {}}', json_data=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("no json")
    return response


@pytest.fixture
def session():
    session = MagicMock()
    session.headers = {}
    session.request.return_value = make_response()
    return session


@pytest.fixture
def transport(session):
    transport = VespaTransport(
        VespaConfig(endpoint="http://vespa.test:8080/", timeout=7.0, max_retries=3),
        session=session,
    )
    transport.retry_wait = wait_none()
    return transport


@pytest.fixture
def keyword_descriptor():
    return build_query(QueryRequest(mode=SearchMode.KEYWORD, query="data science", limit=5))


class TestTransportResponse:

    @pytest.mark.parametrize("status,ok", [(200, True), (204, True), (299, True), (300, False), (404, False), (500, False)])
    def test_ok(self, status, ok):
        assert TransportResponse(status_code=status, body="").ok is ok


class TestSearch:
    """Tests for VespaTransport.search."""

    def test_posts_json_body_to_search_api(self, transport, session, keyword_descriptor):
        response = transport.search(keyword_descriptor)

        session.request.assert_called_once_with(
            "POST",
            "http://vespa.test:8080/search/",
            timeout=7.0,
            json=keyword_descriptor.to_request_body(),
        )
        assert response == TransportResponse(status_code=200, body='{"root": {}}')

    def test_sets_json_content_type(self, transport, session):
        assert session.headers["Content-Type"] == "application/json"

    def test_caller_timeout_overrides_default(self, transport, session, keyword_descriptor):
        transport.search(keyword_descriptor, timeout=1.5)
        assert session.request.call_args.kwargs["timeout"] == 1.5

    def test_error_status_is_returned_not_raised(self, transport, session, keyword_descriptor):
        session.request.return_value = make_response(500, "index unavailable")
        response = transport.search(keyword_descriptor)

        assert response.status_code == 500
        assert response.body == "index unavailable"
        assert session.request.call_count == 1

    def test_retries_connection_errors(self, transport, session, keyword_descriptor, caplog):
        session.request.side_effect = [
            requests.ConnectionError("refused"),
            requests.Timeout("slow"),
            make_response(200, '{"root": {"children": []}}'),
        ]
        with caplog.at_level(logging.WARNING, logger="hybridsearch.transport.client"):
            response = transport.search(keyword_descriptor)

        assert response.ok
        assert session.request.call_count == 3
        assert "Retrying" in caplog.text

    def test_exhausted_retries_raise_backend_error(self, transport, session, keyword_descriptor):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(BackendError) as exc_info:
            transport.search(keyword_descriptor)

        assert exc_info.value.status_code is None
        assert "connection refused" in exc_info.value.body
        assert session.request.call_count == 3

    def test_non_retryable_request_error_raises_backend_error(self, transport, session, keyword_descriptor):
        session.request.side_effect = requests.exceptions.InvalidURL("bad url")

        with pytest.raises(BackendError):
            transport.search(keyword_descriptor)
        assert session.request.call_count == 1


class TestFeedDocument:
    """Tests for VespaTransport.feed_document."""

    def test_posts_to_document_api(self, transport, session):
        doc = Document(id="doc1", title="T", content="C", category="K", embedding=[0.6, 0.8])
        transport.feed_document(doc)

        args, kwargs = session.request.call_args
        assert args == ("POST", "http://vespa.test:8080/document/v1/doc/document/docid/doc1")
        assert kwargs["json"] == doc.to_feed_body()

    def test_document_id_is_url_quoted(self, transport, session):
        doc = Document(id="a b/c", embedding=[1.0])
        transport.feed_document(doc)

        url = session.request.call_args[0][1]
        assert url.endswith("/docid/a%20b%2Fc")


class TestHealthCheck:
    """Tests for VespaTransport.health_check."""

    def test_up(self, transport, session):
        session.get.return_value = make_response(200, json_data={"status": {"code": "up"}})
        assert transport.health_check() is True
        session.get.assert_called_once_with("http://vespa.test:8080/state/v1/health", timeout=2)

    def test_down(self, transport, session):
        session.get.return_value = make_response(200, json_data={"status": {"code": "initializing"}})
        assert transport.health_check() is False

    def test_error_status(self, transport, session):
        session.get.return_value = make_response(503)
        assert transport.health_check() is False

    def test_unreachable(self, transport, session):
        session.get.side_effect = requests.ConnectionError("refused")
        assert transport.health_check() is False

    def test_not_json(self, transport, session):
        session.get.return_value = make_response(200, "ok")
        assert transport.health_check() is False


class TestLifecycle:

    def test_context_manager_closes_session(self, session):
        with VespaTransport(session=session) as transport:
            assert transport.config.endpoint == "http://localhost:8080"
        session.close.assert_called_once()
