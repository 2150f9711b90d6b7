"""Tests for commitpost.publish modules."""

from unittest.mock import MagicMock

import pytest
import requests

from commitpost.publish import PublishError, XPublisher


def _http_response(status: int, payload=None, reason: str = "", text: str = ""):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.reason = reason
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def publisher(session):
    return XPublisher("secret-token", session=session)


class TestEndpoint:
    """Tests for XPublisher.endpoint."""

    def test_timeline(self, publisher):
        """Test the main timeline endpoint."""
        assert publisher.endpoint() == "https://api.twitter.com/2/tweets"

    def test_community_is_quoted(self, publisher):
        """Test that community ids are URL-encoded."""
        assert publisher.endpoint("a b/c") == "https://api.twitter.com/2/communities/a%20b%2Fc/posts"


class TestPublish:
    """Tests for XPublisher.publish."""

    def test_posts_to_timeline(self, publisher, session):
        """Test request shape and returned id."""
        session.post.return_value = _http_response(201, {"data": {"id": "1799", "text": "hi"}})

        assert publisher.publish("hi") == "1799"

        call = session.post.call_args
        assert call.args[0] == "https://api.twitter.com/2/tweets"
        assert call.kwargs["json"] == {"text": "hi"}
        assert call.kwargs["headers"]["Authorization"] == "Bearer secret-token"

    def test_posts_to_community(self, publisher, session):
        """Test that a community id selects the community endpoint."""
        session.post.return_value = _http_response(201, {"data": {"id": "42"}})

        publisher.publish("hi", community_id="1630")

        assert session.post.call_args.args[0] == "https://api.twitter.com/2/communities/1630/posts"

    def test_missing_id_returns_empty(self, publisher, session):
        """Test success without a post id."""
        session.post.return_value = _http_response(200, {"meta": {}})

        assert publisher.publish("hi") == ""

    def test_aggregates_error_messages(self, publisher, session):
        """Test that every reported error message is included."""
        session.post.return_value = _http_response(
            403,
            {"errors": [{"message": "Duplicate content"}, {"code": 1}, {"message": "Not allowed"}]},
            reason="Forbidden",
        )

        with pytest.raises(PublishError) as exc_info:
            publisher.publish("hi")

        assert str(exc_info.value) == "X API request failed (403): Duplicate content, Not allowed"

    def test_falls_back_to_title(self, publisher, session):
        """Test the title fallback."""
        session.post.return_value = _http_response(401, {"title": "Unauthorized"}, reason="Unauthorized")

        with pytest.raises(PublishError) as exc_info:
            publisher.publish("hi")

        assert str(exc_info.value) == "X API request failed (401): Unauthorized"

    def test_falls_back_to_reason(self, publisher, session):
        """Test the HTTP reason fallback for non-JSON errors."""
        session.post.return_value = _http_response(503, None, reason="Service Unavailable")

        with pytest.raises(PublishError) as exc_info:
            publisher.publish("hi")

        assert "(503): Service Unavailable" in str(exc_info.value)

    def test_malformed_success_body(self, publisher, session):
        """Test that a non-JSON success body is an error."""
        session.post.return_value = _http_response(200, None, text="<html>")

        with pytest.raises(PublishError) as exc_info:
            publisher.publish("hi")

        assert "malformed" in str(exc_info.value)

    def test_network_error(self, publisher, session):
        """Test that request exceptions become PublishError."""
        session.post.side_effect = requests.ConnectionError("refused")

        with pytest.raises(PublishError) as exc_info:
            publisher.publish("hi")

        assert "refused" in str(exc_info.value)


class TestPostUrl:
    """Tests for XPublisher.post_url."""

    def test_url_from_id(self, publisher):
        """Test the public status URL."""
        assert publisher.post_url("1799") == "https://x.com/i/web/status/1799"

    def test_no_id_no_url(self, publisher):
        """Test that an empty id yields no URL."""
        assert publisher.post_url("") == ""
