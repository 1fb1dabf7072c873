"""
Tests for the backend HTTP client.

requests.request is mocked to avoid real network calls. The tests verify that:
- Requests carry the app id, bearer token and timeout
- Collection queries are translated into the backend's query parameters
- Transport and HTTP failures map onto the BackendError hierarchy
- The connectivity probe never raises
"""

from unittest.mock import Mock, patch

import pytest
import requests

from recipes_client.backend import (
    APP_ID_HEADER,
    AuthenticationError,
    BackendError,
    BackendHTTPError,
    BackendUnavailableError,
    ManifestClient,
    NoActiveSessionError,
    ResponseFormatError,
)
from recipes_client.models import RecipeDraft

API_URL = "http://backend.test/api"


def make_response(status_code=200, json_data=None, json_error=None):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def client():
    return ManifestClient(api_url=API_URL, app_id="app-123", timeout=5, user_entity="users", recipe_entity="recipes")


class TestRequestBasics:
    """Test headers, URLs and error mapping shared by every call."""

    @patch("recipes_client.backend.requests.request")
    def test_headers_and_timeout(self, mock_request, client):
        """Test that the app id header and timeout are always sent."""
        mock_request.return_value = make_response(json_data={"status": "OK"})
        client.check_connection()

        args, kwargs = mock_request.call_args
        assert args == ("GET", f"{API_URL}/health")
        assert kwargs["headers"][APP_ID_HEADER] == "app-123"
        assert "Authorization" not in kwargs["headers"]
        assert kwargs["timeout"] == 5

    @patch("recipes_client.backend.requests.request")
    def test_bearer_token_after_login(self, mock_request, client):
        """Test that the token from login is sent on later requests."""
        mock_request.side_effect = [
            make_response(json_data={"token": "tok-1"}),
            make_response(json_data={"id": 1, "name": "Ada", "email": "ada@example.com"}),
        ]
        client.login("ada@example.com", "secret")
        client.me()

        _, kwargs = mock_request.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer tok-1"

    @patch("recipes_client.backend.requests.request")
    def test_timeout_maps_to_unavailable(self, mock_request, client):
        mock_request.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(BackendUnavailableError):
            client.find("recipes")

    @patch("recipes_client.backend.requests.request")
    def test_connection_error_maps_to_unavailable(self, mock_request, client):
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(BackendUnavailableError):
            client.find("recipes")

    @patch("recipes_client.backend.requests.request")
    def test_server_error_maps_to_http_error(self, mock_request, client):
        """Test that 5xx responses raise BackendHTTPError with the status code."""
        mock_request.return_value = make_response(status_code=500)
        with pytest.raises(BackendHTTPError) as exc_info:
            client.find("recipes")
        assert exc_info.value.status_code == 500
        assert not isinstance(exc_info.value, AuthenticationError)

    @patch("recipes_client.backend.requests.request")
    def test_forbidden_maps_to_authentication_error(self, mock_request, client):
        mock_request.return_value = make_response(status_code=403)
        with pytest.raises(AuthenticationError):
            client.create("recipes", {"title": "Soup"})

    @patch("recipes_client.backend.requests.request")
    def test_non_json_body(self, mock_request, client):
        mock_request.return_value = make_response(json_error=ValueError("no json"))
        with pytest.raises(ResponseFormatError):
            client.find("recipes")


class TestCheckConnection:
    """Test cases for the connectivity probe."""

    @patch("recipes_client.backend.requests.request")
    def test_reachable(self, mock_request, client):
        mock_request.return_value = make_response(json_data={"status": "OK"})
        result = client.check_connection()
        assert result.success is True
        assert result.error is None

    @patch("recipes_client.backend.requests.request")
    def test_unreachable_never_raises(self, mock_request, client):
        """Test that connection failures come back as success=False."""
        mock_request.side_effect = requests.exceptions.ConnectionError("refused")
        result = client.check_connection()
        assert result.success is False
        assert "Could not connect" in result.error

    @patch("recipes_client.backend.requests.request")
    def test_unhealthy_status(self, mock_request, client):
        mock_request.return_value = make_response(status_code=503)
        assert client.check_connection().success is False


class TestAuth:
    """Test cases for login, logout and session lookup."""

    @patch("recipes_client.backend.requests.request")
    def test_login_posts_credentials(self, mock_request, client):
        mock_request.return_value = make_response(json_data={"token": "tok-1"})
        token = client.login("ada@example.com", "secret")

        args, kwargs = mock_request.call_args
        assert args == ("POST", f"{API_URL}/auth/users/login")
        assert kwargs["json"] == {"email": "ada@example.com", "password": "secret"}
        assert token == "tok-1"
        assert client.token == "tok-1"

    @patch("recipes_client.backend.requests.request")
    def test_login_rejected(self, mock_request, client):
        mock_request.return_value = make_response(status_code=401)
        with pytest.raises(AuthenticationError):
            client.login("ada@example.com", "wrong")
        assert client.token is None

    @patch("recipes_client.backend.requests.request")
    def test_login_without_token(self, mock_request, client):
        mock_request.return_value = make_response(json_data={"message": "ok"})
        with pytest.raises(ResponseFormatError):
            client.login("ada@example.com", "secret")

    def test_logout_drops_token(self, client):
        client.token = "tok-1"
        client.logout()
        assert client.token is None

    @patch("recipes_client.backend.requests.request")
    def test_me_without_token_makes_no_request(self, mock_request, client):
        """Test that session lookup without a token fails fast."""
        with pytest.raises(NoActiveSessionError):
            client.me()
        mock_request.assert_not_called()

    @patch("recipes_client.backend.requests.request")
    def test_me_with_rejected_token(self, mock_request, client):
        """Test that an expired token is dropped and reported as no session."""
        client.token = "expired"
        mock_request.return_value = make_response(status_code=401)
        with pytest.raises(NoActiveSessionError):
            client.me()
        assert client.token is None

    @patch("recipes_client.backend.requests.request")
    def test_me_returns_user(self, mock_request, client):
        client.token = "tok-1"
        mock_request.return_value = make_response(json_data={"id": 1, "name": "Ada", "email": "ada@example.com"})
        user = client.me()

        args, _ = mock_request.call_args
        assert args == ("GET", f"{API_URL}/auth/users/me")
        assert user.name == "Ada"

    @patch("recipes_client.backend.requests.request")
    def test_me_bad_payload(self, mock_request, client):
        client.token = "tok-1"
        mock_request.return_value = make_response(json_data={"name": "no id"})
        with pytest.raises(ResponseFormatError):
            client.me()


class TestCollections:
    """Test cases for collection queries and record creation."""

    @patch("recipes_client.backend.requests.request")
    def test_find_recipes_query(self, mock_request, client):
        """Test that the published-recipes query uses relations, filter and sort."""
        mock_request.return_value = make_response(json_data={
            "data": [
                {"id": 2, "title": "Stew", "status": "published", "author": {"id": 1, "name": "Ada"}},
                {"id": 1, "title": "Soup", "status": "published", "author": {"id": 1, "name": "Ada"}},
            ],
            "currentPage": 1,
            "lastPage": 1,
            "total": 2,
            "perPage": 20,
        })
        page = client.find_recipes()

        args, kwargs = mock_request.call_args
        assert args == ("GET", f"{API_URL}/collections/recipes")
        assert kwargs["params"] == {
            "relations": "author,categories",
            "status_eq": "published",
            "orderBy": "createdAt",
            "order": "DESC",
        }
        assert [r.title for r in page.data] == ["Stew", "Soup"]

    @patch("recipes_client.backend.requests.request")
    def test_find_pagination_params(self, mock_request, client):
        mock_request.return_value = make_response(json_data={"data": []})
        client.find("recipes", page=2, per_page=10)

        _, kwargs = mock_request.call_args
        assert kwargs["params"] == {"page": 2, "perPage": 10}

    @patch("recipes_client.backend.requests.request")
    def test_find_rejects_non_envelope(self, mock_request, client):
        mock_request.return_value = make_response(json_data=[1, 2, 3])
        with pytest.raises(ResponseFormatError):
            client.find("recipes")

    @patch("recipes_client.backend.requests.request")
    def test_find_recipes_bad_record(self, mock_request, client):
        mock_request.return_value = make_response(json_data={"data": [{"title": "no id"}]})
        with pytest.raises(ResponseFormatError):
            client.find_recipes()

    @patch("recipes_client.backend.requests.request")
    def test_create_recipe(self, mock_request, client):
        """Test that create posts the draft payload and parses the echo."""
        mock_request.return_value = make_response(json_data={
            "id": 9, "title": "Soup", "status": "published", "author": 1,
        })
        recipe = client.create_recipe(RecipeDraft(title="Soup", author=1))

        args, kwargs = mock_request.call_args
        assert args == ("POST", f"{API_URL}/collections/recipes")
        assert kwargs["json"]["title"] == "Soup"
        assert kwargs["json"]["status"] == "published"
        assert kwargs["json"]["author"] == 1
        assert recipe.id == 9

    @patch("recipes_client.backend.requests.request")
    def test_other_request_errors_are_backend_errors(self, mock_request, client):
        mock_request.side_effect = requests.exceptions.InvalidURL("bad url")
        with pytest.raises(BackendError):
            client.create("recipes", {"title": "Soup"})
