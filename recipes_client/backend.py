"""
Backend client for the hosted recipe backend.

This module is the single place where HTTP calls to the backend-as-a-service are made.
The backend is an external collaborator: the client consumes its auth endpoints and its
collection query language (relations, `{field}_eq` filters, orderBy/order) as-is.

The client:
- Probes connectivity through the health endpoint without ever raising
- Logs in against the authenticable entity and keeps the bearer token in memory
- Resolves the current session's user
- Runs generic collection queries and creates records
- Maps transport and HTTP failures onto a small BackendError hierarchy

There is no retry, cancellation or backoff. Every request carries the configured timeout.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import requests
from pydantic import ValidationError

from recipes_client.config import BackendConfig
from recipes_client.models import (
    STATUS_PUBLISHED,
    ConnectionResult,
    Recipe,
    RecipeDraft,
    RecipePage,
    User,
)

logger = logging.getLogger(__name__)

APP_ID_HEADER = "X-App-Id"


class BackendError(Exception):
    """Base class for every failure talking to the backend."""
    pass


class BackendUnavailableError(BackendError):
    """The backend could not be reached (connection refused, DNS, timeout)."""
    pass


class BackendHTTPError(BackendError):
    """The backend answered with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(BackendHTTPError):
    """
    Raised when the backend rejects the caller's identity.

    This is raised when:
    - Login credentials are invalid
    - A request returns 401/403
    """
    pass


class NoActiveSessionError(AuthenticationError):
    """There is no session to restore: no token held, or the token was rejected."""
    pass


class ResponseFormatError(BackendError):
    """The response body is not JSON or does not match the expected record shape."""
    pass


class ManifestClient:
    """
    Client for the hosted backend's REST API.

    Args:
        api_url: REST root (defaults to BackendConfig.get_api_url())
        app_id: Application identifier sent as the X-App-Id header
        timeout: Per-request timeout in seconds
        user_entity: Slug of the authenticable entity
        recipe_entity: Slug of the recipe collection
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        app_id: Optional[str] = None,
        timeout: Optional[float] = None,
        user_entity: Optional[str] = None,
        recipe_entity: Optional[str] = None,
    ):
        self.api_url = (api_url or BackendConfig.get_api_url()).rstrip("/")
        self.app_id = app_id if app_id is not None else BackendConfig.get_app_id()
        self.timeout = timeout or BackendConfig.get_timeout()
        self.user_entity = user_entity or BackendConfig.get_user_entity()
        self.recipe_entity = recipe_entity or BackendConfig.get_recipe_entity()
        self.token: Optional[str] = None

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.app_id:
            headers[APP_ID_HEADER] = self.app_id
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            BackendUnavailableError: On connection errors and timeouts
            AuthenticationError: On 401/403
            BackendHTTPError: On any other non-2xx status
            ResponseFormatError: If the body is not JSON
            BackendError: On any other request failure
        """
        url = f"{self.api_url}/{path.lstrip('/')}"
        try:
            response = requests.request(
                method,
                url,
                headers=self._headers(),
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise BackendUnavailableError(f"{method} {url} timed out") from e
        except requests.exceptions.ConnectionError as e:
            raise BackendUnavailableError(f"Could not connect to {url}: {e}") from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            message = f"{method} {url} returned {status_code}"
            if status_code in (401, 403):
                raise AuthenticationError(message, status_code=status_code) from e
            raise BackendHTTPError(message, status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise BackendError(f"{method} {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ResponseFormatError(f"{method} {url} returned a non-JSON body") from e

    def check_connection(self) -> ConnectionResult:
        """
        Check that the backend is reachable by calling its health endpoint.

        Returns:
            ConnectionResult with success=True on any 2xx answer, otherwise success=False
            and the error message. Never raises.
        """
        try:
            self._request("GET", "/health")
        except BackendError as e:
            logger.warning("Backend connectivity check failed: %s", e)
            return ConnectionResult(success=False, error=str(e))
        return ConnectionResult(success=True)

    def login(self, email: str, password: str) -> str:
        """
        Log in with email and password and keep the returned token.

        Returns:
            The bearer token

        Raises:
            AuthenticationError: If the credentials are rejected
            ResponseFormatError: If the response carries no token
        """
        data = self._request(
            "POST",
            f"/auth/{self.user_entity}/login",
            json={"email": email, "password": password},
        )
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ResponseFormatError("Login response did not include a token")
        self.token = token
        logger.info("Logged in as %s", email)
        return token

    def logout(self) -> None:
        """End the session. The session is the bearer token, so dropping it ends it."""
        self.token = None

    def me(self) -> User:
        """
        Get the user of the current session.

        Raises:
            NoActiveSessionError: If no token is held or the backend rejects it
        """
        if not self.token:
            raise NoActiveSessionError("No session token")
        try:
            data = self._request("GET", f"/auth/{self.user_entity}/me")
        except AuthenticationError as e:
            self.token = None
            raise NoActiveSessionError(str(e), status_code=e.status_code) from e
        try:
            return User.model_validate(data)
        except ValidationError as e:
            raise ResponseFormatError(f"Unexpected user payload: {e}") from e

    def find(
        self,
        entity: str,
        relations: Optional[Iterable[str]] = None,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order: str = "DESC",
        page: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Query a collection.

        Args:
            entity: Collection slug (e.g. "recipes")
            relations: Relations to expand (e.g. ["author", "categories"])
            filters: Equality filters, sent as `{field}_eq=value`
            order_by: Field to sort on
            order: "ASC" or "DESC" (only sent with order_by)
            page: 1-indexed page number
            per_page: Page size

        Returns:
            The raw paginated envelope
        """
        params: Dict[str, Any] = {}
        if relations:
            params["relations"] = ",".join(relations)
        for field, value in (filters or {}).items():
            params[f"{field}_eq"] = value
        if order_by:
            params["orderBy"] = order_by
            params["order"] = order
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["perPage"] = per_page

        data = self._request("GET", f"/collections/{entity}", params=params)
        if not isinstance(data, dict):
            raise ResponseFormatError(f"Unexpected list payload for {entity}")
        return data

    def create(self, entity: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a record in a collection and return the stored record."""
        record = self._request("POST", f"/collections/{entity}", json=data)
        if not isinstance(record, dict):
            raise ResponseFormatError(f"Unexpected create payload for {entity}")
        return record

    def find_recipes(self, page: Optional[int] = None, per_page: Optional[int] = None) -> RecipePage:
        """
        List published recipes, newest first, with author and categories expanded.
        """
        data = self.find(
            self.recipe_entity,
            relations=["author", "categories"],
            filters={"status": STATUS_PUBLISHED},
            order_by="createdAt",
            order="DESC",
            page=page,
            per_page=per_page,
        )
        try:
            return RecipePage.model_validate(data)
        except ValidationError as e:
            raise ResponseFormatError(f"Unexpected recipe list payload: {e}") from e

    def create_recipe(self, draft: RecipeDraft) -> Recipe:
        record = self.create(self.recipe_entity, draft.to_payload())
        try:
            return Recipe.model_validate(record)
        except ValidationError as e:
            raise ResponseFormatError(f"Unexpected recipe payload: {e}") from e
