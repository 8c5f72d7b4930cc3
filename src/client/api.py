"""HTTP client wrapping each endpoint of the bookmarks API."""

import logging
from typing import Any

import httpx

from src.client.session import AuthenticationRequired, AuthGate

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"
PROFILE_PATH = f"{API_PREFIX}/profile"
SETTINGS_PATH = f"{API_PREFIX}/settings"
BOOKMARKS_PATH = f"{API_PREFIX}/bookmarks"
LAYOUT_PATH = f"{BOOKMARKS_PATH}/layout"


class ApiError(Exception):
    """A request the server did not accept."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationFailed(ApiError):
    """The server rejected the payload (400)."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message, 400)
        self.errors = errors or []


class NotFound(ApiError):
    """The referenced bookmark is absent or not owned by the user (404)."""


class Conflict(ApiError):
    """The resource already exists (409)."""


def _body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _detail(response: httpx.Response, fallback: str) -> str:
    detail = _body(response).get("detail")
    return detail if isinstance(detail, str) else fallback


class BookmarkApiClient:
    """Thin wrapper over an httpx client; cookies carry the session.

    Any httpx.Client works, including FastAPI's TestClient.
    """

    def __init__(self, http: httpx.Client, gate: AuthGate | None = None):
        self.http = http
        self.gate = gate or AuthGate()

    @classmethod
    def connect(cls, base_url: str, timeout: float = 10.0) -> "BookmarkApiClient":
        """Create a client talking to a running server."""
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        response = self.http.request(method, path, **kwargs)
        if response.is_success:
            return response

        status_code = response.status_code
        if status_code == 400:
            raise ValidationFailed(
                _detail(response, "Validation failed"), errors=_body(response).get("errors")
            )
        if status_code == 401:
            self.gate.expire()
            raise AuthenticationRequired(_detail(response, "Authentication required"))
        if status_code == 404:
            raise NotFound(_detail(response, "Not found"), status_code)
        if status_code == 409:
            raise Conflict(_detail(response, "Already exists"), status_code)

        logger.error(f"{method} {path} failed with status {status_code}")
        raise ApiError("Something went wrong, please try again", status_code)

    # Auth

    def signup(self, name: str, email: str, password: str) -> dict:
        response = self._request(
            "POST",
            f"{API_PREFIX}/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        user = response.json()
        self.gate.authenticate(user)
        return user

    def login(self, email: str, password: str) -> dict:
        response = self._request(
            "POST", f"{API_PREFIX}/auth/login", json={"email": email, "password": password}
        )
        user = response.json()
        self.gate.authenticate(user)
        return user

    def logout(self) -> None:
        self._request("POST", f"{API_PREFIX}/auth/logout")
        self.gate.expire()

    def get_profile(self) -> dict:
        user = self._request("GET", PROFILE_PATH).json()
        self.gate.authenticate(user)
        return user

    def restore_session(self) -> dict | None:
        """Check whether the stored cookie is still valid; None when it is not."""
        try:
            return self.get_profile()
        except AuthenticationRequired:
            return None

    # Settings

    def get_settings(self) -> dict:
        return self._request("GET", SETTINGS_PATH).json()

    def update_settings(self, **changes: Any) -> dict:
        return self._request("PUT", SETTINGS_PATH, json=changes).json()

    # Bookmarks

    def list_bookmarks(self) -> list[dict]:
        return self._request("GET", BOOKMARKS_PATH).json()

    def get_bookmark(self, bookmark_id: int) -> dict:
        return self._request("GET", f"{BOOKMARKS_PATH}/{bookmark_id}").json()

    def create_bookmark(self, title: str, url: str, category: str, **extra: Any) -> dict:
        payload = {"title": title, "url": url, "category": category, **extra}
        return self._request("POST", BOOKMARKS_PATH, json=payload).json()

    def update_bookmark(self, bookmark_id: int, **changes: Any) -> dict:
        return self._request("PUT", f"{BOOKMARKS_PATH}/{bookmark_id}", json=changes).json()

    def delete_bookmark(self, bookmark_id: int) -> None:
        self._request("DELETE", f"{BOOKMARKS_PATH}/{bookmark_id}")

    def save_layout(self, layouts: list[dict]) -> None:
        self._request("PUT", LAYOUT_PATH, json=layouts)
