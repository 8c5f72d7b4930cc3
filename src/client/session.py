"""Client-side authentication gate."""

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)

LOGIN_VIEW = "/login"


class AuthStatus(StrEnum):
    """The two states of the client session."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AuthenticationRequired(Exception):
    """Raised when an operation needs a signed-in user.

    Carries the view the caller should redirect to.
    """

    def __init__(self, message: str = "Authentication required", redirect_to: str = LOGIN_VIEW):
        super().__init__(message)
        self.message = message
        self.redirect_to = redirect_to


class AuthGate:
    """Tracks whether the client holds a valid session.

    Login and signup move the gate to authenticated; logout and any 401 from
    the server move it back to anonymous.
    """

    def __init__(self) -> None:
        self.status = AuthStatus.ANONYMOUS
        self.user: dict | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status == AuthStatus.AUTHENTICATED

    def authenticate(self, user: dict) -> None:
        self.user = user
        self.status = AuthStatus.AUTHENTICATED
        logger.debug(f"Session authenticated for user {user.get('id')}")

    def expire(self) -> None:
        if self.status == AuthStatus.AUTHENTICATED:
            logger.info("Session ended; returning to login view")
        self.user = None
        self.status = AuthStatus.ANONYMOUS

    def require(self) -> dict:
        """Return the signed-in user or raise AuthenticationRequired."""
        if not self.is_authenticated or self.user is None:
            raise AuthenticationRequired()
        return self.user

    def redirect_target(self) -> str | None:
        """The view to show instead of protected content, if any."""
        return None if self.is_authenticated else LOGIN_VIEW
