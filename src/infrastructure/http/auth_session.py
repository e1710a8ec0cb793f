"""Authenticated session passed explicitly to the API client."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionUser:
    """Signed-in back-office user."""

    name: str
    role: str


@dataclass
class AuthSession:
    """Bearer token and user for one back-office session.

    Cleared by the API client when the server rejects the token.
    """

    token: str | None = None
    user: SessionUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def authorization_header(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def clear(self) -> None:
        self.token = None
        self.user = None
