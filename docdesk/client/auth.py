"""Login and registration against the public ``/auth`` endpoints."""

import logging

from docdesk.client.api import ApiClient
from docdesk.client.errors import ApiError, ConflictError, InvalidCredentialsError
from docdesk.models.schemas import AuthResponse, Identity, LoginRequest, RegisterRequest
from docdesk.session.store import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Signs users in and registers new accounts."""

    def __init__(self, client: ApiClient, session: SessionStore) -> None:
        self.client = client
        self.session = session

    async def login(self, email: str, password: str) -> Identity:
        """Sign in and store the session.

        Args:
            email: Account email.
            password: Account password.

        Returns:
            The signed-in identity.

        Raises:
            InvalidCredentialsError: If the backend rejects the credentials.
            ApiError: For any other failure.
        """
        payload = LoginRequest(email=email.strip(), password=password)
        try:
            response = await self.client.request(
                "POST",
                "/auth/login",
                action="signing in",
                json=payload.model_dump(),
                authenticated=False,
            )
        except ApiError as e:
            if e.status_code == 401:
                raise InvalidCredentialsError("Invalid credentials", 401) from e
            raise

        try:
            auth = AuthResponse.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Unexpected login payload: {e}")
            raise ApiError("Unexpected response while signing in", response.status_code) from e
        return self.session.login(auth)

    async def register(self, username: str, email: str, password: str) -> None:
        """Create an account. The user signs in separately afterwards.

        Raises:
            ConflictError: If the username or email is taken.
            ApiError: For any other failure.
        """
        payload = RegisterRequest(username=username.strip(), email=email.strip(), password=password)
        try:
            await self.client.request(
                "POST",
                "/auth/register",
                action="registering",
                json=payload.model_dump(),
                authenticated=False,
            )
        except ApiError as e:
            if e.status_code == 409:
                raise ConflictError("User or email already exists", 409) from e
            raise
        logger.info(f"Registered account {payload.username}")
