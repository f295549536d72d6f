"""
Security and Authentication

JWT validation and the authenticated-user dependencies.
Tokens are issued by the upstream auth service; this service only needs
the shared secret to verify them.
"""

from typing import Optional, Dict, Any
from dataclasses import dataclass

from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobtrack.core.config import get_settings
from jobtrack.core.exceptions import (
    AuthenticationException,
    InvalidTokenException,
    ReadOnlyUserException,
)
from jobtrack.utils.logger import get_logger

# Initialize logger
logger = get_logger(__name__)

# HTTP Bearer token scheme
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity resolved from a bearer token."""

    user_id: str
    test_user: bool = False


class SecurityManager:
    """Security and authentication manager."""

    def __init__(self) -> None:
        """Initialize security manager."""
        settings = get_settings()
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.demo_user_id = settings.DEMO_USER_ID

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode JWT token.

        Args:
            token: JWT token to verify

        Returns:
            Dict[str, Any]: Decoded token payload

        Raises:
            InvalidTokenException: If token is invalid or expired
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification error: {e}")
            raise InvalidTokenException() from e

    def resolve_user(self, payload: Dict[str, Any]) -> CurrentUser:
        """Build the current user from a verified token payload."""
        user_id = payload.get("sub")
        if not user_id:
            raise AuthenticationException("Invalid token payload")

        user_id = str(user_id)
        test_user = bool(payload.get("test_user")) or (
            self.demo_user_id is not None and user_id == self.demo_user_id
        )
        return CurrentUser(user_id=user_id, test_user=test_user)


_security_manager: Optional[SecurityManager] = None


def get_security_manager() -> SecurityManager:
    """Get the process-wide security manager."""
    global _security_manager
    if _security_manager is None:
        _security_manager = SecurityManager()
    return _security_manager


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> CurrentUser:
    """
    Dependency to get current authenticated user.

    Raises:
        AuthenticationException: If the header is missing or the token is invalid
    """
    if not credentials:
        raise AuthenticationException("Authorization header missing")

    manager = get_security_manager()
    payload = manager.verify_token(credentials.credentials)
    return manager.resolve_user(payload)


async def require_writable_user(
    current_user: CurrentUser = Depends(get_current_user)
) -> CurrentUser:
    """
    Dependency for mutating endpoints: rejects the read-only demo account.

    Raises:
        ReadOnlyUserException: If the user is the demo account
    """
    if current_user.test_user:
        logger.info("Blocked write from read-only user", user_id=current_user.user_id)
        raise ReadOnlyUserException(current_user.user_id)
    return current_user
