"""Verified caller identity, resolved from a Supabase access token."""
import logging
from typing import Optional

from fastapi import Header
from pydantic import BaseModel
from supabase import AuthApiError

from app.core.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)


class AuthContext(BaseModel):
    user_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)


ANONYMOUS = AuthContext()


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_auth_context(authorization: Optional[str], client=None) -> AuthContext:
    """Verify the bearer token with Supabase Auth. Anything short of a verified user is anonymous."""
    token = _bearer_token(authorization)
    if token is None:
        return ANONYMOUS
    client = client if client is not None else get_supabase_client()
    if client is None:
        return ANONYMOUS
    try:
        resp = client.auth.get_user(token)
    except AuthApiError as e:
        # Rejected or expired token; transport failures propagate
        logger.info("Token verification failed: %s", e)
        return ANONYMOUS
    user = getattr(resp, "user", None) if resp is not None else None
    if user is None or not getattr(user, "id", None):
        return ANONYMOUS
    return AuthContext(user_id=str(user.id))


def get_auth_context(authorization: Optional[str] = Header(None)) -> AuthContext:
    """FastAPI dependency."""
    return resolve_auth_context(authorization)
