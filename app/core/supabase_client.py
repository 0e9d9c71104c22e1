"""Supabase client plus the conversation and wallet records. Requires SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (use the service role key, not anon)."""
import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from postgrest.exceptions import APIError

from app.core.config import get_settings
from app.core.errors import (
    ConflictError,
    RecordNotFoundError,
    StoreError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

CONVERSATIONS_TABLE = "conversations"
WALLETS_TABLE = "wallets"

# Postgres unique / foreign key / check violations
_CONFLICT_CODES = {"23505", "23503", "23514"}

_supabase = None


def get_supabase_client():
    """Return the Supabase client or None if disabled."""
    return _get_client()


def _get_client():
    global _supabase
    if _supabase is not None:
        return _supabase
    settings = get_settings()
    if not settings.supabase_enabled:
        logger.info(
            "Supabase disabled: SUPABASE_URL and/or SUPABASE_SERVICE_ROLE_KEY not set or empty. "
            "Conversation and wallet records will not be available."
        )
        return None
    try:
        from supabase import ClientOptions, create_client
        _supabase = create_client(
            settings.supabase_url,
            settings.supabase_key,
            options=ClientOptions(postgrest_client_timeout=settings.supabase_timeout_seconds),
        )
        logger.info("Supabase client connected.")
        return _supabase
    except Exception as e:
        logger.warning("Supabase client failed to connect: %s", e)
        return None


def _require_client():
    client = _get_client()
    if client is None:
        raise StoreUnavailableError("Supabase is not configured")
    return client


def _translate(e: Exception) -> StoreError:
    """Map a postgrest/httpx failure onto a tagged StoreError."""
    if isinstance(e, APIError):
        if str(e.code or "") in _CONFLICT_CODES:
            return ConflictError(e.message or str(e))
        return StoreUnavailableError(e.message or str(e))
    return StoreUnavailableError(str(e))


def update_conversation_title(conversation_id: str, title: str) -> dict:
    """Set a conversation's title. Raises RecordNotFoundError if no row has that id."""
    client = _require_client()
    try:
        r = (
            client.table(CONVERSATIONS_TABLE)
            .update({"title": title, "updated_at": datetime.now(timezone.utc).isoformat()})
            .eq("id", conversation_id)
            .execute()
        )
    except (APIError, httpx.HTTPError) as e:
        raise _translate(e) from e
    if not r.data:
        raise RecordNotFoundError(f"conversation {conversation_id} not found")
    return r.data[0]


def find_wallet_by_owner(owner_id: str) -> Optional[dict]:
    """Return the first wallet row owned by the user, or None."""
    client = _require_client()
    try:
        r = (
            client.table(WALLETS_TABLE)
            .select("id, owner_id, public_key, encrypted_private_key")
            .eq("owner_id", owner_id)
            .limit(1)
            .execute()
        )
    except (APIError, httpx.HTTPError) as e:
        raise _translate(e) from e
    return r.data[0] if r.data else None


def insert_wallet(owner_id: str, public_key: str, encrypted_private_key: str) -> dict:
    client = _require_client()
    try:
        r = client.table(WALLETS_TABLE).insert({
            "owner_id": owner_id,
            "public_key": public_key,
            "encrypted_private_key": encrypted_private_key,
        }).execute()
    except (APIError, httpx.HTTPError) as e:
        raise _translate(e) from e
    return r.data[0] if r.data else {}


class SupabaseConversationStore:
    """Conversation store backed by the module-level Supabase client."""

    def update_title(self, conversation_id: str, title: str) -> dict:
        return update_conversation_title(conversation_id, title)


class SupabaseWalletStore:
    """Wallet store backed by the module-level Supabase client."""

    def find_by_owner(self, owner_id: str) -> Optional[dict]:
        return find_wallet_by_owner(owner_id)

    def insert(self, owner_id: str, public_key: str, encrypted_private_key: str) -> dict:
        return insert_wallet(owner_id, public_key, encrypted_private_key)
