"""
Validated actions: conversation rename and wallet agent retrieval.

Each action takes its collaborators as optional arguments (defaults are the
Supabase-backed stores, the AES vault, and WalletAgent) and always answers
with an ActionResult, except where a failure is meant to abort the request.
"""
import logging
from typing import Callable, Optional

from pydantic import BaseModel, Field

from app.core.auth import AuthContext
from app.core.config import AgentKitConfig
from app.core.errors import StoreError
from app.core.results import ActionResult, ErrorCode
from app.core.supabase_client import SupabaseConversationStore, SupabaseWalletStore
from app.core.wallet_agent import create_wallet_agent
from app.core.wallet_crypto import CredentialVault

logger = logging.getLogger(__name__)


class RenameConversationRequest(BaseModel):
    id: str
    title: str = Field(..., min_length=1, max_length=100)


def rename_conversation(req: RenameConversationRequest, store=None) -> ActionResult:
    """Update the title. Any store failure becomes UNEXPECTED_ERROR; the cause is only logged."""
    store = store if store is not None else SupabaseConversationStore()
    try:
        store.update_title(req.id, req.title)
    except StoreError as e:
        logger.warning("rename_conversation failed (%s) for %s: %s", e.kind, req.id, e)
        return ActionResult.fail(ErrorCode.UNEXPECTED_ERROR)
    except Exception:
        logger.exception("rename_conversation failed for %s", req.id)
        return ActionResult.fail(ErrorCode.UNEXPECTED_ERROR)
    return ActionResult.ok()


def retrieve_agent_kit(
    auth: AuthContext,
    config: Optional[AgentKitConfig] = None,
    wallets=None,
    vault=None,
    agent_factory: Optional[Callable] = None,
) -> ActionResult:
    """Build a fresh wallet agent for the caller.

    Short-circuits on UNAUTHORIZED, then WALLET_NOT_FOUND. When ``config`` is
    omitted it is read from the environment only once a wallet has been found.
    Decryption, configuration and agent construction errors are not caught.
    """
    if not auth.user_id:
        return ActionResult.fail(ErrorCode.UNAUTHORIZED)

    wallets = wallets if wallets is not None else SupabaseWalletStore()
    wallet = wallets.find_by_owner(auth.user_id)
    if not wallet:
        return ActionResult.fail(ErrorCode.WALLET_NOT_FOUND)

    logger.info("[retrieve_agent_kit] wallet %s", wallet.get("public_key"))

    config = config or AgentKitConfig.from_settings()
    vault = vault if vault is not None else CredentialVault(config.wallet_encryption_key)
    private_key = vault.decrypt(wallet["encrypted_private_key"])
    factory = agent_factory or create_wallet_agent
    agent = factory(private_key, config.rpc_url, config.model_api_key)
    return ActionResult.ok({"agent": agent})
