"""Wallet provisioning: generate a Solana keypair and store it sealed."""
import logging

from solders.keypair import Keypair

from app.core.supabase_client import SupabaseWalletStore
from app.core.wallet_crypto import CredentialVault

logger = logging.getLogger(__name__)


def create_wallet(owner_id: str, encryption_key: bytes, store=None) -> str:
    """Create and persist a wallet for ``owner_id``. Returns the public key."""
    store = store if store is not None else SupabaseWalletStore()
    keypair = Keypair()
    public_key = str(keypair.pubkey())
    sealed = CredentialVault(encryption_key).encrypt(str(keypair))
    store.insert(owner_id, public_key, sealed)
    logger.info("Created wallet %s for user %s", public_key, owner_id)
    return public_key
