"""
Credential vault for wallet private keys.

Private keys are sealed with AES-256-GCM and stored as base64 text of
``nonce || ciphertext``. The key comes from WALLET_ENCRYPTION_KEY (see config).
"""
import base64
import binascii
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from app.core.errors import CredentialDecryptError

NONCE_SIZE = 12
# AES-GCM appends a 16-byte tag
_MIN_BLOB_SIZE = NONCE_SIZE + 16


def encrypt_private_key(private_key: str, key: bytes) -> str:
    """Seal a private key string. Returns base64 text safe to store in a text column."""
    nonce = os.urandom(NONCE_SIZE)
    ciphertext = AESGCM(key).encrypt(nonce, private_key.encode("utf-8"), None)
    return base64.b64encode(nonce + ciphertext).decode("ascii")


def decrypt_private_key(encrypted: str, key: bytes) -> str:
    """Open a blob produced by encrypt_private_key.

    Raises:
        CredentialDecryptError: blob is not base64, too short, or fails authentication.
    """
    if not encrypted:
        raise CredentialDecryptError("Encrypted private key is empty")
    try:
        raw = base64.b64decode(encrypted, validate=True)
    except (binascii.Error, ValueError) as e:
        raise CredentialDecryptError("Encrypted private key is not valid base64") from e
    if len(raw) < _MIN_BLOB_SIZE:
        raise CredentialDecryptError("Encrypted private key is too short")
    try:
        plaintext = AESGCM(key).decrypt(raw[:NONCE_SIZE], raw[NONCE_SIZE:], None)
    except InvalidTag as e:
        raise CredentialDecryptError("Encrypted private key failed authentication") from e
    return plaintext.decode("utf-8")


class CredentialVault:
    """Binds the vault functions to one key so it can be passed around as a collaborator."""

    def __init__(self, key: bytes):
        self._key = key

    def encrypt(self, private_key: str) -> str:
        return encrypt_private_key(private_key, self._key)

    def decrypt(self, encrypted: str) -> str:
        return decrypt_private_key(encrypted, self._key)
