"""Exceptions raised by the core layer.

Store errors are tagged by cause so callers can log the variant while still
returning a generic code to clients. Routes translate what they need into HTTP
responses; everything else surfaces as a 500.
"""


class ConfigurationError(RuntimeError):
    """Required environment configuration is missing or malformed."""


class CredentialDecryptError(ValueError):
    """Stored ciphertext could not be decrypted (wrong key, truncated or tampered)."""


class StoreError(Exception):
    """Base class for persistence failures."""

    kind = "store_error"


class RecordNotFoundError(StoreError):
    kind = "not_found"


class ConflictError(StoreError):
    kind = "conflict"


class StoreUnavailableError(StoreError):
    kind = "unavailable"
