"""Application settings from environment."""
import base64
import binascii
import os
from dataclasses import dataclass
from functools import lru_cache

from app.core.errors import ConfigurationError


@lru_cache
def get_settings() -> "Settings":
    return Settings()


class Settings:
    """Central config. Load .env in main/run_api before using. Key settings are @property so they read env at access time."""

    # NVIDIA LLM (properties so they read after .env is loaded)
    @property
    def nvidia_api_key(self) -> str:
        return os.getenv("NVIDIA_API_KEY", "").strip()

    @property
    def nvidia_model(self) -> str:
        return (os.getenv("NVIDIA_MODEL", "") or "").strip()

    # Title generation: small/fast model preferred; falls back to NVIDIA_MODEL
    @property
    def title_model(self) -> str:
        return (os.getenv("TITLE_MODEL", "") or self.nvidia_model or "meta/llama-3.1-8b-instruct").strip()

    # Supabase: use SERVICE ROLE key (Settings → API), not the anon/publishable key
    @property
    def supabase_url(self) -> str:
        return os.getenv("SUPABASE_URL", "").strip()

    @property
    def supabase_key(self) -> str:
        return (os.getenv("SUPABASE_SERVICE_ROLE_KEY", "") or os.getenv("SUPABASE_KEY", "")).strip()

    @property
    def supabase_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def supabase_timeout_seconds(self) -> float:
        raw = os.getenv("SUPABASE_TIMEOUT_SECONDS", "10").strip()
        try:
            return max(1.0, min(60.0, float(raw)))
        except ValueError:
            return 10.0

    # Solana RPC endpoint (HELIUS_RPC_URL kept for older .env files)
    @property
    def solana_rpc_url(self) -> str:
        return (os.getenv("SOLANA_RPC_URL", "") or os.getenv("HELIUS_RPC_URL", "")).strip()

    # Base64 of a 32-byte AES key used to seal wallet private keys at rest
    @property
    def wallet_encryption_key(self) -> str:
        return os.getenv("WALLET_ENCRYPTION_KEY", "").strip()

    # API
    @property
    def api_title(self) -> str:
        return os.getenv("API_TITLE", "Wallet Agent Actions API").strip()

    @property
    def api_version(self) -> str:
        return os.getenv("API_VERSION", "0.1.0").strip()

    # CORS: comma-separated origins (e.g. http://localhost:3000) or * for all
    @property
    def cors_origins(self) -> list[str]:
        raw = os.getenv("CORS_ORIGINS", "*").strip()
        if not raw or raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


def decode_encryption_key(raw: str) -> bytes:
    """Decode a base64 AES-256 key. Raises ConfigurationError if it is not 32 bytes."""
    try:
        key = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError("WALLET_ENCRYPTION_KEY is not valid base64") from e
    if len(key) != 32:
        raise ConfigurationError("WALLET_ENCRYPTION_KEY must decode to 32 bytes")
    return key


@dataclass(frozen=True)
class AgentKitConfig:
    """Everything agent retrieval needs from the environment, resolved up front."""

    rpc_url: str
    model_api_key: str
    wallet_encryption_key: bytes

    @classmethod
    def from_settings(cls, settings: "Settings | None" = None) -> "AgentKitConfig":
        s = settings or get_settings()
        missing = [
            name
            for name, value in (
                ("SOLANA_RPC_URL", s.solana_rpc_url),
                ("NVIDIA_API_KEY", s.nvidia_api_key),
                ("WALLET_ENCRYPTION_KEY", s.wallet_encryption_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
        return cls(
            rpc_url=s.solana_rpc_url,
            model_api_key=s.nvidia_api_key,
            wallet_encryption_key=decode_encryption_key(s.wallet_encryption_key),
        )
