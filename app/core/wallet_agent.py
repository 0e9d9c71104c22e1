"""
Wallet agent: an in-memory handle bundling a decrypted Solana keypair with an
RPC client and the model API key the agent's LLM uses.

Built fresh for every request and never persisted.
"""
from langchain_nvidia_ai_endpoints import ChatNVIDIA
from solana.rpc.async_api import AsyncClient
from solders.keypair import Keypair

from app.core.config import get_settings

DEFAULT_AGENT_MODEL = "meta/llama-3.1-70b-instruct"


class WalletAgent:
    def __init__(self, private_key: str, rpc_url: str, model_api_key: str):
        # Raises ValueError on a malformed base58 secret key
        self.keypair = Keypair.from_base58_string(private_key)
        self.rpc_url = rpc_url
        # No connection is opened until the first RPC call
        self.connection = AsyncClient(rpc_url)
        self._model_api_key = model_api_key
        self._llm = None

    @property
    def wallet_address(self) -> str:
        return str(self.keypair.pubkey())

    @property
    def llm(self):
        """Chat model for agent tool use, built on first access."""
        if self._llm is None:
            model = get_settings().nvidia_model or DEFAULT_AGENT_MODEL
            self._llm = ChatNVIDIA(model=model, nvidia_api_key=self._model_api_key, temperature=0)
        return self._llm

    async def get_balance(self) -> int:
        """Wallet balance in lamports."""
        resp = await self.connection.get_balance(self.keypair.pubkey())
        return resp.value

    async def close(self) -> None:
        await self.connection.close()

    def describe(self) -> dict:
        """JSON-safe summary; never includes key material."""
        return {"wallet_address": self.wallet_address, "rpc_url": self.rpc_url}

    def __repr__(self) -> str:
        return f"WalletAgent(wallet_address={self.wallet_address!r}, rpc_url={self.rpc_url!r})"


def create_wallet_agent(private_key: str, rpc_url: str, model_api_key: str) -> WalletAgent:
    return WalletAgent(private_key, rpc_url, model_api_key)
