import base64
import os

import pytest
from fastapi.testclient import TestClient
from solders.keypair import Keypair

import app.core.supabase_client as supabase_mod
import app.core.titles as titles_mod
from app.core.config import AgentKitConfig
from app.core.wallet_crypto import CredentialVault, encrypt_private_key
from app.main import app

TEST_KEY = os.urandom(32)
TEST_RPC_URL = "https://rpc.test.invalid"
TEST_MODEL_KEY = "nvapi-test"


class FakeConversationStore:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def update_title(self, conversation_id: str, title: str) -> dict:
        self.calls.append((conversation_id, title))
        if self.error is not None:
            raise self.error
        return {"id": conversation_id, "title": title}


class FakeWalletStore:
    def __init__(self, rows: list[dict] | None = None):
        self.rows = list(rows or [])
        self.lookups: list[str] = []

    def find_by_owner(self, owner_id: str) -> dict | None:
        self.lookups.append(owner_id)
        for row in self.rows:
            if row["owner_id"] == owner_id:
                return row
        return None

    def insert(self, owner_id: str, public_key: str, encrypted_private_key: str) -> dict:
        row = {"owner_id": owner_id, "public_key": public_key, "encrypted_private_key": encrypted_private_key}
        self.rows.append(row)
        return row


class CountingVault(CredentialVault):
    def __init__(self, key: bytes):
        super().__init__(key)
        self.decrypt_calls = 0

    def decrypt(self, encrypted: str) -> str:
        self.decrypt_calls += 1
        return super().decrypt(encrypted)


class RecordingAgentFactory:
    def __init__(self):
        self.calls: list[tuple[str, str, str]] = []

    def __call__(self, private_key: str, rpc_url: str, model_api_key: str):
        self.calls.append((private_key, rpc_url, model_api_key))
        return object()


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(supabase_mod, "_supabase", None)
    monkeypatch.setattr(titles_mod, "_llm", None)
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture()
def agent_config() -> AgentKitConfig:
    return AgentKitConfig(rpc_url=TEST_RPC_URL, model_api_key=TEST_MODEL_KEY, wallet_encryption_key=TEST_KEY)


@pytest.fixture()
def agent_env(monkeypatch) -> None:
    monkeypatch.setenv("SOLANA_RPC_URL", TEST_RPC_URL)
    monkeypatch.setenv("NVIDIA_API_KEY", TEST_MODEL_KEY)
    monkeypatch.setenv("WALLET_ENCRYPTION_KEY", base64.b64encode(TEST_KEY).decode("ascii"))


@pytest.fixture()
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture()
def wallet_row(keypair: Keypair) -> dict:
    return {
        "id": "w-1",
        "owner_id": "user-1",
        "public_key": str(keypair.pubkey()),
        "encrypted_private_key": encrypt_private_key(str(keypair), TEST_KEY),
    }
