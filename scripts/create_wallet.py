#!/usr/bin/env python3
"""
Provision a Solana wallet for a user and store it in Supabase `wallets`.
Usage: python scripts/create_wallet.py <owner-user-id>

Needs SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY and WALLET_ENCRYPTION_KEY.
Generate a key with: python scripts/create_wallet.py --new-key
"""
import base64
import os
import sys
from pathlib import Path

# Project root
_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from dotenv import load_dotenv
load_dotenv(_root / ".env")

from app.core.config import decode_encryption_key, get_settings
from app.core.supabase_client import get_supabase_client
from app.core.wallets import create_wallet


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/create_wallet.py <owner-user-id> | --new-key")
        sys.exit(1)
    if sys.argv[1] == "--new-key":
        print(base64.b64encode(os.urandom(32)).decode("ascii"))
        return
    if not get_supabase_client():
        print("Supabase not configured (SUPABASE_URL + SUPABASE_SERVICE_ROLE_KEY).")
        sys.exit(1)
    key = decode_encryption_key(get_settings().wallet_encryption_key)
    public_key = create_wallet(sys.argv[1], key)
    print("Created wallet:", public_key)


if __name__ == "__main__":
    main()
