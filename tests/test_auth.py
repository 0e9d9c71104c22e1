from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from supabase import AuthApiError

from app.core.auth import resolve_auth_context


def _client_returning(user) -> MagicMock:
    client = MagicMock()
    client.auth.get_user.return_value = SimpleNamespace(user=user)
    return client


def test_verified_token_yields_user():
    client = _client_returning(SimpleNamespace(id="user-1"))
    ctx = resolve_auth_context("Bearer abc.def", client=client)
    assert ctx.user_id == "user-1"
    assert ctx.is_authenticated
    client.auth.get_user.assert_called_once_with("abc.def")


@pytest.mark.parametrize("header", [None, "", "Basic xyz", "Bearer ", "abc.def"])
def test_missing_or_malformed_header_is_anonymous(header):
    client = _client_returning(SimpleNamespace(id="user-1"))
    ctx = resolve_auth_context(header, client=client)
    assert ctx.user_id is None
    client.auth.get_user.assert_not_called()


class RejectedToken(AuthApiError):
    def __init__(self):
        Exception.__init__(self, "invalid JWT")
        self.message = "invalid JWT"
        self.status = 401
        self.code = "bad_jwt"
        self.name = "AuthApiError"


def test_rejected_token_is_anonymous():
    client = MagicMock()
    client.auth.get_user.side_effect = RejectedToken()
    assert resolve_auth_context("Bearer expired", client=client).user_id is None


def test_auth_outage_propagates():
    client = MagicMock()
    client.auth.get_user.side_effect = httpx.ConnectError("auth server unreachable")
    with pytest.raises(httpx.ConnectError):
        resolve_auth_context("Bearer t", client=client)


def test_response_without_user_is_anonymous():
    assert resolve_auth_context("Bearer t", client=_client_returning(None)).user_id is None


def test_disabled_supabase_is_anonymous():
    assert resolve_auth_context("Bearer t").user_id is None
