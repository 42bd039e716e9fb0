# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for MockIdentityProvider."""

import json

import pytest

from oauth_identity import (
    AuthenticationError,
    IdentityProvider,
    MockIdentityProvider,
    RemoteStatusError,
    ResolvedIdentity,
    TokenInfo,
)


@pytest.fixture
def identity():
    return ResolvedIdentity(subject="user-123", display_name="Test User", email="test@example.com")


class TestMockIdentityProvider:
    def test_provider_initialization(self):
        provider = MockIdentityProvider()

        assert isinstance(provider, IdentityProvider)
        assert len(provider.users) == 0

    def test_resolve_registered_token(self, identity):
        provider = MockIdentityProvider()
        provider.add_user("token-123", identity)

        result, raw_profile = provider.resolve_identity(TokenInfo(access_token="token-123"))

        assert result == identity
        assert json.loads(raw_profile) == {"subject": "user-123", "display_name": "Test User"}

    def test_get_user(self, identity):
        provider = MockIdentityProvider()
        provider.add_user("token-123", identity)

        assert provider.get_user("token-123") == identity

    def test_unknown_token_is_rejected(self):
        with pytest.raises(RemoteStatusError) as exc_info:
            MockIdentityProvider().resolve_identity("unknown-token")

        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("token", ["", None])
    def test_empty_token(self, token):
        with pytest.raises(AuthenticationError):
            MockIdentityProvider().resolve_identity(token)

    def test_remove_user(self, identity):
        provider = MockIdentityProvider()
        provider.add_user("token-123", identity)

        provider.remove_user("token-123")
        provider.remove_user("nonexistent-token")

        assert len(provider.users) == 0

    def test_clear(self, identity):
        provider = MockIdentityProvider()
        provider.add_user("token-1", identity)
        provider.add_user("token-2", identity)

        provider.clear()

        assert provider.users == {}
