# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Mock identity provider for testing and local development.

Maps access tokens to identities in memory; no network calls are made.
"""

import json
from typing import Dict, Union

from .models import ResolutionResult, ResolvedIdentity, TokenInfo
from .provider import IdentityProvider, RemoteStatusError, access_token_of


class MockIdentityProvider(IdentityProvider):
    """In-memory identity provider.

    Attributes:
        users: Mapping of access token to identity
    """

    def __init__(self):
        self.users: Dict[str, ResolvedIdentity] = {}

    def add_user(self, token: str, identity: ResolvedIdentity) -> None:
        """Register an identity for a token."""
        self.users[token] = identity

    def remove_user(self, token: str) -> None:
        """Forget the identity for a token, if any."""
        self.users.pop(token, None)

    def clear(self) -> None:
        self.users.clear()

    def resolve_identity(self, token: Union[TokenInfo, str]) -> ResolutionResult:
        """Look up the identity registered for token.

        Raises:
            AuthenticationError: If the token is empty
            RemoteStatusError: 401 if no identity is registered for the token
        """
        access_token = access_token_of(token)

        identity = self.users.get(access_token)
        if identity is None:
            raise RemoteStatusError(401, b'{"error": "invalid_token"}')

        raw_profile = json.dumps(
            {"subject": identity.subject, "display_name": identity.display_name}
        ).encode("utf-8")
        return ResolutionResult(identity, raw_profile)
