# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Identity models for OAuth2 identity resolution.

This module defines the credential, profile, email and identity records
passed between the fetcher, the resolution stages and the caller.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class TokenInfo:
    """Bearer credential used to authenticate outbound provider calls.

    Attributes:
        access_token: Opaque access token issued by the upstream provider
        token_type: Token type reported by the provider (default: "Bearer")
        scope: Granted scopes, if the provider reported them
    """
    access_token: str
    token_type: str = "Bearer"
    scope: Optional[str] = None

    @classmethod
    def from_token_response(cls, token_response: Dict[str, Any]) -> "TokenInfo":
        """Build a TokenInfo from an OAuth token endpoint response.

        Args:
            token_response: Decoded token response (access_token, token_type, scope)

        Returns:
            TokenInfo instance
        """
        return cls(
            access_token=token_response.get("access_token") or "",
            token_type=token_response.get("token_type") or "Bearer",
            scope=token_response.get("scope"),
        )

    def __repr__(self) -> str:
        return f"TokenInfo(token_type={self.token_type!r}, scope={self.scope!r})"


@dataclass(frozen=True)
class Profile:
    """Provider profile mapped onto the canonical shape.

    Attributes:
        subject: Stable unique identifier of the user at the provider
        display_name: Human readable name
        extras: Provider-specific fields outside the canonical contract
        raw: Decoded profile JSON
    """
    subject: str
    display_name: str
    extras: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EmailRecord:
    """A single address from the provider's email list."""
    address: str
    confirmed: bool
    primary: bool


# Response order is preserved; it is the tie-break for primary selection.
EmailCollection = Tuple[EmailRecord, ...]


@dataclass(frozen=True)
class ResolvedIdentity:
    """Canonical identity produced by a successful resolution.

    Attributes:
        subject: Provider subject id
        display_name: User's display name
        email: Confirmed primary email, or "" when the provider has none
    """
    subject: str
    display_name: str
    email: str = ""

    @classmethod
    def empty(cls) -> "ResolvedIdentity":
        """Return the zero-value identity."""
        return cls(subject="", display_name="", email="")

    @property
    def is_empty(self) -> bool:
        return not (self.subject or self.display_name or self.email)

    def to_dict(self) -> dict:
        """Convert identity to dictionary for serialization.

        Returns:
            Dictionary representation of the identity
        """
        return {
            "subject": self.subject,
            "display_name": self.display_name,
            "email": self.email,
        }


class ResolutionResult(NamedTuple):
    """Identity plus the verbatim profile response body."""
    identity: ResolvedIdentity
    raw_profile: bytes
