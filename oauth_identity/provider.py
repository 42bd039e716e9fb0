# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract identity provider interface and resolution errors.

This module defines the contract every identity provider implements,
so login flows can resolve an identity from a bearer token without
coupling to a specific upstream (Bitbucket, GitHub, ...).
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from .models import ResolutionResult, ResolvedIdentity, TokenInfo


class IdentityProvider(ABC):
    """Abstract base class for identity providers.

    All identity providers must implement resolve_identity to turn an
    access token into a canonical identity.
    """

    @abstractmethod
    def resolve_identity(self, token: Union[TokenInfo, str]) -> ResolutionResult:
        """Resolve the identity behind an access token.

        Args:
            token: Access token, as a TokenInfo or a plain string

        Returns:
            ResolutionResult with the identity and raw profile bytes

        Raises:
            AuthenticationError: If no usable token was supplied
            ProviderError: If any provider call fails
        """
        pass

    def get_user(self, token: Union[TokenInfo, str]) -> ResolvedIdentity:
        """Resolve and return only the identity."""
        return self.resolve_identity(token).identity

    def validate_and_get_user(self, token_response: dict) -> ResolvedIdentity:
        """Resolve the identity from an OAuth token endpoint response.

        Args:
            token_response: OAuth token response containing access_token

        Returns:
            ResolvedIdentity for the token's owner

        Raises:
            AuthenticationError: If the response carries no access token
            ProviderError: If any provider call fails
        """
        token = TokenInfo.from_token_response(token_response)
        if not token.access_token:
            raise AuthenticationError("No access token in response")

        return self.get_user(token)


def access_token_of(token: Union[TokenInfo, str, None]) -> str:
    """Extract the raw access token, rejecting unusable credentials.

    The token travels in an HTTP header, so it must be printable ASCII.

    Raises:
        AuthenticationError: If the token is missing, empty, not a string,
            or holds non-ASCII or control characters
    """
    if isinstance(token, TokenInfo):
        token = token.access_token
    if not token or not isinstance(token, str):
        raise AuthenticationError("Access token must be a non-empty string")
    if not (token.isascii() and token.isprintable()):
        raise AuthenticationError("Access token must contain only printable ASCII characters")
    return token


class AuthenticationError(Exception):
    """Raised when the caller supplies no usable credential."""
    pass


class ProviderError(Exception):
    """Base class for failures talking to the identity provider."""
    pass


class TransportError(ProviderError):
    """Raised when the HTTP call could not be completed."""
    pass


class RequestTimeoutError(TransportError):
    """Raised when the HTTP call exceeded its deadline."""
    pass


class RequestCancelledError(TransportError):
    """Raised when the caller cancelled the resolution."""
    pass


class RemoteStatusError(ProviderError):
    """Raised when the provider answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code returned by the provider
        body: Raw response body, kept for diagnostics
    """

    def __init__(self, status_code: int, body: bytes = b"", url: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        self.url = url
        target = f" from {url}" if url else ""
        super().__init__(f"Provider returned HTTP {status_code}{target}")


class UnexpectedContentTypeError(ProviderError):
    """Raised when the provider response is not declared as JSON."""

    def __init__(self, content_type: str, url: Optional[str] = None):
        self.content_type = content_type
        self.url = url
        target = f" from {url}" if url else ""
        super().__init__(f"Expected JSON response{target}, got content type {content_type!r}")


class DecodeError(ProviderError):
    """Raised when a response body cannot be decoded into the expected shape."""
    pass
