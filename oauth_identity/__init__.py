# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""OAuth2 identity resolution adapter.

Resolves a canonical identity (subject, display name, confirmed primary
email) from an access token issued by a third-party OAuth2 provider, by
reading the provider's profile endpoint and then its email endpoint.
Supports Bitbucket, GitHub, and a mock provider for testing.
"""

__version__ = "0.1.0"

from .bitbucket_provider import create_bitbucket_resolver
from .config import ResolverConfig
from .factory import create_identity_provider
from .fetcher import FetchResult, JSONFetcher
from .github_provider import create_github_resolver
from .log import Logger, SilentLogger, StdoutLogger, create_logger
from .mock_provider import MockIdentityProvider
from .models import (
    EmailCollection,
    EmailRecord,
    Profile,
    ResolutionResult,
    ResolvedIdentity,
    TokenInfo,
)
from .provider import (
    AuthenticationError,
    DecodeError,
    IdentityProvider,
    ProviderError,
    RemoteStatusError,
    RequestCancelledError,
    RequestTimeoutError,
    TransportError,
    UnexpectedContentTypeError,
)
from .resolver import IdentityResolver
from .stages import EmailStage, ProfileStage, select_primary_email

__all__ = [
    # Version
    "__version__",
    # Models
    "TokenInfo",
    "Profile",
    "EmailRecord",
    "EmailCollection",
    "ResolvedIdentity",
    "ResolutionResult",
    # Resolution
    "JSONFetcher",
    "FetchResult",
    "ProfileStage",
    "EmailStage",
    "select_primary_email",
    "IdentityResolver",
    # Providers
    "IdentityProvider",
    "MockIdentityProvider",
    "create_bitbucket_resolver",
    "create_github_resolver",
    # Config
    "ResolverConfig",
    # Factory
    "create_identity_provider",
    # Logging
    "Logger",
    "StdoutLogger",
    "SilentLogger",
    "create_logger",
    # Exceptions
    "AuthenticationError",
    "ProviderError",
    "TransportError",
    "RequestTimeoutError",
    "RequestCancelledError",
    "RemoteStatusError",
    "UnexpectedContentTypeError",
    "DecodeError",
]
