# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory for creating identity providers based on configuration.

This module provides a factory function that creates identity provider
instances from explicit configuration or environment variables, so login
flows can switch providers without code changes.
"""

from typing import Optional

from .bitbucket_provider import create_bitbucket_resolver
from .config import ResolverConfig
from .fetcher import JSONFetcher
from .github_provider import create_github_resolver
from .log import Logger
from .mock_provider import MockIdentityProvider
from .provider import IdentityProvider

SUPPORTED_PROVIDERS = ("mock", "bitbucket", "github")

_RESOLVER_BUILDERS = {
    "bitbucket": create_bitbucket_resolver,
    "github": create_github_resolver,
}


def create_identity_provider(
    provider_type: Optional[str] = None,
    config: Optional[ResolverConfig] = None,
    fetcher: Optional[JSONFetcher] = None,
    logger: Optional[Logger] = None,
) -> IdentityProvider:
    """Create an identity provider based on type.

    Supported provider types:
    - "mock": MockIdentityProvider for testing/local dev
    - "bitbucket": Bitbucket /user + /user/emails resolver
    - "github": GitHub /user + /user/emails resolver

    Args:
        provider_type: Type of provider to create (required)
        config: Endpoint configuration. Loaded from the environment
            (ResolverConfig.from_env) when omitted.
        fetcher: Fetcher shared by the provider's stages
        logger: Logger for resolution events

    Returns:
        IdentityProvider instance

    Raises:
        ValueError: If provider_type is missing or unknown, or the
            environment holds an invalid endpoint URL

    Examples:
        >>> provider = create_identity_provider("mock")

        >>> provider = create_identity_provider(
        ...     "bitbucket",
        ...     ResolverConfig.for_provider(
        ...         "bitbucket", profile_endpoint_url="http://localhost:8080"
        ...     ),
        ... )
    """
    if not provider_type:
        raise ValueError(
            "provider_type parameter is required. "
            f"Must be one of: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    provider_type = provider_type.lower()

    if provider_type == "mock":
        return MockIdentityProvider()

    builder = _RESOLVER_BUILDERS.get(provider_type)
    if builder is None:
        raise ValueError(
            f"Unknown identity provider type: {provider_type}. "
            f"Supported types: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    if config is None:
        config = ResolverConfig.from_env(provider_type)

    return builder(config=config, fetcher=fetcher, logger=logger)
