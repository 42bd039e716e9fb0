# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared pytest fixtures for oauth_identity tests."""

import pytest

from oauth_identity import (
    JSONFetcher,
    ResolverConfig,
    SilentLogger,
    create_bitbucket_resolver,
)
from tests.fixtures import (
    BITBUCKET_EMAIL_RESPONSE,
    BITBUCKET_USER_RESPONSE,
    EMAIL_PATH,
    PROFILE_PATH,
    STUB_API_URL,
    HandlerState,
    StubProvider,
)



@pytest.fixture
def silent_logger():
    return SilentLogger(name="test")


@pytest.fixture
def stub_config():
    """Resolver config pointing both endpoints at the stub provider."""
    return ResolverConfig.for_provider(
        "bitbucket",
        profile_endpoint_url=STUB_API_URL,
        email_endpoint_url=STUB_API_URL,
    )


@pytest.fixture
def bitbucket_stub():
    """Stub provider answering both Bitbucket endpoints successfully."""
    return (
        StubProvider()
        .route(PROFILE_PATH, HandlerState.SUCCESS, BITBUCKET_USER_RESPONSE)
        .route(EMAIL_PATH, HandlerState.SUCCESS, BITBUCKET_EMAIL_RESPONSE)
    )


@pytest.fixture
def make_resolver(stub_config, silent_logger):
    """Build a Bitbucket resolver that sends its requests to a stub."""

    def _make(stub: StubProvider):
        fetcher = JSONFetcher(client=stub.client(), logger=silent_logger)
        return create_bitbucket_resolver(stub_config, fetcher=fetcher, logger=silent_logger)

    return _make
