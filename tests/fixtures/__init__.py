# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Shared test fixtures: stub provider endpoints and recorded responses.

Usage:
    from tests.fixtures import HandlerState, StubProvider

    stub = StubProvider().route("/2.0/user", HandlerState.SUCCESS, BITBUCKET_USER_RESPONSE)
"""

from .provider_responses import (  # noqa: F401
    BITBUCKET_EMAIL_RESPONSE,
    BITBUCKET_EMPTY_EMAIL_RESPONSE,
    BITBUCKET_USER_RESPONSE,
    GITHUB_EMAIL_RESPONSE,
    GITHUB_USER_RESPONSE,
)
from .stub_server import (  # noqa: F401
    FAILURE_STATES,
    EMAIL_PATH,
    PROFILE_PATH,
    STUB_API_URL,
    HandlerState,
    StubProvider,
    build_response,
)
