# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Identity resolution over a profile stage and an email stage.

IdentityResolver runs the profile stage, then the email stage, then the
primary-email selection rule. Any failure aborts the resolution with the
stage's exception unchanged; no partially filled identity is ever handed
back to the caller.
"""

import threading
from typing import Optional, Tuple, Union

from .log import Logger, create_logger
from .models import ResolutionResult, ResolvedIdentity, TokenInfo
from .provider import (
    IdentityProvider,
    ProviderError,
    RequestCancelledError,
    access_token_of,
)
from .stages import EmailStage, ProfileStage, select_primary_email


class IdentityResolver(IdentityProvider):
    """Resolves a canonical identity from a bearer token.

    The resolver holds no per-call state; one instance can serve
    concurrent resolutions for different tokens.

    Attributes:
        name: Provider name used in log records (e.g. "bitbucket")
        profile_stage: Stage that fetches the user profile
        email_stage: Stage that fetches the user's email list
    """

    def __init__(
        self,
        profile_stage: ProfileStage,
        email_stage: EmailStage,
        name: str = "oauth",
        logger: Optional[Logger] = None,
    ):
        self.profile_stage = profile_stage
        self.email_stage = email_stage
        self.name = name
        self.logger = logger or create_logger(name="oauth_identity.resolver")

    def resolve_identity(
        self,
        token: Union[TokenInfo, str],
        cancel_event: Optional[threading.Event] = None,
    ) -> ResolutionResult:
        """Resolve the identity behind an access token.

        Args:
            token: Access token, as a TokenInfo or a plain string
            cancel_event: Aborts the resolution before the next call when set

        Returns:
            ResolutionResult with the identity and the raw profile bytes

        Raises:
            AuthenticationError: If the token is empty
            ProviderError: If either provider call fails
        """
        access_token = access_token_of(token)

        try:
            profile, raw_profile = self.profile_stage.fetch_profile(access_token, cancel_event)
        except ProviderError as e:
            self.logger.warning(
                "Profile lookup failed", provider=self.name, error_type=type(e).__name__, error=str(e)
            )
            raise

        if cancel_event is not None and cancel_event.is_set():
            raise RequestCancelledError("Identity resolution cancelled after profile lookup")

        try:
            emails = self.email_stage.fetch_emails(access_token, cancel_event)
        except ProviderError as e:
            self.logger.warning(
                "Email lookup failed",
                provider=self.name,
                subject=profile.subject,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise

        email = select_primary_email(emails)
        if not email:
            self.logger.info(
                "No confirmed primary email", provider=self.name, subject=profile.subject, email_count=len(emails)
            )

        identity = ResolvedIdentity(
            subject=profile.subject,
            display_name=profile.display_name,
            email=email,
        )
        self.logger.debug("Resolved identity", provider=self.name, subject=identity.subject)
        return ResolutionResult(identity, raw_profile)

    def try_resolve_identity(
        self,
        token: Union[TokenInfo, str],
        cancel_event: Optional[threading.Event] = None,
    ) -> Tuple[ResolvedIdentity, bytes, Optional[Exception]]:
        """Resolve without raising provider errors.

        Returns:
            Tuple of (identity, raw profile bytes, error). On failure the
            identity is ResolvedIdentity.empty(), the bytes are empty and
            error is the exception that aborted the resolution.
        """
        try:
            identity, raw_profile = self.resolve_identity(token, cancel_event)
        except ProviderError as e:
            return ResolvedIdentity.empty(), b"", e
        return identity, raw_profile, None
