# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""GitHub identity provider.

GitHub only exposes the public email on /user, so the verified primary
address is read from /user/emails.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import ResolverConfig
from .fetcher import JSONFetcher
from .log import Logger
from .models import EmailRecord, Profile
from .resolver import IdentityResolver
from .stages import EmailStage, ProfileStage


class GitHubUser(BaseModel):
    """Response of GET /user."""

    model_config = ConfigDict(extra="allow")

    login: str = Field(..., min_length=1)
    id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None


class GitHubEmail(BaseModel):
    email: str
    verified: bool = False
    primary: bool = False
    visibility: Optional[str] = None


def user_to_profile(user: GitHubUser) -> Profile:
    """Map a GitHub /user response onto Profile."""
    extras = {
        "id": user.id,
        "avatar_url": user.avatar_url,
        "html_url": user.html_url,
        "public_email": user.email,
    }
    return Profile(
        subject=user.login,
        display_name=user.name or user.login,
        extras={k: v for k, v in extras.items() if v is not None},
        raw=user.model_dump(),
    )


def emails_to_records(emails: List[GitHubEmail]) -> List[EmailRecord]:
    return [EmailRecord(address=e.email, confirmed=e.verified, primary=e.primary) for e in emails]


def create_github_resolver(
    config: Optional[ResolverConfig] = None,
    fetcher: Optional[JSONFetcher] = None,
    logger: Optional[Logger] = None,
) -> IdentityResolver:
    """Assemble an IdentityResolver for GitHub (or GitHub Enterprise).

    Args:
        config: Endpoint configuration (default: https://api.github.com)
        fetcher: Fetcher shared by both stages (default: one built from config)
        logger: Logger for resolution events

    Returns:
        IdentityResolver wired to GitHub's /user and /user/emails endpoints
    """
    config = config or ResolverConfig.for_provider("github")
    fetcher = fetcher or JSONFetcher(timeout=config.timeout, logger=logger)

    return IdentityResolver(
        profile_stage=ProfileStage(
            fetcher, config.profile_endpoint_url, config.profile_path, GitHubUser, user_to_profile
        ),
        email_stage=EmailStage(
            fetcher, config.email_endpoint_url, config.email_path, List[GitHubEmail], emails_to_records
        ),
        name="github",
        logger=logger,
    )
