# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Bitbucket identity provider.

Bitbucket does not include the email address in the /user response, so
the provider reads the profile from /user and the addresses from
/user/emails.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import ResolverConfig
from .fetcher import JSONFetcher
from .log import Logger
from .models import EmailRecord, Profile
from .resolver import IdentityResolver
from .stages import EmailStage, ProfileStage


class BitbucketUser(BaseModel):
    """Response of GET /user."""

    model_config = ConfigDict(extra="allow")

    username: str = Field(..., min_length=1, description="Bitbucket username, used as subject")
    display_name: str = ""
    uuid: Optional[str] = None
    account_id: Optional[str] = None
    nickname: Optional[str] = None
    type: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    created_on: Optional[str] = None
    is_staff: bool = False
    links: Dict[str, Any] = Field(default_factory=dict)


class BitbucketEmail(BaseModel):
    email: str
    is_confirmed: bool = False
    is_primary: bool = False
    type: Optional[str] = None


class BitbucketEmailPage(BaseModel):
    """Paginated response of GET /user/emails."""

    page: int = 1
    pagelen: int = 10
    size: int = 0
    values: List[BitbucketEmail] = Field(default_factory=list)
    next: Optional[str] = None


def user_to_profile(user: BitbucketUser) -> Profile:
    """Map a Bitbucket /user response onto Profile."""
    extras: Dict[str, Any] = {
        "uuid": user.uuid,
        "account_id": user.account_id,
        "nickname": user.nickname,
        "type": user.type,
        "website": user.website,
        "location": user.location,
        "created_on": user.created_on,
        "is_staff": user.is_staff,
    }
    avatar = user.links.get("avatar")
    if isinstance(avatar, dict) and avatar.get("href"):
        extras["avatar_url"] = avatar["href"]

    return Profile(
        subject=user.username,
        display_name=user.display_name,
        extras={k: v for k, v in extras.items() if v is not None},
        raw=user.model_dump(),
    )


def email_page_to_records(page: BitbucketEmailPage) -> List[EmailRecord]:
    """Map a Bitbucket /user/emails page onto EmailRecords, keeping order."""
    return [
        EmailRecord(address=value.email, confirmed=value.is_confirmed, primary=value.is_primary)
        for value in page.values
    ]


def create_bitbucket_resolver(
    config: Optional[ResolverConfig] = None,
    fetcher: Optional[JSONFetcher] = None,
    logger: Optional[Logger] = None,
) -> IdentityResolver:
    """Assemble an IdentityResolver for Bitbucket.

    Args:
        config: Endpoint configuration (default: public Bitbucket API)
        fetcher: Fetcher shared by both stages (default: one built from config)
        logger: Logger for resolution events

    Returns:
        IdentityResolver wired to Bitbucket's /user and /user/emails endpoints
    """
    config = config or ResolverConfig.for_provider("bitbucket")
    fetcher = fetcher or JSONFetcher(timeout=config.timeout, logger=logger)

    return IdentityResolver(
        profile_stage=ProfileStage(
            fetcher,
            config.profile_endpoint_url,
            config.profile_path,
            BitbucketUser,
            user_to_profile,
        ),
        email_stage=EmailStage(
            fetcher,
            config.email_endpoint_url,
            config.email_path,
            BitbucketEmailPage,
            email_page_to_records,
        ),
        name="bitbucket",
        logger=logger,
    )
