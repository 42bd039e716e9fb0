# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Profile and email stages of identity resolution.

Each stage wraps one provider endpoint. Stages are provider-agnostic: the
wire shape and the mapping onto canonical records are supplied by the
provider module that assembles them.
"""

import threading
from typing import Any, Callable, Iterable, Optional, Tuple, Type

from .fetcher import JSONFetcher, validate_base_url
from .models import EmailCollection, EmailRecord, Profile
from .provider import DecodeError


class ProfileStage:
    """Fetches the user profile and maps it onto Profile.

    Attributes:
        base_url: Profile API root
        path: Profile endpoint path below base_url
        shape: Wire type the response is decoded into
        to_profile: Maps the decoded wire object onto a Profile
    """

    def __init__(
        self,
        fetcher: JSONFetcher,
        base_url: str,
        path: str,
        shape: Type[Any],
        to_profile: Callable[[Any], Profile],
    ):
        self.fetcher = fetcher
        self.base_url = validate_base_url(base_url)
        self.path = path
        self.shape = shape
        self.to_profile = to_profile

    def fetch_profile(
        self, token: str, cancel_event: Optional[threading.Event] = None
    ) -> Tuple[Profile, bytes]:
        """Fetch the profile for token.

        Returns:
            Tuple of (Profile, raw response bytes)

        Raises:
            ProviderError: Fetcher errors, unchanged
            DecodeError: If the profile has no subject
        """
        data, raw = self.fetcher.fetch(self.base_url, self.path, token, self.shape, cancel_event)

        profile = self.to_profile(data)
        if not profile.subject:
            raise DecodeError(f"Profile response from {self.base_url}{self.path} has no subject id")

        return profile, raw


class EmailStage:
    """Fetches the user's email addresses in response order.

    Attributes:
        base_url: Email API root
        path: Email endpoint path below base_url
        shape: Wire type the response is decoded into
        to_records: Maps the decoded wire object onto EmailRecords
    """

    def __init__(
        self,
        fetcher: JSONFetcher,
        base_url: str,
        path: str,
        shape: Type[Any],
        to_records: Callable[[Any], Iterable[EmailRecord]],
    ):
        self.fetcher = fetcher
        self.base_url = validate_base_url(base_url)
        self.path = path
        self.shape = shape
        self.to_records = to_records

    def fetch_emails(
        self, token: str, cancel_event: Optional[threading.Event] = None
    ) -> EmailCollection:
        """Fetch the email list for token.

        An empty list is a valid result, not an error.

        Raises:
            ProviderError: Fetcher errors, unchanged
        """
        data, _ = self.fetcher.fetch(self.base_url, self.path, token, self.shape, cancel_event)
        return tuple(self.to_records(data))


def select_primary_email(records: Iterable[EmailRecord]) -> str:
    """Return the first confirmed primary address, or "" if there is none.

    Primary-but-unconfirmed and confirmed-but-secondary addresses are never
    selected. When the provider reports several confirmed primaries, the
    first in response order wins.
    """
    for record in records:
        if record.confirmed and record.primary:
            return record.address
    return ""
