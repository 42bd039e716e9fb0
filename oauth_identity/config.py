# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Resolver configuration.

Endpoint roots are passed to each resolver explicitly; nothing here is
module-level mutable state. ResolverConfig.from_env builds a config from
environment variables on top of per-provider defaults:

    OAUTH_<PROVIDER>_PROFILE_ENDPOINT_URL  (fallback: OAUTH_PROFILE_ENDPOINT_URL)
    OAUTH_<PROVIDER>_EMAIL_ENDPOINT_URL    (fallback: OAUTH_EMAIL_ENDPOINT_URL)
    OAUTH_HTTP_TIMEOUT                     (seconds)
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .fetcher import DEFAULT_TIMEOUT, validate_base_url


@dataclass(frozen=True)
class ProviderDefaults:
    profile_endpoint_url: str
    email_endpoint_url: str
    profile_path: str = "/user"
    email_path: str = "/user/emails"


PROVIDER_DEFAULTS: Dict[str, ProviderDefaults] = {
    "bitbucket": ProviderDefaults(
        profile_endpoint_url="https://api.bitbucket.org/2.0",
        email_endpoint_url="https://api.bitbucket.org/2.0",
    ),
    "github": ProviderDefaults(
        profile_endpoint_url="https://api.github.com",
        email_endpoint_url="https://api.github.com",
    ),
}


class EnvConfigProvider:
    """Configuration provider that reads from environment variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        value = self._environ.get(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            return default


@dataclass(frozen=True)
class ResolverConfig:
    """Endpoints and timeout for one provider.

    Attributes:
        profile_endpoint_url: Root of the profile API
        email_endpoint_url: Root of the email API
        profile_path: Profile endpoint path below its root
        email_path: Email endpoint path below its root
        timeout: Per-request deadline in seconds
    """
    profile_endpoint_url: str
    email_endpoint_url: str
    profile_path: str = "/user"
    email_path: str = "/user/emails"
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        validate_base_url(self.profile_endpoint_url)
        validate_base_url(self.email_endpoint_url)
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def for_provider(cls, provider: str, **overrides: Any) -> "ResolverConfig":
        """Build the default config for a known provider.

        Args:
            provider: Provider name ("bitbucket", "github")
            **overrides: Field values replacing the provider defaults

        Raises:
            ValueError: If the provider is unknown
        """
        defaults = _defaults_for(provider)
        values = {
            "profile_endpoint_url": defaults.profile_endpoint_url,
            "email_endpoint_url": defaults.email_endpoint_url,
            "profile_path": defaults.profile_path,
            "email_path": defaults.email_path,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @classmethod
    def from_env(cls, provider: str, environ: Optional[Mapping[str, str]] = None) -> "ResolverConfig":
        """Build a config from environment variables.

        Args:
            provider: Provider name ("bitbucket", "github")
            environ: Mapping to read instead of os.environ

        Returns:
            ResolverConfig with environment overrides applied
        """
        env = EnvConfigProvider(environ)
        prefix = f"OAUTH_{provider.upper()}_"

        profile_url = env.get(f"{prefix}PROFILE_ENDPOINT_URL") or env.get("OAUTH_PROFILE_ENDPOINT_URL")
        email_url = env.get(f"{prefix}EMAIL_ENDPOINT_URL") or env.get("OAUTH_EMAIL_ENDPOINT_URL")

        return cls.for_provider(
            provider,
            profile_endpoint_url=profile_url,
            email_endpoint_url=email_url,
            timeout=env.get_float("OAUTH_HTTP_TIMEOUT", DEFAULT_TIMEOUT),
        )


def _defaults_for(provider: str) -> ProviderDefaults:
    try:
        return PROVIDER_DEFAULTS[provider.lower()]
    except KeyError:
        raise ValueError(
            f"No endpoint defaults for provider: {provider}. "
            f"Supported providers: {', '.join(sorted(PROVIDER_DEFAULTS))}"
        ) from None
