"""
Upstream provider adapters.

Each adapter owns its base URL, auth headers and body encoding. Calls return
an `UpstreamResult` and never raise on a non-2xx answer; handlers decide
whether they need a success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from command_center.core.config import Settings
from command_center.core.providers.base import ProviderClient, UpstreamError, UpstreamResult
from command_center.core.providers.cloudflare import CloudflareClient
from command_center.core.providers.github import ExistingFile, FileRevision, GitHubClient, MissingFile
from command_center.core.providers.huggingface import HuggingFaceClient
from command_center.core.providers.stripe import StripeClient, to_minor_units


@dataclass
class Providers:
    github: GitHubClient
    stripe: StripeClient
    huggingface: HuggingFaceClient
    cloudflare: CloudflareClient


def build_providers(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> Providers:
    timeout = settings.UPSTREAM_TIMEOUT_SECONDS
    return Providers(
        github=GitHubClient(
            base_url=settings.GITHUB_API_URL,
            credential=settings.GITHUB_TOKEN,
            user_agent=settings.GITHUB_USER_AGENT,
            timeout=timeout,
            transport=transport,
        ),
        stripe=StripeClient(
            base_url=settings.STRIPE_API_URL,
            credential=settings.STRIPE_SECRET_KEY,
            timeout=timeout,
            transport=transport,
        ),
        huggingface=HuggingFaceClient(
            base_url=settings.HF_API_URL,
            credential=settings.HF_TOKEN,
            timeout=timeout,
            transport=transport,
        ),
        cloudflare=CloudflareClient(
            base_url=settings.CLOUDFLARE_API_URL,
            credential=settings.CLOUDFLARE_API_TOKEN,
            account_id=settings.CLOUDFLARE_ACCOUNT_ID,
            timeout=timeout,
            transport=transport,
        ),
    )


__all__ = [
    "CloudflareClient",
    "ExistingFile",
    "FileRevision",
    "GitHubClient",
    "HuggingFaceClient",
    "MissingFile",
    "ProviderClient",
    "Providers",
    "StripeClient",
    "UpstreamError",
    "UpstreamResult",
    "build_providers",
    "to_minor_units",
]
