from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import httpx

from command_center.core.providers.base import ProviderClient, UpstreamResult

PAGE_SIZE = 100


@dataclass(frozen=True)
class ExistingFile:
    sha: str


@dataclass(frozen=True)
class MissingFile:
    pass


FileRevision = Union[ExistingFile, MissingFile]


def encode_content(content: str) -> str:
    return base64.b64encode((content or "").encode("utf-8")).decode("ascii")


class GitHubClient(ProviderClient):
    provider = "github"

    def __init__(
        self,
        *,
        base_url: str,
        credential: str,
        user_agent: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(base_url=base_url, credential=credential, timeout=timeout, transport=transport)
        self.user_agent = user_agent

    def default_headers(self) -> Dict[str, str]:
        # GitHub rejects requests without a User-Agent
        return {
            "Authorization": f"token {self._credential}",
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.user_agent,
        }

    async def list_orgs(self) -> UpstreamResult:
        return await self.call("/user/orgs", params={"per_page": PAGE_SIZE})

    async def list_org_repos(self, org: str) -> UpstreamResult:
        return await self.call(f"/orgs/{org}/repos", params={"per_page": PAGE_SIZE})

    async def create_repo(self, org: str, *, name: str, description: str = "", private: bool = False) -> UpstreamResult:
        return await self.call(
            f"/orgs/{org}/repos",
            "POST",
            {"name": name, "description": description, "private": private, "auto_init": True},
        )

    async def get_file_revision(self, org: str, repo: str, path: str) -> FileRevision:
        """
        Look up the current blob sha of `path`.

        Any answer without a sha (404, error body, a directory listing) means
        there is nothing to update and the next write is a create.
        """
        result = await self.call(f"/repos/{org}/{repo}/contents/{path}")
        if result.ok and isinstance(result.data, dict):
            sha = result.data.get("sha")
            if isinstance(sha, str) and sha:
                return ExistingFile(sha=sha)
        return MissingFile()

    async def put_file(
        self,
        org: str,
        repo: str,
        path: str,
        *,
        message: str,
        content_b64: str,
        sha: Optional[str] = None,
    ) -> UpstreamResult:
        payload: Dict[str, Any] = {"message": message, "content": content_b64}
        if sha:
            payload["sha"] = sha
        return await self.call(f"/repos/{org}/{repo}/contents/{path}", "PUT", payload)
