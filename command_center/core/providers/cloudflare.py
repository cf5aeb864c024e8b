from __future__ import annotations

from typing import Any, List, Optional

import httpx

from command_center.core.providers.base import ProviderClient, UpstreamError, UpstreamResult


class CloudflareClient(ProviderClient):
    """All calls are scoped to a single account: <api>/accounts/<account_id>/..."""

    provider = "cloudflare"

    def __init__(
        self,
        *,
        base_url: str,
        credential: str,
        account_id: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            base_url=f"{(base_url or '').rstrip('/')}/accounts/{account_id}",
            credential=credential,
            timeout=timeout,
            transport=transport,
        )
        self.account_id = account_id

    async def _list(self, endpoint: str) -> List[Any]:
        result: UpstreamResult = await self.call(endpoint)
        if not isinstance(result.data, dict):
            raise UpstreamError(self.provider, result.status_code, result.error_message())
        items = result.data.get("result")
        return items if isinstance(items, list) else []

    async def list_workers(self) -> List[Any]:
        return await self._list("/workers/scripts")

    async def list_kv_namespaces(self) -> List[Any]:
        return await self._list("/storage/kv/namespaces")

    async def list_d1_databases(self) -> List[Any]:
        return await self._list("/d1/database")
