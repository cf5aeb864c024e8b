from command_center.core.providers.base import ProviderClient, UpstreamResult

SEARCH_LIMIT = 20


class HuggingFaceClient(ProviderClient):
    provider = "huggingface"

    async def search_models(self, query: str = "", limit: int = SEARCH_LIMIT) -> UpstreamResult:
        return await self.call("/models", params={"search": query or "", "limit": limit})

    async def search_spaces(self, query: str = "", limit: int = SEARCH_LIMIT) -> UpstreamResult:
        return await self.call("/spaces", params={"search": query or "", "limit": limit})
