from typing import List

from fastapi import APIRouter, Depends

from command_center.api.deps import get_providers
from command_center.api.fallback import add_catch_all, scoped_not_found
from command_center.core.providers import Providers
from command_center.schemas.huggingface import ModelOut, SpaceOut

router = APIRouter(prefix="/hf", tags=["huggingface"])

unknown_hf_route = scoped_not_found("HF", ["/hf/models?q=", "/hf/spaces?q="])


@router.get("/models", response_model=List[ModelOut])
async def search_models(q: str = "", providers: Providers = Depends(get_providers)):
    models = (await providers.huggingface.search_models(q)).expect_list()
    return [
        ModelOut(id=m.get("id"), downloads=m.get("downloads"), likes=m.get("likes"))
        for m in models
        if isinstance(m, dict)
    ]


@router.get("/spaces", response_model=List[SpaceOut])
async def search_spaces(q: str = "", providers: Providers = Depends(get_providers)):
    spaces = (await providers.huggingface.search_spaces(q)).expect_list()
    return [SpaceOut(id=s.get("id"), likes=s.get("likes"), sdk=s.get("sdk")) for s in spaces if isinstance(s, dict)]


add_catch_all(router, unknown_hf_route)
