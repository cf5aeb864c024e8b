from typing import List

from fastapi import APIRouter, Depends

from command_center.api.deps import get_providers
from command_center.api.fallback import add_catch_all, scoped_not_found
from command_center.core.providers import Providers
from command_center.schemas.cloudflare import D1DatabaseOut, KVNamespaceOut, WorkerOut

router = APIRouter(prefix="/cf", tags=["cloudflare"])

unknown_cf_route = scoped_not_found("CF", ["/cf/workers", "/cf/kv", "/cf/d1"])


@router.get("/workers", response_model=List[WorkerOut])
async def list_workers(providers: Providers = Depends(get_providers)):
    workers = await providers.cloudflare.list_workers()
    return [WorkerOut(name=w.get("id"), modified=w.get("modified_on")) for w in workers if isinstance(w, dict)]


@router.get("/kv", response_model=List[KVNamespaceOut])
async def list_kv(providers: Providers = Depends(get_providers)):
    namespaces = await providers.cloudflare.list_kv_namespaces()
    return [KVNamespaceOut(id=ns.get("id"), title=ns.get("title")) for ns in namespaces if isinstance(ns, dict)]


@router.get("/d1", response_model=List[D1DatabaseOut])
async def list_d1(providers: Providers = Depends(get_providers)):
    databases = await providers.cloudflare.list_d1_databases()
    return [D1DatabaseOut(id=db.get("uuid"), name=db.get("name")) for db in databases if isinstance(db, dict)]


add_catch_all(router, unknown_cf_route)
