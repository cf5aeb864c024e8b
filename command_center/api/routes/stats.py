from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from command_center.api.deps import get_agent_store, get_settings
from command_center.api.fallback import add_catch_all, scoped_not_found
from command_center.core.agent_store import AgentStore
from command_center.core.config import Settings

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
def stats(settings: Settings = Depends(get_settings), store: AgentStore = Depends(get_agent_store)):
    # identifiers only; credentials never leave Settings
    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "agents": store.count(),
        "github": {"default_org": settings.GITHUB_DEFAULT_ORG},
        "cloudflare": {"account_id": settings.CLOUDFLARE_ACCOUNT_ID},
        "stripe": {"account": settings.STRIPE_ACCOUNT_ID},
        "huggingface": {"user": settings.HF_USER},
    }


add_catch_all(router, scoped_not_found("stats", ["/stats"]))
