from fastapi import APIRouter

from command_center.api.routes import agents, cloudflare, github, health, huggingface, notify, stats, stripe

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(github.router)
api_router.include_router(stripe.router)
api_router.include_router(huggingface.router)
api_router.include_router(cloudflare.router)
api_router.include_router(agents.router)
api_router.include_router(notify.router)
api_router.include_router(stats.router)
