from typing import Optional

import httpx
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from command_center.core.agent_store import AgentStore
from command_center.core.config import Settings
from command_center.core.db import get_db
from command_center.core.providers import Providers, build_providers


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_transport(request: Request) -> Optional[httpx.AsyncBaseTransport]:
    return getattr(request.app.state, "upstream_transport", None)


def get_providers(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
) -> Providers:
    return build_providers(settings, transport)


def get_agent_store(db: Session = Depends(get_db)) -> AgentStore:
    return AgentStore(db)
