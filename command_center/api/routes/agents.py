from typing import List

from fastapi import APIRouter, Depends

from command_center.api.deps import get_agent_store
from command_center.api.fallback import add_catch_all, is_identifier, scoped_not_found
from command_center.core.agent_store import AgentStore
from command_center.core.envelope import error_response
from command_center.models.agent import Agent
from command_center.schemas.agent import AgentCreate, AgentCreated, AgentOut

router = APIRouter(prefix="/agents", tags=["agents"])

AGENT_ROUTES = ["/agents", "/agents/:id"]

unknown_agents_route = scoped_not_found("agents", AGENT_ROUTES)


def _agent_out(a: Agent) -> AgentOut:
    return AgentOut(
        id=a.id,
        name=a.name,
        type=a.type,
        capabilities=list(a.capabilities or []),
        birthday=a.birthday,
        created_at=a.created_at,
    )


@router.get("", response_model=List[AgentOut])
def list_agents(store: AgentStore = Depends(get_agent_store)):
    return [_agent_out(a) for a in store.list()]


@router.post("", response_model=AgentCreated)
def create_agent(payload: AgentCreate, store: AgentStore = Depends(get_agent_store)):
    agent = store.insert(
        name=payload.name,
        type=payload.type,
        capabilities=payload.capabilities,
        birthday=payload.birthday,
    )
    return AgentCreated(created=True, id=agent.id, name=agent.name)


@router.get("/{agent_id}", response_model=AgentOut)
def get_agent(agent_id: str, store: AgentStore = Depends(get_agent_store)):
    if not is_identifier(agent_id):
        return error_response("Unknown agents route", 404, available=AGENT_ROUTES)
    agent = store.get(agent_id)
    if not agent:
        return error_response("Agent not found", 404)
    return _agent_out(agent)


add_catch_all(router, unknown_agents_route)
