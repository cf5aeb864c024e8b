from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from command_center.models.agent import Agent
from command_center.models.base import utcnow

LIST_LIMIT = 100


def _as_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    # stored timestamps are naive UTC
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


class AgentStore:
    """
    Record store gateway for agents.

    Concurrency and durability are whatever the underlying database gives;
    nothing here holds state between requests.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        *,
        name: str,
        type: str = "general",
        capabilities: Optional[Sequence[str]] = None,
        birthday: Optional[datetime] = None,
    ) -> Agent:
        now = utcnow()
        agent = Agent(
            id=str(uuid.uuid4()),
            name=name,
            type=type or "general",
            capabilities=list(capabilities or []),
            birthday=_as_naive_utc(birthday) or now,
            created_at=now,
        )
        self.db.add(agent)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return agent

    def list(self, limit: int = LIST_LIMIT) -> List[Agent]:
        q = select(Agent).order_by(Agent.created_at.asc()).limit(max(1, int(limit)))
        return list(self.db.execute(q).scalars().all())

    def get(self, agent_id: str) -> Optional[Agent]:
        return self.db.get(Agent, agent_id)

    def count(self) -> int:
        return int(self.db.execute(select(func.count()).select_from(Agent)).scalar_one())
