from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class AgentCreate(BaseModel):
    name: str
    type: str = "general"
    capabilities: List[str] = Field(default_factory=list)
    birthday: Optional[datetime] = None


class AgentCreated(BaseModel):
    created: bool = True
    id: str
    name: str


class AgentOut(BaseModel):
    id: str
    name: str
    type: str
    capabilities: List[str]
    birthday: datetime
    created_at: datetime
