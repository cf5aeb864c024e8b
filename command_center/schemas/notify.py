from typing import Any, Dict, List

from pydantic import BaseModel, Field


class NotifyRequest(BaseModel):
    message: str = ""
    channels: List[Any] = Field(default_factory=lambda: ["log"])


class NotifyResult(BaseModel):
    sent: bool = True
    channels: Dict[str, bool] = Field(default_factory=dict)
