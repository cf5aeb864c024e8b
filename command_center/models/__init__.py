from command_center.models.agent import Agent
from command_center.models.base import Base

__all__ = [
    "Base",
    "Agent",
]
