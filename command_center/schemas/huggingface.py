from typing import Optional

from pydantic import BaseModel


class ModelOut(BaseModel):
    id: Optional[str] = None
    downloads: Optional[int] = None
    likes: Optional[int] = None


class SpaceOut(BaseModel):
    id: Optional[str] = None
    likes: Optional[int] = None
    sdk: Optional[str] = None
