from typing import Optional

from pydantic import BaseModel


class WorkerOut(BaseModel):
    name: Optional[str] = None
    modified: Optional[str] = None


class KVNamespaceOut(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None


class D1DatabaseOut(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
