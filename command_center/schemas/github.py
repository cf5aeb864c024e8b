from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_COMMIT_MESSAGE = "Update via Command Center"


class OrgOut(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None


class RepoOut(BaseModel):
    name: Optional[str] = None
    url: Optional[str] = None
    language: Optional[str] = None


class RepoCreate(BaseModel):
    org: Optional[str] = None  # falls back to GITHUB_DEFAULT_ORG
    name: str
    description: str = ""
    private: bool = False


class RepoCreated(BaseModel):
    created: bool = True
    url: Optional[str] = None
    name: Optional[str] = None


class FileUpsert(BaseModel):
    org: Optional[str] = None  # falls back to GITHUB_DEFAULT_ORG
    repo: str
    path: str
    content: str
    message: str = Field(default=DEFAULT_COMMIT_MESSAGE)


class FileWritten(BaseModel):
    success: bool = True
    url: Optional[str] = None
