import logging
from typing import List

from fastapi import APIRouter, Depends

from command_center.api.deps import get_providers, get_settings
from command_center.api.fallback import add_catch_all, is_identifier, scoped_not_found
from command_center.core.config import Settings
from command_center.core.providers import ExistingFile, Providers
from command_center.core.providers.github import encode_content
from command_center.schemas.github import FileUpsert, FileWritten, OrgOut, RepoCreate, RepoCreated, RepoOut

router = APIRouter(prefix="/github", tags=["github"])
logger = logging.getLogger(__name__)

unknown_github_route = scoped_not_found(
    "GitHub", ["/github/orgs", "/github/repos/:org", "/github/repo", "/github/file"]
)


@router.get("/orgs", response_model=List[OrgOut])
async def list_orgs(providers: Providers = Depends(get_providers)):
    orgs = (await providers.github.list_orgs()).expect_list()
    return [OrgOut(name=o.get("login"), url=o.get("html_url")) for o in orgs if isinstance(o, dict)]


@router.get("/repos/{org}", response_model=List[RepoOut])
async def list_repos(org: str, providers: Providers = Depends(get_providers)):
    if not is_identifier(org):
        return await unknown_github_route()
    repos = (await providers.github.list_org_repos(org)).expect_list()
    return [
        RepoOut(name=r.get("name"), url=r.get("html_url"), language=r.get("language"))
        for r in repos
        if isinstance(r, dict)
    ]


@router.post("/repo", response_model=RepoCreated)
async def create_repo(
    payload: RepoCreate,
    providers: Providers = Depends(get_providers),
    settings: Settings = Depends(get_settings),
):
    org = payload.org or settings.GITHUB_DEFAULT_ORG
    result = (
        await providers.github.create_repo(
            org,
            name=payload.name,
            description=payload.description,
            private=payload.private,
        )
    ).expect_dict()
    logger.info("created repository %s/%s", org, result.get("name"))
    return RepoCreated(created=True, url=result.get("html_url"), name=result.get("name"))


@router.post("/file", response_model=FileWritten)
async def upsert_file(
    payload: FileUpsert,
    providers: Providers = Depends(get_providers),
    settings: Settings = Depends(get_settings),
):
    """
    Create or update a single file.

    The current blob sha is looked up first and sent back with the write, so
    GitHub rejects the update if the file changed in between. That rejection is
    returned to the caller as-is; nothing is retried.
    """
    gh = providers.github
    org = payload.org or settings.GITHUB_DEFAULT_ORG
    encoded = encode_content(payload.content)

    revision = await gh.get_file_revision(org, payload.repo, payload.path)
    sha = revision.sha if isinstance(revision, ExistingFile) else None

    result = (
        await gh.put_file(
            org,
            payload.repo,
            payload.path,
            message=payload.message,
            content_b64=encoded,
            sha=sha,
        )
    ).expect_dict()
    content = result.get("content")
    url = content.get("html_url") if isinstance(content, dict) else None
    return FileWritten(success=True, url=url)


add_catch_all(router, unknown_github_route)
