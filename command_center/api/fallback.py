import re
from typing import Awaitable, Callable, List

from fastapi import APIRouter
from starlette.responses import Response

from command_center.core.envelope import error_response

# identifier path segments, e.g. /agents/{id}
IDENT_RE = re.compile(r"[\w-]+")

FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]

GLOBAL_ROUTES: List[str] = ["/github", "/stripe", "/hf", "/cf", "/agents", "/notify", "/stats"]


def is_identifier(value: str) -> bool:
    return bool(IDENT_RE.fullmatch(value or ""))


def scoped_not_found(label: str, available: List[str]) -> Callable[[], Awaitable[Response]]:
    async def unknown_route() -> Response:
        return error_response(f"Unknown {label} route", 404, available=list(available))

    return unknown_route


def add_catch_all(router: APIRouter, endpoint: Callable[..., Awaitable[Response]]) -> None:
    """
    Register `endpoint` for every path and method left under the router's prefix.

    Must be called after the router's real routes so those match first.
    """
    for path in ("", "/{rest:path}"):
        router.add_api_route(path, endpoint, methods=FALLBACK_METHODS, include_in_schema=False)


async def global_not_found() -> Response:
    return error_response("Not found", 404, routes=list(GLOBAL_ROUTES))
