import json
from typing import Any, Dict

from fastapi.responses import JSONResponse

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-API-Key",
}


class PrettyJSONResponse(JSONResponse):
    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2, default=str).encode("utf-8")


def error_response(message: str, status_code: int, **extra: Any) -> PrettyJSONResponse:
    body: Dict[str, Any] = {"error": message}
    body.update(extra)
    return PrettyJSONResponse(content=body, status_code=status_code)
