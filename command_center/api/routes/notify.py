import logging
from typing import Callable, Dict

from fastapi import APIRouter, Request
from starlette.responses import Response

from command_center.api.fallback import add_catch_all
from command_center.core.envelope import error_response
from command_center.schemas.notify import NotifyRequest, NotifyResult

router = APIRouter(prefix="/notify", tags=["notify"])
logger = logging.getLogger(__name__)


def _send_log(message: str) -> None:
    logger.info("[NOTIFY] %s", message)


# channel name -> side effect; anything not listed here is ignored
CHANNELS: Dict[str, Callable[[str], None]] = {
    "log": _send_log,
}


@router.post("", response_model=NotifyResult)
async def notify(payload: NotifyRequest):
    results: Dict[str, bool] = {}
    for channel in payload.channels:
        # best effort: non-string and unknown names are skipped
        send = CHANNELS.get(channel) if isinstance(channel, str) else None
        if send is None:
            continue
        send(payload.message)
        results[channel] = True
    return NotifyResult(sent=True, channels=results)


async def _notify_fallback(request: Request) -> Response:
    if request.method != "POST":
        return error_response("POST only", 405)
    return error_response("Unknown notify route", 404, available=["/notify"])


add_catch_all(router, _notify_fallback)
