from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """A provider answered, but not with what the handler needed."""

    def __init__(self, provider: str, status_code: int, message: str):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.message = message


def _extract_error_message(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    msg = data.get("message")
    if isinstance(msg, str) and msg:
        return msg
    err = data.get("error")
    if isinstance(err, dict):
        inner = err.get("message")
        if isinstance(inner, str) and inner:
            return inner
    if isinstance(err, str) and err:
        return err
    errors = data.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict) and first.get("message"):
            return str(first["message"])
    return ""


@dataclass
class UpstreamResult:
    """
    Raw outcome of one upstream call.

    Non-2xx statuses and unparseable bodies are kept here as data; some of them
    (e.g. a 404 on a file lookup) are an expected answer, not a failure.
    """

    provider: str
    status_code: int
    data: Any = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300 and self.data is not None

    def error_message(self) -> str:
        msg = _extract_error_message(self.data)
        if msg:
            return msg
        if self.data is None:
            body = self.text.strip()
            if body:
                return f"{self.provider} returned a non-JSON response ({self.status_code}): {body[:200]}"
            return f"{self.provider} returned an empty response ({self.status_code})"
        return f"{self.provider} request failed with status {self.status_code}"

    def raise_for_error(self) -> None:
        if not self.ok:
            raise UpstreamError(self.provider, self.status_code, self.error_message())

    def expect_dict(self) -> Dict[str, Any]:
        self.raise_for_error()
        if not isinstance(self.data, dict):
            raise UpstreamError(self.provider, self.status_code, f"Unexpected {self.provider} response shape")
        return self.data

    def expect_list(self) -> List[Any]:
        self.raise_for_error()
        if not isinstance(self.data, list):
            raise UpstreamError(
                self.provider,
                self.status_code,
                _extract_error_message(self.data) or f"Unexpected {self.provider} response shape",
            )
        return self.data


class ProviderClient:
    """
    Thin wrapper around one upstream HTTP API.

    Subclasses set `provider`, build their auth headers and choose how request
    bodies are encoded. A new `httpx.AsyncClient` is opened per call; no retry.
    """

    provider = "upstream"

    def __init__(
        self,
        *,
        base_url: str,
        credential: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or "").rstrip("/")
        self._credential = credential or ""
        self.timeout = timeout
        self.transport = transport

    def __repr__(self) -> str:
        # never include the credential
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    def default_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._credential}"}

    def encode_body(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return {"json": body}

    async def call(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> UpstreamResult:
        kwargs: Dict[str, Any] = {"headers": self.default_headers()}
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs.update(self.encode_body(body))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.request(method, f"{self.base_url}{endpoint}", **kwargs)

        logger.debug("%s %s %s -> %s", self.provider, method, endpoint, resp.status_code)

        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            data = None
        return UpstreamResult(provider=self.provider, status_code=resp.status_code, data=data, text=resp.text)
