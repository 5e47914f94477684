from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from app.platform.config import settings


@dataclass
class ApiResult:
    status_code: int
    message: str = ""
    data: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400


class WaitlistApiClient:
    """Talks to the waitlist endpoints through a caller owned httpx.AsyncClient."""

    def __init__(self, http_client: httpx.AsyncClient, api_prefix: str = settings.API_PREFIX):
        self.http_client = http_client
        self.api_prefix = api_prefix.rstrip("/")

    async def join(self, payload: dict[str, Any]) -> ApiResult:
        """POST a signup. Transport failures (httpx.RequestError) propagate to the caller."""
        response = await self.http_client.post(f"{self.api_prefix}/waitlist", json=payload)
        return self._result(response)

    async def stats(self) -> ApiResult:
        response = await self.http_client.get(f"{self.api_prefix}/waitlist/stats")
        return self._result(response)

    @staticmethod
    def _result(response: httpx.Response) -> ApiResult:
        body: Optional[dict] = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            return ApiResult(status_code=response.status_code, message=response.text)

        data = body.get("data")
        return ApiResult(
            status_code=response.status_code,
            message=body.get("message", ""),
            data=data if isinstance(data, dict) else {},
        )
