"""Authenticated JSON client for the Jira Cloud REST API."""

from typing import Any

import httpx
import structlog

from jira_action.jira.schemas import HttpOutcome

log = structlog.get_logger()


def _parse_body(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        log.warning("jira_non_json_body", status=resp.status_code)
        return resp.text


class JiraHttpClient:
    def __init__(
        self,
        email: str,
        api_token: str,
        *,
        timeout: float = 30.0,
        user_agent: str = "jira-cloud-action",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            auth=(email, api_token),
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    async def __aenter__(self) -> "JiraHttpClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self, method: str, url: str, headers: dict, body: Any = None
    ) -> HttpOutcome:
        log.debug("jira_request", method=method, url=url)
        resp = await self._client.request(method, url, headers=headers, json=body)
        log.debug("jira_response", method=method, url=url, status=resp.status_code)
        return HttpOutcome(status_code=resp.status_code, result=_parse_body(resp))

    async def get_json(self, url: str, headers: dict) -> HttpOutcome:
        return await self._request("GET", url, headers)

    async def post_json(self, url: str, body: Any, headers: dict) -> HttpOutcome:
        return await self._request("POST", url, headers, body)

    async def put_json(self, url: str, body: Any, headers: dict) -> HttpOutcome:
        return await self._request("PUT", url, headers, body)
