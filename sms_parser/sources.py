from __future__ import annotations

import time
from typing import Any, Iterable, Optional, Protocol

import httpx

from sms_parser.types import RawMessage


class GatewayError(RuntimeError):
    pass


class MessageSource(Protocol):
    async def fetch_messages(self, *, since: int) -> Iterable[RawMessage]:
        ...


def _now_ms() -> int:
    return int(time.time() * 1000)


def _to_message(item: dict[str, Any]) -> RawMessage:
    date = item.get("date")
    try:
        received_at = int(date) if date else _now_ms()
    except (TypeError, ValueError):
        received_at = _now_ms()
    return RawMessage(
        sender=str(item.get("address") or ""),
        body=str(item.get("body") or ""),
        received_at=received_at,
    )


class HttpSmsGatewaySource:
    """
    Pulls received SMS from an Android SMS gateway app over HTTP.

    GET /messages?since=<ms>&offset=<n>&limit=<n>
    returns a JSON list of {"address": ..., "body": ..., "date": <ms>}
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: str = "",
        max_messages: int = 500,
        page_size: int = 100,
        timeout_sec: float = 10.0,
        verify_tls: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._max_messages = max_messages
        self._page_size = page_size
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_sec,
            verify=verify_tls,
            headers=headers,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def _raise_http(self, where: str, r: httpx.Response) -> None:
        raise GatewayError(f"{where} failed: http={r.status_code} body={r.text[:300]}")

    async def _fetch_page(self, *, since: int, offset: int, limit: int) -> list[dict[str, Any]]:
        try:
            r = await self._client.get(
                "/messages",
                params={"since": since, "offset": offset, "limit": limit},
            )
        except httpx.HTTPError as e:
            raise GatewayError(f"messages request failed: {e}") from e

        if r.status_code != 200:
            self._raise_http("messages", r)

        try:
            data = r.json()
        except ValueError:
            raise GatewayError(f"messages failed: invalid json http={r.status_code} body={r.text[:300]}")

        if not isinstance(data, list):
            raise GatewayError(f"messages unexpected response: {data!r}")
        return [item for item in data if isinstance(item, dict)]

    async def fetch_messages(self, *, since: int) -> list[RawMessage]:
        offset = 0
        messages: list[RawMessage] = []

        while offset < self._max_messages:
            limit = min(self._page_size, self._max_messages - offset)
            items = await self._fetch_page(since=since, offset=offset, limit=limit)
            if not items:
                break

            for item in items:
                msg = _to_message(item)
                if msg.received_at < since:
                    continue
                messages.append(msg)

            if len(items) < limit:
                break
            offset += limit

        messages.sort(key=lambda m: m.received_at)
        return messages
