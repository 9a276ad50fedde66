from __future__ import annotations

from typing import Any, Dict

import httpx

from commons_projects.core.errors import NetworkOrServerError
from commons_projects.settings.config import get_settings


class CommonsRepo:
    """Client for the Wikimedia Commons action API."""

    def __init__(
        self,
        api_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        s = get_settings()
        self._api_url = api_url or s.COMMONS_API_URL
        self._timeout = timeout if timeout is not None else s.HTTP_TIMEOUT
        self._transport = transport

    async def query_page_info(self, title: str) -> Dict[str, Any]:
        """Run ``action=query`` for a single page title and return the decoded body.

        ``title`` is passed unencoded; httpx percent-encodes query params.
        """
        params = {
            "action": "query",
            "format": "json",
            "titles": title,
            "origin": "*",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._api_url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            # titles that cannot be encoded into a request URL count as failed queries
            raise NetworkOrServerError(f"Commons query failed: {exc}") from exc

        if not resp.is_success:
            raise NetworkOrServerError(
                f"Commons query failed: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise NetworkOrServerError("Commons query returned a non-JSON body") from exc

        if not isinstance(data, dict):
            raise NetworkOrServerError("Commons query returned an unexpected body")
        return data
