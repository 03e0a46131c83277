from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Iterator

import requests
from requests.auth import AuthBase

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "7.1"
CONTINUATION_HEADER = "x-ms-continuationtoken"


class BearerAuth(AuthBase):
    """Attach an Entra access token as a bearer credential."""

    def __init__(self, token: str) -> None:
        self.token = token

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = f"Bearer {self.token}"
        return r

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and other.token == self.token


class DevOpsClient:
    """Thin REST client for one Azure DevOps organization.

    The client is bound to the organization URL, a ``requests`` auth object
    and the User-Agent valid at construction time. Relative paths are joined
    to the organization URL; absolute URLs (sub-services such as search) are
    used as given.
    """

    RETRY_STATUS_CODES = frozenset({429, 503, 504})
    MAX_RETRIES = 5
    BASE_DELAY = 1.0
    MAX_DELAY = 60.0

    def __init__(
        self,
        base_url: str,
        *,
        auth: AuthBase,
        user_agent: str,
        session: requests.Session | None = None,
        timeout: float = 60.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = auth
        self._session.headers.update(
            {"User-Agent": user_agent, "Accept": "application/json"}
        )

    def url(self, path: str) -> str:
        if path.startswith(("https://", "http://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _retry_after(value: str | None) -> float | None:
        """Seconds to wait from a ``Retry-After`` header (delta or HTTP date)."""
        if not value:
            return None
        value = value.strip()
        if value.isdigit():
            return float(value)
        try:
            when = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return None
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        return max(0.0, (when - datetime.now(timezone.utc)).total_seconds())

    def _send_with_retry(
        self, method: str, url: str, **kwargs: Any
    ) -> requests.Response:
        for attempt in range(1, self.MAX_RETRIES + 1):
            response = self._session.request(
                method, url, timeout=self.timeout, **kwargs
            )
            if response.status_code < 400:
                return response
            if (
                response.status_code not in self.RETRY_STATUS_CODES
                or attempt == self.MAX_RETRIES
            ):
                response.raise_for_status()

            delay = self._retry_after(response.headers.get("Retry-After"))
            if delay is None:
                delay = self.BASE_DELAY * (2 ** (attempt - 1))
                delay += random.uniform(0, 0.5)  # jitter
            delay = min(delay, self.MAX_DELAY)
            logger.warning(
                "Azure DevOps %s error. Retrying in %.1f seconds (attempt %d/%d)",
                response.status_code,
                delay,
                attempt,
                self.MAX_RETRIES,
            )
            time.sleep(delay)
        raise RuntimeError("Unreachable")

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        api_version: str | None = DEFAULT_API_VERSION,
    ) -> requests.Response:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        if api_version:
            query.setdefault("api-version", api_version)
        return self._send_with_retry(method, self.url(path), params=query, json=json)

    def get(self, path: str, **kwargs: Any) -> Any:
        return self.request("GET", path, **kwargs).json()

    def post(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        return self.request("POST", path, json=json, **kwargs).json()

    def get_text(self, path: str, **kwargs: Any) -> str:
        return self.request("GET", path, **kwargs).text

    def get_paged(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        limit: int | None = None,
        **kwargs: Any,
    ) -> Iterator[Any]:
        """Yield items of a list endpoint, following continuation tokens.

        At most ``limit`` items are yielded; no further page is requested
        once it is reached.
        """
        params = dict(params or {})
        remaining = limit
        page_number = 0
        while remaining is None or remaining > 0:
            response = self.request("GET", path, params=params, **kwargs)
            page_number += 1
            logger.debug("Fetched page %s of %s", page_number, path)
            items = response.json().get("value", [])
            if remaining is not None:
                items = items[:remaining]
                remaining -= len(items)
            yield from items

            token = response.headers.get(CONTINUATION_HEADER)
            if not token:
                break
            params["continuationToken"] = token

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "DevOpsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
