"""
modules/catalog/attraction_client.py
-------------------------------------
HTTP consumer of the attraction endpoint.

Real API:  GET {API_BASE_URL}/attractions
Response:  200 {"status": "success", "data": [...]}
           200 {"status": "error",   "message": "..."}

Any non-"success" status, transport failure, non-JSON body or malformed
record is reported as AttractionRetrievalError. No retries.
"""

from __future__ import annotations

import logging

import requests

import config
from modules.catalog.errors import AttractionRetrievalError
from modules.catalog.sources import AttractionSource, parse_records
from schemas.attraction import Attraction

logger = logging.getLogger(__name__)


class RemoteAttractionSource(AttractionSource):
    """Fetches the catalogue from a running instance of this API."""

    name = "remote"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.API_REQUEST_TIMEOUT
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}/attractions"

    def fetch_all(self) -> list[Attraction]:
        try:
            resp = self._session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except requests.RequestException as exc:
            logger.error("GET %s failed: %s", self.url, exc)
            raise AttractionRetrievalError(f"request to {self.url} failed: {exc}") from exc
        except ValueError as exc:
            logger.error("GET %s returned a non-JSON body", self.url)
            raise AttractionRetrievalError("response body is not valid JSON") from exc

        if not isinstance(body, dict):
            raise AttractionRetrievalError("response body is not a JSON object")

        if body.get("status") != "success":
            message = body.get("message") or f"unexpected status {body.get('status')!r}"
            logger.warning("Attraction endpoint reported an error: %s", message)
            raise AttractionRetrievalError(message)

        data = body.get("data")
        if not isinstance(data, list):
            raise AttractionRetrievalError("response 'data' is not a list")
        return parse_records(data)
