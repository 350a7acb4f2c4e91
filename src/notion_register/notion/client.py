"""Synchronous Notion client that creates one database page per call.

Talks to the pages endpoint directly over httpx, pinned to the API version
the payload shape was written against. The transport can be injected for
tests; otherwise a default httpx.Client is created and owned by the instance.
"""

import json
import logging

import httpx

from notion_register.errors import (
    NotionAPIError,
    PayloadError,
    RequestBuildError,
    TransportError,
)
from notion_register.models import RegistrationRequest
from notion_register.notion.properties import build_page_payload

logger = logging.getLogger(__name__)

NOTION_PAGES_URL = "https://api.notion.com/v1/pages"
NOTION_API_VERSION = "2021-05-13"


class NotionClient:
    """Holds the access token and a reusable HTTP transport."""

    def __init__(self, token: str, http_client: httpx.Client | None = None):
        self._token = token
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client()

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this instance created it."""
        if self._owns_http:
            self._http.close()

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
            "Notion-Version": NOTION_API_VERSION,
        }

    def register_record(self, database_id: str, title: str) -> None:
        """Create a page titled ``title`` in ``database_id``.

        Sends exactly one POST with no retry, so calling twice creates two
        pages. Returns None on HTTP 200 and discards the response body.

        Raises:
            PayloadError: the body could not be serialized.
            RequestBuildError: the request could not be built from the headers.
            TransportError: the request failed before a response arrived.
            NotionAPIError: any status other than 200, with the raw body.
        """
        payload = build_page_payload(RegistrationRequest(database_id=database_id, title=title))

        try:
            body = json.dumps(payload)
        except (TypeError, ValueError) as exc:
            raise PayloadError(f"error marshalling payload: {exc}") from exc

        try:
            request = self._http.build_request(
                "POST", NOTION_PAGES_URL, content=body, headers=self._headers()
            )
        except ValueError as exc:
            # Header values must be ASCII; a non-ASCII token fails here.
            raise RequestBuildError(f"error creating request: {exc}") from exc

        try:
            response = self._http.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"error sending request: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise NotionAPIError(response.status_code, response.text)

        logger.debug("Created Notion page in %s", database_id)
