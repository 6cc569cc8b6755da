import logging
from typing import Any, Protocol, TypeVar

import httpx

from app.exceptions.custom import RateLimitError, TableClientError
from app.schemas.envelope import BatchResponse, RecordResponse

logger = logging.getLogger(__name__)

E = TypeVar("E", RecordResponse, BatchResponse)

RECORDS_PATH = "/tables/{table}/records"
QUERY_PATH = "/tables/{table}/records/query"
RECORD_QUERY_PATH = "/tables/{table}/records/{record_id}/query"


class TableClient(Protocol):
    async def fetch_records(self, table: str, params: dict[str, Any]) -> RecordResponse: ...

    async def get_record_by_id(
        self, table: str, record_id: int, params: dict[str, Any]
    ) -> RecordResponse: ...

    async def create_record(
        self, table: str, records: list[dict[str, Any]]
    ) -> BatchResponse: ...

    async def update_record(
        self, table: str, records: list[dict[str, Any]]
    ) -> BatchResponse: ...

    async def delete_record(self, table: str, record_ids: list[int]) -> BatchResponse: ...


class ApperTableClient:
    """HTTP binding of the hosted table API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        project_id: str,
        public_key: str,
        base_url: str = "https://api.apper.io/v1",
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {public_key}",
            "X-Apper-Project-Id": project_id,
            "Content-Type": "application/json",
        }

    def _url(self, template: str, **kwargs: Any) -> str:
        return self._base_url + template.format(**kwargs)

    async def _send(
        self, method: str, url: str, payload: dict[str, Any], envelope: type[E]
    ) -> E:
        try:
            resp = await self._client.request(
                method, url, json=payload, headers=self._headers
            )
        except httpx.HTTPError as exc:
            raise TableClientError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code == 429:
            raise RateLimitError("Apper")
        if resp.status_code >= 400:
            raise TableClientError(resp.text, status_code=resp.status_code)

        # JSONDecodeError and pydantic's ValidationError are both ValueErrors
        try:
            return envelope.model_validate(resp.json())
        except ValueError as exc:
            logger.error("Malformed response from %s: %s", url, exc)
            raise TableClientError(
                f"Malformed response from {url}", status_code=resp.status_code
            ) from exc

    async def fetch_records(self, table: str, params: dict[str, Any]) -> RecordResponse:
        url = self._url(QUERY_PATH, table=table)
        return await self._send("POST", url, params, RecordResponse)

    async def get_record_by_id(
        self, table: str, record_id: int, params: dict[str, Any]
    ) -> RecordResponse:
        url = self._url(RECORD_QUERY_PATH, table=table, record_id=record_id)
        return await self._send("POST", url, params, RecordResponse)

    async def create_record(
        self, table: str, records: list[dict[str, Any]]
    ) -> BatchResponse:
        resp = await self._send(
            "POST", self._url(RECORDS_PATH, table=table), {"records": records}, BatchResponse
        )
        logger.debug("Created %d record(s) in %s", len(records), table)
        return resp

    async def update_record(
        self, table: str, records: list[dict[str, Any]]
    ) -> BatchResponse:
        return await self._send(
            "PATCH", self._url(RECORDS_PATH, table=table), {"records": records}, BatchResponse
        )

    async def delete_record(self, table: str, record_ids: list[int]) -> BatchResponse:
        return await self._send(
            "DELETE", self._url(RECORDS_PATH, table=table), {"RecordIds": record_ids}, BatchResponse
        )
