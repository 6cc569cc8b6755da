import logging
from typing import Any, Awaitable, Callable, TypeVar

from pydantic import ValidationError

from app.clients.table_client import TableClient
from app.exceptions.custom import (
    BatchOperationError,
    ClientNotInitializedError,
    RateLimitError,
    RecordNotFoundError,
    RemoteOperationError,
    TableClientError,
)
from app.notifications import Notifier
from app.schemas.envelope import BatchResponse, RecordResponse
from app.schemas.query import QueryParams

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TableService:
    """Shared plumbing for services backed by one remote table.

    Subclasses set ``table_name``, ``entity`` and ``projection``. The client
    is injected; when it is missing every call fails with
    ``ClientNotInitializedError`` before anything is sent.
    """

    table_name: str = ""
    entity: str = "Record"
    projection: list[str] = []

    def __init__(self, client: TableClient | None, notifier: Notifier | None = None):
        self._client = client
        self._notifier = notifier

    def _ensure_client(self) -> TableClient:
        if self._client is None:
            raise ClientNotInitializedError()
        return self._client

    def _notify(self, message: str | None) -> None:
        if self._notifier is not None and message:
            self._notifier.error(message)

    def _remote_failure(self, message: str | None) -> RemoteOperationError:
        message = message or f"Request to {self.table_name} failed"
        logger.error("%s: %s", self.table_name, message)
        self._notify(message)
        return RemoteOperationError(message)

    async def _fetch_many(
        self, query: QueryParams, degrade: bool = True
    ) -> list[dict[str, Any]]:
        """Fetch rows; on remote failure return [] unless ``degrade`` is off."""
        client = self._ensure_client()
        try:
            resp = await client.fetch_records(self.table_name, query.to_wire())
        except (TableClientError, RateLimitError) as exc:
            resp = RecordResponse(success=False, message=str(exc))

        if not resp.success:
            if not degrade:
                raise self._remote_failure(resp.message)
            logger.warning(
                "Fetch from %s failed, returning no rows: %s",
                self.table_name,
                resp.message,
            )
            self._notify(resp.message)
            return []

        if isinstance(resp.data, dict):
            return [resp.data]
        return resp.data or []

    def _map_rows(
        self, rows: list[dict[str, Any]], mapper: Callable[[dict[str, Any]], T]
    ) -> list[T]:
        """Map list rows, skipping ones whose stored values fail validation."""
        mapped = []
        for row in rows:
            try:
                mapped.append(mapper(row))
            except ValidationError as exc:
                logger.warning(
                    "Skipping %s %s with invalid data: %s",
                    self.entity.lower(),
                    row.get("Id"),
                    exc,
                )
        return mapped

    async def _fetch_one(self, record_id: int) -> dict[str, Any]:
        client = self._ensure_client()
        params = QueryParams(fields=self.projection).to_wire()
        try:
            resp = await client.get_record_by_id(self.table_name, int(record_id), params)
        except TableClientError as exc:
            raise self._remote_failure(exc.message) from exc

        if not resp.success:
            raise self._remote_failure(resp.message)

        data = resp.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            raise RecordNotFoundError(self.entity, record_id)
        return data

    def _collect_failures(self, resp: BatchResponse, action: str) -> list[str]:
        """Notify every per-record failure and return the messages."""
        failed = [r for r in resp.results or [] if not r.success]
        if not failed:
            return []

        logger.error(
            "Failed to %s %d %s record(s): %s",
            action,
            len(failed),
            self.table_name,
            [r.model_dump() for r in failed],
        )
        messages: list[str] = []
        for result in failed:
            for error in result.errors:
                messages.append(f"{error.fieldLabel}: {error.message}")
            if result.message:
                messages.append(result.message)
        if not messages:
            messages.append(f"Failed to {action} {self.entity.lower()}")
        for message in messages:
            self._notify(message)
        return messages

    async def _checked(self, call: Awaitable[BatchResponse]) -> BatchResponse:
        try:
            resp = await call
        except TableClientError as exc:
            raise self._remote_failure(exc.message) from exc
        if not resp.success:
            raise self._remote_failure(resp.message)
        return resp

    async def _create_one(self, record: dict[str, Any]) -> dict[str, Any]:
        client = self._ensure_client()
        resp = await self._checked(client.create_record(self.table_name, [record]))

        failures = self._collect_failures(resp, "create")
        if failures:
            raise BatchOperationError(f"Failed to create {self.entity.lower()}", failures)

        created = [r for r in resp.results or [] if r.success and r.data]
        if not created:
            raise RemoteOperationError("Create failed")

        logger.info("Created %s %s", self.entity.lower(), created[0].data.get("Id"))
        return created[0].data

    async def _update_one(self, record_id: int, record: dict[str, Any]) -> None:
        client = self._ensure_client()
        resp = await self._checked(
            client.update_record(self.table_name, [{"Id": int(record_id), **record}])
        )

        failures = self._collect_failures(resp, "update")
        if failures:
            raise BatchOperationError(f"Failed to update {self.entity.lower()}", failures)

        if not any(r.success for r in resp.results or []):
            raise RemoteOperationError("Update failed")

        logger.info("Updated %s %s (%s)", self.entity.lower(), record_id, ", ".join(record))

    async def delete(self, record_ids: int | list[int]) -> bool:
        """Delete by id; raises if any id failed, even when others succeeded."""
        if isinstance(record_ids, int):
            record_ids = [record_ids]
        client = self._ensure_client()
        resp = await self._checked(
            client.delete_record(self.table_name, [int(i) for i in record_ids])
        )

        failures = self._collect_failures(resp, "delete")
        if failures:
            raise BatchOperationError("Delete failed", failures)

        logger.info("Deleted %d %s record(s)", len(record_ids), self.table_name)
        return True
