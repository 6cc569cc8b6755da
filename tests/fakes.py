"""In-memory stand-in for the hosted table API, used by service and router tests."""

import copy
from typing import Any

from app.schemas.envelope import BatchResponse, FieldError, RecordResponse, RecordResult


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("Id")
    return value


def _condition_matches(row: dict[str, Any], field: str, operator: str, values: list) -> bool:
    value = _plain(row.get(field))
    if operator in ("EqualTo", "ExactMatch"):
        return value in values
    if value is None:
        return False
    if operator == "GreaterThanOrEqualTo":
        return value >= values[0]
    if operator == "LessThanOrEqualTo":
        return value <= values[0]
    if operator == "Contains":
        return str(values[0]).lower() in str(value).lower()
    raise ValueError(f"Unsupported operator {operator}")


def _group_matches(row: dict[str, Any], group: dict[str, Any]) -> bool:
    results = []
    for sub in group.get("subGroups", []):
        checks = [
            _condition_matches(row, c["fieldName"], c["operator"], c["values"])
            for c in sub.get("conditions", [])
        ]
        results.append(any(checks) if sub.get("operator", "OR") == "OR" else all(checks))
    return any(results) if group.get("operator", "OR") == "OR" else all(results)


class FakeTableClient:
    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None):
        self.tables: dict[str, dict[int, dict[str, Any]]] = {}
        for name, rows in (tables or {}).items():
            self.tables[name] = {row["Id"]: copy.deepcopy(row) for row in rows}
        self.calls: list[tuple[str, str, Any]] = []
        self.failures: dict[str, str] = {}
        self.create_errors: list[FieldError] = []

    def fail(self, method: str, message: str) -> None:
        """Make every later call to ``method`` answer with success=false."""
        self.failures[method] = message

    def _table(self, name: str) -> dict[int, dict[str, Any]]:
        return self.tables.setdefault(name, {})

    def _next_id(self, name: str) -> int:
        return max(self._table(name), default=0) + 1

    async def fetch_records(self, table: str, params: dict[str, Any]) -> RecordResponse:
        self.calls.append(("fetch_records", table, params))
        if "fetch_records" in self.failures:
            return RecordResponse(success=False, message=self.failures["fetch_records"])

        rows = list(self._table(table).values())
        for cond in params.get("where", []):
            rows = [
                r for r in rows
                if _condition_matches(r, cond["FieldName"], cond["Operator"], cond["Values"])
            ]
        for group in params.get("whereGroups", []):
            rows = [r for r in rows if _group_matches(r, group)]
        for order in reversed(params.get("orderBy", [])):
            rows.sort(
                key=lambda r: (r.get(order["fieldName"]) is None, r.get(order["fieldName"])),
                reverse=order["sorttype"] == "DESC",
            )
        paging = params.get("pagingInfo")
        if paging:
            offset = paging.get("offset", 0)
            rows = rows[offset:offset + paging["limit"]]

        return RecordResponse(success=True, data=copy.deepcopy(rows))

    async def get_record_by_id(
        self, table: str, record_id: int, params: dict[str, Any]
    ) -> RecordResponse:
        self.calls.append(("get_record_by_id", table, record_id))
        if "get_record_by_id" in self.failures:
            return RecordResponse(success=False, message=self.failures["get_record_by_id"])
        row = self._table(table).get(record_id)
        return RecordResponse(success=True, data=copy.deepcopy(row))

    async def create_record(self, table: str, records: list[dict[str, Any]]) -> BatchResponse:
        self.calls.append(("create_record", table, records))
        if "create_record" in self.failures:
            return BatchResponse(success=False, message=self.failures["create_record"])
        if self.create_errors:
            return BatchResponse(
                success=True,
                results=[
                    RecordResult(success=False, errors=self.create_errors, message="Invalid record")
                    for _ in records
                ],
            )

        results = []
        for record in records:
            row = {"Id": self._next_id(table), **copy.deepcopy(record)}
            self._table(table)[row["Id"]] = row
            results.append(RecordResult(success=True, data=copy.deepcopy(row)))
        return BatchResponse(success=True, results=results)

    async def update_record(self, table: str, records: list[dict[str, Any]]) -> BatchResponse:
        self.calls.append(("update_record", table, records))
        if "update_record" in self.failures:
            return BatchResponse(success=False, message=self.failures["update_record"])

        results = []
        for record in records:
            row = self._table(table).get(record["Id"])
            if row is None:
                results.append(RecordResult(success=False, message=f"Record {record['Id']} not found"))
                continue
            row.update(copy.deepcopy(record))
            results.append(RecordResult(success=True, data=copy.deepcopy(row)))
        return BatchResponse(success=True, results=results)

    async def delete_record(self, table: str, record_ids: list[int]) -> BatchResponse:
        self.calls.append(("delete_record", table, record_ids))
        if "delete_record" in self.failures:
            return BatchResponse(success=False, message=self.failures["delete_record"])

        results = []
        for record_id in record_ids:
            if self._table(table).pop(record_id, None) is None:
                results.append(RecordResult(success=False, message=f"Record {record_id} not found"))
            else:
                results.append(RecordResult(success=True))
        return BatchResponse(success=True, results=results)

    def last_call(self, method: str) -> Any:
        for name, _table, payload in reversed(self.calls):
            if name == method:
                return payload
        return None
