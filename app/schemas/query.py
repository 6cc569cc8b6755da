from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Operator(StrEnum):
    equal_to = "EqualTo"
    greater_than_or_equal_to = "GreaterThanOrEqualTo"
    less_than_or_equal_to = "LessThanOrEqualTo"
    contains = "Contains"
    exact_match = "ExactMatch"


class SortType(StrEnum):
    asc = "ASC"
    desc = "DESC"


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Condition(_Wire):
    field_name: str = Field(alias="FieldName")
    operator: Operator = Field(alias="Operator")
    values: list[Any] = Field(alias="Values")


class GroupCondition(_Wire):
    field_name: str = Field(alias="fieldName")
    operator: Operator
    values: list[Any]


class SubGroup(_Wire):
    conditions: list[GroupCondition]
    operator: str = "OR"


class WhereGroup(_Wire):
    operator: str = "OR"
    sub_groups: list[SubGroup] = Field(alias="subGroups")


class OrderBy(_Wire):
    field_name: str = Field(alias="fieldName")
    sorttype: SortType = SortType.asc


class PagingInfo(_Wire):
    limit: int
    offset: int = 0


class QueryParams(_Wire):
    fields: list[str] = []
    where: list[Condition] = []
    where_groups: list[WhereGroup] = Field(default=[], alias="whereGroups")
    order_by: list[OrderBy] = Field(default=[], alias="orderBy")
    paging_info: PagingInfo | None = Field(default=None, alias="pagingInfo")

    def to_wire(self) -> dict[str, Any]:
        """Serialise to the remote parameter shape, omitting empty clauses."""
        payload: dict[str, Any] = {
            "fields": [{"field": {"Name": name}} for name in self.fields],
        }
        if self.where:
            payload["where"] = [c.model_dump(by_alias=True, mode="json") for c in self.where]
        if self.where_groups:
            payload["whereGroups"] = [g.model_dump(by_alias=True, mode="json") for g in self.where_groups]
        if self.order_by:
            payload["orderBy"] = [o.model_dump(by_alias=True, mode="json") for o in self.order_by]
        if self.paging_info:
            payload["pagingInfo"] = self.paging_info.model_dump()
        return payload


def any_contains(field_names: list[str], text: str) -> WhereGroup:
    """OR-group matching ``text`` as a substring of any of ``field_names``."""
    return WhereGroup(
        sub_groups=[
            SubGroup(
                conditions=[
                    GroupCondition(field_name=name, operator=Operator.contains, values=[text])
                    for name in field_names
                ]
            )
        ]
    )
