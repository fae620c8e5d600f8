from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class DeleteQuery(BaseModel):
    """
    { "where"?: <filter> }

    A missing or null `where` deletes nothing (use clear() to empty a store).
    """

    where: Any = None


class FindQuery(BaseModel):
    """
    { "where"?: <filter>, "sort"?: <field>, "page"?: int >= 0, "size"?: int >= 0 }

    Pagination only applies when both `page` and `size` are given and `size` > 0.
    """

    where: Any = None
    sort: str | None = None
    page: NonNegativeInt | None = None
    size: NonNegativeInt | None = None

    @property
    def paginated(self) -> bool:
        return self.page is not None and self.size is not None and self.size > 0


class FindResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    documents: list[Any] = Field(default_factory=list)
    total_count: int = Field(0, alias="totalCount")


def coerce_find_query(query: FindQuery | Mapping[str, Any] | None) -> FindQuery:
    if query is None:
        return FindQuery()
    if isinstance(query, FindQuery):
        return query
    return FindQuery.model_validate(dict(query))


def coerce_delete_query(query: DeleteQuery | Mapping[str, Any] | None) -> DeleteQuery:
    if query is None:
        return DeleteQuery()
    if isinstance(query, DeleteQuery):
        return query
    return DeleteQuery.model_validate(dict(query))
