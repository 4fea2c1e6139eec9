"""
Shared building blocks for the per-resource parameter models.

Each Posty5 operation is a pydantic model tagged by its `operation`
literal. Field aliases are the node parameter names, so a model can be
validated straight from the values the node resolved for an item.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..transport import RequestDescriptor


def compact(**fields: Any) -> Dict[str, Any]:
    """Keep only truthy fields."""
    return {key: value for key, value in fields.items() if value}


class ParamModel(BaseModel):
    """Base for parameter collections; keys are node parameter names."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OperationParams(ParamModel):
    """Validated parameters of one operation for one item."""

    operation: str

    def to_request(self) -> RequestDescriptor:
        """Build the single API call this operation maps to."""
        raise NotImplementedError(f"{type(self).__name__} has no single request")


class UploadParams(OperationParams):
    """An operation whose metadata call is followed by a file upload."""

    def binary_property(self) -> str:
        """Name of the item's binary property holding the file."""
        raise NotImplementedError


class ListFilters(ParamModel):
    """
    Filters of a list operation.

    Every truthy filter becomes a query field under its alias. The free-text
    `search` filter is never sent itself; it is copied to each field named
    in `search_fields`.
    """

    search_fields: ClassVar[Tuple[str, ...]] = ()

    search: Optional[str] = None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name == "search":
                continue
            value = getattr(self, name)
            if value:
                query[field.alias or name] = value
        if self.search:
            for key in self.search_fields:
                query[key] = self.search
        return query


class ListParams(OperationParams):
    """A list operation: one bounded page, or every page."""

    path: ClassVar[str] = ""

    return_all: bool = Field(False, alias="returnAll")
    limit: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    filters: ListFilters = Field(default_factory=ListFilters)

    def query_filters(self) -> Dict[str, Any]:
        return self.filters.to_query()


def operation_map(*models: Type[OperationParams]) -> Dict[str, Type[OperationParams]]:
    """Index operation models by their `operation` literal."""
    return {model.model_fields["operation"].default: model for model in models}
