"""Short link operations (/api/short-link)."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field

from ..constants import SHORT_LINK
from ..transport import RequestDescriptor
from .base import ListFilters, ListParams, OperationParams, ParamModel, compact, operation_map


class ShortLinkAdditionalFields(ParamModel):
    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")
    template_id: Optional[str] = Field(None, alias="templateId")
    is_enable_monetization: Optional[bool] = Field(None, alias="isEnableMonetization")
    page_title: Optional[str] = Field(None, alias="pageTitle")
    page_description: Optional[str] = Field(None, alias="pageDescription")


class _ShortLinkFields(OperationParams):
    name: Optional[str] = None
    custom_landing_id: Optional[str] = Field(None, alias="customLandingId")
    additional_fields: ShortLinkAdditionalFields = Field(
        default_factory=ShortLinkAdditionalFields, alias="additionalFields"
    )

    def optional_body(self) -> Dict[str, Any]:
        extra = self.additional_fields
        body = compact(
            name=self.name,
            customLandingId=self.custom_landing_id,
            tag=extra.tag,
            refId=extra.ref_id,
            templateId=extra.template_id,
        )
        # false is meaningful here
        if extra.is_enable_monetization is not None:
            body["isEnableMonetization"] = extra.is_enable_monetization
        if extra.page_title or extra.page_description:
            body["pageInfo"] = {
                "title": extra.page_title or "",
                "description": extra.page_description or "",
            }
        return body


class ShortLinkCreate(_ShortLinkFields):
    operation: Literal["create"] = "create"
    url: str

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="POST",
            path=SHORT_LINK,
            body={"baseUrl": self.url, **self.optional_body()},
        )


class ShortLinkUpdate(_ShortLinkFields):
    operation: Literal["update"] = "update"
    short_link_id: str = Field(..., alias="shortLinkId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{SHORT_LINK}/{self.short_link_id}",
            body=self.optional_body(),
        )


class ShortLinkGet(OperationParams):
    operation: Literal["get"] = "get"
    short_link_id: str = Field(..., alias="shortLinkId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{SHORT_LINK}/{self.short_link_id}")


class ShortLinkDelete(OperationParams):
    operation: Literal["delete"] = "delete"
    short_link_id: str = Field(..., alias="shortLinkId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="DELETE", path=f"{SHORT_LINK}/{self.short_link_id}")


class ShortLinkFilters(ListFilters):
    search_fields = ("name", "baseUrl")

    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")


class ShortLinkList(ListParams):
    path = SHORT_LINK

    operation: Literal["list"] = "list"
    filters: ShortLinkFilters = Field(default_factory=ShortLinkFilters)


ShortLinkOperation = Annotated[
    Union[ShortLinkCreate, ShortLinkGet, ShortLinkUpdate, ShortLinkDelete, ShortLinkList],
    Field(discriminator="operation"),
]

SHORT_LINK_OPERATIONS = operation_map(
    ShortLinkCreate, ShortLinkGet, ShortLinkUpdate, ShortLinkDelete, ShortLinkList
)
