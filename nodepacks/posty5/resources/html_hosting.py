"""HTML hosting operations (/api/html-hosting)."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field

from ..constants import HTML_HOSTING
from ..transport import RequestDescriptor
from .base import (
    ListFilters,
    ListParams,
    OperationParams,
    ParamModel,
    UploadParams,
    compact,
    operation_map,
)


class HtmlHostingAdditionalFields(ParamModel):
    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")


class _PageFields(OperationParams):
    name: str
    custom_landing_id: Optional[str] = Field(None, alias="customLandingId")
    additional_fields: HtmlHostingAdditionalFields = Field(
        default_factory=HtmlHostingAdditionalFields, alias="additionalFields"
    )

    def optional_body(self) -> Dict[str, Any]:
        return compact(
            customLandingId=self.custom_landing_id,
            tag=self.additional_fields.tag,
            refId=self.additional_fields.ref_id,
        )


class _FilePageFields(_PageFields, UploadParams):
    file_name: str = Field(..., alias="fileName")
    html_file: str = Field("data", alias="htmlFile")

    def binary_property(self) -> str:
        return self.html_file

    def file_body(self) -> Dict[str, Any]:
        return {"name": self.name, "fileName": self.file_name, **self.optional_body()}


class _GithubPageFields(_PageFields):
    github_file_url: str = Field(..., alias="githubFileUrl")

    def github_body(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "githubInfo": {"fileURL": self.github_file_url},
            **self.optional_body(),
        }


class HtmlHostingCreateFromFile(_FilePageFields):
    operation: Literal["createFromFile"] = "createFromFile"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path=f"{HTML_HOSTING}/file", body=self.file_body())


class HtmlHostingUpdateFromFile(_FilePageFields):
    operation: Literal["updateFromFile"] = "updateFromFile"
    html_hosting_id: str = Field(..., alias="htmlHostingId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{HTML_HOSTING}/{self.html_hosting_id}/file",
            body=self.file_body(),
        )


class HtmlHostingCreateFromGithub(_GithubPageFields):
    operation: Literal["createFromGithub"] = "createFromGithub"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path=f"{HTML_HOSTING}/github", body=self.github_body())


class HtmlHostingUpdateFromGithub(_GithubPageFields):
    operation: Literal["updateFromGithub"] = "updateFromGithub"
    html_hosting_id: str = Field(..., alias="htmlHostingId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{HTML_HOSTING}/{self.html_hosting_id}/github",
            body=self.github_body(),
        )


class _ByIdFields(OperationParams):
    html_hosting_id: str = Field(..., alias="htmlHostingId")


class HtmlHostingGet(_ByIdFields):
    operation: Literal["get"] = "get"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{HTML_HOSTING}/{self.html_hosting_id}")


class HtmlHostingDelete(_ByIdFields):
    operation: Literal["delete"] = "delete"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="DELETE", path=f"{HTML_HOSTING}/{self.html_hosting_id}")


class HtmlHostingClearCache(_ByIdFields):
    operation: Literal["clearCache"] = "clearCache"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT", path=f"{HTML_HOSTING}/{self.html_hosting_id}/clean-cache"
        )


class HtmlHostingGetFormIds(_ByIdFields):
    operation: Literal["getFormIds"] = "getFormIds"

    def to_request(self) -> RequestDescriptor:
        # "froms" is the server's spelling
        return RequestDescriptor(
            method="GET", path=f"{HTML_HOSTING}/lookup-froms/{self.html_hosting_id}"
        )


class HtmlHostingFilters(ListFilters):
    search_fields = ("name", "htmlHostingId")

    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")


class HtmlHostingList(ListParams):
    path = HTML_HOSTING

    operation: Literal["list"] = "list"
    filters: HtmlHostingFilters = Field(default_factory=HtmlHostingFilters)


HtmlHostingOperation = Annotated[
    Union[
        HtmlHostingCreateFromFile,
        HtmlHostingCreateFromGithub,
        HtmlHostingUpdateFromFile,
        HtmlHostingUpdateFromGithub,
        HtmlHostingGet,
        HtmlHostingList,
        HtmlHostingDelete,
        HtmlHostingClearCache,
        HtmlHostingGetFormIds,
    ],
    Field(discriminator="operation"),
]

HTML_HOSTING_OPERATIONS = operation_map(
    HtmlHostingCreateFromFile,
    HtmlHostingCreateFromGithub,
    HtmlHostingUpdateFromFile,
    HtmlHostingUpdateFromGithub,
    HtmlHostingGet,
    HtmlHostingList,
    HtmlHostingDelete,
    HtmlHostingClearCache,
    HtmlHostingGetFormIds,
)
