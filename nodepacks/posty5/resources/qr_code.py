"""
QR code operations (/api/qr-code).

Create and update are addressed by QR type (POST /api/qr-code/{type},
PUT /api/qr-code/{type}/{id}); the body carries the base fields plus one
type-specific payload. Free-text QR codes send `text` on create but
`qrCodeTarget.text` on update: the API expects exactly that.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field

from ..constants import QR_CODE
from ..transport import RequestDescriptor
from .base import ListFilters, ListParams, OperationParams, ParamModel, compact, operation_map


QrType = Literal["url", "freeText", "email", "wifi", "call", "sms", "geolocation"]
WifiAuthType = Literal["WPA", "WEP", "nopass"]


class QrCodeAdditionalFields(ParamModel):
    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")
    template_id: Optional[str] = Field(None, alias="templateId")


class _QrCodeFields(OperationParams):
    """Name, extras and every type-specific input of the QR code form."""

    qr_type: QrType = Field(..., alias="qrType")
    name: Optional[str] = None
    additional_fields: QrCodeAdditionalFields = Field(
        default_factory=QrCodeAdditionalFields, alias="additionalFields"
    )

    url: Optional[str] = None
    text: Optional[str] = None
    email: Optional[str] = None
    email_subject: str = Field("", alias="emailSubject")
    email_body: str = Field("", alias="emailBody")
    wifi_name: Optional[str] = Field(None, alias="wifiName")
    wifi_auth_type: Optional[WifiAuthType] = Field(None, alias="wifiAuthType")
    wifi_password: str = Field("", alias="wifiPassword")
    phone_number: Optional[str] = Field(None, alias="phoneNumber")
    sms_phone_number: Optional[str] = Field(None, alias="smsPhoneNumber")
    sms_message: str = Field("", alias="smsMessage")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def base_body(self) -> Dict[str, Any]:
        extra = self.additional_fields
        return compact(
            name=self.name,
            tag=extra.tag,
            refId=extra.ref_id,
            templateId=extra.template_id,
        )

    def type_payload(self, for_update: bool) -> Dict[str, Any]:
        if self.qr_type == "url":
            return {"url": {"url": self.url}}
        if self.qr_type == "freeText":
            if for_update:
                return {"qrCodeTarget": {"text": self.text}}
            return {"text": self.text}
        if self.qr_type == "email":
            return {
                "email": {
                    "email": self.email,
                    "subject": self.email_subject,
                    "body": self.email_body,
                }
            }
        if self.qr_type == "wifi":
            return {
                "wifi": {
                    "name": self.wifi_name,
                    "authenticationType": self.wifi_auth_type,
                    "password": self.wifi_password,
                }
            }
        if self.qr_type == "call":
            return {"call": {"phoneNumber": self.phone_number}}
        if self.qr_type == "sms":
            return {"sms": {"phoneNumber": self.sms_phone_number, "message": self.sms_message}}
        return {"geolocation": {"latitude": self.latitude, "longitude": self.longitude}}


class QrCodeCreate(_QrCodeFields):
    operation: Literal["create"] = "create"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="POST",
            path=f"{QR_CODE}/{self.qr_type}",
            body={**self.base_body(), **self.type_payload(for_update=False)},
        )


class QrCodeUpdate(_QrCodeFields):
    operation: Literal["update"] = "update"
    qr_code_id: str = Field(..., alias="qrCodeId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{QR_CODE}/{self.qr_type}/{self.qr_code_id}",
            body={**self.base_body(), **self.type_payload(for_update=True)},
        )


class QrCodeGet(OperationParams):
    operation: Literal["get"] = "get"
    qr_code_id: str = Field(..., alias="qrCodeId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{QR_CODE}/{self.qr_code_id}")


class QrCodeDelete(OperationParams):
    operation: Literal["delete"] = "delete"
    qr_code_id: str = Field(..., alias="qrCodeId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="DELETE", path=f"{QR_CODE}/{self.qr_code_id}")


class QrCodeFilters(ListFilters):
    search_fields = ("name",)

    tag: Optional[str] = None
    ref_id: Optional[str] = Field(None, alias="refId")


class QrCodeList(ListParams):
    path = QR_CODE

    operation: Literal["list"] = "list"
    filters: QrCodeFilters = Field(default_factory=QrCodeFilters)


QrCodeOperation = Annotated[
    Union[QrCodeCreate, QrCodeGet, QrCodeUpdate, QrCodeDelete, QrCodeList],
    Field(discriminator="operation"),
]

QR_CODE_OPERATIONS = operation_map(QrCodeCreate, QrCodeGet, QrCodeUpdate, QrCodeDelete, QrCodeList)
