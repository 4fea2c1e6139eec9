"""
Posty5 QR Code node - create and manage dynamic QR codes.

Each QR type shows its own inputs; only the inputs of the selected type
reach the request body.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.qr_code import QR_CODE_OPERATIONS, QrCodeOperation
from .common import (
    REF_ID_FILTER,
    SEARCH_FILTER,
    TAG_FILTER,
    list_properties,
    operation_property,
    string_property,
)


_WRITE = ["create", "update"]


def _typed(name, display_name, qr_types, field_type="string", default="", required=True, **extra):
    prop = {
        "displayName": display_name,
        "name": name,
        "type": field_type,
        "default": default,
        "required": required,
        "displayOptions": {"show": {"operation": _WRITE, "qrType": qr_types}},
    }
    prop.update(extra)
    return prop


class QrCodeNode(Posty5Node):
    """QR codes for URLs, text, email, wifi, calls, SMS and locations."""

    type = f"{NODE_TYPE_PREFIX}.posty5QrCode"
    version = 1

    operations = QR_CODE_OPERATIONS
    parameters_adapter = TypeAdapter(QrCodeOperation)
    default_operation = "create"

    description = posty5_description(
        "posty5QrCode", "Posty5 QR Code", "Create and manage Posty5 QR codes"
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Create", "value": "create", "action": "Create a QR code"},
                    {"name": "Get", "value": "get", "action": "Get a QR code"},
                    {"name": "Update", "value": "update", "action": "Update a QR code"},
                    {"name": "Delete", "value": "delete", "action": "Delete a QR code"},
                    {"name": "List", "value": "list", "action": "List QR codes"},
                ],
                default="create",
            ),
            string_property("qrCodeId", "QR Code ID", ["get", "update", "delete"]),
            {
                "displayName": "QR Code Type",
                "name": "qrType",
                "type": "options",
                "default": "url",
                "displayOptions": {"show": {"operation": _WRITE}},
                "options": [
                    {"name": "URL", "value": "url"},
                    {"name": "Free Text", "value": "freeText"},
                    {"name": "Email", "value": "email"},
                    {"name": "WiFi", "value": "wifi"},
                    {"name": "Phone Call", "value": "call"},
                    {"name": "SMS", "value": "sms"},
                    {"name": "Geolocation", "value": "geolocation"},
                ],
            },
            string_property("name", "Name", _WRITE, required=False),
            _typed("url", "URL", ["url"]),
            _typed("text", "Text", ["freeText"]),
            _typed("email", "Email", ["email"]),
            _typed("emailSubject", "Subject", ["email"], required=False),
            _typed("emailBody", "Body", ["email"], required=False),
            _typed("wifiName", "Network Name", ["wifi"]),
            _typed(
                "wifiAuthType", "Authentication Type", ["wifi"],
                field_type="options", default="WPA",
                options=[
                    {"name": "WPA/WPA2", "value": "WPA"},
                    {"name": "WEP", "value": "WEP"},
                    {"name": "None", "value": "nopass"},
                ],
            ),
            _typed("wifiPassword", "Password", ["wifi"], required=False, typeOptions={"password": True}),
            _typed("phoneNumber", "Phone Number", ["call"]),
            _typed("smsPhoneNumber", "Phone Number", ["sms"]),
            _typed("smsMessage", "Message", ["sms"], required=False),
            _typed("latitude", "Latitude", ["geolocation"], field_type="number", default=0),
            _typed("longitude", "Longitude", ["geolocation"], field_type="number", default=0),
            {
                "displayName": "Additional Fields",
                "name": "additionalFields",
                "type": "collection",
                "placeholder": "Add Field",
                "default": {},
                "displayOptions": {"show": {"operation": _WRITE}},
                "options": [
                    {"displayName": "Tag", "name": "tag", "type": "string", "default": ""},
                    {"displayName": "Reference ID", "name": "refId", "type": "string", "default": ""},
                    {"displayName": "Template ID", "name": "templateId", "type": "string", "default": ""},
                ],
            },
            *list_properties(filters=[SEARCH_FILTER, TAG_FILTER, REF_ID_FILTER]),
        ],
        "credentials": [],
    }
