"""
Node Items - Data structures flowing through workflows.

Items are plain dicts of the form {"json": {...}, "binary": {...},
"pairedItem": {"item": i}}. Binary attachments are normalized through
BinaryData before a node reads their bytes.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BinaryData(BaseModel):
    """
    Binary attachment for a node item.

    Binary data is stored separately and referenced by key.
    """
    model_config = ConfigDict(extra="forbid")

    data: bytes = Field(..., description="Raw binary data")
    mime_type: str = Field("application/octet-stream", description="MIME type")
    file_name: Optional[str] = Field(None, description="Original filename")
    file_extension: Optional[str] = Field(None, description="File extension")
    file_size: Optional[int] = Field(None, description="File size in bytes")

    @property
    def size(self) -> int:
        """Get size of binary data."""
        return len(self.data)

    @classmethod
    def from_value(cls, value: Any) -> "BinaryData":
        """
        Normalize a binary entry as found on an input item.

        Accepts a BinaryData instance, raw bytes, or an n8n-style dict
        ({"data": <base64 str | bytes>, "mimeType": ..., "fileName": ...}).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(data=bytes(value))
        if isinstance(value, dict):
            raw = value.get("data", b"")
            if isinstance(raw, str):
                try:
                    raw = base64.b64decode(raw, validate=True)
                except binascii.Error as e:
                    raise ValueError("Binary data is not valid base64") from e
            return cls(
                data=raw,
                mime_type=value.get("mimeType") or value.get("mime_type") or "application/octet-stream",
                file_name=value.get("fileName") or value.get("file_name"),
                file_extension=value.get("fileExtension") or value.get("file_extension"),
                file_size=value.get("fileSize") or value.get("file_size"),
            )
        raise TypeError(f"Unsupported binary value: {type(value).__name__}")


def return_json_array(payload: Any, item_index: int) -> List[Dict[str, Any]]:
    """
    Wrap an operation result into output items paired with their source item.

    A list fans out into one item per element; anything else becomes a
    single item. Non-dict values are wrapped as {"data": value}.
    """
    values = payload if isinstance(payload, list) else [payload]
    items = []
    for value in values:
        if value is None:
            value = {}
        elif not isinstance(value, dict):
            value = {"data": value}
        items.append({"json": value, "pairedItem": {"item": item_index}})
    return items
