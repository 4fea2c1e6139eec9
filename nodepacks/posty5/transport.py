"""
Posty5 transport - gateway, pagination driver and upload orchestrator.

Every Posty5 node talks to the API through a Posty5Gateway:

- send(): one authenticated call described by a RequestDescriptor
- fetch_page() / list_all(): bounded and exhaustive list reads
- upload() / send_with_upload(): raw PUT of bytes to a pre-signed URL

Response contract: the API answers either with an envelope
{"message": ..., "result": ...} or with a bare payload. unwrap_envelope()
returns the envelope's result and passes bare payloads through.

All failures leave this module as Posty5ApiError or FileUploadError.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from src.node_sdk.basenode import NodeApiError
from src.node_sdk.http import HttpApiError, HttpClient, HttpResponse, NodeTimeoutError
from src.posty5.config import Settings, get_settings
from src.posty5.observability import get_logger

from .constants import API_KEY_HEADER, CREATED_FROM, DEFAULT_PAGE


logger = get_logger(__name__)


# ==============================================================================
# Errors
# ==============================================================================

class Posty5ApiError(NodeApiError):
    """A Posty5 API call failed (transport error or non-2xx response)."""

    prefix = "Posty5 API Error: "

    def __init__(
        self,
        detail: str,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        self.detail = detail
        super().__init__(
            f"{self.prefix}{detail}",
            status_code=status_code,
            response_body=response_body,
        )


class FileUploadError(Posty5ApiError):
    """The raw PUT of file bytes to a pre-signed URL failed."""

    prefix = "File Upload Error: "


def extract_error_message(error: Exception) -> str:
    """
    Best-effort detail for a failed call.

    Prefers the "message" field of a JSON error body, then the error's own
    message, then "Unknown error".
    """
    parsed = getattr(error, "response_data", None)
    body = getattr(error, "response_body", None)
    if parsed is None and body:
        try:
            parsed = json.loads(body)
        except ValueError:
            parsed = None
    if isinstance(parsed, dict) and parsed.get("message"):
        return str(parsed["message"])
    return str(error) or "Unknown error"


# ==============================================================================
# Request / response shapes
# ==============================================================================

class RequestDescriptor(BaseModel):
    """One REST call: method, path relative to the base URL, query and body."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    method: Literal["GET", "POST", "PUT", "DELETE"]
    path: str
    query: Optional[Dict[str, Any]] = None
    body: Optional[Dict[str, Any]] = None


def unwrap_envelope(payload: Any) -> Any:
    """Return payload["result"] for an envelope, the payload itself otherwise."""
    if isinstance(payload, dict) and "result" in payload:
        return payload["result"]
    return payload


def extract_items(result: Any) -> List[Any]:
    """Normalize a list response: bare array or {"items": [...]} envelope."""
    if isinstance(result, list):
        return result
    if isinstance(result, dict):
        return list(result.get("items") or [])
    return []


def strip_query(url: str) -> str:
    """Public file URL of a pre-signed upload URL."""
    return url.split("?", 1)[0]


# ==============================================================================
# Gateway
# ==============================================================================

class Posty5Gateway:
    """
    Authenticated access to the Posty5 REST API.

    Usage:
        gateway = Posty5Gateway(api_key="...")
        link = gateway.send(RequestDescriptor(method="GET", path="/api/short-link/abc"))
        links = gateway.list_all("/api/short-link", {"tag": "promo"})
    """

    def __init__(self, api_key: str, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._client = HttpClient(
            base_url=self.settings.base_url,
            default_headers={"Content-Type": "application/json"},
            timeout=self.settings.request_timeout_s,
            api_key=api_key,
            api_key_header=API_KEY_HEADER,
        )
        # Pre-signed URLs are absolute and must not receive the API key
        self._upload_client = HttpClient(timeout=self.settings.upload_timeout_s)

    # ==== Single call ====

    def send(self, request: RequestDescriptor) -> Any:
        """
        Perform one API call and return the unwrapped payload.

        Raises:
            Posty5ApiError: On transport failure or a non-2xx response
        """
        body = request.body
        if request.method == "POST":
            body = {**(body or {}), "createdFrom": CREATED_FROM}

        logger.debug(f"Posty5 request {request.method} {request.path}")

        try:
            response = self._client.request(
                request.method,
                request.path,
                params=request.query,
                json=body,
            )
            response.raise_for_status()
        except (HttpApiError, NodeTimeoutError) as e:
            raise Posty5ApiError(
                extract_error_message(e),
                status_code=getattr(e, "status_code", None),
                response_body=getattr(e, "response_body", None),
            ) from e

        return unwrap_envelope(response.data())

    # ==== Pagination ====

    def fetch_page(self, path: str, filters: Dict[str, Any], limit: int) -> List[Any]:
        """Fetch the first page of a list with page size `limit`."""
        result = self.send(
            RequestDescriptor(
                method="GET",
                path=path,
                query={**filters, "page": DEFAULT_PAGE, "pageSize": limit},
            )
        )
        return extract_items(result)

    def list_all(
        self,
        path: str,
        filters: Dict[str, Any],
        page_size: Optional[int] = None,
    ) -> List[Any]:
        """
        Fetch every page of a list.

        Keeps requesting while a page comes back exactly full; the first
        short (or empty) page ends the loop. When the total is an exact
        multiple of the page size this costs one extra, empty request.
        """
        page_size = page_size or self.settings.return_all_page_size
        items: List[Any] = []
        page = DEFAULT_PAGE

        while True:
            result = self.send(
                RequestDescriptor(
                    method="GET",
                    path=path,
                    query={**filters, "page": page, "pageSize": page_size},
                )
            )
            batch = extract_items(result)
            items.extend(batch)
            if len(batch) != page_size:
                break
            page += 1

        logger.debug(f"Fetched {len(items)} items from {path} in {page} page(s)")
        return items

    # ==== Uploads ====

    def upload(self, upload_url: str, data: bytes) -> HttpResponse:
        """
        PUT raw bytes to a pre-signed URL.

        Returns the full response; its body is not parsed.

        Raises:
            FileUploadError: If the upload fails
        """
        logger.debug(f"Uploading {len(data)} bytes to pre-signed URL")
        try:
            response = self._upload_client.put(
                upload_url,
                data=data,
                headers={"Content-Type": "application/octet-stream"},
            )
            response.raise_for_status()
        except (HttpApiError, NodeTimeoutError) as e:
            raise FileUploadError(
                extract_error_message(e),
                status_code=getattr(e, "status_code", None),
                response_body=getattr(e, "response_body", None),
            ) from e
        return response

    def send_with_upload(self, request: RequestDescriptor, data: bytes) -> Any:
        """
        Two-phase create/update: metadata call, then file upload.

        The metadata call must answer {"details": ..., "uploadFileConfig":
        {"uploadUrl": ...}}. Only `details` is returned; the upload
        response is discarded.
        """
        result = self.send(request)
        upload_config = result.get("uploadFileConfig") if isinstance(result, dict) else None
        upload_url = upload_config.get("uploadUrl") if isinstance(upload_config, dict) else None
        if not upload_url:
            raise Posty5ApiError("Upload URL missing from response")

        self.upload(upload_url, data)
        return result.get("details")


__all__ = [
    "FileUploadError",
    "Posty5ApiError",
    "Posty5Gateway",
    "RequestDescriptor",
    "extract_error_message",
    "extract_items",
    "strip_query",
    "unwrap_envelope",
]
