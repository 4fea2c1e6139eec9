"""Unit tests for the Posty5 gateway, pagination driver and upload orchestrator."""
import pytest
import requests

from nodepacks.posty5.transport import (
    FileUploadError,
    Posty5ApiError,
    Posty5Gateway,
    RequestDescriptor,
    extract_items,
    strip_query,
    unwrap_envelope,
)


@pytest.fixture
def gateway():
    return Posty5Gateway(api_key="test-key")


class TestSend:
    """Single authenticated calls."""

    def test_sends_api_key_and_base_url(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link/abc", {"message": "ok", "result": {"_id": "abc"}})

        result = gateway.send(RequestDescriptor(method="GET", path="/api/short-link/abc"))

        assert result == {"_id": "abc"}
        call = fake_api.calls[0]
        assert call.url == "https://api.posty5.test/api/short-link/abc"
        assert call.headers["X-API-Key"] == "test-key"
        assert call.headers["Content-Type"] == "application/json"
        assert call.timeout == 30

    def test_created_from_added_to_post_only(self, fake_api, gateway):
        fake_api.add("POST", "/api/short-link", {"result": {}})
        fake_api.add("PUT", "/api/short-link/1", {"result": {}})
        fake_api.add("DELETE", "/api/short-link/1", {"result": {}})
        fake_api.add("GET", "/api/short-link/1", {"result": {}})

        gateway.send(RequestDescriptor(method="POST", path="/api/short-link", body={"baseUrl": "x"}))
        gateway.send(RequestDescriptor(method="PUT", path="/api/short-link/1", body={"name": "n"}))
        gateway.send(RequestDescriptor(method="DELETE", path="/api/short-link/1"))
        gateway.send(RequestDescriptor(method="GET", path="/api/short-link/1"))

        post, put, delete, get = fake_api.calls
        assert post.json == {"baseUrl": "x", "createdFrom": "n8n"}
        assert put.json == {"name": "n"}
        assert delete.json is None
        assert get.json is None

    def test_post_without_body_still_carries_created_from(self, fake_api, gateway):
        fake_api.add("POST", "/api/thing", {"result": True})

        gateway.send(RequestDescriptor(method="POST", path="/api/thing"))

        assert fake_api.calls[0].json == {"createdFrom": "n8n"}

    def test_bare_payload_passes_through(self, fake_api, gateway):
        fake_api.add("GET", "/api/qr-code/q1", {"_id": "q1", "name": "QR"})

        result = gateway.send(RequestDescriptor(method="GET", path="/api/qr-code/q1"))

        assert result == {"_id": "q1", "name": "QR"}

    def test_empty_body_returns_none(self, fake_api, gateway):
        fake_api.add("DELETE", "/api/short-link/1")

        assert gateway.send(RequestDescriptor(method="DELETE", path="/api/short-link/1")) is None


class TestErrors:
    """Failures leave the gateway as Posty5ApiError."""

    def test_json_error_message_is_used(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link/x", {"message": "Short link not found"}, status=404)

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send(RequestDescriptor(method="GET", path="/api/short-link/x"))

        error = exc_info.value
        assert error.message == "Posty5 API Error: Short link not found"
        assert error.status_code == 404
        assert "Short link not found" in error.response_body

    def test_long_json_error_keeps_server_message(self, fake_api, gateway):
        errors = [{"field": f"field{n}", "message": "must not be empty"} for n in range(40)]
        fake_api.add(
            "POST",
            "/api/short-link",
            {"message": "Validation failed", "errors": errors},
            status=400,
        )

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send(RequestDescriptor(method="POST", path="/api/short-link", body={}))

        error = exc_info.value
        assert error.message == "Posty5 API Error: Validation failed"
        assert error.status_code == 400
        assert len(error.response_body) == 1000

    def test_non_json_error_falls_back_to_status(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link/x", text="Bad Gateway", status=502)

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send(RequestDescriptor(method="GET", path="/api/short-link/x"))

        assert exc_info.value.message == "Posty5 API Error: HTTP 502: Error"
        assert exc_info.value.status_code == 502

    def test_transport_failure(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link", exc=requests.exceptions.ConnectionError("refused"))

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send(RequestDescriptor(method="GET", path="/api/short-link"))

        assert exc_info.value.message.startswith("Posty5 API Error: Request failed: ")
        assert "refused" in exc_info.value.message
        assert exc_info.value.status_code is None

    def test_timeout(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link", exc=requests.exceptions.ReadTimeout("slow"))

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send(RequestDescriptor(method="GET", path="/api/short-link"))

        assert exc_info.value.message == "Posty5 API Error: Request timed out after 30s"


class TestPagination:
    """Bounded and exhaustive list reads."""

    def test_fetch_page_uses_limit_as_page_size(self, fake_api, gateway):
        fake_api.add("GET", "/api/short-link", {"result": {"items": [{"_id": "a"}, {"_id": "b"}]}})

        items = gateway.fetch_page("/api/short-link", {"tag": "promo"}, 10)

        assert items == [{"_id": "a"}, {"_id": "b"}]
        assert fake_api.calls[0].params == {"tag": "promo", "page": 1, "pageSize": 10}

    def test_fetch_page_accepts_bare_array(self, fake_api, gateway):
        fake_api.add("GET", "/api/qr-code", {"result": [{"_id": "a"}]})

        assert gateway.fetch_page("/api/qr-code", {}, 5) == [{"_id": "a"}]

    def test_list_all_concatenates_pages_in_order(self, fake_api, gateway):
        fake_api.add("GET", "/api/qr-code", {"result": {"items": [{"n": 1}, {"n": 2}]}})
        fake_api.add("GET", "/api/qr-code", {"result": {"items": [{"n": 3}, {"n": 4}]}})
        fake_api.add("GET", "/api/qr-code", {"result": {"items": [{"n": 5}]}})

        items = gateway.list_all("/api/qr-code", {"refId": "r"}, page_size=2)

        assert [item["n"] for item in items] == [1, 2, 3, 4, 5]
        assert [call.params["page"] for call in fake_api.calls] == [1, 2, 3]
        assert all(call.params["pageSize"] == 2 for call in fake_api.calls)
        assert all(call.params["refId"] == "r" for call in fake_api.calls)

    def test_list_all_exact_multiple_costs_one_extra_request(self, fake_api, gateway):
        fake_api.add("GET", "/api/qr-code", {"result": {"items": [{"n": 1}, {"n": 2}]}})
        fake_api.add("GET", "/api/qr-code", {"result": {"items": []}})

        items = gateway.list_all("/api/qr-code", {}, page_size=2)

        assert len(items) == 2
        assert len(fake_api.calls) == 2

    def test_list_all_defaults_to_settings_page_size(self, fake_api, gateway):
        fake_api.add("GET", "/api/html-hosting", {"result": {"items": []}})

        assert gateway.list_all("/api/html-hosting", {}) == []
        assert fake_api.calls[0].params["pageSize"] == 100

    def test_pagination_object_is_ignored(self, fake_api, gateway):
        fake_api.add(
            "GET",
            "/api/social-publisher-workspace",
            {"result": {"items": [{"_id": "w"}], "pagination": {"page": 1, "total": 1}}},
        )

        assert gateway.fetch_page("/api/social-publisher-workspace", {}, 50) == [{"_id": "w"}]


class TestUploads:
    """Raw PUT to pre-signed URLs."""

    UPLOAD_URL = "https://uploads.posty5.test/page.html?X-Signature=abc"

    def test_upload_sends_raw_bytes_without_api_key(self, fake_api, gateway):
        fake_api.add("PUT", self.UPLOAD_URL)

        gateway.upload(self.UPLOAD_URL, b"<html></html>")

        call = fake_api.calls[0]
        assert call.url == self.UPLOAD_URL
        assert call.data == b"<html></html>"
        assert call.headers == {"Content-Type": "application/octet-stream"}
        assert call.timeout == 120

    def test_upload_failure(self, fake_api, gateway):
        fake_api.add("PUT", self.UPLOAD_URL, text="<Error>SignatureDoesNotMatch</Error>", status=403)

        with pytest.raises(FileUploadError) as exc_info:
            gateway.upload(self.UPLOAD_URL, b"x")

        assert exc_info.value.message.startswith("File Upload Error: ")
        assert exc_info.value.status_code == 403

    def test_send_with_upload_returns_details(self, fake_api, gateway):
        fake_api.add(
            "POST",
            "/api/html-hosting/file",
            {
                "result": {
                    "details": {"_id": "h1", "name": "Landing"},
                    "uploadFileConfig": {"uploadUrl": self.UPLOAD_URL},
                }
            },
        )
        fake_api.add("PUT", self.UPLOAD_URL)

        result = gateway.send_with_upload(
            RequestDescriptor(method="POST", path="/api/html-hosting/file", body={"name": "Landing"}),
            b"<html></html>",
        )

        assert result == {"_id": "h1", "name": "Landing"}
        assert [call.method for call in fake_api.calls] == ["POST", "PUT"]

    def test_send_with_upload_requires_upload_url(self, fake_api, gateway):
        fake_api.add("POST", "/api/html-hosting/file", {"result": {"details": {"_id": "h1"}}})

        with pytest.raises(Posty5ApiError) as exc_info:
            gateway.send_with_upload(
                RequestDescriptor(method="POST", path="/api/html-hosting/file"), b"x"
            )

        assert exc_info.value.message == "Posty5 API Error: Upload URL missing from response"
        assert len(fake_api.calls) == 1


class TestHelpers:

    def test_unwrap_envelope(self):
        assert unwrap_envelope({"message": "ok", "result": [1, 2]}) == [1, 2]
        assert unwrap_envelope({"result": None}) is None
        assert unwrap_envelope({"_id": "a"}) == {"_id": "a"}
        assert unwrap_envelope("plain") == "plain"

    def test_extract_items(self):
        assert extract_items([1, 2]) == [1, 2]
        assert extract_items({"items": [3]}) == [3]
        assert extract_items({"items": None}) == []
        assert extract_items(None) == []

    def test_strip_query(self):
        assert strip_query("https://cdn.test/v.mp4?sig=1&exp=2") == "https://cdn.test/v.mp4"
        assert strip_query("https://cdn.test/v.mp4") == "https://cdn.test/v.mp4"
