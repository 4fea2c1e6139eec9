"""Unit tests for social publisher tasks and posts."""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import TypeAdapter, ValidationError

from nodepacks.posty5.nodes import SocialPublisherPostNode, SocialPublisherTaskNode
from nodepacks.posty5.resources.social_publisher import (
    PostOperation,
    TaskOperation,
    format_schedule_time,
    sniff_video_source,
    split_tags,
)


tasks = TypeAdapter(TaskOperation)
posts = TypeAdapter(PostOperation)

VIDEO_UPLOAD_URL = "https://uploads.posty5.test/videos/v1.mp4?X-Signature=abc"
THUMB_UPLOAD_URL = "https://uploads.posty5.test/thumbs/t1.jpg?X-Signature=def"


class TestSniffing:

    @pytest.mark.parametrize(
        "url,source",
        [
            ("https://www.facebook.com/watch?v=1", "facebook-video"),
            ("https://fb.watch/abc", "facebook-video"),
            ("https://www.tiktok.com/@u/video/1", "tiktok-video"),
            ("https://www.youtube.com/watch?v=1", "youtube-video"),
            ("https://youtu.be/1", "youtube-video"),
            ("https://cdn.example.com/v.mp4", "video-url"),
        ],
    )
    def test_sniff_video_source(self, url, source):
        assert sniff_video_source(url) == source

    def test_first_matching_rule_wins(self):
        assert sniff_video_source("https://facebook.com/share?u=https://youtube.com/x") == "facebook-video"


class TestScheduling:

    def test_format_schedule_time_utc(self):
        value = datetime(2026, 3, 1, 9, 30, 5, 123456, tzinfo=timezone.utc)

        assert format_schedule_time(value) == "2026-03-01T09:30:05.123Z"

    def test_format_schedule_time_converts_offset(self):
        value = datetime(2026, 3, 1, 11, 0, tzinfo=timezone(timedelta(hours=2)))

        assert format_schedule_time(value) == "2026-03-01T09:00:00.000Z"

    def test_naive_date_is_utc(self):
        assert format_schedule_time(datetime(2026, 3, 1, 9, 0)) == "2026-03-01T09:00:00.000Z"

    def test_later_requires_date(self):
        with pytest.raises(ValidationError):
            tasks.validate_python(
                {
                    "operation": "publishVideo",
                    "workspaceId": "w1",
                    "scheduledPublishTime": "later",
                    "scheduleDate": "",
                }
            )


class TestPublishRequest:

    def test_workspace_publish_by_url(self):
        params = tasks.validate_python(
            {
                "operation": "publishVideo",
                "workspaceId": "w1",
                "videoSource": "url",
                "videoUrl": "https://youtu.be/1",
                "platforms": ["youtube", "tiktok"],
                "youtubeSettings": {"title": "Clip", "tags": "a, b ,c"},
                "tiktokSettings": {},
                "facebookSettings": {"title": "not selected"},
            }
        )
        request = params.publish_request("https://youtu.be/1", "youtube-video")

        assert request.method == "POST"
        assert request.path == "/api/social-publisher-task/short-video/workspace/by-url"
        assert request.body == {
            "workspaceId": "w1",
            "videoURL": "https://youtu.be/1",
            "source": "youtube-video",
            "platforms": ["youtube", "tiktok"],
            "scheduledPublishTime": "now",
            "youtubeConfig": {"title": "Clip", "tags": ["a", "b", "c"]},
        }

    def test_account_publish_by_file_scheduled(self):
        params = posts.validate_python(
            {
                "operation": "publishVideoToAccount",
                "accountId": "acc1",
                "platforms": ["instagram"],
                "scheduledPublishTime": "later",
                "scheduleDate": "2026-05-01T12:00:00Z",
                "instagramSettings": {"description": "New", "share_to_feed": False},
            }
        )
        request = params.publish_request(
            "https://uploads.posty5.test/v.mp4", "video-upload", "https://uploads.posty5.test/t.jpg"
        )

        assert request.path == "/api/social-publisher-post/short-video/account/by-file"
        assert request.body == {
            "accountId": "acc1",
            "videoURL": "https://uploads.posty5.test/v.mp4",
            "source": "video-upload",
            "platforms": ["instagram"],
            "thumbURL": "https://uploads.posty5.test/t.jpg",
            "scheduledPublishTime": "2026-05-01T12:00:00.000Z",
            "instagramConfig": {"description": "New", "share_to_feed": False},
        }

    def test_url_source_requires_video_url(self):
        with pytest.raises(ValidationError):
            tasks.validate_python(
                {"operation": "publishVideo", "workspaceId": "w1", "videoSource": "url"}
            )

    def test_split_tags(self):
        assert split_tags(" one,two , three") == ["one", "two", "three"]


class TestOtherOperations:

    def test_status_paths(self):
        task = tasks.validate_python({"operation": "getTaskStatus", "taskId": "t1"}).to_request()
        post = posts.validate_python({"operation": "getPostStatus", "postId": "p1"}).to_request()

        assert task.path == "/api/social-publisher-task/t1/status"
        assert post.path == "/api/social-publisher-post/p1/status"

    def test_default_settings(self):
        request = posts.validate_python({"operation": "getDefaultSettings"}).to_request()

        assert (request.method, request.path) == ("GET", "/api/social-publisher-post/default-settings")

    def test_list_sends_workspace_id(self):
        params = tasks.validate_python({"operation": "listTasks", "listWorkspaceId": "w1"})

        assert params.path == "/api/social-publisher-task"
        assert params.query_filters() == {"workspaceId": "w1"}


class TestPublishFlow:
    """End-to-end publish through the node with a faked API."""

    def _upload_urls(self, fake_api, base):
        fake_api.add(
            "POST",
            f"{base}/generate-upload-urls",
            {
                "result": {
                    "video": {"uploadFileURL": VIDEO_UPLOAD_URL},
                    "thumb": {"uploadFileURL": THUMB_UPLOAD_URL},
                }
            },
        )
        fake_api.add("PUT", VIDEO_UPLOAD_URL)
        fake_api.add("PUT", THUMB_UPLOAD_URL)

    def test_binary_video_and_thumbnail(self, fake_api, run_node):
        base = "/api/social-publisher-task"
        self._upload_urls(fake_api, base)
        fake_api.add("POST", f"{base}/short-video/workspace/by-file", {"result": {"_id": "task1"}})

        output = run_node(
            SocialPublisherTaskNode,
            {
                "operation": "publishVideo",
                "workspaceId": "w1",
                "videoSource": "binary",
                "thumbnailSource": "binary",
                "platforms": ["youtube"],
            },
            input_data=[
                {
                    "json": {},
                    "binary": {
                        "data": {"data": "dmlkZW8=", "mimeType": "video/mp4"},
                        "thumbnail": {"data": "dGh1bWI=", "mimeType": "image/jpeg"},
                    },
                }
            ],
        )

        assert output == [{"json": {"_id": "task1"}, "pairedItem": {"item": 0}}]
        generate, video_put, thumb_put, publish = fake_api.calls
        assert generate.json == {"videoFileType": "mp4", "thumbFileType": "jpg", "createdFrom": "n8n"}
        assert video_put.data == b"video"
        assert thumb_put.data == b"thumb"
        assert publish.json == {
            "workspaceId": "w1",
            "videoURL": "https://uploads.posty5.test/videos/v1.mp4",
            "source": "video-upload",
            "platforms": ["youtube"],
            "thumbURL": "https://uploads.posty5.test/thumbs/t1.jpg",
            "scheduledPublishTime": "now",
            "createdFrom": "n8n",
        }

    def test_binary_thumbnail_missing_is_skipped(self, fake_api, run_node):
        base = "/api/social-publisher-post"
        self._upload_urls(fake_api, base)
        fake_api.add("POST", f"{base}/short-video/account/by-file", {"result": {"_id": "post1"}})

        run_node(
            SocialPublisherPostNode,
            {
                "operation": "publishVideoToAccount",
                "accountId": "acc1",
                "thumbnailSource": "binary",
            },
            input_data=[{"json": {}, "binary": {"data": b"video"}}],
        )

        assert [call.method for call in fake_api.calls] == ["POST", "PUT", "POST"]
        assert "thumbURL" not in fake_api.calls[-1].json

    def test_url_video_with_url_thumbnail(self, fake_api, run_node):
        base = "/api/social-publisher-post"
        fake_api.add("POST", f"{base}/short-video/workspace/by-url", {"result": {"_id": "post2"}})

        output = run_node(
            SocialPublisherPostNode,
            {
                "operation": "publishVideo",
                "workspaceId": "w1",
                "videoSource": "url",
                "videoUrl": "https://www.tiktok.com/@u/video/1",
                "thumbnailSource": "url",
                "thumbnailUrl": "https://cdn.example.com/t.jpg",
                "platforms": ["facebook"],
                "facebookSettings": {"description": "Watch"},
            },
        )

        assert output[0]["json"] == {"_id": "post2"}
        assert len(fake_api.calls) == 1
        assert fake_api.calls[0].json == {
            "workspaceId": "w1",
            "videoURL": "https://www.tiktok.com/@u/video/1",
            "source": "tiktok-video",
            "platforms": ["facebook"],
            "thumbURL": "https://cdn.example.com/t.jpg",
            "scheduledPublishTime": "now",
            "facebookPageConfig": {"description": "Watch"},
            "createdFrom": "n8n",
        }

    def test_missing_video_binary_fails_before_any_request(self, fake_api, run_node):
        output = run_node(
            SocialPublisherTaskNode,
            {"operation": "publishVideo", "workspaceId": "w1"},
            continue_on_fail=True,
        )

        assert output == [
            {"json": {"error": "Item has no binary property 'data'"}, "pairedItem": {"item": 0}}
        ]
        assert fake_api.calls == []

    def test_model_level_error_names_operation_once(self, fake_api, run_node):
        output = run_node(
            SocialPublisherTaskNode,
            {"operation": "publishVideo", "workspaceId": "w1", "videoSource": "url"},
            continue_on_fail=True,
        )

        error = output[0]["json"]["error"]
        assert error.startswith('Invalid parameters for "publishVideo": Value error, ')
        assert "videoUrl is required" in error
        assert error.count("publishVideo") == 1
        assert fake_api.calls == []

    def test_list_tasks(self, fake_api, run_node):
        fake_api.add(
            "GET",
            "/api/social-publisher-task",
            {"result": {"items": [{"_id": "t1"}, {"_id": "t2"}], "pagination": {}}},
        )

        output = run_node(
            SocialPublisherTaskNode,
            {"operation": "listTasks", "listWorkspaceId": "w1", "limit": 10},
        )

        assert [item["json"]["_id"] for item in output] == ["t1", "t2"]
        assert fake_api.calls[0].params == {"workspaceId": "w1", "page": 1, "pageSize": 10}
