"""
Posty5 Social Publisher Task and Post nodes.

Both nodes publish short videos to YouTube, TikTok, Facebook and Instagram
through a workspace or a single connected account. The video (and
optionally its thumbnail) either comes from the item's binary data, in
which case it is uploaded to Posty5 first, or from a public URL.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.base import OperationParams
from ..resources.social_publisher import (
    POST_OPERATIONS,
    TASK_OPERATIONS,
    VIDEO_UPLOAD_SOURCE,
    PostOperation,
    PublishVideoParams,
    TaskOperation,
    sniff_video_source,
)
from ..transport import Posty5ApiError, Posty5Gateway, strip_query
from .common import list_properties, operation_property, string_property


_PUBLISH_OPS = ["publishVideo", "publishVideoToAccount"]


def publish_properties() -> List[Dict[str, Any]]:
    """Inputs of the two publish operations."""
    show = {"operation": _PUBLISH_OPS}
    return [
        string_property("workspaceId", "Workspace ID", ["publishVideo"]),
        string_property("accountId", "Account ID", ["publishVideoToAccount"]),
        {
            "displayName": "Video Source",
            "name": "videoSource",
            "type": "options",
            "default": "binary",
            "displayOptions": {"show": show},
            "options": [
                {"name": "Binary File", "value": "binary"},
                {"name": "URL", "value": "url"},
            ],
        },
        {
            "displayName": "Input Binary Field",
            "name": "videoBinaryProperty",
            "type": "string",
            "default": "data",
            "displayOptions": {"show": {**show, "videoSource": ["binary"]}},
        },
        {
            "displayName": "Video URL",
            "name": "videoUrl",
            "type": "string",
            "default": "",
            "required": True,
            "description": "Direct video URL, or a Facebook, TikTok or YouTube video link",
            "displayOptions": {"show": {**show, "videoSource": ["url"]}},
        },
        {
            "displayName": "Platforms",
            "name": "platforms",
            "type": "multiOptions",
            "default": ["youtube"],
            "displayOptions": {"show": show},
            "options": [
                {"name": "YouTube", "value": "youtube"},
                {"name": "TikTok", "value": "tiktok"},
                {"name": "Facebook", "value": "facebook"},
                {"name": "Instagram", "value": "instagram"},
            ],
        },
        {
            "displayName": "Thumbnail Source",
            "name": "thumbnailSource",
            "type": "options",
            "default": "none",
            "displayOptions": {"show": show},
            "options": [
                {"name": "None", "value": "none"},
                {"name": "Binary File", "value": "binary"},
                {"name": "URL", "value": "url"},
            ],
        },
        {
            "displayName": "Thumbnail Binary Field",
            "name": "thumbnailBinaryProperty",
            "type": "string",
            "default": "thumbnail",
            "displayOptions": {"show": {**show, "thumbnailSource": ["binary"]}},
        },
        {
            "displayName": "Thumbnail URL",
            "name": "thumbnailUrl",
            "type": "string",
            "default": "",
            "displayOptions": {"show": {**show, "thumbnailSource": ["url"]}},
        },
        {
            "displayName": "Publish Time",
            "name": "scheduledPublishTime",
            "type": "options",
            "default": "now",
            "displayOptions": {"show": show},
            "options": [
                {"name": "Now", "value": "now"},
                {"name": "Schedule", "value": "later"},
            ],
        },
        {
            "displayName": "Schedule Date",
            "name": "scheduleDate",
            "type": "dateTime",
            "default": "",
            "displayOptions": {"show": {**show, "scheduledPublishTime": ["later"]}},
        },
        {
            "displayName": "YouTube Settings",
            "name": "youtubeSettings",
            "type": "collection",
            "placeholder": "Add Setting",
            "default": {},
            "displayOptions": {"show": show},
            "options": [
                {"displayName": "Title", "name": "title", "type": "string", "default": ""},
                {"displayName": "Description", "name": "description", "type": "string", "default": ""},
                {
                    "displayName": "Tags",
                    "name": "tags",
                    "type": "string",
                    "default": "",
                    "description": "Comma-separated tags",
                },
                {"displayName": "Made For Kids", "name": "madeForKids", "type": "boolean", "default": False},
            ],
        },
        {
            "displayName": "TikTok Settings",
            "name": "tiktokSettings",
            "type": "collection",
            "placeholder": "Add Setting",
            "default": {},
            "displayOptions": {"show": show},
            "options": [
                {"displayName": "Caption", "name": "caption", "type": "string", "default": ""},
                {
                    "displayName": "Privacy Level",
                    "name": "privacy_level",
                    "type": "options",
                    "default": "PUBLIC_TO_EVERYONE",
                    "options": [
                        {"name": "Public", "value": "PUBLIC_TO_EVERYONE"},
                        {"name": "Friends", "value": "MUTUAL_FOLLOW_FRIENDS"},
                        {"name": "Private", "value": "SELF_ONLY"},
                    ],
                },
                {"displayName": "Disable Duet", "name": "disable_duet", "type": "boolean", "default": False},
                {"displayName": "Disable Stitch", "name": "disable_stitch", "type": "boolean", "default": False},
                {"displayName": "Disable Comment", "name": "disable_comment", "type": "boolean", "default": False},
            ],
        },
        {
            "displayName": "Facebook Settings",
            "name": "facebookSettings",
            "type": "collection",
            "placeholder": "Add Setting",
            "default": {},
            "displayOptions": {"show": show},
            "options": [
                {"displayName": "Title", "name": "title", "type": "string", "default": ""},
                {"displayName": "Description", "name": "description", "type": "string", "default": ""},
            ],
        },
        {
            "displayName": "Instagram Settings",
            "name": "instagramSettings",
            "type": "collection",
            "placeholder": "Add Setting",
            "default": {},
            "displayOptions": {"show": show},
            "options": [
                {"displayName": "Description", "name": "description", "type": "string", "default": ""},
                {"displayName": "Share To Feed", "name": "share_to_feed", "type": "boolean", "default": True},
            ],
        },
    ]


class _SocialPublisherNode(Posty5Node):
    """Adds the upload-then-publish flow to the generic dispatch."""

    default_operation = "publishVideo"

    def run_operation(self, gateway: Posty5Gateway, params: OperationParams, item_index: int) -> Any:
        if isinstance(params, PublishVideoParams):
            return self.publish_video(gateway, params, item_index)
        return super().run_operation(gateway, params, item_index)

    def publish_video(self, gateway: Posty5Gateway, params: PublishVideoParams, item_index: int) -> Any:
        thumb_url: Optional[str] = None

        if params.video_source == "binary":
            video = self.get_binary_data_buffer(item_index, params.video_binary_property)
            upload_urls = gateway.send(params.upload_urls_request())
            video_upload_url = _upload_url(upload_urls, "video")
            gateway.upload(video_upload_url, video)
            video_url = strip_query(video_upload_url)
            source = VIDEO_UPLOAD_SOURCE

            if params.thumbnail_source == "binary" and self.has_binary_data(
                item_index, params.thumbnail_binary_property
            ):
                thumbnail = self.get_binary_data_buffer(item_index, params.thumbnail_binary_property)
                thumb_upload_url = _upload_url(upload_urls, "thumb")
                gateway.upload(thumb_upload_url, thumbnail)
                thumb_url = strip_query(thumb_upload_url)
        else:
            video_url = params.video_url
            source = sniff_video_source(video_url)

        if params.thumbnail_source == "url" and params.thumbnail_url:
            thumb_url = params.thumbnail_url

        self.logger.debug(f"Publishing {source} video to {', '.join(params.platforms)}")
        return gateway.send(params.publish_request(video_url, source, thumb_url))


def _upload_url(upload_urls: Any, kind: str) -> str:
    """uploadFileURL of the "video" or "thumb" entry of generate-upload-urls."""
    entry = upload_urls.get(kind) if isinstance(upload_urls, dict) else None
    url = entry.get("uploadFileURL") if isinstance(entry, dict) else None
    if not url:
        raise Posty5ApiError(f"Upload URL for {kind} missing from response")
    return url


class SocialPublisherTaskNode(_SocialPublisherNode):
    type = f"{NODE_TYPE_PREFIX}.posty5SocialPublisherTask"
    version = 1

    operations = TASK_OPERATIONS
    parameters_adapter = TypeAdapter(TaskOperation)

    description = posty5_description(
        "posty5SocialPublisherTask",
        "Posty5 Social Publisher Task",
        "Publish short videos to social platforms as Posty5 tasks",
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Publish Video", "value": "publishVideo", "action": "Publish a video to a workspace"},
                    {
                        "name": "Publish Video To Account",
                        "value": "publishVideoToAccount",
                        "action": "Publish a video to an account",
                    },
                    {"name": "Get Status", "value": "getTaskStatus", "action": "Get the status of a task"},
                    {"name": "List", "value": "listTasks", "action": "List tasks"},
                    {
                        "name": "Get Default Settings",
                        "value": "getDefaultSettings",
                        "action": "Get the default publish settings",
                    },
                ],
                default="publishVideo",
            ),
            *publish_properties(),
            string_property("taskId", "Task ID", ["getTaskStatus"]),
            string_property("listWorkspaceId", "Workspace ID", ["listTasks"]),
            *list_properties(operation="listTasks"),
        ],
        "credentials": [],
    }


class SocialPublisherPostNode(_SocialPublisherNode):
    type = f"{NODE_TYPE_PREFIX}.posty5SocialPublisherPost"
    version = 1

    operations = POST_OPERATIONS
    parameters_adapter = TypeAdapter(PostOperation)

    description = posty5_description(
        "posty5SocialPublisherPost",
        "Posty5 Social Publisher Post",
        "Publish short videos to social platforms as Posty5 posts",
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Publish Video", "value": "publishVideo", "action": "Publish a video to a workspace"},
                    {
                        "name": "Publish Video To Account",
                        "value": "publishVideoToAccount",
                        "action": "Publish a video to an account",
                    },
                    {"name": "Get Status", "value": "getPostStatus", "action": "Get the status of a post"},
                    {"name": "List", "value": "listPosts", "action": "List posts"},
                    {
                        "name": "Get Default Settings",
                        "value": "getDefaultSettings",
                        "action": "Get the default publish settings",
                    },
                ],
                default="publishVideo",
            ),
            *publish_properties(),
            string_property("postId", "Post ID", ["getPostStatus"]),
            string_property("listWorkspaceId", "Workspace ID", ["listPosts"]),
            *list_properties(operation="listPosts"),
        ],
        "credentials": [],
    }
