"""
Social publisher task and post operations.

Tasks (/api/social-publisher-task) and posts (/api/social-publisher-post)
share one publishing protocol:

1. A local video is uploaded first: generate-upload-urls returns pre-signed
   URLs for the video and the thumbnail, and the public URL of an upload is
   its pre-signed URL without the query string.
2. A remote video is classified by its URL (see sniff_video_source).
3. POST {base}/short-video/{workspace|account}/{by-file|by-url} publishes,
   by-file exactly when the video was uploaded.

Platform settings become `<platform>Config` objects only for selected
platforms whose settings collection is non-empty.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, field_validator, model_validator

from ..constants import SOCIAL_PUBLISHER_POST, SOCIAL_PUBLISHER_TASK
from ..transport import RequestDescriptor
from .base import ListParams, OperationParams, ParamModel, operation_map


VIDEO_UPLOAD_SOURCE = "video-upload"

Platform = Literal["youtube", "tiktok", "facebook", "instagram"]


def sniff_video_source(video_url: str) -> str:
    """Classify a remote video URL; the first matching rule wins."""
    if "facebook.com" in video_url or "fb.watch" in video_url:
        return "facebook-video"
    if "tiktok.com" in video_url:
        return "tiktok-video"
    if "youtube.com" in video_url or "youtu.be" in video_url:
        return "youtube-video"
    return "video-url"


def format_schedule_time(value: datetime) -> str:
    """UTC ISO-8601 with milliseconds and a Z suffix; naive values are UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def split_tags(tags: str) -> List[str]:
    return [tag.strip() for tag in tags.split(",")]


# ==============================================================================
# Platform settings
# ==============================================================================

class _PlatformSettings(ParamModel):
    """Only keys the user actually set are sent; unknown keys pass through."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_config(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class YoutubeSettings(_PlatformSettings):
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[Union[str, List[str]]] = None
    made_for_kids: Optional[bool] = Field(None, alias="madeForKids")

    def to_config(self) -> Dict[str, Any]:
        config = super().to_config()
        if self.tags and isinstance(self.tags, str):
            config["tags"] = split_tags(self.tags)
        return config


class TiktokSettings(_PlatformSettings):
    caption: Optional[str] = None
    privacy_level: Optional[
        Literal["PUBLIC_TO_EVERYONE", "MUTUAL_FOLLOW_FRIENDS", "SELF_ONLY"]
    ] = None
    disable_duet: Optional[bool] = None
    disable_stitch: Optional[bool] = None
    disable_comment: Optional[bool] = None


class FacebookSettings(_PlatformSettings):
    title: Optional[str] = None
    description: Optional[str] = None


class InstagramSettings(_PlatformSettings):
    description: Optional[str] = None
    share_to_feed: Optional[bool] = None


# ==============================================================================
# Publishing
# ==============================================================================

class PublishVideoParams(OperationParams):
    """Inputs of a short-video publish, shared by tasks and posts."""

    base_path: ClassVar[str] = ""
    scope: ClassVar[str] = ""

    video_source: Literal["binary", "url"] = Field("binary", alias="videoSource")
    video_binary_property: str = Field("data", alias="videoBinaryProperty")
    video_url: Optional[str] = Field(None, alias="videoUrl")
    platforms: List[Platform] = Field(default_factory=lambda: ["youtube"])
    thumbnail_source: Literal["none", "binary", "url"] = Field("none", alias="thumbnailSource")
    thumbnail_binary_property: str = Field("thumbnail", alias="thumbnailBinaryProperty")
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailUrl")
    scheduled_publish_time: Literal["now", "later"] = Field("now", alias="scheduledPublishTime")
    schedule_date: Optional[datetime] = Field(None, alias="scheduleDate")

    youtube_settings: YoutubeSettings = Field(default_factory=YoutubeSettings, alias="youtubeSettings")
    tiktok_settings: TiktokSettings = Field(default_factory=TiktokSettings, alias="tiktokSettings")
    facebook_settings: FacebookSettings = Field(
        default_factory=FacebookSettings, alias="facebookSettings"
    )
    instagram_settings: InstagramSettings = Field(
        default_factory=InstagramSettings, alias="instagramSettings"
    )

    @field_validator("schedule_date", mode="before")
    @classmethod
    def blank_date_is_unset(cls, v: Any) -> Any:
        return None if v == "" else v

    @model_validator(mode="after")
    def check_sources(self) -> "PublishVideoParams":
        if self.video_source == "url" and not self.video_url:
            raise ValueError("videoUrl is required when the video source is a URL")
        if self.scheduled_publish_time == "later" and self.schedule_date is None:
            raise ValueError("scheduleDate is required when publishing later")
        return self

    def scope_fields(self) -> Dict[str, Any]:
        raise NotImplementedError

    def upload_urls_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="POST",
            path=f"{self.base_path}/generate-upload-urls",
            body={"videoFileType": "mp4", "thumbFileType": "jpg"},
        )

    def platform_configs(self) -> Dict[str, Dict[str, Any]]:
        sections = (
            ("youtube", "youtubeConfig", self.youtube_settings),
            ("tiktok", "tiktokConfig", self.tiktok_settings),
            ("facebook", "facebookPageConfig", self.facebook_settings),
            ("instagram", "instagramConfig", self.instagram_settings),
        )
        configs = {}
        for platform, key, settings in sections:
            if platform not in self.platforms:
                continue
            config = settings.to_config()
            if config:
                configs[key] = config
        return configs

    def publish_request(
        self,
        video_url: str,
        source: str,
        thumb_url: Optional[str] = None,
    ) -> RequestDescriptor:
        """Build the publish call once the video (and thumbnail) URLs are known."""
        body: Dict[str, Any] = {
            **self.scope_fields(),
            "videoURL": video_url,
            "source": source,
            "platforms": list(self.platforms),
        }
        if thumb_url:
            body["thumbURL"] = thumb_url

        if self.scheduled_publish_time == "later":
            body["scheduledPublishTime"] = format_schedule_time(self.schedule_date)
        else:
            body["scheduledPublishTime"] = "now"

        body.update(self.platform_configs())

        mode = "by-file" if source == VIDEO_UPLOAD_SOURCE else "by-url"
        return RequestDescriptor(
            method="POST",
            path=f"{self.base_path}/short-video/{self.scope}/{mode}",
            body=body,
        )


class _WorkspacePublish(PublishVideoParams):
    scope = "workspace"

    operation: Literal["publishVideo"] = "publishVideo"
    workspace_id: str = Field(..., alias="workspaceId")

    def scope_fields(self) -> Dict[str, Any]:
        return {"workspaceId": self.workspace_id}


class _AccountPublish(PublishVideoParams):
    scope = "account"

    operation: Literal["publishVideoToAccount"] = "publishVideoToAccount"
    account_id: str = Field(..., alias="accountId")

    def scope_fields(self) -> Dict[str, Any]:
        return {"accountId": self.account_id}


class _DefaultSettings(OperationParams):
    base_path: ClassVar[str] = ""

    operation: Literal["getDefaultSettings"] = "getDefaultSettings"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{self.base_path}/default-settings")


class _PublishedList(ListParams):
    list_workspace_id: str = Field(..., alias="listWorkspaceId")

    def query_filters(self) -> Dict[str, Any]:
        return {"workspaceId": self.list_workspace_id}


# ==============================================================================
# Tasks
# ==============================================================================

class TaskPublishVideo(_WorkspacePublish):
    base_path = SOCIAL_PUBLISHER_TASK


class TaskPublishVideoToAccount(_AccountPublish):
    base_path = SOCIAL_PUBLISHER_TASK


class TaskGetStatus(OperationParams):
    operation: Literal["getTaskStatus"] = "getTaskStatus"
    task_id: str = Field(..., alias="taskId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{SOCIAL_PUBLISHER_TASK}/{self.task_id}/status")


class TaskList(_PublishedList):
    path = SOCIAL_PUBLISHER_TASK

    operation: Literal["listTasks"] = "listTasks"


class TaskDefaultSettings(_DefaultSettings):
    base_path = SOCIAL_PUBLISHER_TASK


TaskOperation = Annotated[
    Union[TaskPublishVideo, TaskPublishVideoToAccount, TaskGetStatus, TaskList, TaskDefaultSettings],
    Field(discriminator="operation"),
]

TASK_OPERATIONS = operation_map(
    TaskPublishVideo, TaskPublishVideoToAccount, TaskGetStatus, TaskList, TaskDefaultSettings
)


# ==============================================================================
# Posts
# ==============================================================================

class PostPublishVideo(_WorkspacePublish):
    base_path = SOCIAL_PUBLISHER_POST


class PostPublishVideoToAccount(_AccountPublish):
    base_path = SOCIAL_PUBLISHER_POST


class PostGetStatus(OperationParams):
    operation: Literal["getPostStatus"] = "getPostStatus"
    post_id: str = Field(..., alias="postId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{SOCIAL_PUBLISHER_POST}/{self.post_id}/status")


class PostList(_PublishedList):
    path = SOCIAL_PUBLISHER_POST

    operation: Literal["listPosts"] = "listPosts"


class PostDefaultSettings(_DefaultSettings):
    base_path = SOCIAL_PUBLISHER_POST


PostOperation = Annotated[
    Union[PostPublishVideo, PostPublishVideoToAccount, PostGetStatus, PostList, PostDefaultSettings],
    Field(discriminator="operation"),
]

POST_OPERATIONS = operation_map(
    PostPublishVideo, PostPublishVideoToAccount, PostGetStatus, PostList, PostDefaultSettings
)
