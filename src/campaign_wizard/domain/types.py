"""Domain enumerations and platform-content type mappings for the campaign wizard."""

from enum import StrEnum


class Platform(StrEnum):
    """Social networks a campaign can target."""

    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    TIKTOK = "tiktok"


class ContentType(StrEnum):
    """Platform-scoped deliverable formats."""

    # Instagram
    FEED = "feed"
    STORY = "story"
    REELS = "reels"
    # YouTube
    YOUTUBE_VIDEO = "youtube_video"
    YOUTUBE_SHORTS = "youtube_shorts"
    # TikTok
    TIKTOK_VIDEO = "tiktok_video"
    TIKTOK_STORY = "tiktok_story"


class CampaignKind(StrEnum):
    """Whether the campaign targets one chosen influencer or an open pool."""

    SINGLE_INFLUENCER = "single"
    OPEN_POOL = "multiple"


class SubmissionState(StrEnum):
    """Progress of the campaign-creation request for one wizard session."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    FAILED = "failed"


# Mapping of platforms to their valid content types
PLATFORM_CONTENT_TYPES: dict[Platform, set[ContentType]] = {
    Platform.INSTAGRAM: {
        ContentType.FEED,
        ContentType.STORY,
        ContentType.REELS,
    },
    Platform.YOUTUBE: {
        ContentType.YOUTUBE_VIDEO,
        ContentType.YOUTUBE_SHORTS,
    },
    Platform.TIKTOK: {
        ContentType.TIKTOK_VIDEO,
        ContentType.TIKTOK_STORY,
    },
}


def valid_content_types(platform: Platform | None) -> frozenset[ContentType]:
    """Return the content types selectable for *platform*.

    An unset platform has no valid content types.
    """
    if platform is None:
        return frozenset()
    return frozenset(PLATFORM_CONTENT_TYPES.get(platform, set()))


def get_platform_for_content_type(content_type: ContentType) -> Platform:
    """Look up which platform a content type belongs to.

    Args:
        content_type: The content type to look up.

    Returns:
        The platform that owns the given content type.

    Raises:
        ValueError: If the content type is not mapped to any platform.
    """
    for platform, types in PLATFORM_CONTENT_TYPES.items():
        if content_type in types:
            return platform
    raise ValueError(f"Unknown content type: {content_type}")


def validate_platform_content_type(
    platform: Platform | None, content_type: ContentType
) -> None:
    """Validate that a content type is valid for the given platform.

    Args:
        platform: The platform to validate against.
        content_type: The content type to validate.

    Raises:
        ValueError: If the content type is not valid for the given platform.
    """
    valid_types = valid_content_types(platform)
    if content_type not in valid_types:
        raise ValueError(
            f"{content_type} is not valid for {platform}. "
            f"Valid types: {', '.join(sorted(valid_types)) or 'none'}"
        )
