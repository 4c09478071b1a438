"""Tests for domain enumerations and the platform-content type mapping."""

import pytest

from campaign_wizard.domain.types import (
    PLATFORM_CONTENT_TYPES,
    CampaignKind,
    ContentType,
    Platform,
    get_platform_for_content_type,
    valid_content_types,
    validate_platform_content_type,
)


class TestPlatformContentTypes:
    """Every content type belongs to exactly one platform."""

    def test_every_platform_has_content_types(self):
        for platform in Platform:
            assert PLATFORM_CONTENT_TYPES[platform]

    def test_every_content_type_is_mapped_once(self):
        mapped = [ct for types in PLATFORM_CONTENT_TYPES.values() for ct in types]
        assert sorted(mapped) == sorted(ContentType)

    @pytest.mark.parametrize(
        ("content_type", "platform"),
        [
            (ContentType.FEED, Platform.INSTAGRAM),
            (ContentType.STORY, Platform.INSTAGRAM),
            (ContentType.REELS, Platform.INSTAGRAM),
            (ContentType.YOUTUBE_VIDEO, Platform.YOUTUBE),
            (ContentType.YOUTUBE_SHORTS, Platform.YOUTUBE),
            (ContentType.TIKTOK_VIDEO, Platform.TIKTOK),
            (ContentType.TIKTOK_STORY, Platform.TIKTOK),
        ],
        ids=lambda v: v.value,
    )
    def test_get_platform_for_content_type(self, content_type: ContentType, platform: Platform):
        assert get_platform_for_content_type(content_type) == platform

    def test_valid_content_types_for_unset_platform_is_empty(self):
        assert valid_content_types(None) == frozenset()

    def test_valid_content_types_returns_a_copy(self):
        types = valid_content_types(Platform.INSTAGRAM)
        assert isinstance(types, frozenset)
        assert types == {ContentType.FEED, ContentType.STORY, ContentType.REELS}


class TestValidatePlatformContentType:
    def test_valid_pair_passes(self):
        validate_platform_content_type(Platform.YOUTUBE, ContentType.YOUTUBE_SHORTS)

    def test_cross_platform_pair_raises(self):
        with pytest.raises(ValueError, match="is not valid for"):
            validate_platform_content_type(Platform.TIKTOK, ContentType.REELS)

    def test_unset_platform_raises(self):
        with pytest.raises(ValueError, match="Valid types: none"):
            validate_platform_content_type(None, ContentType.FEED)


class TestCampaignKind:
    def test_wire_values_match_marketplace_api(self):
        assert CampaignKind.SINGLE_INFLUENCER == "single"
        assert CampaignKind.OPEN_POOL == "multiple"
