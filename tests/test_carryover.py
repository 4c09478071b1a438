"""Tests for reading the carried-over influencer from a key-value store."""

from __future__ import annotations

import json

import pytest

from campaign_wizard.carryover import SELECTED_INFLUENCER_KEY, read_carryover_influencer
from campaign_wizard.domain.types import Platform


class TestReadCarryoverInfluencer:
    def test_reads_stored_influencer(self) -> None:
        store = {
            SELECTED_INFLUENCER_KEY: json.dumps(
                {"id": 7, "name": "Carla Dias", "followers": 25000, "platform": "tiktok"}
            )
        }

        influencer = read_carryover_influencer(store)

        assert influencer is not None
        assert influencer.id == "7"
        assert influencer.followers == 25000
        assert influencer.platform is Platform.TIKTOK

    def test_missing_key_is_absent(self) -> None:
        assert read_carryover_influencer({}) is None

    def test_custom_key(self) -> None:
        store = {"pickedCreator": json.dumps({"id": "inf_5", "name": "Duda"})}
        assert read_carryover_influencer(store, "pickedCreator") is not None
        assert read_carryover_influencer(store) is None

    @pytest.mark.parametrize(
        "raw",
        ["{not json", "[1, 2, 3]", json.dumps({"id": "inf_1"}), json.dumps({"id": "x", "name": ""})],
        ids=["malformed_json", "not_an_object", "missing_name", "blank_name"],
    )
    def test_unusable_entry_is_absent(self, raw: str) -> None:
        assert read_carryover_influencer({SELECTED_INFLUENCER_KEY: raw}) is None

    def test_store_is_not_modified(self) -> None:
        raw = json.dumps({"id": "inf_1", "name": "Ana Souza"})
        store = {SELECTED_INFLUENCER_KEY: raw}
        read_carryover_influencer(store)
        assert store == {SELECTED_INFLUENCER_KEY: raw}
