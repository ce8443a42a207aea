"""Tests for the settings field allow-lists and asset path builder."""

from __future__ import annotations

import pytest

from platform_settings.services.field_policy import (
    IMAGE_SLOT_FIELDS,
    PLUGGOU_FIELDS,
    TEXT_FIELDS,
    build_asset_path,
    filter_text_fields,
    select_uploads,
)
from platform_settings.storage.uploads import UploadedAsset


def _asset(name: str = "logo.png") -> UploadedAsset:
    return UploadedAsset(content=b"\x89PNG", filename=name, content_type="image/png")


class TestImageSlotFields:
    """Tests for the IMAGE_SLOT_FIELDS allow-list."""

    def test_policy_table_is_the_full_allow_list(self) -> None:
        assert dict(IMAGE_SLOT_FIELDS) == {
            "logo": "plataform_logo",
            "banner": "plataform_banner",
            "banner_2": "plataform_banner_2",
            "banner_3": "plataform_banner_3",
            "register_banner": "register_banner",
            "login_banner": "login_banner",
            "deposit_banner": "deposit_banner",
        }

    def test_policy_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            IMAGE_SLOT_FIELDS["favicon"] = "favicon"  # type: ignore[index]


class TestSelectUploads:
    """Tests for select_uploads()."""

    def test_unknown_slots_are_ignored(self) -> None:
        uploads = {"favicon": _asset(), "__class__": _asset(), "logo": _asset()}
        selected = list(select_uploads(uploads))
        assert [(slot, attr) for slot, attr, _ in selected] == [("logo", "plataform_logo")]

    def test_follows_policy_order_not_input_order(self) -> None:
        uploads = {"deposit_banner": _asset(), "banner": _asset(), "logo": _asset()}
        slots = [slot for slot, _, _ in select_uploads(uploads)]
        assert slots == ["logo", "banner", "deposit_banner"]

    def test_empty_input_yields_nothing(self) -> None:
        assert list(select_uploads({})) == []


class TestFilterTextFields:
    """Tests for filter_text_fields()."""

    def test_trims_accepted_values(self) -> None:
        result = filter_text_fields(
            {"platform_name": "  Acme  ", "platform_description": "\tBest\n"}, TEXT_FIELDS
        )
        assert result == {"platform_name": "Acme", "platform_description": "Best"}

    def test_blank_and_non_string_values_are_not_supplied(self) -> None:
        data = {"platform_name": "   ", "platform_description": 42}
        assert filter_text_fields(data, TEXT_FIELDS) == {}

    def test_fields_outside_allow_list_are_dropped(self) -> None:
        data = {"platform_name": "Acme", "pluggou_api_key": "secret", "id": "x"}
        assert filter_text_fields(data, TEXT_FIELDS) == {"platform_name": "Acme"}

    def test_none_data(self) -> None:
        assert filter_text_fields(None, PLUGGOU_FIELDS) == {}


class TestBuildAssetPath:
    """Tests for build_asset_path()."""

    def test_path_layout(self) -> None:
        path = build_asset_path("logo", "brand.png")
        assert path.startswith("settings/logo/")
        assert path.endswith("-brand.png")

    def test_directory_components_are_stripped(self) -> None:
        path = build_asset_path("banner", "../../etc/passwd")
        assert path.startswith("settings/banner/")
        assert path.endswith("-passwd")
        assert ".." not in path

    def test_windows_style_filename(self) -> None:
        assert build_asset_path("logo", "C:\\Users\\me\\logo.png").endswith("-logo.png")

    def test_blank_filename_falls_back(self) -> None:
        assert build_asset_path("logo", "").endswith("-upload")

    def test_paths_are_unique_per_call(self) -> None:
        assert build_asset_path("logo", "a.png") != build_asset_path("logo", "a.png")
