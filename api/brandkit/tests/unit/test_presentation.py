"""Unit tests for display defaults."""

from brandkit.services.presentation import apply_display_defaults


def test_empty_kit_gets_every_default():
    preview = apply_display_defaults({})

    assert preview.model_dump(by_alias=True) == {
        "brandName": "Your Brand",
        "colors": [],
        "headingFont": "Poppins",
        "bodyFont": "Inter",
        "personality": "A distinctive brand with a clear personality and tone of voice.",
    }


def test_existing_values_are_kept(valid_kit):
    preview = apply_display_defaults(valid_kit, brand_name="Lunar Studio")

    assert preview.brand_name == "Lunar Studio"
    assert preview.colors == valid_kit["colors"]
    assert preview.heading_font == "Poppins"
    assert preview.body_font == "Inter"
    assert preview.personality == "Bold and modern."


def test_wrong_types_fall_back():
    preview = apply_display_defaults({"colors": "#111111", "headingFont": 12, "bodyFont": "", "personality": None})

    assert preview.colors == []
    assert preview.heading_font == "Poppins"
    assert preview.body_font == "Inter"
    assert preview.personality.startswith("A distinctive brand")


def test_empty_brand_name_uses_default():
    assert apply_display_defaults({}, brand_name="").brand_name == "Your Brand"
