"""Tests for branding overlay onto default themes."""
import pytest

from mobile_schema.models.schemas.editor import BrandingConfig
from mobile_schema.models.schemas.theme import DEFAULT_THEMES
from mobile_schema.services.compilation.theme_converter import build_theme


@pytest.mark.parametrize("mode", ["light", "dark"])
def test_no_branding_returns_default_theme(mode):
    theme = build_theme(None, mode)

    assert theme.mode == mode
    assert theme.to_dict() == DEFAULT_THEMES[mode].to_dict()


def test_primary_override_changes_only_primary():
    branding = BrandingConfig.model_validate({"primaryColor": "#111111"})

    light = build_theme(branding, "light").colors.to_dict()
    default = DEFAULT_THEMES["light"].colors.to_dict()

    assert light["primary"] == "#111111"
    assert {k: v for k, v in light.items() if k != "primary"} == {
        k: v for k, v in default.items() if k != "primary"
    }


def test_branding_applies_to_both_modes():
    branding = BrandingConfig.model_validate({"primaryColor": "#111111"})

    assert build_theme(branding, "light").colors.primary == "#111111"
    assert build_theme(branding, "dark").colors.primary == "#111111"
    assert build_theme(branding, "dark").colors.background == DEFAULT_THEMES["dark"].colors.background


def test_full_branding_mapping():
    branding = BrandingConfig.model_validate({
        "primaryColor": "#000001",
        "secondaryColor": "#000002",
        "bodyBackgroundColor": "#000003",
        "topMenuBackgroundColor": "#000004",
        "bodyTextColor": "#000005",
        "dangerColor": "#000006",
        "warningColor": "#000007",
    })

    colors = build_theme(branding, "light").colors

    assert (colors.primary, colors.secondary, colors.background, colors.surface) == (
        "#000001", "#000002", "#000003", "#000004",
    )
    assert (colors.text, colors.error, colors.warning) == ("#000005", "#000006", "#000007")
    assert colors.success == DEFAULT_THEMES["light"].colors.success
    assert colors.info == DEFAULT_THEMES["light"].colors.info


def test_font_family_override():
    branding = BrandingConfig.model_validate({"globalStyling": {"fontFamily": "Roboto"}})

    typography = build_theme(branding, "light").typography

    assert typography.fontFamily == "Roboto"
    assert typography.baseFontSize == 16


def test_defaults_are_not_mutated():
    build_theme(BrandingConfig.model_validate({"primaryColor": "#111111"}), "light")

    assert DEFAULT_THEMES["light"].colors.primary == "#3B82F6"


def test_empty_branding_values_are_ignored():
    branding = BrandingConfig.model_validate({"primaryColor": "", "globalStyling": "Arial"})

    assert build_theme(branding, "light").to_dict() == DEFAULT_THEMES["light"].to_dict()
