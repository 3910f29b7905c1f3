"""
Theme Converter - branding overlay onto the built-in light/dark themes.

The override list is explicit and narrow; branding keys not listed here are
ignored.
"""
from typing import Literal, Optional

from mobile_schema.models.schemas.editor import BrandingConfig
from mobile_schema.models.schemas.theme import DEFAULT_THEMES, ThemeConfig


# theme color -> branding field
BRANDING_COLOR_OVERRIDES = (
    ("primary", "primaryColor"),
    ("secondary", "secondaryColor"),
    ("background", "bodyBackgroundColor"),
    ("surface", "topMenuBackgroundColor"),
    ("text", "bodyTextColor"),
    ("error", "dangerColor"),
    ("warning", "warningColor"),
)


def build_theme(branding: Optional[BrandingConfig], mode: Literal["light", "dark"]) -> ThemeConfig:
    """Default theme for `mode` with the branding overrides applied"""
    theme = DEFAULT_THEMES["dark" if mode == "dark" else "light"]

    if branding is None:
        return theme

    color_updates = {}
    for color, branding_field in BRANDING_COLOR_OVERRIDES:
        value = getattr(branding, branding_field)
        if value:
            color_updates[color] = value

    typography = theme.typography
    font_family = branding.globalStyling.fontFamily if branding.globalStyling else None
    if font_family:
        typography = typography.model_copy(update={"fontFamily": font_family})

    return theme.model_copy(update={
        "colors": theme.colors.model_copy(update=color_updates),
        "typography": typography,
    })
