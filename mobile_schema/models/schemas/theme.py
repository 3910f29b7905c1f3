"""
Theme models and the built-in default palettes.
"""
from types import MappingProxyType
from typing import Any, Dict, Literal

from .core import SchemaModel


class ThemeColors(SchemaModel):
    primary: str
    secondary: str
    background: str
    surface: str
    text: str
    textSecondary: str
    border: str
    error: str
    warning: str
    success: str
    info: str


class ThemeTypography(SchemaModel):
    fontFamily: str
    baseFontSize: int
    headingScale: float


class ThemeSpacing(SchemaModel):
    base: int
    scale: float


class ThemeBorderRadius(SchemaModel):
    small: int
    medium: int
    large: int
    full: int


class ThemeConfig(SchemaModel):
    """Complete theme for one color mode"""
    mode: Literal["light", "dark"]
    colors: ThemeColors
    typography: ThemeTypography
    spacing: ThemeSpacing
    borderRadius: ThemeBorderRadius


_SHARED_SCALES: Dict[str, Any] = {
    "typography": {
        "fontFamily": "Inter, -apple-system, BlinkMacSystemFont, sans-serif",
        "baseFontSize": 16,
        "headingScale": 1.25,
    },
    "spacing": {
        "base": 8,
        "scale": 1.5,
    },
    "borderRadius": {
        "small": 4,
        "medium": 8,
        "large": 12,
        "full": 9999,
    },
}

DEFAULT_THEMES = MappingProxyType({
    "light": ThemeConfig.model_validate({
        "mode": "light",
        "colors": {
            "primary": "#3B82F6",
            "secondary": "#8B5CF6",
            "background": "#F5F5F7",
            "surface": "#FFFFFF",
            "text": "#1D1D1F",
            "textSecondary": "#6B7280",
            "border": "#E5E7EB",
            "error": "#EF4444",
            "warning": "#F59E0B",
            "success": "#10B981",
            "info": "#3B82F6",
        },
        **_SHARED_SCALES,
    }),
    "dark": ThemeConfig.model_validate({
        "mode": "dark",
        "colors": {
            "primary": "#60A5FA",
            "secondary": "#A78BFA",
            "background": "#000000",
            "surface": "#1C1C1E",
            "text": "#F5F5F7",
            "textSecondary": "#9CA3AF",
            "border": "#3A3A3C",
            "error": "#F87171",
            "warning": "#FBBF24",
            "success": "#34D399",
            "info": "#60A5FA",
        },
        **_SHARED_SCALES,
    }),
})
