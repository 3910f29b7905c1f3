"""
Mobile app schema models.

Output models (Component, Page, MobileApp, ...) are immutable and serialize
with `to_dict()`. Input models (EditorConfig, BrandingConfig, ...) accept
whatever the web page builder saves.
"""

from .core import (
    MOBILE_SCHEMA_VERSION,
    ComponentType,
    SchemaModel,
)

from .style import (
    Style,
    COMPOSITE_STYLE_FIELDS,
)

from .data_binding import (
    DataBinding,
    Pagination,
)

from .components import Component

from .page import (
    Page,
    PageHeader,
)

from .navigation import (
    Navigation,
    NavigationBadge,
    NavigationItem,
)

from .theme import (
    ThemeBorderRadius,
    ThemeColors,
    ThemeConfig,
    ThemeSpacing,
    ThemeTypography,
    DEFAULT_THEMES,
)

from .app import (
    ApiConfig,
    AppTheme,
    AuthConfig,
    LocalizationConfig,
    MobileApp,
)

from .editor import (
    BrandingConfig,
    EditorConfig,
    EditorPage,
    EditorPermissions,
    EditorWidget,
    GlobalStyling,
    SidebarConfig,
    SidebarItem,
)

from .input_output import (
    AssembleOptions,
    ExportOptions,
    ExportResult,
)

from .component_catalog import (
    WIDGET_TYPE_MAPPING,
    COMPONENT_CATEGORIES,
    map_widget_type,
    get_component_category,
    get_widget_category,
    get_available_component_types,
    get_widget_aliases,
    export_widget_type_catalog,
)

from .validation import (
    validate_component,
    validate_page,
    validate_mobile_app,
    safe_parse_component,
    safe_parse_page,
    safe_parse_mobile_app,
)

__all__ = [
    # Core
    'MOBILE_SCHEMA_VERSION',
    'ComponentType',
    'SchemaModel',

    # Output schema
    'Style',
    'COMPOSITE_STYLE_FIELDS',
    'DataBinding',
    'Pagination',
    'Component',
    'Page',
    'PageHeader',
    'Navigation',
    'NavigationBadge',
    'NavigationItem',
    'ThemeBorderRadius',
    'ThemeColors',
    'ThemeConfig',
    'ThemeSpacing',
    'ThemeTypography',
    'DEFAULT_THEMES',
    'ApiConfig',
    'AppTheme',
    'AuthConfig',
    'LocalizationConfig',
    'MobileApp',

    # Editor input
    'BrandingConfig',
    'EditorConfig',
    'EditorPage',
    'EditorPermissions',
    'EditorWidget',
    'GlobalStyling',
    'SidebarConfig',
    'SidebarItem',

    # Options / results
    'AssembleOptions',
    'ExportOptions',
    'ExportResult',

    # Catalog
    'WIDGET_TYPE_MAPPING',
    'COMPONENT_CATEGORIES',
    'map_widget_type',
    'get_component_category',
    'get_widget_category',
    'get_available_component_types',
    'get_widget_aliases',
    'export_widget_type_catalog',

    # Validation
    'validate_component',
    'validate_page',
    'validate_mobile_app',
    'safe_parse_component',
    'safe_parse_page',
    'safe_parse_mobile_app',
]
