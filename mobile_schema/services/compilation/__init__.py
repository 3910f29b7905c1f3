"""
Compilation services - page-builder documents into mobile app schemas.

Widget -> Component -> Page -> MobileApp, then export.
"""

from mobile_schema.services.compilation.style_normalizer import (
    normalize_style,
    is_present,
)

from mobile_schema.services.compilation.component_converter import (
    convert_widget,
    convert_widgets,
    build_props,
    build_widget_binding,
    WidgetDepthExceededError,
)

from mobile_schema.services.compilation.page_converter import convert_page

from mobile_schema.services.compilation.navigation_builder import (
    build_navigation,
    build_bottom_tabs,
    convert_navigation_items,
)

from mobile_schema.services.compilation.theme_converter import build_theme

from mobile_schema.services.compilation.content_hash import (
    generate_content_hash,
    rolling_hash32,
)

from mobile_schema.services.compilation.app_assembler import (
    assemble_app,
    with_content_hash,
)

from mobile_schema.services.compilation.exporter import (
    export_schema,
    export_filename,
    serialize_schema,
    ExportError,
)

__all__ = [
    'normalize_style',
    'is_present',
    'convert_widget',
    'convert_widgets',
    'build_props',
    'build_widget_binding',
    'WidgetDepthExceededError',
    'convert_page',
    'build_navigation',
    'build_bottom_tabs',
    'convert_navigation_items',
    'build_theme',
    'generate_content_hash',
    'rolling_hash32',
    'assemble_app',
    'with_content_hash',
    'export_schema',
    'export_filename',
    'serialize_schema',
    'ExportError',
]
