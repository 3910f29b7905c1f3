"""
Mobile Schema Compiler.

Turns web page-builder documents into the mobile app schema consumed by
native clients.
"""

from mobile_schema.models.schemas import (
    MOBILE_SCHEMA_VERSION,
    BrandingConfig,
    Component,
    ComponentType,
    EditorConfig,
    ExportOptions,
    ExportResult,
    MobileApp,
    Page,
)
from mobile_schema.services.compilation import (
    assemble_app,
    convert_page,
    convert_widget,
    export_schema,
    generate_content_hash,
)
from mobile_schema.services.data_binding import (
    DataBindingTemplates,
    DataSourceBuilder,
)

__version__ = "1.0.0"

__all__ = [
    'MOBILE_SCHEMA_VERSION',
    'BrandingConfig',
    'Component',
    'ComponentType',
    'EditorConfig',
    'ExportOptions',
    'ExportResult',
    'MobileApp',
    'Page',
    'assemble_app',
    'convert_page',
    'convert_widget',
    'export_schema',
    'generate_content_hash',
    'DataBindingTemplates',
    'DataSourceBuilder',
]
