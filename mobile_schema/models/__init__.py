"""
Models package.

Exports:
- schemas: mobile app schema, editor input models and validation
"""

from .schemas import (
    # Output schema
    MOBILE_SCHEMA_VERSION,
    ComponentType,
    Style,
    DataBinding,
    Component,
    Page,
    Navigation,
    ThemeConfig,
    MobileApp,

    # Editor input
    EditorConfig,
    BrandingConfig,

    # Options / results
    AssembleOptions,
    ExportOptions,
    ExportResult,

    # Validation
    validate_component,
    validate_page,
    validate_mobile_app,
)

__all__ = [
    'MOBILE_SCHEMA_VERSION',
    'ComponentType',
    'Style',
    'DataBinding',
    'Component',
    'Page',
    'Navigation',
    'ThemeConfig',
    'MobileApp',
    'EditorConfig',
    'BrandingConfig',
    'AssembleOptions',
    'ExportOptions',
    'ExportResult',
    'validate_component',
    'validate_page',
    'validate_mobile_app',
]
