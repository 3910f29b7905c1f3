"""
Data binding construction helpers.
"""

from mobile_schema.services.data_binding.builder import (
    DataSourceBuilder,
    DataBindingError,
)

from mobile_schema.services.data_binding.templates import DataBindingTemplates

__all__ = [
    'DataSourceBuilder',
    'DataBindingError',
    'DataBindingTemplates',
]
