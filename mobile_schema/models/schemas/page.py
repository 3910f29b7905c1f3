"""
Page models.
"""
from typing import List, Optional

from .core import SchemaModel
from .components import Component


class PageHeader(SchemaModel):
    """Native header bar configuration"""
    visible: bool
    title: Optional[str] = None
    showBackButton: Optional[bool] = None


class Page(SchemaModel):
    """One routable screen of the app"""
    id: str
    name: str
    title: str
    description: Optional[str] = None
    path: str
    icon: Optional[str] = None
    components: List[Component]
    header: Optional[PageHeader] = None
    requiresAuth: bool = False
    permissions: Optional[List[str]] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None
