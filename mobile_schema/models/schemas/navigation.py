"""
App navigation configuration.
"""
from typing import List, Literal, Optional
from pydantic import Field

from .core import SchemaModel


class NavigationBadge(SchemaModel):
    text: str
    color: str


class NavigationItem(SchemaModel):
    """Drawer or tab entry"""
    id: str
    type: Literal["page", "divider", "group"] = "page"
    label: Optional[str] = None
    icon: Optional[str] = None
    pageId: Optional[str] = None
    children: Optional[List["NavigationItem"]] = None
    badge: Optional[NavigationBadge] = None


NavigationItem.model_rebuild()


class Navigation(SchemaModel):
    initialPage: str
    drawer: List[NavigationItem] = Field(default_factory=list)
    loginPage: Optional[str] = None
    bottomTabs: Optional[List[NavigationItem]] = None
