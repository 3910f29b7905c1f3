"""
Page-builder document models (compiler input).

These mirror what the visual editor stores. They are deliberately lenient:
unknown keys are kept, and malformed optional blocks are treated as absent so
that a sloppy document still compiles.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mobile_schema.utils.datetime_utils import to_iso_string


def _coerce_id(v: Any) -> Any:
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    return v


def _dict_or_none(v: Any) -> Optional[Dict[str, Any]]:
    return v if isinstance(v, dict) else None


def _list_or_empty(v: Any) -> List[Any]:
    return v if isinstance(v, list) else []


class EditorModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class EditorWidget(EditorModel):
    """Widget as placed on the editor canvas"""
    id: str
    type: str = "custom"
    x: Optional[Any] = None
    y: Optional[Any] = None
    width: Optional[Any] = None
    height: Optional[Any] = None
    config: Optional[Dict[str, Any]] = None
    style: Optional[Dict[str, Any]] = None
    children: Optional[List["EditorWidget"]] = None

    @field_validator('id', mode='before')
    @classmethod
    def validate_ids(cls, v: Any) -> Any:
        return _coerce_id(v)

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v: Any) -> str:
        return v if isinstance(v, str) else "custom"

    @field_validator('config', 'style', mode='before')
    @classmethod
    def validate_bags(cls, v: Any) -> Optional[Dict[str, Any]]:
        return _dict_or_none(v)

    @field_validator('children', mode='before')
    @classmethod
    def validate_children(cls, v: Any) -> Optional[List[Any]]:
        return v if isinstance(v, list) else None


EditorWidget.model_rebuild()


class EditorPermissions(EditorModel):
    roles: Optional[List[str]] = None


class EditorPage(EditorModel):
    """Page definition from the editor"""
    id: str
    name: str = ""
    displayName: Optional[str] = None
    description: Optional[str] = None
    path: Optional[str] = None
    icon: Optional[str] = None
    isActive: Optional[bool] = None
    hidden: Optional[bool] = None
    permissions: Optional[EditorPermissions] = None
    components: List[EditorWidget] = Field(default_factory=list)
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def validate_ids(cls, v: Any) -> Any:
        return _coerce_id(v)

    @field_validator('permissions', mode='before')
    @classmethod
    def validate_permissions(cls, v: Any) -> Any:
        """A bare role list is shorthand for {"roles": [...]}"""
        if isinstance(v, list):
            return {"roles": v}
        return _dict_or_none(v)

    @field_validator('components', mode='before')
    @classmethod
    def validate_components(cls, v: Any) -> List[Any]:
        return _list_or_empty(v)

    @field_validator('createdAt', 'updatedAt', mode='before')
    @classmethod
    def validate_timestamps(cls, v: Any) -> Optional[str]:
        if isinstance(v, datetime):
            return to_iso_string(v)
        return v if isinstance(v, str) else None

    @property
    def is_active(self) -> bool:
        return self.isActive is not False


class SidebarItem(EditorModel):
    """Sidebar entry from the editor's navigation panel"""
    id: str
    type: Optional[str] = None
    name: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    pageId: Optional[str] = None
    children: Optional[List["SidebarItem"]] = None

    @field_validator('id', 'pageId', mode='before')
    @classmethod
    def validate_ids(cls, v: Any) -> Any:
        return _coerce_id(v)


SidebarItem.model_rebuild()


class SidebarConfig(EditorModel):
    items: List[SidebarItem] = Field(default_factory=list)

    @field_validator('items', mode='before')
    @classmethod
    def validate_items(cls, v: Any) -> List[Any]:
        return _list_or_empty(v)


class EditorConfig(EditorModel):
    """Whole page-builder document for one space"""
    spaceId: Optional[str] = None
    pages: List[EditorPage] = Field(default_factory=list)
    sidebarConfig: Optional[SidebarConfig] = None
    loginPageConfig: Optional[Dict[str, Any]] = None
    postAuthRedirectPageId: Optional[str] = None

    @field_validator('spaceId', 'postAuthRedirectPageId', mode='before')
    @classmethod
    def validate_ids(cls, v: Any) -> Any:
        return _coerce_id(v)

    @field_validator('pages', mode='before')
    @classmethod
    def validate_pages(cls, v: Any) -> List[Any]:
        return _list_or_empty(v)

    @field_validator('sidebarConfig', 'loginPageConfig', mode='before')
    @classmethod
    def validate_blocks(cls, v: Any) -> Optional[Dict[str, Any]]:
        if isinstance(v, BaseModel):
            return v
        return _dict_or_none(v)


class GlobalStyling(EditorModel):
    fontFamily: Optional[str] = None


class BrandingConfig(EditorModel):
    """Tenant branding; every field is optional"""
    applicationName: Optional[str] = None
    applicationLogo: Optional[str] = None
    primaryColor: Optional[str] = None
    secondaryColor: Optional[str] = None
    warningColor: Optional[str] = None
    dangerColor: Optional[str] = None
    bodyBackgroundColor: Optional[str] = None
    bodyTextColor: Optional[str] = None
    topMenuBackgroundColor: Optional[str] = None
    globalStyling: Optional[GlobalStyling] = None
    loginBackground: Optional[Dict[str, Any]] = None

    @field_validator('globalStyling', 'loginBackground', mode='before')
    @classmethod
    def validate_blocks(cls, v: Any) -> Any:
        if isinstance(v, BaseModel):
            return v
        return _dict_or_none(v)
