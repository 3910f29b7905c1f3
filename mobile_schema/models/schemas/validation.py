"""
Validation helper functions.

Structural checks only: they confirm a payload has the shape of a canonical
Component, Page or MobileApp. They say nothing about whether referenced pages
or endpoints exist.
"""
from typing import Any, Optional, Tuple, Type, TypeVar
from pydantic import ValidationError

from .core import SchemaModel
from .components import Component
from .page import Page
from .app import MobileApp

M = TypeVar("M", bound=SchemaModel)


def _validate(model: Type[M], data: Any) -> M:
    if isinstance(data, model):
        return data
    return model.model_validate(data)


def _safe_parse(model: Type[M], data: Any) -> Tuple[bool, Optional[M], Optional[str]]:
    try:
        return True, _validate(model, data), None
    except ValidationError as e:
        return False, None, str(e)


def validate_component(data: Any) -> Component:
    """Parse a component payload, raising ValidationError on bad shape"""
    return _validate(Component, data)


def validate_page(data: Any) -> Page:
    """Parse a page payload, raising ValidationError on bad shape"""
    return _validate(Page, data)


def validate_mobile_app(data: Any) -> MobileApp:
    """Parse a full app payload, raising ValidationError on bad shape"""
    return _validate(MobileApp, data)


def safe_parse_component(data: Any) -> Tuple[bool, Optional[Component], Optional[str]]:
    return _safe_parse(Component, data)


def safe_parse_page(data: Any) -> Tuple[bool, Optional[Page], Optional[str]]:
    return _safe_parse(Page, data)


def safe_parse_mobile_app(data: Any) -> Tuple[bool, Optional[MobileApp], Optional[str]]:
    return _safe_parse(MobileApp, data)
