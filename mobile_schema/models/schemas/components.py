"""
Canonical component tree.
"""
from typing import Any, Dict, List, Optional
from pydantic import field_validator

from .core import SchemaModel, ComponentType
from .style import Style
from .data_binding import DataBinding


class Component(SchemaModel):
    """Typed counterpart of an editor widget"""
    id: str
    type: ComponentType
    name: Optional[str] = None
    style: Optional[Style] = None
    props: Optional[Dict[str, Any]] = None
    dataBindings: Optional[List[DataBinding]] = None
    children: Optional[List["Component"]] = None

    @field_validator('children')
    @classmethod
    def validate_children(cls, v: Optional[List["Component"]]) -> Optional[List["Component"]]:
        """Leaves carry no children list at all"""
        if v is not None and len(v) == 0:
            return None
        return v


Component.model_rebuild()
