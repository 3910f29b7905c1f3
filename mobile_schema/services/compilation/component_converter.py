"""
Component Converter - editor widget tree to canonical Component tree.
"""
from typing import Any, Dict, List, Optional

from mobile_schema.config import settings
from mobile_schema.models.schemas.component_catalog import map_widget_type
from mobile_schema.models.schemas.components import Component
from mobile_schema.models.schemas.data_binding import DataBinding
from mobile_schema.models.schemas.editor import EditorWidget
from mobile_schema.services.compilation.style_normalizer import is_present, normalize_style
from mobile_schema.utils.logging import get_logger

logger = get_logger(__name__)


class WidgetDepthExceededError(Exception):
    """Raised when a widget tree nests deeper than the configured limit"""
    pass


# Config keys with a dedicated meaning; everything else is copied into props
CONSUMED_CONFIG_KEYS = frozenset({
    "name",
    "text", "content", "label",
    "src", "imageUrl", "source",
    "placeholder", "value", "options", "icon", "variant",
    "dataBinding", "dataSource", "dataPath",
})

# (prop name, config keys in priority order)
ALIASED_PROPS = (
    ("text", ("text", "content", "label")),
    ("source", ("src", "imageUrl", "source")),
)

VERBATIM_PROPS = ("placeholder", "options", "icon", "variant")


def _first_present(config: Dict[str, Any], keys) -> Any:
    for key in keys:
        if is_present(config.get(key)):
            return config[key]
    return None


def build_props(config: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Collect component props from a widget config; None when nothing applies"""
    props: Dict[str, Any] = {}

    for prop, keys in ALIASED_PROPS:
        value = _first_present(config, keys)
        if value is not None:
            props[prop] = value

    for key in VERBATIM_PROPS:
        if is_present(config.get(key)):
            props[key] = config[key]

    # `value` may legitimately be falsy (False, 0, "")
    if config.get("value") is not None:
        props["value"] = config["value"]

    for key, value in config.items():
        if key not in CONSUMED_CONFIG_KEYS:
            props[key] = value

    return props or None


def build_widget_binding(widget_id: str, config: Dict[str, Any]) -> Optional[DataBinding]:
    """Single api binding for widgets that name a data source"""
    source = _first_present(config, ("dataBinding", "dataSource"))
    if not isinstance(source, str):
        return None

    response_path = config.get("dataPath")
    return DataBinding(
        id=f"{widget_id}-binding",
        type="api",
        source=source,
        responsePath=response_path if isinstance(response_path, str) and response_path else None,
    )


def convert_widget(
    widget: EditorWidget,
    depth: int = 1,
    max_depth: Optional[int] = None,
) -> Component:
    """
    Convert one widget and its descendants.

    Args:
        widget: Editor widget
        depth: Nesting level of this widget (top-level widgets are 1)
        max_depth: Deepest level accepted, defaults to settings.max_widget_depth

    Returns:
        Component mirroring the widget tree

    Raises:
        WidgetDepthExceededError: If the tree nests deeper than max_depth
    """
    limit = max_depth if max_depth is not None else settings.max_widget_depth
    if depth > limit:
        raise WidgetDepthExceededError(
            f"Widget '{widget.id}' exceeds the maximum nesting depth of {limit}"
        )

    config = widget.config or {}

    name = config.get("name")
    if not (isinstance(name, str) and name):
        name = widget.type

    binding = build_widget_binding(widget.id, config)

    children: Optional[List[Component]] = None
    if widget.children:
        children = [
            convert_widget(child, depth=depth + 1, max_depth=limit)
            for child in widget.children
        ]

    return Component(
        id=widget.id,
        type=map_widget_type(widget.type),
        name=name,
        style=normalize_style(widget.style, widget),
        props=build_props(config),
        dataBindings=[binding] if binding else None,
        children=children,
    )


def convert_widgets(widgets: List[EditorWidget], max_depth: Optional[int] = None) -> List[Component]:
    return [convert_widget(widget, max_depth=max_depth) for widget in widgets]
