"""Centralized widget type registry.

Single source of truth for how editor widget labels map onto canonical
component kinds. Adding a synonym is a one-line edit to WIDGET_TYPE_MAPPING.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from .core import ComponentType


WIDGET_TYPE_MAPPING: Mapping[str, ComponentType] = MappingProxyType({
    # Layout
    "container": ComponentType.CONTAINER,
    "row": ComponentType.ROW,
    "column": ComponentType.COLUMN,
    "group": ComponentType.CONTAINER,
    "section": ComponentType.CONTAINER,

    # Basic
    "text": ComponentType.TEXT,
    "label": ComponentType.TEXT,
    "header": ComponentType.TEXT,
    "paragraph": ComponentType.TEXT,
    "image": ComponentType.IMAGE,
    "icon": ComponentType.ICON,
    "button": ComponentType.BUTTON,
    "link": ComponentType.LINK,
    "divider": ComponentType.DIVIDER,
    "separator": ComponentType.DIVIDER,
    "spacer": ComponentType.SPACER,

    # Input
    "input": ComponentType.TEXT_INPUT,
    "text-input": ComponentType.TEXT_INPUT,
    "textInput": ComponentType.TEXT_INPUT,
    "textarea": ComponentType.TEXT_AREA,
    "text-area": ComponentType.TEXT_AREA,
    "select": ComponentType.SELECT,
    "dropdown": ComponentType.SELECT,
    "checkbox": ComponentType.CHECKBOX,
    "radio": ComponentType.RADIO,
    "switch": ComponentType.SWITCH,
    "toggle": ComponentType.SWITCH,
    "slider": ComponentType.SLIDER,
    "range": ComponentType.SLIDER,
    "date-picker": ComponentType.DATE_PICKER,
    "datePicker": ComponentType.DATE_PICKER,
    "time-picker": ComponentType.TIME_PICKER,
    "timePicker": ComponentType.TIME_PICKER,
    "file-picker": ComponentType.FILE_PICKER,
    "filePicker": ComponentType.FILE_PICKER,
    "file-upload": ComponentType.FILE_PICKER,

    # Data display
    "list": ComponentType.LIST,
    "table": ComponentType.TABLE,
    "data-table": ComponentType.TABLE,
    "card": ComponentType.CARD,
    "badge": ComponentType.BADGE,
    "avatar": ComponentType.AVATAR,
    "chip": ComponentType.CHIP,
    "tag": ComponentType.CHIP,
    "progress": ComponentType.PROGRESS,
    "progress-bar": ComponentType.PROGRESS,
    "skeleton": ComponentType.SKELETON,
    "loading": ComponentType.SKELETON,

    # Navigation
    "tabs": ComponentType.TABS,
    "tab-bar": ComponentType.TABS,
    "bottom-nav": ComponentType.BOTTOM_NAV,
    "drawer": ComponentType.DRAWER,
    "sidebar": ComponentType.DRAWER,
    "app-bar": ComponentType.APP_BAR,
    "header-bar": ComponentType.APP_BAR,
    "breadcrumb": ComponentType.BREADCRUMB,

    # Feedback
    "modal": ComponentType.MODAL,
    "dialog": ComponentType.MODAL,
    "toast": ComponentType.TOAST,
    "notification": ComponentType.TOAST,
    "alert": ComponentType.ALERT,
    "tooltip": ComponentType.TOOLTIP,

    # Charts
    "line-chart": ComponentType.LINE_CHART,
    "lineChart": ComponentType.LINE_CHART,
    "bar-chart": ComponentType.BAR_CHART,
    "barChart": ComponentType.BAR_CHART,
    "pie-chart": ComponentType.PIE_CHART,
    "pieChart": ComponentType.PIE_CHART,
    "area-chart": ComponentType.AREA_CHART,
    "areaChart": ComponentType.AREA_CHART,
    "chart": ComponentType.LINE_CHART,

    # Media
    "video": ComponentType.VIDEO,
    "audio": ComponentType.AUDIO,
    "webview": ComponentType.WEB_VIEW,
    "web-view": ComponentType.WEB_VIEW,
    "iframe": ComponentType.WEB_VIEW,
    "map": ComponentType.MAP,

    # Custom / unknown
    "custom": ComponentType.CUSTOM,
    "widget": ComponentType.CUSTOM,
})


COMPONENT_CATEGORIES: Mapping[str, frozenset] = MappingProxyType({
    "layout": frozenset({ComponentType.CONTAINER, ComponentType.ROW, ComponentType.COLUMN}),
    "basic": frozenset({
        ComponentType.TEXT, ComponentType.IMAGE, ComponentType.ICON, ComponentType.BUTTON,
        ComponentType.LINK, ComponentType.DIVIDER, ComponentType.SPACER,
    }),
    "input": frozenset({
        ComponentType.TEXT_INPUT, ComponentType.TEXT_AREA, ComponentType.SELECT,
        ComponentType.CHECKBOX, ComponentType.RADIO, ComponentType.SWITCH, ComponentType.SLIDER,
        ComponentType.DATE_PICKER, ComponentType.TIME_PICKER, ComponentType.FILE_PICKER,
    }),
    "data_display": frozenset({
        ComponentType.LIST, ComponentType.TABLE, ComponentType.CARD, ComponentType.BADGE,
        ComponentType.AVATAR, ComponentType.CHIP, ComponentType.PROGRESS, ComponentType.SKELETON,
    }),
    "navigation": frozenset({
        ComponentType.TABS, ComponentType.BOTTOM_NAV, ComponentType.DRAWER,
        ComponentType.APP_BAR, ComponentType.BREADCRUMB,
    }),
    "feedback": frozenset({
        ComponentType.MODAL, ComponentType.TOAST, ComponentType.ALERT, ComponentType.TOOLTIP,
    }),
    "chart": frozenset({
        ComponentType.LINE_CHART, ComponentType.BAR_CHART,
        ComponentType.PIE_CHART, ComponentType.AREA_CHART,
    }),
    "media": frozenset({
        ComponentType.VIDEO, ComponentType.AUDIO, ComponentType.WEB_VIEW, ComponentType.MAP,
    }),
    "custom": frozenset({ComponentType.CUSTOM}),
})


def map_widget_type(widget_type: Any) -> ComponentType:
    """Canonical component kind for an editor widget label; `custom` when unknown."""
    if not isinstance(widget_type, str):
        return ComponentType.CUSTOM
    return WIDGET_TYPE_MAPPING.get(widget_type, ComponentType.CUSTOM)


def get_component_category(component_type: ComponentType) -> str:
    for category, members in COMPONENT_CATEGORIES.items():
        if component_type in members:
            return category
    return "custom"


def get_widget_category(widget_type: Any) -> str:
    return get_component_category(map_widget_type(widget_type))


def get_available_component_types() -> List[str]:
    return [member.value for member in ComponentType]


def get_widget_aliases(component_type: ComponentType) -> List[str]:
    return sorted(label for label, mapped in WIDGET_TYPE_MAPPING.items() if mapped is component_type)


def export_widget_type_catalog() -> Dict[str, Any]:
    return {
        "componentTypes": get_available_component_types(),
        "mapping": {label: mapped.value for label, mapped in WIDGET_TYPE_MAPPING.items()},
        "categories": {
            category: sorted(member.value for member in members)
            for category, members in COMPONENT_CATEGORIES.items()
        },
        "fallback": ComponentType.CUSTOM.value,
    }
