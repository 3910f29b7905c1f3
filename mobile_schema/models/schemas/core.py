"""
Core type definitions and constants.
"""
from enum import Enum
from typing import Any, Dict, Union
from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, StrictStr


# Bumped whenever the emitted document shape changes
MOBILE_SCHEMA_VERSION = "1.0.0"


StyleScalar = Union[StrictInt, StrictFloat, StrictStr]
StyleComposite = Union[StrictInt, StrictFloat, StrictStr, Dict[str, Any]]


class SchemaModel(BaseModel):
    """Base for every canonical output type. Instances are immutable."""

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with unset optional fields dropped"""
        return self.model_dump(mode="json", exclude_none=True)


class ComponentType(str, Enum):
    """Closed set of component kinds a rendering client must support"""

    # Layout
    CONTAINER = "container"
    ROW = "row"
    COLUMN = "column"

    # Basic
    TEXT = "text"
    IMAGE = "image"
    ICON = "icon"
    BUTTON = "button"
    LINK = "link"
    DIVIDER = "divider"
    SPACER = "spacer"

    # Input
    TEXT_INPUT = "textInput"
    TEXT_AREA = "textArea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SWITCH = "switch"
    SLIDER = "slider"
    DATE_PICKER = "datePicker"
    TIME_PICKER = "timePicker"
    FILE_PICKER = "filePicker"

    # Data display
    LIST = "list"
    TABLE = "table"
    CARD = "card"
    BADGE = "badge"
    AVATAR = "avatar"
    CHIP = "chip"
    PROGRESS = "progress"
    SKELETON = "skeleton"

    # Navigation
    TABS = "tabs"
    BOTTOM_NAV = "bottomNav"
    DRAWER = "drawer"
    APP_BAR = "appBar"
    BREADCRUMB = "breadcrumb"

    # Feedback
    MODAL = "modal"
    TOAST = "toast"
    ALERT = "alert"
    TOOLTIP = "tooltip"

    # Charts
    LINE_CHART = "lineChart"
    BAR_CHART = "barChart"
    PIE_CHART = "pieChart"
    AREA_CHART = "areaChart"

    # Media
    VIDEO = "video"
    AUDIO = "audio"
    WEB_VIEW = "webView"
    MAP = "map"

    CUSTOM = "custom"
