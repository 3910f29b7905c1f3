"""
Style Normalizer - editor style record to canonical Style.

Only decides which keys are forwarded. Values are copied verbatim: no unit
inference, no color parsing, no defaults.
"""
from typing import Any, Dict, Optional, Tuple

from mobile_schema.models.schemas.editor import EditorWidget
from mobile_schema.models.schemas.style import Style, COMPOSITE_STYLE_FIELDS
from mobile_schema.utils.logging import get_logger

logger = get_logger(__name__)


# (target field, source keys in priority order)
STYLE_FIELD_SOURCES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    # Layout
    ("width", ("width",)),
    ("height", ("height",)),
    ("minWidth", ("minWidth",)),
    ("maxWidth", ("maxWidth",)),
    ("minHeight", ("minHeight",)),
    ("maxHeight", ("maxHeight",)),

    # Spacing
    ("padding", ("padding",)),
    ("margin", ("margin",)),

    # Colors
    ("backgroundColor", ("backgroundColor",)),
    ("color", ("color", "textColor")),

    # Border
    ("borderWidth", ("borderWidth",)),
    ("borderColor", ("borderColor",)),
    ("borderRadius", ("borderRadius",)),
    ("borderStyle", ("borderStyle",)),

    # Typography
    ("fontSize", ("fontSize",)),
    ("fontWeight", ("fontWeight",)),
    ("fontFamily", ("fontFamily",)),
    ("lineHeight", ("lineHeight",)),
    ("textAlign", ("textAlign",)),
    ("textTransform", ("textTransform",)),

    # Effects
    ("opacity", ("opacity",)),
    ("shadow", ("shadow", "boxShadow")),

    # Visibility
    ("display", ("display",)),
    ("overflow", ("overflow",)),

    # Flexbox
    ("flex", ("flex",)),
    ("flexDirection", ("flexDirection",)),
    ("justifyContent", ("justifyContent",)),
    ("alignItems", ("alignItems",)),
    ("gap", ("gap",)),
)


def is_present(value: Any) -> bool:
    """None and the empty string both mean 'not supplied'"""
    return value is not None and value != ""


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (int, float, str)) and not isinstance(value, bool)


def _accepts(field: str, value: Any) -> bool:
    if _is_scalar(value):
        return True
    return field in COMPOSITE_STYLE_FIELDS and isinstance(value, dict)


def _first_present(raw: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if is_present(value):
            return value
    return None


def normalize_style(raw_style: Optional[Dict[str, Any]], widget: EditorWidget) -> Style:
    """
    Build the canonical style for a widget.

    Width/height come from the widget bounds first so every component has a
    size, then explicit style fields are overlaid when present.

    Args:
        raw_style: Free-form style record from the editor (may be None)
        widget: Widget supplying the layout bounds

    Returns:
        Style with only the supplied fields set
    """
    fields: Dict[str, Any] = {}

    for bound in ("width", "height"):
        value = getattr(widget, bound)
        if is_present(value) and _is_scalar(value):
            fields[bound] = value

    raw = raw_style if isinstance(raw_style, dict) else {}

    for target, sources in STYLE_FIELD_SOURCES:
        value = _first_present(raw, sources)
        if value is None:
            continue
        if not _accepts(target, value):
            logger.debug(
                "compiler.style.value_dropped",
                extra={"widget_id": widget.id, "field": target, "value_type": type(value).__name__}
            )
            continue
        fields[target] = value

    return Style(**fields)
