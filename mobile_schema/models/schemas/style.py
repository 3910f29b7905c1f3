"""
Platform-neutral style record. Rendering clients translate it to native styles.
"""
from typing import Optional

from .core import SchemaModel, StyleScalar, StyleComposite


class Style(SchemaModel):
    """Flat style record; every field is optional and absence means unspecified"""

    # Layout
    width: Optional[StyleScalar] = None
    height: Optional[StyleScalar] = None
    minWidth: Optional[StyleScalar] = None
    maxWidth: Optional[StyleScalar] = None
    minHeight: Optional[StyleScalar] = None
    maxHeight: Optional[StyleScalar] = None

    # Spacing (scalar or per-edge object)
    padding: Optional[StyleComposite] = None
    margin: Optional[StyleComposite] = None

    # Colors
    backgroundColor: Optional[StyleScalar] = None
    color: Optional[StyleScalar] = None

    # Border
    borderWidth: Optional[StyleScalar] = None
    borderColor: Optional[StyleScalar] = None
    borderRadius: Optional[StyleComposite] = None
    borderStyle: Optional[StyleScalar] = None

    # Typography
    fontSize: Optional[StyleScalar] = None
    fontWeight: Optional[StyleScalar] = None
    fontFamily: Optional[StyleScalar] = None
    lineHeight: Optional[StyleScalar] = None
    textAlign: Optional[StyleScalar] = None
    textTransform: Optional[StyleScalar] = None

    # Effects
    opacity: Optional[StyleScalar] = None
    shadow: Optional[StyleComposite] = None

    # Visibility
    display: Optional[StyleScalar] = None
    overflow: Optional[StyleScalar] = None

    # Flexbox
    flex: Optional[StyleScalar] = None
    flexDirection: Optional[StyleScalar] = None
    justifyContent: Optional[StyleScalar] = None
    alignItems: Optional[StyleScalar] = None
    gap: Optional[StyleScalar] = None


COMPOSITE_STYLE_FIELDS = frozenset({"padding", "margin", "borderRadius", "shadow"})
