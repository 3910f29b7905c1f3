"""
Page Converter - editor page to canonical Page.
"""
from typing import Optional

from mobile_schema.models.schemas.editor import EditorPage
from mobile_schema.models.schemas.page import Page, PageHeader
from mobile_schema.services.compilation.component_converter import convert_widgets
from mobile_schema.utils.logging import get_logger

logger = get_logger(__name__)


def convert_page(page: EditorPage, max_depth: Optional[int] = None) -> Page:
    """
    Convert a page and its widget tree.

    Hidden pages still convert but get no header. Declaring permissions at
    all (even an empty block) marks the page as requiring auth.
    """
    title = page.displayName or page.name

    header = None
    if page.hidden is not True:
        header = PageHeader(visible=True, title=title, showBackButton=True)

    requires_auth = False
    roles = None
    if page.permissions is not None:
        requires_auth = True
        roles = page.permissions.roles

    converted = Page(
        id=page.id,
        name=page.name,
        title=title,
        description=page.description,
        path=page.path or f"/{page.name}",
        icon=page.icon,
        components=convert_widgets(page.components, max_depth=max_depth),
        header=header,
        requiresAuth=requires_auth,
        permissions=roles,
        createdAt=page.createdAt,
        updatedAt=page.updatedAt,
    )

    logger.debug(
        "compiler.page.converted",
        extra={
            "page_id": page.id,
            "components": len(converted.components),
            "requires_auth": requires_auth,
        }
    )

    return converted
