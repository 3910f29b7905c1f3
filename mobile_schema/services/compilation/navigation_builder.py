"""
Navigation Synthesizer - sidebar items and pages to canonical Navigation.
"""
from typing import Any, List, Optional

from mobile_schema.config import settings
from mobile_schema.models.schemas.editor import SidebarItem
from mobile_schema.models.schemas.navigation import Navigation, NavigationBadge, NavigationItem
from mobile_schema.models.schemas.page import Page

# Mobile tab bars never show more than five entries
MAX_BOTTOM_TABS = 5


def _item_type(raw_type: Optional[str]) -> str:
    if raw_type == "divider":
        return "divider"
    if raw_type == "group":
        return "group"
    return "page"


def convert_navigation_items(items: List[SidebarItem]) -> List[NavigationItem]:
    """Recursive sidebar conversion for the drawer"""
    converted = []
    for item in items:
        badge = None
        # A colored sidebar entry becomes an empty-text badge
        if item.color:
            badge = NavigationBadge(text="", color=item.color)

        converted.append(NavigationItem(
            id=item.id,
            type=_item_type(item.type),
            label=item.name,
            icon=item.icon,
            pageId=item.pageId or None,
            children=convert_navigation_items(item.children) if item.children else None,
            badge=badge,
        ))
    return converted


def build_bottom_tabs(pages: List[Page], limit: Optional[int] = None) -> Optional[List[NavigationItem]]:
    """One tab per page, in page order, capped at the tab limit"""
    if limit is None:
        limit = settings.bottom_tab_limit
    tab_pages = pages[:min(limit, MAX_BOTTOM_TABS)]
    if not tab_pages:
        return None
    return [
        NavigationItem(
            id=f"tab-{page.id}",
            type="page",
            label=page.title,
            icon=page.icon,
            pageId=page.id,
        )
        for page in tab_pages
    ]


def build_navigation(
    sidebar_items: Optional[List[SidebarItem]],
    pages: List[Page],
    login_config: Optional[Any] = None,
    redirect_page_id: Optional[str] = None,
) -> Navigation:
    """
    Build app navigation.

    Args:
        sidebar_items: Editor sidebar entries (drawer source)
        pages: Converted pages, in order
        login_config: Login page configuration; only its presence matters
        redirect_page_id: Page to open after sign-in

    Returns:
        Navigation with initial page, drawer, optional login page and tabs
    """
    initial_page = redirect_page_id or (pages[0].id if pages else "")

    return Navigation(
        initialPage=initial_page,
        drawer=convert_navigation_items(sidebar_items or []),
        loginPage="login" if login_config is not None else None,
        bottomTabs=build_bottom_tabs(pages),
    )
