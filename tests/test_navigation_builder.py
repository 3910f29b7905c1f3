"""Tests for navigation synthesis."""
from mobile_schema.config import settings
from mobile_schema.models.schemas.editor import SidebarItem
from mobile_schema.services.compilation.navigation_builder import (
    MAX_BOTTOM_TABS,
    build_bottom_tabs,
    build_navigation,
    convert_navigation_items,
)
from mobile_schema.services.compilation.page_converter import convert_page


def _pages(page_factory, count):
    return [convert_page(page_factory(f"p{i}")) for i in range(1, count + 1)]


def _items(*raw):
    return [SidebarItem.model_validate(item) for item in raw]


def test_bottom_tabs_capped_at_five_in_page_order(page_factory):
    pages = _pages(page_factory, 7)

    tabs = build_navigation(None, pages).bottomTabs

    assert len(tabs) == 5
    assert [tab.pageId for tab in tabs] == ["p1", "p2", "p3", "p4", "p5"]
    assert tabs[0].id == "tab-p1"
    assert tabs[0].label == "Page p1"


def test_bottom_tab_limit_override(page_factory):
    assert len(build_bottom_tabs(_pages(page_factory, 4), limit=2)) == 2


def test_no_pages_means_no_tabs_and_empty_initial_page():
    navigation = build_navigation(None, [])

    assert navigation.bottomTabs is None
    assert navigation.initialPage == ""
    assert navigation.drawer == []


def test_initial_page_prefers_post_auth_redirect(page_factory):
    pages = _pages(page_factory, 2)

    assert build_navigation(None, pages).initialPage == "p1"
    assert build_navigation(None, pages, redirect_page_id="p2").initialPage == "p2"


def test_login_page_only_when_configured(page_factory):
    pages = _pages(page_factory, 1)

    assert build_navigation(None, pages).loginPage is None
    assert build_navigation(None, pages, login_config={}).loginPage == "login"


def test_drawer_items_converted_recursively():
    drawer = convert_navigation_items(_items(
        {"id": "n1", "type": "page", "name": "Home", "icon": "home", "pageId": "p1"},
        {"id": "n2", "type": "divider"},
        {
            "id": "n3",
            "type": "group",
            "name": "Reports",
            "children": [{"id": "n3a", "name": "Sales", "pageId": "p2"}],
        },
        {"id": "n4", "type": "external-link", "name": "Docs"},
    ))

    assert [item.type for item in drawer] == ["page", "divider", "group", "page"]
    assert drawer[0].label == "Home"
    assert drawer[2].children[0].pageId == "p2"
    assert drawer[2].children[0].type == "page"
    assert drawer[3].children is None


def test_colored_sidebar_item_gets_empty_badge():
    drawer = convert_navigation_items(_items({"id": "n1", "name": "Alerts", "color": "#EF4444"}))

    assert drawer[0].badge.to_dict() == {"text": "", "color": "#EF4444"}


def test_uncolored_sidebar_item_has_no_badge():
    drawer = convert_navigation_items(_items({"id": "n1", "name": "Alerts", "color": ""}))

    assert drawer[0].badge is None


def test_bottom_tab_limit_override_never_exceeds_five(page_factory):
    assert len(build_bottom_tabs(_pages(page_factory, 7), limit=7)) == MAX_BOTTOM_TABS == 5


def test_bottom_tab_setting_never_exceeds_five(page_factory, monkeypatch):
    monkeypatch.setattr(settings, "bottom_tab_limit", 7)

    tabs = build_navigation(None, _pages(page_factory, 7)).bottomTabs

    assert len(tabs) == 5
