"""
App Assembler - pages, navigation and themes into one MobileApp document.
"""
from typing import List, Optional

from mobile_schema.config import settings
from mobile_schema.models.schemas.app import (
    ApiConfig,
    AppTheme,
    AuthConfig,
    LocalizationConfig,
    MobileApp,
)
from mobile_schema.models.schemas.core import MOBILE_SCHEMA_VERSION
from mobile_schema.models.schemas.editor import BrandingConfig, EditorConfig
from mobile_schema.models.schemas.input_output import AssembleOptions
from mobile_schema.models.schemas.page import Page
from mobile_schema.services.compilation.content_hash import generate_content_hash
from mobile_schema.services.compilation.navigation_builder import build_navigation
from mobile_schema.services.compilation.page_converter import convert_page
from mobile_schema.services.compilation.theme_converter import build_theme
from mobile_schema.utils.datetime_utils import to_iso_string
from mobile_schema.utils.logging import get_logger, trace_sync

logger = get_logger(__name__)


DEFAULT_FEATURES = {
    "darkMode": True,
    "offlineSupport": False,
    "pushNotifications": False,
    "analytics": False,
}


def convert_active_pages(config: EditorConfig) -> List[Page]:
    """Convert pages not marked inactive, keeping source order"""
    return [convert_page(page) for page in config.pages if page.is_active]


def with_content_hash(app: MobileApp) -> MobileApp:
    """Copy of `app` whose contentHash covers everything else in it"""
    content = app.model_dump(mode="json", exclude_none=True, exclude={"contentHash"})
    return app.model_copy(update={"contentHash": generate_content_hash(content)})


@trace_sync("compiler.assemble")
def assemble_app(
    config: EditorConfig,
    branding: Optional[BrandingConfig],
    options: AssembleOptions,
) -> MobileApp:
    """
    Assemble the complete app schema.

    Args:
        config: Page-builder document
        branding: Tenant branding (None for stock themes)
        options: App identity, API base URL and optional fixed timestamp

    Returns:
        MobileApp with contentHash attached
    """
    pages = convert_active_pages(config)

    navigation = build_navigation(
        sidebar_items=config.sidebarConfig.items if config.sidebarConfig else None,
        pages=pages,
        login_config=config.loginPageConfig,
        redirect_page_id=config.postAuthRedirectPageId,
    )

    app = MobileApp(
        schemaVersion=MOBILE_SCHEMA_VERSION,
        appId=options.app_id,
        name=options.app_name,
        version=options.app_version,
        organizationId=options.organization_id,
        spaceId=config.spaceId,
        theme=AppTheme(
            light=build_theme(branding, "light"),
            dark=build_theme(branding, "dark"),
        ),
        navigation=navigation,
        pages=pages,
        api=ApiConfig(
            baseUrl=options.base_url,
            timeout=settings.api_timeout_ms,
            retryCount=settings.api_retry_count,
        ),
        auth=AuthConfig(
            type=settings.auth_type,
            loginEndpoint=settings.auth_login_endpoint,
            refreshEndpoint=settings.auth_refresh_endpoint,
            logoutEndpoint=settings.auth_logout_endpoint,
            userEndpoint=settings.auth_user_endpoint,
            tokenStorage=settings.auth_token_storage,
        ),
        features=dict(DEFAULT_FEATURES),
        localization=LocalizationConfig(
            defaultLocale=settings.default_locale,
            supportedLocales=list(settings.supported_locales),
        ),
        updatedAt=to_iso_string(options.updated_at),
    )

    app = with_content_hash(app)

    logger.info(
        "compiler.app.assembled",
        extra={
            "app_id": app.appId,
            "pages": len(app.pages),
            "drawer_items": len(app.navigation.drawer),
            "content_hash": app.contentHash,
        }
    )

    return app
