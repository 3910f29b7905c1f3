"""
Complete mobile app schema. This is what rendering clients receive.
"""
from typing import Dict, List, Literal, Optional

from .core import SchemaModel
from .navigation import Navigation
from .page import Page
from .theme import ThemeConfig


class AppTheme(SchemaModel):
    light: ThemeConfig
    dark: ThemeConfig


class ApiConfig(SchemaModel):
    baseUrl: str
    timeout: int
    retryCount: int


class AuthConfig(SchemaModel):
    type: Literal["jwt", "oauth2", "apiKey", "none"]
    loginEndpoint: Optional[str] = None
    refreshEndpoint: Optional[str] = None
    logoutEndpoint: Optional[str] = None
    userEndpoint: Optional[str] = None
    tokenStorage: Optional[Literal["secure", "memory"]] = None


class LocalizationConfig(SchemaModel):
    defaultLocale: str
    supportedLocales: List[str]


class MobileApp(SchemaModel):
    """Versioned, platform-neutral application document"""
    schemaVersion: str
    appId: str
    name: str
    version: str
    organizationId: Optional[str] = None
    spaceId: Optional[str] = None
    theme: AppTheme
    navigation: Navigation
    pages: List[Page]
    api: ApiConfig
    auth: AuthConfig
    features: Dict[str, bool]
    localization: LocalizationConfig
    updatedAt: str
    contentHash: Optional[str] = None
