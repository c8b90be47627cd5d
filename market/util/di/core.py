"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from market.config import (
    AuthSettings,
    EngagementSettings,
    MatchingSettings,
    ModerationSettings,
    Settings,
)
from market.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_engagement_settings(self, settings: Settings) -> EngagementSettings:
        """Provide engagement scoring settings."""
        return settings.engagement

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide report moderation settings."""
        return settings.moderation

    @provide
    def provide_matching_settings(self, settings: Settings) -> MatchingSettings:
        """Provide vendor match scoring settings."""
        return settings.matching
