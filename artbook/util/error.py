"""Utility layer errors."""

from artbook.config import DEFAULT_JWT_SECRET, Settings


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


def check_settings(settings: Settings) -> Settings:
    """Refuse settings that are unsafe for the current environment.

    Raises:
        ConfigurationError: If production still uses the default JWT secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError(
            "AUTH__JWT_SECRET must be set in production (default secret in use)"
        )
    return settings
