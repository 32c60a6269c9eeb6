"""User configuration for zmkview."""

from .models import KeymapMetadataDefaults, UserConfigData
from .user_config import UserConfig, create_user_config


__all__ = [
    "KeymapMetadataDefaults",
    "UserConfig",
    "UserConfigData",
    "create_user_config",
]
