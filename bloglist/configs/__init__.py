from bloglist.configs.settings import (
    CONFIG_MAP,
    EMPTY_BLOGS_MESSAGE,
    Argon2Config,
    LimiterConfig,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "EMPTY_BLOGS_MESSAGE",
    "LimiterConfig",
    "Settings",
    "settings",
]
