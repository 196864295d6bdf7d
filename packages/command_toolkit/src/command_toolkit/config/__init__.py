from command_toolkit.config.settings import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_TRACER_NAME,
    Settings,
    load_settings,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_TRACER_NAME",
    "Settings",
    "load_settings",
]
