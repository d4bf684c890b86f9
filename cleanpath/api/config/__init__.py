"""Config API module - option validation and one-time resolution."""

from .build_config import build_config
from .CleanpathConfig import CleanpathConfig
from .CleanpathOptions import CleanpathOptions
from .ConfigError import ConfigError
from .SystemContext import SystemContext
from .UserRecord import UserRecord

__all__ = [
    "CleanpathConfig",
    "CleanpathOptions",
    "ConfigError",
    "SystemContext",
    "UserRecord",
    "build_config",
]
