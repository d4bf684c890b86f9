"""Configuration error raised before any path is processed."""


class ConfigError(ValueError):
    """Invalid option combination or unresolvable option value."""
